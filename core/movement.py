"""
Purpose: Click-to-adjacent-hex movement with smooth per-frame interpolation.
Dependencies: core/hex/layout.py, core/actors/base.py, core/config.py, math.
Ext Hooks: Keyboard moves (map keys to the six neighbor offsets).

Idle: pixel position snapped to the current tile centre every tick.
Moving: fixed pixel step toward the target centre; snaps on arrival and
reports the tile through ``on_arrival``.
"""

import math
from core.config import MOVE_SPEED, MOVE_DELAY


class MovementController:
    def __init__(self, layout, actor, move_speed=MOVE_SPEED, move_delay=MOVE_DELAY, on_arrival=None):
        self.layout = layout
        self.actor = actor
        self.move_speed = move_speed
        self.move_delay = move_delay
        self.on_arrival = on_arrival

    def handle_click(self, x, y, now):
        """Move toward the tile under a click. Returns True if the move was accepted."""
        col, row = self.layout.pixel_to_hex(x, y)
        return self.request_move(col, row, now)

    def request_move(self, col, row, now):
        actor = self.actor
        if actor.is_moving:
            return False
        if now - actor.last_move_time < self.move_delay:
            return False
        if not self.layout.are_adjacent(actor.grid_col, actor.grid_row, col, row):
            return False  # One hex at a time, no jumps

        actor.target_col = col
        actor.target_row = row
        actor.is_moving = True
        actor.last_move_time = now
        if col > actor.grid_col:
            actor.facing_right = True
        elif col < actor.grid_col:
            actor.facing_right = False
        return True

    def place(self, col, row):
        self.actor.place(col, row)
        self.snap()

    def snap(self):
        self.actor.pixel_x, self.actor.pixel_y = self.layout.hex_to_pixel(self.actor.grid_col, self.actor.grid_row)

    def tick(self):
        """Advance one frame. Returns the (col, row) arrived at, or None."""
        actor = self.actor
        if not actor.is_moving:
            self.snap()
            return None

        target_x, target_y = self.layout.hex_to_pixel(actor.target_col, actor.target_row)
        dx = target_x - actor.pixel_x
        dy = target_y - actor.pixel_y
        distance = math.hypot(dx, dy)

        if distance <= self.move_speed:
            # Snap exactly to the hex centre so we never overshoot
            actor.grid_col = actor.target_col
            actor.grid_row = actor.target_row
            actor.pixel_x = target_x
            actor.pixel_y = target_y
            actor.is_moving = False
            arrived = (actor.grid_col, actor.grid_row)
            if self.on_arrival:
                self.on_arrival(*arrived)
            return arrived

        actor.pixel_x += dx / distance * self.move_speed
        actor.pixel_y += dy / distance * self.move_speed
        return None
