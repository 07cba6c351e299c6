"""
Purpose: Actor dataclasses for the player (Mathew) and the goal (princess).
Dependencies: None.
Ext Hooks: Extra walkers (e.g., a wandering dragon) reuse Actor.
"""

from dataclasses import dataclass


@dataclass
class Actor:
    """
    Player position on the board.
    - grid_col/grid_row: tile the actor stands on (or left, while moving).
    - target_col/target_row: tile being walked to.
    - pixel_x/pixel_y: interpolated screen position.
    """
    grid_col: int = 0
    grid_row: int = 0
    target_col: int = 0
    target_row: int = 0
    pixel_x: float = 0.0
    pixel_y: float = 0.0
    is_moving: bool = False
    facing_right: bool = True
    last_move_time: float = float('-inf')

    @property
    def position(self):
        return self.grid_col, self.grid_row

    def place(self, col: int, row: int):
        """Teleport to a tile and stop any walk in progress."""
        self.grid_col = self.target_col = col
        self.grid_row = self.target_row = row
        self.is_moving = False


@dataclass
class Goal:
    grid_col: int = 0
    grid_row: int = 0
    pixel_x: float = 0.0
    pixel_y: float = 0.0

    @property
    def position(self):
        return self.grid_col, self.grid_row
