"""
Purpose: Pixel <-> grid conversion for the flat-top, column-offset hex board.
Dependencies: core/config.py, core/hex/utils.py, math.
Ext Hooks: Zoom/pan by scaling radius and shifting the offsets.
"""

import math
from core.config import (
    GRID_COLS, GRID_ROWS, HEX_RADIUS, HORIZONTAL_SPACING, VERTICAL_SPACING,
    OFFSET_MULTIPLIER, GRID_OFFSET_X, GRID_OFFSET_Y, CONTROLS_HEIGHT, VIEWPORT_PADDING,
)
from core.hex.utils import are_adjacent, in_bounds


def _round_half_up(value):
    return int(math.floor(value + 0.5))


class HexLayout:
    """
    Geometry of the board: hex radius, spacing ratios and grid origin.

    Tiles are addressed as (col, row). Column centres are evenly spaced on x;
    row centres are evenly spaced on y with odd columns pushed down by
    ``offset_multiplier`` of a row step. Every derived size is computed from
    ``radius`` so ``fit_to_viewport`` cannot break the conversion contracts.
    """

    def __init__(self, cols=GRID_COLS, rows=GRID_ROWS, radius=HEX_RADIUS,
                 horizontal_spacing=HORIZONTAL_SPACING, vertical_spacing=VERTICAL_SPACING,
                 offset_multiplier=OFFSET_MULTIPLIER, offset_x=GRID_OFFSET_X, offset_y=GRID_OFFSET_Y):
        self.cols = cols
        self.rows = rows
        self.radius = radius
        self.horizontal_spacing = horizontal_spacing
        self.vertical_spacing = vertical_spacing
        self.offset_multiplier = offset_multiplier
        self.offset_x = offset_x
        self.offset_y = offset_y

    @property
    def hex_width(self):
        return math.sqrt(3) * self.radius

    @property
    def hex_height(self):
        return 2 * self.radius

    @property
    def col_step(self):
        return self.hex_width * self.horizontal_spacing

    @property
    def row_step(self):
        return self.hex_height * 0.75 * self.vertical_spacing

    def column_shift(self, col):
        return (col % 2) * self.row_step * self.offset_multiplier

    def hex_to_pixel(self, col, row):
        """Centre of tile (col, row) in pixels."""
        x = col * self.col_step + self.offset_x
        y = row * self.row_step + self.column_shift(col) + self.offset_y
        return x, y

    def pixel_to_hex(self, x, y):
        """Nearest tile to a pixel, always clamped into the grid."""
        col = _round_half_up((x - self.offset_x) / self.col_step)
        col = max(0, min(self.cols - 1, col))
        row = _round_half_up((y - self.offset_y - self.column_shift(col)) / self.row_step)
        row = max(0, min(self.rows - 1, row))
        return col, row

    def are_adjacent(self, col1, row1, col2, row2):
        if not (in_bounds(col1, row1, self.cols, self.rows) and in_bounds(col2, row2, self.cols, self.rows)):
            return False
        return are_adjacent(col1, row1, col2, row2)

    def fit_to_viewport(self, width, height, controls_height=CONTROLS_HEIGHT, padding=VIEWPORT_PADDING):
        """Resize the hexes so the whole grid fits the drawing area."""
        available_width = width - padding * 2
        available_height = height - controls_height - padding * 2

        radius_for_width = available_width / (self.cols * math.sqrt(3) * self.horizontal_spacing)
        radius_for_height = available_height / ((self.rows - 1) * 1.5 * self.vertical_spacing + 2)
        self.radius = min(radius_for_width, radius_for_height)

        grid_width = (self.cols - 1) * self.col_step + self.hex_width
        grid_height = (self.rows - 1) * self.row_step + self.hex_height

        # Centre, then nudge down and right to clear the HUD
        self.offset_x = (width - grid_width) / 2 + 20
        self.offset_y = ((height - controls_height) - grid_height) / 2 + 40

    def hex_corners(self, col, row, scale=1.0):
        cx, cy = self.hex_to_pixel(col, row)
        size = self.radius * scale
        points = []
        for i in range(6):
            angle_rad = math.radians(60 * i)
            points.append((cx + size * math.cos(angle_rad), cy + size * math.sin(angle_rad)))
        return points
