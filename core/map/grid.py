"""
Purpose: Tile grid (rows x cols) addressed by (row, col).
Dependencies: core/map/tile.py.
Ext Hooks: Serialize boards for shared/daily levels.
"""

from core.map.tile import Tile, NORMAL


class Grid:
    def __init__(self, cols, rows):
        self.cols = cols
        self.rows = rows
        self.tiles = [[Tile(row, col, NORMAL) for col in range(cols)] for row in range(rows)]

    def __getitem__(self, pos):
        row, col = pos
        return self.tiles[row][col]

    def tile_at(self, col, row):
        """Tile lookup in (col, row) order, matching screen coordinates."""
        return self.tiles[row][col]

    def in_bounds(self, col, row):
        return 0 <= col < self.cols and 0 <= row < self.rows

    def __iter__(self):
        for row in self.tiles:
            yield from row

    def count(self, tile_type):
        return sum(1 for tile in self if tile.type == tile_type)

    def to_dict(self):
        return {
            'cols': self.cols,
            'rows': self.rows,
            'tiles': [[tile.to_dict() for tile in row] for row in self.tiles],
        }
