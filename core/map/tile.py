"""
Purpose: Board tiles: normal ground, hazards (lava) and challenge (question) tiles.
Dependencies: None.
Ext Hooks: Add more types (e.g., ice: slide one extra hex).
Client: Visuals (colors/images); Server: Rules (JSON serializable).
"""

NORMAL = 'normal'
HAZARD = 'hazard'
CHALLENGE = 'challenge'
TILE_TYPES = (NORMAL, HAZARD, CHALLENGE)


class Tile:
    def __init__(self, row, col, tile_type=NORMAL, has_bonus=False):
        if tile_type not in TILE_TYPES:
            raise ValueError(f"Invalid tile type: {tile_type}")
        self.row = row
        self.col = col
        self.type = tile_type
        self.has_bonus = has_bonus

    @property
    def is_hazard(self):
        return self.type == HAZARD

    @property
    def is_challenge(self):
        return self.type == CHALLENGE

    @property
    def is_normal(self):
        return self.type == NORMAL

    def collect_bonus(self):
        """Clear the bonus; True if there was one to collect."""
        had_bonus = self.has_bonus
        self.has_bonus = False
        return had_bonus

    def to_dict(self):
        return {
            'row': self.row,
            'col': self.col,
            'type': self.type,
            'has_bonus': self.has_bonus,
        }

    def __repr__(self):
        return f"Tile(row={self.row}, col={self.col}, type={self.type!r})"
