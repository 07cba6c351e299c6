"""
Purpose: Procedural board: barrier rows, scattered lava/question tiles, bonuses, safe start tiles.
Dependencies: core/map/grid.py, core/map/tile.py, core/config.py, random.
Ext Hooks: Level presets (barrier layout and densities per level).
"""

import random
from core.config import (
    GRID_COLS, GRID_ROWS, BARRIER_ROWS, FORCED_BARRIER_ROW, BARRIER_GAP_COLS,
    BARRIER_HAZARD_PROBABILITY, HAZARD_PROBABILITY, CHALLENGE_PROBABILITY_NORTH,
    CHALLENGE_PROBABILITY_SOUTH, BONUS_PROBABILITY, MAX_PLACEMENT_ATTEMPTS,
)
from core.map.grid import Grid
from core.map.tile import NORMAL, HAZARD, CHALLENGE


class GridGenerator:
    """
    Builds a board in three passes:

    1. every tile normal;
    2. barrier rows: the forced row is all questions, the others keep their
       gap columns as questions and fill the rest with lava or questions;
    3. every other row gets independent lava/question rolls, with more
       questions in the northern half (closer to the princess).

    Start tiles are then moved off anything that is not normal ground.
    """

    def __init__(self, cols=GRID_COLS, rows=GRID_ROWS, barrier_rows=BARRIER_ROWS,
                 forced_row=FORCED_BARRIER_ROW, gap_cols=BARRIER_GAP_COLS,
                 barrier_hazard_probability=BARRIER_HAZARD_PROBABILITY,
                 hazard_probability=HAZARD_PROBABILITY,
                 challenge_probability_north=CHALLENGE_PROBABILITY_NORTH,
                 challenge_probability_south=CHALLENGE_PROBABILITY_SOUTH,
                 bonus_probability=BONUS_PROBABILITY,
                 max_attempts=MAX_PLACEMENT_ATTEMPTS, rng=None):
        self.cols = cols
        self.rows = rows
        self.barrier_rows = tuple(r for r in barrier_rows if 0 <= r < rows)
        self.forced_row = forced_row
        self.gap_cols = tuple(gap_cols)
        self.barrier_hazard_probability = barrier_hazard_probability
        self.hazard_probability = hazard_probability
        self.challenge_probability_north = challenge_probability_north
        self.challenge_probability_south = challenge_probability_south
        self.bonus_probability = bonus_probability
        self.max_attempts = max_attempts
        self.rng = rng or random.Random()

    def generate(self):
        grid = Grid(self.cols, self.rows)
        self._place_barriers(grid)
        self._scatter_obstacles(grid)
        self._scatter_bonuses(grid)
        return grid

    def _place_barriers(self, grid):
        for row in self.barrier_rows:
            for col in range(self.cols):
                tile = grid.tile_at(col, row)
                if row == self.forced_row or col in self.gap_cols:
                    tile.type = CHALLENGE
                elif self.rng.random() < self.barrier_hazard_probability:
                    tile.type = HAZARD
                else:
                    tile.type = CHALLENGE

    def _scatter_obstacles(self, grid):
        for row in range(self.rows):
            if row in self.barrier_rows:
                continue
            is_northern_half = row < self.rows * 0.5
            challenge_probability = self.challenge_probability_north if is_northern_half else self.challenge_probability_south
            for col in range(self.cols):
                tile = grid.tile_at(col, row)
                # Two independent rolls per tile
                if self.rng.random() < self.hazard_probability:
                    tile.type = HAZARD
                elif self.rng.random() < challenge_probability:
                    tile.type = CHALLENGE

    def _scatter_bonuses(self, grid):
        for tile in grid:
            if tile.type == NORMAL and self.rng.random() < self.bonus_probability:
                tile.has_bonus = True

    def random_player_start(self):
        """Random tile in the southern quarter."""
        col = self.rng.randrange(self.cols)
        row = int(self.rows * 0.75 + self.rng.random() * (self.rows * 0.25))
        return col, min(row, self.rows - 1)

    def random_goal_start(self):
        """Random tile in the northern quarter."""
        col = self.rng.randrange(self.cols)
        row = int(self.rng.random() * (self.rows * 0.25))
        return col, min(row, self.rows - 1)

    def find_tile(self, grid, predicate, exclude=()):
        """
        Random (col, row) whose tile satisfies ``predicate``.

        Samples uniformly up to ``max_attempts`` times, then scans row by row
        so the search ends even on boards without a single match. Returns
        None in that case.
        """
        exclude = set(exclude)
        for _ in range(self.max_attempts):
            col = self.rng.randrange(grid.cols)
            row = self.rng.randrange(grid.rows)
            if (col, row) not in exclude and predicate(grid.tile_at(col, row)):
                return col, row
        for tile in grid:
            if (tile.col, tile.row) not in exclude and predicate(tile):
                return tile.col, tile.row
        return None

    def ensure_safe_start(self, grid, pos, exclude=()):
        """Move a start tile off lava/question tiles onto normal ground."""
        col, row = pos
        if grid.tile_at(col, row).is_normal and pos not in set(exclude):
            return pos
        found = self.find_tile(grid, lambda tile: tile.is_normal, exclude=exclude)
        if found is None:
            # No normal ground anywhere: force the requested start tile to normal
            grid.tile_at(col, row).type = NORMAL
            return pos
        return found

    def build(self, player_start=None, goal_start=None):
        """Generate a board with safe start tiles; returns (grid, player_pos, goal_pos)."""
        grid = self.generate()
        goal_pos = self.ensure_safe_start(grid, goal_start or self.random_goal_start())
        player_pos = self.ensure_safe_start(grid, player_start or self.random_player_start(), exclude=[goal_pos])
        for col, row in (player_pos, goal_pos):
            grid.tile_at(col, row).has_bonus = False
        return grid, player_pos, goal_pos
