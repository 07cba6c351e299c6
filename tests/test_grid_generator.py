import random
import unittest
from core.map.generator import GridGenerator
from core.map.grid import Grid
from core.map.tile import NORMAL, HAZARD, CHALLENGE


class TestGridGenerator(unittest.TestCase):
    def setUp(self):
        self.generator = GridGenerator(rng=random.Random(7))

    def test_dimensions(self):
        grid = self.generator.generate()
        self.assertEqual(grid.rows, 20)
        self.assertEqual(grid.cols, 12)
        self.assertEqual(len(grid.tiles), 20)
        self.assertTrue(all(len(row) == 12 for row in grid.tiles))
        self.assertEqual(grid[(3, 4)].row, 3)
        self.assertEqual(grid[(3, 4)].col, 4)

    def test_forced_barrier_row_is_all_questions(self):
        for _ in range(20):
            grid = self.generator.generate()
            self.assertTrue(all(grid.tile_at(col, 10).type == CHALLENGE for col in range(12)))

    def test_barrier_gaps_are_questions(self):
        for _ in range(20):
            grid = self.generator.generate()
            for row in (5, 15):
                for col in (2, 6, 9):
                    self.assertEqual(grid.tile_at(col, row).type, CHALLENGE)
                for col in range(12):
                    self.assertIn(grid.tile_at(col, row).type, (HAZARD, CHALLENGE))

    def test_start_tiles_are_normal_ground(self):
        for seed in range(100):
            generator = GridGenerator(rng=random.Random(seed))
            grid, player_pos, goal_pos = generator.build()
            self.assertEqual(grid.tile_at(*player_pos).type, NORMAL)
            self.assertEqual(grid.tile_at(*goal_pos).type, NORMAL)
            self.assertNotEqual(player_pos, goal_pos)
            self.assertFalse(grid.tile_at(*player_pos).has_bonus)

    def test_default_start_quarters(self):
        for seed in range(50):
            generator = GridGenerator(rng=random.Random(seed))
            col, row = generator.random_player_start()
            self.assertTrue(15 <= row <= 19)
            self.assertTrue(0 <= col < 12)
            col, row = generator.random_goal_start()
            self.assertTrue(0 <= row <= 4)

    def test_hazard_density_between_barriers(self):
        hazards = total = 0
        for _ in range(200):
            grid = self.generator.generate()
            for tile in grid:
                if tile.row not in (5, 10, 15):
                    total += 1
                    hazards += tile.type == HAZARD
        self.assertAlmostEqual(hazards / total, 0.08, delta=0.02)

    def test_more_questions_in_the_north(self):
        north = south = 0
        for _ in range(200):
            grid = self.generator.generate()
            for tile in grid:
                if tile.row in (5, 10, 15) or tile.type != CHALLENGE:
                    continue
                if tile.row < 10:
                    north += 1
                else:
                    south += 1
        # 8 northern rows at ~14% vs 9 southern rows at ~7%
        self.assertGreater(north, south)

    def test_bonuses_only_on_normal_tiles(self):
        for _ in range(20):
            grid = self.generator.generate()
            for tile in grid:
                if tile.has_bonus:
                    self.assertEqual(tile.type, NORMAL)

    def test_all_hazard_board_still_terminates(self):
        generator = GridGenerator(
            hazard_probability=1.0, barrier_hazard_probability=1.0,
            max_attempts=10, rng=random.Random(3),
        )
        grid, player_pos, goal_pos = generator.build()
        self.assertEqual(grid.tile_at(*player_pos).type, NORMAL)
        self.assertEqual(grid.tile_at(*goal_pos).type, NORMAL)
        self.assertEqual(grid.count(NORMAL), 2)

    def test_find_tile_returns_none_without_match(self):
        grid = self.generator.generate()
        self.assertIsNone(self.generator.find_tile(grid, lambda tile: False))

    def test_find_tile_scan_fallback(self):
        generator = GridGenerator(max_attempts=0, rng=random.Random(1))
        grid = Grid(12, 20)
        self.assertEqual(generator.find_tile(grid, lambda tile: tile.is_normal), (0, 0))
        self.assertEqual(generator.find_tile(grid, lambda tile: tile.is_normal, exclude=[(0, 0)]), (1, 0))

    def test_ensure_safe_start_relocates(self):
        grid = Grid(12, 20)
        grid.tile_at(3, 3).type = HAZARD
        pos = self.generator.ensure_safe_start(grid, (3, 3))
        self.assertNotEqual(pos, (3, 3))
        self.assertEqual(grid.tile_at(*pos).type, NORMAL)

    def test_explicit_start_positions(self):
        grid, player_pos, goal_pos = self.generator.build(player_start=(0, 19), goal_start=(11, 0))
        for pos in (player_pos, goal_pos):
            self.assertEqual(grid.tile_at(*pos).type, NORMAL)


if __name__ == '__main__':
    unittest.main()
