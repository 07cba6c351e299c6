import math
import unittest
from core.actors import Actor
from core.hex.layout import HexLayout
from core.movement import MovementController


class TestMovementController(unittest.TestCase):
    def setUp(self):
        self.layout = HexLayout()
        self.actor = Actor()
        self.arrivals = []
        self.movement = MovementController(self.layout, self.actor, on_arrival=lambda c, r: self.arrivals.append((c, r)))
        self.movement.place(5, 5)

    def click(self, col, row, now=0.0):
        x, y = self.layout.hex_to_pixel(col, row)
        return self.movement.handle_click(x, y, now)

    def walk(self, max_frames=100):
        for frame in range(max_frames):
            if self.movement.tick():
                return frame + 1
        self.fail("Actor never arrived")

    def test_place_snaps_pixels(self):
        self.assertEqual((self.actor.pixel_x, self.actor.pixel_y), self.layout.hex_to_pixel(5, 5))
        self.assertFalse(self.actor.is_moving)

    def test_adjacent_click_starts_move(self):
        self.assertTrue(self.click(6, 5))
        self.assertTrue(self.actor.is_moving)
        self.assertEqual((self.actor.target_col, self.actor.target_row), (6, 5))
        self.assertEqual(self.actor.position, (5, 5))

    def test_non_adjacent_click_is_ignored(self):
        self.assertFalse(self.click(7, 5))
        self.assertFalse(self.click(5, 7))
        self.assertFalse(self.click(5, 5))
        self.assertFalse(self.actor.is_moving)

    def test_click_while_moving_is_ignored(self):
        self.assertTrue(self.click(6, 5))
        self.assertFalse(self.click(5, 4, now=1.0))
        self.assertEqual((self.actor.target_col, self.actor.target_row), (6, 5))

    def test_rate_limit(self):
        self.assertTrue(self.click(5, 4, now=0.0))
        self.walk()
        self.assertFalse(self.click(5, 5, now=0.1))
        self.assertTrue(self.click(5, 5, now=0.25))

    def test_arrival_snaps_exactly_without_overshoot(self):
        target = self.layout.hex_to_pixel(6, 5)
        self.click(6, 5)
        last_distance = math.hypot(target[0] - self.actor.pixel_x, target[1] - self.actor.pixel_y)
        frames = 0
        while self.actor.is_moving:
            self.movement.tick()
            frames += 1
            distance = math.hypot(target[0] - self.actor.pixel_x, target[1] - self.actor.pixel_y)
            self.assertLess(distance, last_distance)
            last_distance = distance
            self.assertLess(frames, 100)
        self.assertEqual((self.actor.pixel_x, self.actor.pixel_y), target)
        self.assertEqual(self.actor.position, (6, 5))
        self.assertEqual(self.arrivals, [(6, 5)])

    def test_step_size_per_frame(self):
        start = (self.actor.pixel_x, self.actor.pixel_y)
        self.click(6, 5)
        self.movement.tick()
        moved = math.hypot(self.actor.pixel_x - start[0], self.actor.pixel_y - start[1])
        self.assertAlmostEqual(moved, 5.0)

    def test_facing_follows_horizontal_direction(self):
        self.click(4, 5)
        self.assertFalse(self.actor.facing_right)
        self.walk()
        self.movement.request_move(4, 4, now=1.0)
        self.assertFalse(self.actor.facing_right)  # Straight up keeps facing
        self.walk()
        self.movement.request_move(5, 4, now=2.0)
        self.assertTrue(self.actor.facing_right)

    def test_idle_tick_follows_layout_changes(self):
        self.layout.fit_to_viewport(400, 700)
        self.assertIsNone(self.movement.tick())
        self.assertEqual((self.actor.pixel_x, self.actor.pixel_y), self.layout.hex_to_pixel(5, 5))


if __name__ == '__main__':
    unittest.main()
