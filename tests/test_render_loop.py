import random
import unittest
from core.game_state import DEFEAT, TITLE
from core.render_loop import RenderLoop, CONTINUOUS, GAMEPLAY
from core.session import GameSession


class RecordingRenderer:
    def __init__(self):
        self.calls = []
        self.actor_states = []

    def draw_background(self):
        self.calls.append('background')

    def draw_grid(self, state):
        self.calls.append('grid')

    def draw_goal(self, state):
        self.calls.append('goal')

    def draw_actor(self, state):
        self.calls.append('actor')
        self.actor_states.append(dict(state['actor']))


class TestRenderLoop(unittest.TestCase):
    def setUp(self):
        self.session = GameSession(rng=random.Random(2))
        self.renderer = RecordingRenderer()

    def test_draw_order(self):
        loop = RenderLoop(self.session, self.renderer, mode=CONTINUOUS)
        self.assertTrue(loop.frame(1 / 60))
        self.assertEqual(self.renderer.calls, ['background', 'grid', 'goal', 'actor'])
        self.assertEqual(loop.frame_count, 1)

    def test_continuous_draws_before_start_and_while_paused(self):
        loop = RenderLoop(self.session, self.renderer, mode=CONTINUOUS)
        self.assertTrue(loop.frame(1 / 60))
        self.session.start_game()
        self.session.toggle_pause()
        self.assertTrue(loop.frame(1 / 60))

    def test_gameplay_only_draws_while_running(self):
        loop = RenderLoop(self.session, self.renderer, mode=GAMEPLAY)
        self.assertFalse(loop.frame(1 / 60))
        self.assertEqual(self.renderer.calls, [])
        self.session.start_game()
        self.assertTrue(loop.frame(1 / 60))
        self.session.toggle_pause()
        self.assertFalse(loop.frame(1 / 60))
        self.assertEqual(self.renderer.calls, ['background', 'grid', 'goal', 'actor'])

    def test_movement_ticks_before_drawing(self):
        loop = RenderLoop(self.session, self.renderer, mode=GAMEPLAY)
        self.session.start_game()
        for tile in self.session.grid:
            tile.type = 'normal'
        self.session.movement.place(5, 5)
        start_x = self.session.actor.pixel_x
        self.assertTrue(self.session.move_to(6, 5))
        loop.frame(1 / 60)
        drawn = self.renderer.actor_states[-1]
        self.assertTrue(drawn['is_moving'])
        self.assertNotEqual(drawn['x'], start_x)

    def test_timers_run_even_when_not_drawing(self):
        loop = RenderLoop(self.session, self.renderer, mode=GAMEPLAY)
        self.session.start_game()
        self.session.state.phase = DEFEAT
        self.session.scheduler.schedule(2.0, self.session.restart, tag=self.session.generation)
        self.assertFalse(loop.frame(2.0))
        self.assertEqual(self.session.state.phase, TITLE)

    def test_invalid_mode(self):
        with self.assertRaises(ValueError):
            RenderLoop(self.session, self.renderer, mode='sometimes')


if __name__ == '__main__':
    unittest.main()
