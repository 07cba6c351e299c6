"""
Purpose: Per-frame orchestration - timers, movement tick, then draw background, grid, goal, actor.
Dependencies: core/session.py (duck-typed), any renderer with the four draw_* methods.
Ext Hooks: Extra layers (particles, hint arrows) between goal and actor.
"""

CONTINUOUS = 'continuous'
GAMEPLAY = 'gameplay'
LOOP_MODES = (CONTINUOUS, GAMEPLAY)


class RenderLoop:
    """
    Drives one session against one renderer.

    - continuous: every frame is drawn, title screen and pause included, so
      the board stays visible and responsive before a run starts.
    - gameplay: frames are only drawn while the run is going and not paused.

    Timers always advance so delayed restarts fire even when nothing is drawn.
    """

    def __init__(self, session, renderer, mode=CONTINUOUS):
        if mode not in LOOP_MODES:
            raise ValueError(f"Invalid loop mode: {mode}")
        self.session = session
        self.renderer = renderer
        self.mode = mode
        self.frame_count = 0

    def should_draw(self):
        if self.mode == CONTINUOUS:
            return True
        state = self.session.state
        return state.running and not state.paused

    def frame(self, dt):
        """Run one frame. Returns True if it was drawn."""
        self.session.advance(dt)
        if not self.should_draw():
            return False
        self.session.tick()
        draw_state = self.session.draw_state()
        self.renderer.draw_background()
        self.renderer.draw_grid(draw_state)
        self.renderer.draw_goal(draw_state)
        self.renderer.draw_actor(draw_state)
        self.frame_count += 1
        return True
