"""
Purpose: GameSession aggregate - board, actors, quiz, timers and run state for one player.
Dependencies: core/hex/layout.py, core/map/generator.py, core/movement.py, core/questions/engine.py,
              core/scheduler.py, core/game_state.py, core/actors, core/config.py.
Ext Hooks: Multiple players per session (one Actor + MovementController each).
Game Loop: client/game_controller.py and server/routes/session.py drive advance()/tick();
           UIs read draw_state()/ui_state() or subscribe() to events.
"""

from core.actors import Actor, Goal
from core.config import (
    QUESTION_REWARD, BONUS_REWARD, CORRECT_CLOSE_DELAY, WRONG_RETRY_DELAY,
    HAZARD_MESSAGE_DURATION, VICTORY_RESTART_DELAY, DEFEAT_RESTART_DELAY,
    DEFAULT_GRADE, DEFAULT_SUBJECT,
)
from core.game_state import GameState, TITLE, RUNNING, PAUSED, QUESTION, VICTORY, DEFEAT
from core.hex.layout import HexLayout
from core.map.generator import GridGenerator
from core.movement import MovementController
from core.questions.engine import QuestionEngine, difficulty_for_row
from core.scheduler import Scheduler


class GameSession:
    """
    Everything one run of the game needs, passed around explicitly.

    Tile effects on arrival are resolved in a fixed order: reaching the
    princess wins; lava costs a life (and respawns, or ends the run); an
    unanswered question tile opens the quiz.

    Timers are tagged with ``generation``. restart() cancels the current
    generation's timers before bumping it, so a delayed callback from an old
    run can never touch the new one.
    """

    def __init__(self, layout=None, generator=None, question_engine=None, scheduler=None, rng=None):
        self.layout = layout or HexLayout()
        self.generator = generator or GridGenerator(cols=self.layout.cols, rows=self.layout.rows, rng=rng)
        self.questions = question_engine or QuestionEngine(rng=rng)
        self.scheduler = scheduler or Scheduler()
        self.state = GameState()
        self.actor = Actor()
        self.goal = Goal()
        self.movement = MovementController(self.layout, self.actor, on_arrival=self._resolve_tile)
        self.generation = 0
        self.listeners = []
        self.grid = None
        self.player_start = None
        self.awaiting_feedback = False
        self.message_timer = None
        self.new_board()

    # --- events -------------------------------------------------------

    def subscribe(self, callback):
        """callback(event_name, payload_dict) for every session event."""
        self.listeners.append(callback)

    def _emit(self, event, **payload):
        for listener in list(self.listeners):
            listener(event, payload)

    # --- time ---------------------------------------------------------

    @property
    def now(self):
        return self.scheduler.current_time

    def _later(self, delay, callback, *args):
        return self.scheduler.schedule(delay, callback, *args, tag=self.generation)

    def advance(self, dt):
        """Run timers due within dt seconds."""
        self.scheduler.update(dt)

    def tick(self):
        """One movement frame; frozen while paused."""
        if self.state.paused:
            return None
        return self.movement.tick()

    def update(self, dt):
        self.advance(dt)
        return self.tick()

    # --- board --------------------------------------------------------

    def new_board(self):
        self.grid, self.player_start, goal_pos = self.generator.build()
        self.goal.grid_col, self.goal.grid_row = goal_pos
        self.movement.place(*self.player_start)
        self._refresh_goal_pixels()

    def _refresh_goal_pixels(self):
        self.goal.pixel_x, self.goal.pixel_y = self.layout.hex_to_pixel(self.goal.grid_col, self.goal.grid_row)

    def resize(self, width, height):
        self.layout.fit_to_viewport(width, height)
        if not self.actor.is_moving:
            self.movement.snap()
        self._refresh_goal_pixels()

    # --- run lifecycle ------------------------------------------------

    def start_game(self, grade_level=None, subject=None):
        """Leave the title screen. Raises ValueError for an unknown grade or subject."""
        if self.state.phase != TITLE:
            return False
        grade_level = str(grade_level or self.state.grade_level).upper()
        subject = subject or self.state.subject
        self.questions.configure(subject, grade_level)
        self.state.grade_level = grade_level
        self.state.subject = subject

        self.state.reset()
        self.questions.reset()
        self.awaiting_feedback = False
        self.new_board()
        self.state.switch_phase(RUNNING)
        print(f"Run started: grade {grade_level}, subject {subject}")
        self._emit('started', grade_level=grade_level, subject=subject)
        return True

    def toggle_pause(self):
        if self.state.phase == RUNNING:
            self.state.switch_phase(PAUSED)
            self._emit('paused')
            return True
        if self.state.phase == PAUSED:
            self.state.switch_phase(RUNNING)
            self._emit('resumed')
            return True
        return False

    def restart(self):
        """Full reset back to the title screen with a new board."""
        self.scheduler.cancel_tag(self.generation)
        self.generation += 1
        self.state.reset()
        self.questions.reset()
        self.awaiting_feedback = False
        self.message_timer = None
        self.new_board()
        print(f"Session restarted (generation {self.generation})")
        self._emit('restarted', generation=self.generation)

    # --- input --------------------------------------------------------

    def handle_click(self, x, y):
        """Pointer/tap at pixel (x, y). Silently ignored unless a move is legal right now."""
        if self.state.phase != RUNNING:
            return False
        accepted = self.movement.handle_click(x, y, self.now)
        if accepted:
            self._collect_bonus()
        return accepted

    def move_to(self, col, row):
        if self.state.phase != RUNNING:
            return False
        accepted = self.movement.request_move(col, row, self.now)
        if accepted:
            self._collect_bonus()
        return accepted

    def _collect_bonus(self):
        tile = self.grid.tile_at(self.actor.target_col, self.actor.target_row)
        if tile.collect_bonus():
            self.state.add_score(BONUS_REWARD)
            self._emit('bonus_collected', col=tile.col, row=tile.row, score=self.state.score)

    def submit_answer(self, raw_input):
        """Check an answer for the open question; None if no answer is expected right now."""
        if self.state.phase != QUESTION or self.awaiting_feedback:
            return None
        result = self.questions.submit(raw_input)
        self.state.feedback = result.feedback
        self.awaiting_feedback = True
        if result.correct:
            self.state.add_score(QUESTION_REWARD)
            self._later(CORRECT_CLOSE_DELAY, self._close_question)
        else:
            self._later(WRONG_RETRY_DELAY, self._next_question)
        self._emit('answer_checked', correct=result.correct, feedback=result.feedback, score=self.state.score)
        return result

    # --- tile effects -------------------------------------------------

    def _resolve_tile(self, col, row):
        if (col, row) == self.goal.position:
            self._finish(VICTORY, "Victory!", "Mathew saved the princess!", VICTORY_RESTART_DELAY)
            return

        if self.grid.tile_at(col, row).is_hazard:
            lives = self.state.lose_life()
            self._emit('hazard_hit', col=col, row=row, lives=lives)
            if lives <= 0:
                self._finish(DEFEAT, "Game Over!", "Mathew fell into lava!", DEFEAT_RESTART_DELAY)
                return
            self._show_message("Ouch!", f"Mathew fell into lava! Lives remaining: {lives}",
                               HAZARD_MESSAGE_DURATION)
            col, row = self._respawn()

        tile = self.grid.tile_at(col, row)
        if tile.is_challenge and not self.questions.is_answered(col, row):
            self.show_question(col, row)

    def _respawn(self):
        pos = self.generator.find_tile(self.grid, lambda tile: not tile.is_hazard, exclude=[self.goal.position])
        if pos is None:
            pos = self.player_start
        self.movement.place(*pos)
        return pos

    def _show_message(self, title, text, duration=None):
        """Replace the banner; a pending clear from an earlier banner is dropped."""
        if self.message_timer is not None:
            self.message_timer.cancel()
            self.message_timer = None
        self.state.set_message(title, text)
        if duration is not None:
            self.message_timer = self._later(duration, self.state.clear_message)

    def _finish(self, phase, title, text, restart_delay):
        self.state.switch_phase(phase)
        self._show_message(title, text)
        self._later(restart_delay, self.restart)
        print(f"Run ended: {phase} (score {self.state.score})")
        self._emit(phase, score=self.state.score)

    def show_question(self, col, row):
        difficulty = difficulty_for_row(row, self.grid.rows)
        question = self.questions.begin((col, row), difficulty)
        self.state.feedback = ""
        self.awaiting_feedback = False
        self.state.switch_phase(QUESTION)
        self._emit('question_shown', col=col, row=row, prompt=question.prompt, difficulty=difficulty)
        return question

    def _next_question(self):
        question = self.questions.reissue()
        self.state.feedback = ""
        self.awaiting_feedback = False
        self._emit('question_shown', col=self.questions.origin_tile[0], row=self.questions.origin_tile[1],
                   prompt=question.prompt, difficulty=question.difficulty)

    def _close_question(self):
        self.questions.close()
        self.state.feedback = ""
        self.awaiting_feedback = False
        self.state.switch_phase(RUNNING)
        self._emit('question_closed')

    # --- snapshots ----------------------------------------------------

    def draw_state(self):
        """Everything a renderer needs for one frame."""
        self._refresh_goal_pixels()
        tiles = []
        for tile in self.grid:
            x, y = self.layout.hex_to_pixel(tile.col, tile.row)
            tiles.append({'col': tile.col, 'row': tile.row, 'type': tile.type,
                          'has_bonus': tile.has_bonus, 'x': x, 'y': y})
        return {
            'tiles': tiles,
            'radius': self.layout.radius,
            'actor': {
                'x': self.actor.pixel_x,
                'y': self.actor.pixel_y,
                'col': self.actor.grid_col,
                'row': self.actor.grid_row,
                'facing_right': self.actor.facing_right,
                'is_moving': self.actor.is_moving,
            },
            'goal': {
                'x': self.goal.pixel_x,
                'y': self.goal.pixel_y,
                'col': self.goal.grid_col,
                'row': self.goal.grid_row,
            },
        }

    def ui_state(self):
        question = self.questions.current_question
        return {
            'phase': self.state.phase,
            'running': self.state.running,
            'paused': self.state.paused,
            'score': self.state.score,
            'lives': self.state.lives,
            'level': self.state.level,
            'grade_level': self.state.grade_level,
            'subject': self.state.subject,
            'question': question.prompt if question else None,
            'question_kind': question.kind if question else None,
            'difficulty': question.difficulty if question else None,
            'feedback': self.state.feedback,
            'message_title': self.state.message_title,
            'message_text': self.state.message_text,
        }
