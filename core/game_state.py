"""
Purpose: Centralize mutable run state (phase, score, lives, quiz config, messages) - avoids globals.
Dependencies: core/config.py, dataclasses.
Ext Hooks: Levels (bump ``level`` on victory instead of restarting).
Game Loop: Owned by core/session.py; read by the client UI and the HTTP service.
"""

from dataclasses import dataclass
from core.config import START_LIVES, DEFAULT_GRADE, DEFAULT_SUBJECT

TITLE = 'title'
RUNNING = 'running'
PAUSED = 'paused'
QUESTION = 'question'
VICTORY = 'victory'
DEFEAT = 'defeat'

TRANSITIONS = {
    TITLE: {RUNNING},
    RUNNING: {PAUSED, QUESTION, VICTORY, DEFEAT},
    PAUSED: {RUNNING},
    QUESTION: {RUNNING},
    VICTORY: set(),
    DEFEAT: set(),
}


@dataclass
class GameState:
    """
    Run-level state for one game session.

    ``phase`` drives everything else: clicks are only honoured while
    running, the question modal is shown in the question phase, and the
    victory/defeat phases wait for a scheduled restart back to the title
    screen (see GameSession.restart, the only way out of them).
    """

    phase: str = TITLE
    score: int = 0
    lives: int = START_LIVES
    level: int = 1
    grade_level: str = DEFAULT_GRADE
    subject: str = DEFAULT_SUBJECT
    feedback: str = ""        # Shown under the question prompt
    message_title: str = ""   # Ouch / Victory / Game Over banners
    message_text: str = ""

    @property
    def running(self) -> bool:
        return self.phase in (RUNNING, PAUSED, QUESTION)

    @property
    def paused(self) -> bool:
        return self.phase == PAUSED

    @property
    def finished(self) -> bool:
        return self.phase in (VICTORY, DEFEAT)

    def switch_phase(self, new_phase: str):
        """
        Move to another phase.

        Raises:
            ValueError: If the transition is not allowed from the current phase
        """
        if new_phase not in TRANSITIONS.get(self.phase, set()):
            raise ValueError(f"Invalid transition: {self.phase} -> {new_phase}")
        self.phase = new_phase

    def reset(self):
        """Back to the title screen with a fresh score and full lives; quiz config is kept."""
        self.phase = TITLE
        self.score = 0
        self.lives = START_LIVES
        self.level = 1
        self.feedback = ""
        self.clear_message()

    def add_score(self, points: int):
        self.score += points

    def lose_life(self) -> int:
        self.lives = max(0, self.lives - 1)
        return self.lives

    def set_message(self, title: str, text: str):
        self.message_title = title
        self.message_text = text

    def clear_message(self):
        self.message_title = ""
        self.message_text = ""
