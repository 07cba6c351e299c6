"""
Purpose: Quiz flow for challenge tiles: issue, check, step difficulty down, remember solved tiles.
Dependencies: core/questions/generators.py, core/questions/question.py, random.
Ext Hooks: Step difficulty back up after a streak of correct answers.
"""

import random
from dataclasses import dataclass
from typing import Optional
from core.questions.generators import generate_question
from core.questions.question import NUMERIC, EASY, MEDIUM, HARD

EASIER = {HARD: MEDIUM, MEDIUM: EASY, EASY: EASY}


@dataclass
class AnswerResult:
    correct: bool
    feedback: str
    next_difficulty: Optional[str] = None


def evaluate(question, raw_input):
    """
    Check a typed answer.

    Numeric answers must parse as an integer (anything else is simply wrong);
    text answers are compared case-insensitively after trimming.
    """
    text = str(raw_input).strip()
    if question.kind == NUMERIC:
        try:
            return int(text) == int(question.answer)
        except ValueError:
            return False
    return text.lower() == str(question.answer).strip().lower()


def difficulty_for_row(row, rows):
    """Questions get harder closer to the princess (row 0 is north)."""
    position = row / rows
    if position < 0.33:
        return HARD
    if position < 0.66:
        return MEDIUM
    return EASY


class QuestionEngine:
    def __init__(self, source=None, rng=None):
        self.rng = rng or random.Random()
        self.source = source or self._local_source
        self.current_question = None
        self.current_difficulty = MEDIUM
        self.wrong_answer_count = 0
        self.answered_tiles = set()
        self.origin_tile = None
        self.subject = 'math-mixed'
        self.grade_level = '2'

    def _local_source(self, difficulty, subject, grade_level):
        return generate_question(difficulty, subject, grade_level, self.rng)

    def configure(self, subject, grade_level):
        # Validate eagerly so a bad config fails at game start, not mid-run
        generate_question(MEDIUM, subject, grade_level, self.rng)
        self.subject = subject
        self.grade_level = str(grade_level).upper()

    def generate(self, difficulty, subject=None, grade_level=None):
        return self.source(difficulty, subject or self.subject, grade_level or self.grade_level)

    evaluate = staticmethod(evaluate)

    def is_answered(self, col, row):
        return (col, row) in self.answered_tiles

    def begin(self, tile_pos, difficulty):
        """Open a question for the challenge tile at tile_pos."""
        self.origin_tile = tuple(tile_pos)
        self.current_difficulty = difficulty
        self.wrong_answer_count = 0
        self.current_question = self.generate(difficulty)
        return self.current_question

    def submit(self, raw_input):
        if self.current_question is None:
            raise RuntimeError("No question is open")
        if evaluate(self.current_question, raw_input):
            self.answered_tiles.add(self.origin_tile)
            return AnswerResult(True, "Correct! Great job!")

        self.wrong_answer_count += 1
        previous = self.current_difficulty
        self.current_difficulty = EASIER[previous]
        if previous == HARD:
            feedback = "Let's try an easier one!"
        elif previous == MEDIUM:
            feedback = "Here's an easier question!"
        else:
            feedback = "Try again!"
        return AnswerResult(False, feedback, self.current_difficulty)

    def reissue(self):
        """Replace the open question with a fresh one at the current difficulty."""
        self.current_question = self.generate(self.current_difficulty)
        return self.current_question

    def close(self):
        self.current_question = None
        self.origin_tile = None
        self.wrong_answer_count = 0

    def reset(self):
        self.close()
        self.answered_tiles = set()
        self.current_difficulty = MEDIUM
