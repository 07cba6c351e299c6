"""
Purpose: Handle all user input events and translate them to session actions.
Dependencies: pygame, core/session.py, core/questions/generators.py, core/questions/banks.py.
Ext Hooks: Keyboard hex movement, gamepad.
Client Only: Input handling only; no game logic.
"""

import pygame
from core.questions.banks import GRADES
from core.questions.generators import SUBJECTS


class InputHandler:
    """
    Translates pygame events for one session.

    Holds the only client-side input state: the title-screen grade/subject
    selection and the answer being typed into the question modal.
    """

    def __init__(self, session):
        self.session = session
        self.grade_index = GRADES.index(session.state.grade_level)
        self.subject_index = SUBJECTS.index(session.state.subject)
        self.answer_text = ""

    @property
    def grade(self):
        return GRADES[self.grade_index]

    @property
    def subject(self):
        return SUBJECTS[self.subject_index]

    def handle_event(self, event, viewport_size=None):
        """Dispatch one pygame event. Returns False when the window should close."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.handle_mouse_click(event.pos)
        elif event.type == pygame.FINGERDOWN and viewport_size:
            # Touch coordinates are normalised to 0..1
            self.handle_mouse_click((event.x * viewport_size[0], event.y * viewport_size[1]))
        elif event.type == pygame.KEYDOWN:
            self.handle_keydown(event.key, getattr(event, 'unicode', ''))
        return True

    def handle_mouse_click(self, mouse_pos):
        self.session.handle_click(mouse_pos[0], mouse_pos[1])

    def handle_keydown(self, key, char=''):
        phase = self.session.state.phase
        if phase == 'title':
            self._handle_title_key(key)
        elif phase == 'question':
            self._handle_answer_key(key, char)
        elif key == pygame.K_p:
            self.session.toggle_pause()
        elif key == pygame.K_r:
            self.session.restart()

    def _handle_title_key(self, key):
        if key == pygame.K_LEFT:
            self.grade_index = (self.grade_index - 1) % len(GRADES)
        elif key == pygame.K_RIGHT:
            self.grade_index = (self.grade_index + 1) % len(GRADES)
        elif key == pygame.K_UP:
            self.subject_index = (self.subject_index - 1) % len(SUBJECTS)
        elif key == pygame.K_DOWN:
            self.subject_index = (self.subject_index + 1) % len(SUBJECTS)
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.session.start_game(self.grade, self.subject)

    def _handle_answer_key(self, key, char):
        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            if self.session.submit_answer(self.answer_text) is not None:
                self.answer_text = ""
        elif key == pygame.K_BACKSPACE:
            self.answer_text = self.answer_text[:-1]
        elif char and char.isprintable() and len(self.answer_text) < 24:
            self.answer_text += char
