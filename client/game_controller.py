"""
Purpose: Main game controller - pygame window, frame clock, event pump, drawing.
Dependencies: pygame, core/session.py, core/render_loop.py, client/render/board_renderer.py,
              client/ui/manager.py, client/input_handler.py, client/network/client.py, core/config.py.
Ext Hooks: Sound effects on session events (subscribe()).
Client Only: Input and visuals.
"""

import pygame
from core.config import WINDOW_WIDTH, WINDOW_HEIGHT, FPS, LOOP_MODE, SERVER_URL, USE_QUESTION_SERVER
from core.questions.engine import QuestionEngine
from core.render_loop import RenderLoop
from core.session import GameSession
from client.input_handler import InputHandler
from client.network.client import NetworkClient, RemoteQuestionSource
from client.render.board_renderer import BoardRenderer
from client.ui.manager import UIManager


class GameController:
    """
    Owns the window and the one GameSession it shows.
    Each frame: pump events, run a RenderLoop frame, overlay the UI, flip.
    """

    def __init__(self, width=WINDOW_WIDTH, height=WINDOW_HEIGHT, loop_mode=LOOP_MODE, use_question_server=USE_QUESTION_SERVER):
        pygame.init()
        pygame.font.init()
        self.font = pygame.font.SysFont('Arial', 20)
        self.big_font = pygame.font.SysFont('Arial', 32, bold=True)

        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Hex Quest")
        self.clock = pygame.time.Clock()

        question_engine = None
        if use_question_server:
            question_engine = QuestionEngine(source=RemoteQuestionSource(NetworkClient(SERVER_URL)))
            print(f"Using question service at {SERVER_URL}")

        self.session = GameSession(question_engine=question_engine)
        self.session.resize(width, height)
        self.session.subscribe(self._log_event)

        self.renderer = BoardRenderer(self.screen, self.session.layout)
        self.render_loop = RenderLoop(self.session, self.renderer, mode=loop_mode)
        self.input_handler = InputHandler(self.session)
        self.ui = UIManager(self.font, self.big_font)
        self.running = True

    def _log_event(self, event, payload):
        if event in ('hazard_hit', 'victory', 'defeat', 'bonus_collected'):
            print(f"{event}: {payload}")

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.renderer.screen = self.screen
                self.session.resize(event.w, event.h)
            elif not self.input_handler.handle_event(event, self.screen.get_size()):
                self.running = False

    def draw_ui(self):
        self.ui.draw(self.screen, self.session.ui_state(), self.input_handler.grade,
                     self.input_handler.subject, self.input_handler.answer_text)

    def run(self):
        """Main game loop."""
        while self.running:
            dt = self.clock.tick(FPS) / 1000.0  # Delta time

            self.handle_events()
            if not self.render_loop.frame(dt):
                # Board is hidden; title and pause screens still need painting
                self.renderer.draw_background()
            self.draw_ui()
            pygame.display.flip()

        pygame.quit()
