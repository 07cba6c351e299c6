"""
Purpose: UIManager for HUD, title screen, question modal and end-of-run banners.
Dependencies: pygame, utils/draw_utils.py.
Client Only: UI drawing abstraction; reads session.ui_state() only.
"""

import pygame
from typing import Tuple
from utils.draw_utils import draw_lives

OVERLAY = (0, 0, 0, 140)
PANEL = (255, 255, 255)
TEXT = (51, 51, 51)
GOOD = (76, 175, 80)
BAD = (244, 67, 54)


class UIManager:
    def __init__(self, font, big_font=None):
        self.font = font
        self.big_font = big_font or font

    def draw_message(self, screen: pygame.Surface, message: str, color: Tuple[int, int, int], pos: Tuple[int, int], font=None):
        text_surface = (font or self.font).render(message, True, color)
        screen.blit(text_surface, pos)

    def draw_centered(self, screen: pygame.Surface, message: str, y: int, color=TEXT, font=None):
        text_surface = (font or self.font).render(message, True, color)
        screen.blit(text_surface, (screen.get_width() // 2 - text_surface.get_width() // 2, y))

    def _dim(self, screen):
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill(OVERLAY)
        screen.blit(overlay, (0, 0))

    def _panel(self, screen, height):
        width = screen.get_width() - 40
        rect = pygame.Rect(20, screen.get_height() // 2 - height // 2, width, height)
        pygame.draw.rect(screen, PANEL, rect, border_radius=12)
        return rect

    def draw_hud(self, screen: pygame.Surface, ui):
        self.draw_message(screen, f"Score: {ui['score']}", (255, 255, 255), (10, 8))
        draw_lives(screen, screen.get_width() - 90, 18, ui['lives'])

    def draw_title(self, screen: pygame.Surface, grade: str, subject: str):
        self._dim(screen)
        rect = self._panel(screen, 220)
        self.draw_centered(screen, "Hex Quest", rect.top + 20, font=self.big_font)
        self.draw_centered(screen, "Help Mathew reach the princess!", rect.top + 70)
        self.draw_centered(screen, f"< Grade: {grade} >", rect.top + 105)
        self.draw_centered(screen, f"^ Subject: {subject} v", rect.top + 135)
        self.draw_centered(screen, "Press Enter to start", rect.top + 175, color=GOOD)

    def draw_question(self, screen: pygame.Surface, ui, answer_text: str):
        self._dim(screen)
        rect = self._panel(screen, 200)
        self.draw_centered(screen, "Question!", rect.top + 15, font=self.big_font)
        self.draw_centered(screen, ui['question'] or "", rect.top + 65)
        box = pygame.Rect(rect.left + 40, rect.top + 100, rect.width - 80, 34)
        pygame.draw.rect(screen, TEXT, box, 2, border_radius=6)
        self.draw_message(screen, answer_text, TEXT, (box.left + 8, box.top + 6))
        if ui['feedback']:
            color = GOOD if ui['feedback'].startswith("Correct") else BAD
            self.draw_centered(screen, ui['feedback'], rect.top + 150, color=color)

    def draw_banner(self, screen: pygame.Surface, title: str, text: str):
        self._dim(screen)
        rect = self._panel(screen, 140)
        self.draw_centered(screen, title, rect.top + 20, font=self.big_font)
        self.draw_centered(screen, text, rect.top + 80)

    def draw_paused(self, screen: pygame.Surface):
        self._dim(screen)
        self.draw_centered(screen, "Paused (P to resume)", screen.get_height() // 2, color=(255, 255, 255), font=self.big_font)

    def draw(self, screen: pygame.Surface, ui, grade: str, subject: str, answer_text: str):
        """Overlay everything for the current phase on top of the board."""
        self.draw_hud(screen, ui)
        phase = ui['phase']
        if phase == 'title':
            self.draw_title(screen, grade, subject)
        elif phase == 'paused':
            self.draw_paused(screen)
        elif phase == 'question':
            self.draw_question(screen, ui, answer_text)
        if ui['message_title']:
            self.draw_banner(screen, ui['message_title'], ui['message_text'])
