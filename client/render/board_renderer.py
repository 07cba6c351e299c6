"""
Purpose: Paint the board, the princess and Mathew from a session draw-state snapshot.
Dependencies: pygame, os, core/hex/layout.py, core/config.py, utils/draw_utils.py.
Ext Hooks: Walk-cycle animation frames for Mathew.
Client Only: All visuals; no game logic here.
"""

import os
import pygame
from core.config import ASSET_DIR, PLAYER_IMAGE, GOAL_IMAGE, PLAYER_SIZE, GOAL_SIZE
from utils.draw_utils import hex_color, draw_hexagon, draw_coin

BACKGROUND = hex_color('#87CEEB')
TILE_COLORS = {
    'hazard': (hex_color('#FF5722'), hex_color('#D84315')),
    'challenge': (hex_color('#FFD700'), hex_color('#FFA500')),
    'normal': (hex_color('#7CB342'), hex_color('#558B2F')),
}
NORMAL_ALT = hex_color('#8BC34A')
PLAYER_FALLBACK = hex_color('#FF6B6B')
GOAL_FALLBACK = hex_color('#FFB6C1')
GOAL_FALLBACK_RIM = hex_color('#FF69B4')


def load_image(filename, size, asset_dir=ASSET_DIR):
    """Load and scale an image; None when missing or unreadable so callers draw a fallback."""
    full_path = os.path.join(asset_dir, filename)
    try:
        image = pygame.image.load(full_path).convert_alpha()
    except (FileNotFoundError, pygame.error):
        print(f"Warning: Image not found at {full_path}. Using placeholder.")
        return None
    return pygame.transform.smoothscale(image, (size, size))


class BoardRenderer:
    def __init__(self, screen, layout, asset_dir=ASSET_DIR):
        self.screen = screen
        self.layout = layout
        self.player_image = load_image(PLAYER_IMAGE, PLAYER_SIZE, asset_dir)
        self.goal_image = load_image(GOAL_IMAGE, GOAL_SIZE, asset_dir)
        self.player_image_left = pygame.transform.flip(self.player_image, True, False) if self.player_image else None

    def draw_background(self):
        self.screen.fill(BACKGROUND)

    def draw_grid(self, state):
        # Slightly smaller hexes leave a visible gap between tiles
        for tile in state['tiles']:
            points = self.layout.hex_corners(tile['col'], tile['row'], scale=0.95)
            fill, stroke = TILE_COLORS[tile['type']]
            if tile['type'] == 'normal' and (tile['row'] + tile['col']) % 2 == 0:
                fill = NORMAL_ALT
            draw_hexagon(self.screen, points, fill, stroke)
            if tile['has_bonus']:
                draw_coin(self.screen, tile['x'], tile['y'], max(3, int(state['radius'] * 0.3)))

    def draw_goal(self, state):
        x, y = state['goal']['x'], state['goal']['y']
        if self.goal_image:
            self.screen.blit(self.goal_image, (x - GOAL_SIZE / 2, y - GOAL_SIZE / 2))
            return
        center = (int(x), int(y))
        pygame.draw.circle(self.screen, GOAL_FALLBACK, center, GOAL_SIZE // 2)
        pygame.draw.circle(self.screen, GOAL_FALLBACK_RIM, center, GOAL_SIZE // 2, 3)

    def draw_actor(self, state):
        actor = state['actor']
        x, y = actor['x'], actor['y']
        if self.player_image:
            image = self.player_image if actor['facing_right'] else self.player_image_left
            self.screen.blit(image, (x - PLAYER_SIZE / 2, y - PLAYER_SIZE / 2))
            return
        rect = pygame.Rect(int(x - PLAYER_SIZE / 2), int(y - PLAYER_SIZE / 2), PLAYER_SIZE, PLAYER_SIZE)
        pygame.draw.rect(self.screen, PLAYER_FALLBACK, rect)
