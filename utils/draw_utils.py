import pygame


def hex_color(value):
    """'#RRGGBB' -> (r, g, b)."""
    value = value.lstrip('#')
    return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))


def draw_hexagon(screen, points, fill_color, stroke_color=(51, 51, 51), width=2):
    """Draw a filled flat-top hexagon with an outline."""
    pygame.draw.polygon(screen, fill_color, points)
    pygame.draw.polygon(screen, stroke_color, points, width)


def draw_coin(screen, x, y, radius):
    """Bonus coin: gold disc with a darker rim."""
    pygame.draw.circle(screen, (255, 215, 0), (int(x), int(y)), radius)
    pygame.draw.circle(screen, (184, 134, 11), (int(x), int(y)), radius, 2)


def draw_lives(screen, x, y, lives, size=8):
    """Row of red hearts (drawn as circles + triangle) for the HUD."""
    for i in range(lives):
        cx = x + i * (size * 3)
        pygame.draw.circle(screen, (220, 40, 60), (cx - size // 2, y), size // 2 + 1)
        pygame.draw.circle(screen, (220, 40, 60), (cx + size // 2, y), size // 2 + 1)
        pygame.draw.polygon(screen, (220, 40, 60), [(cx - size, y), (cx + size, y), (cx, y + size)])
