"""
Purpose: Configs for grid, hex geometry, movement, quiz and timers.
Dependencies: os.
Ext Hooks: Add levels (more barrier rows, denser hazards).
"""

import os

# Grid
GRID_COLS = 12
GRID_ROWS = 20
BARRIER_ROWS = (5, 10, 15)
FORCED_BARRIER_ROW = 10  # Every tile a question; no way around it
BARRIER_GAP_COLS = (2, 6, 9)
BARRIER_HAZARD_PROBABILITY = 0.3
HAZARD_PROBABILITY = 0.08
CHALLENGE_PROBABILITY_NORTH = 0.15
CHALLENGE_PROBABILITY_SOUTH = 0.08
BONUS_PROBABILITY = 0.05
MAX_PLACEMENT_ATTEMPTS = 200

# Hex geometry (flat-top, odd columns shifted down)
HEX_RADIUS = 30
HORIZONTAL_SPACING = 0.90
VERTICAL_SPACING = 1.18
OFFSET_MULTIPLIER = 0.5
GRID_OFFSET_X = 150
GRID_OFFSET_Y = 50
CONTROLS_HEIGHT = 60
VIEWPORT_PADDING = 10

# Movement
MOVE_SPEED = 5.0  # Pixels per frame
MOVE_DELAY = 0.2  # Seconds between accepted moves

# Game rules
START_LIVES = 3
QUESTION_REWARD = 10
BONUS_REWARD = 10

# Timers (seconds)
CORRECT_CLOSE_DELAY = 1.0
WRONG_RETRY_DELAY = 1.5
HAZARD_MESSAGE_DURATION = 1.5
VICTORY_RESTART_DELAY = 3.0
DEFEAT_RESTART_DELAY = 2.0

# Quiz defaults
DEFAULT_GRADE = '2'
DEFAULT_SUBJECT = 'math-mixed'

# Window
WINDOW_WIDTH = 400
WINDOW_HEIGHT = 700
FPS = 60
LOOP_MODE = os.getenv("HEXQUEST_LOOP_MODE", "continuous")  # 'continuous' or 'gameplay'
ASSET_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "client", "images")
PLAYER_IMAGE = "Mathew.png"
GOAL_IMAGE = "Princess.png"
PLAYER_SIZE = 40
GOAL_SIZE = 30

# Question service
SERVER_URL = os.getenv("HEXQUEST_SERVER_URL", "http://localhost:5000")
USE_QUESTION_SERVER = bool(int(os.getenv("HEXQUEST_USE_QUESTION_SERVER", "0")))
