"""
constants.py: Centralized default configuration for the game and the pygame driver.
"""

# -------- Screen Config (character cells) --------
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
FRAME_DURATION_MS = 75.0        # Physics step interval (milliseconds)

# -------- Dragon Config --------
SPAWN_X = 5
SPAWN_Y = 25
GRAVITY = 0.2                   # Velocity added per physics step
TERMINAL_VELOCITY = 2.0         # Max downward velocity (cells/step)
FLAP_IMPULSE = 0.9              # Velocity removed per flap
FLAP_FLOOR = 2.0                # Velocity never drops below -FLAP_FLOOR

# -------- Wall Config --------
GAP_MIN_Y = 10                  # Gap centre range [GAP_MIN_Y, GAP_MAX_Y)
GAP_MAX_Y = 40
GAP_BASE = 20                   # Full gap size at score 0
GAP_MIN = 2                     # Smallest full gap size

# -------- Driver Config --------
WINDOW_TITLE = "Flappy Dragon"
CELL_SIZE = 12                  # Pixels per character cell
RENDER_FPS = 60

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
NAVY = (0, 0, 128)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)

DRAGON_GLYPH = "@"
WALL_GLYPH = "|"
