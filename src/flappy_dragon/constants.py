"""
constants.py: Centralized configuration for the game world and the window.
"""

# -------- Window / Terminal Config --------
SCREEN_WIDTH = 80               # Grid columns
SCREEN_HEIGHT = 50              # Grid rows
TILE_SIZE = 16                  # Pixels per grid cell
RENDER_FPS = 60
WINDOW_TITLE = "Flappy Dragon Enhanced"

# Time synchronization
FRAME_DURATION = 75.0           # Milliseconds between physics steps

# -------- Player Config --------
PLAYER_START_X = 5.0
PLAYER_START_Y = 25.0
PLAYER_GLYPH = "@"
PLAYER_GLYPH_SCALE = 4.0

# -------- Physics Config (cells / step) --------
GRAVITY_STEP = 0.2              # Velocity gained per physics step
MAX_FALL_VELOCITY = 2.0         # Gravity stops accelerating past this
FLAP_VELOCITY = -2.0            # Velocity set by a flap
FORWARD_STEP = 1.0              # Horizontal advance per physics step

# -------- Obstacle Config --------
GAP_Y_MIN = 10                  # Inclusive
GAP_Y_MAX = 40                  # Exclusive
BASE_GAP_SIZE = 20
MIN_GAP_SIZE = 2
OBSTACLE_GLYPH = "|"
WALL_GLYPH = "="

# -------- Colors (RGB) --------
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
YELLOW = (255, 255, 0)
NAVY = (0, 0, 128)
