import os

# Paths
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
LOG_DIR = os.path.join(BASE_DIR, "logs")
SETTINGS_PATH = os.path.join(BASE_DIR, "user_settings.json")

# Glyph Geometry
FONT_SIZE = 16.0
CHAR_WIDTH_RATIO = 0.6  # Monospace approximation
CHAR_HEIGHT_RATIO = 1.2  # Includes line spacing

# Column Jitter
START_OFFSET_MIN = 5  # Cells above the top edge
START_OFFSET_MAX = 20
SPEED_JITTER_MIN = 0.7
SPEED_JITTER_MAX = 1.3

# Trail Growth
GROW_PROBABILITY = 0.8
GLITCH_PROBABILITY = 0.05

# Foreground Layer
FOREGROUND_RESET_PROBABILITY = 0.1
FOREGROUND_REACTIVATE_PROBABILITY = 0.01

# Background Layer (sparser, slower, dimmer)
BACKGROUND_SLOT_STEP = 3
BACKGROUND_SPEED_FACTOR = 0.6
BACKGROUND_ALPHA_FACTOR = 0.3
BACKGROUND_FONT_FACTOR = 0.9
BACKGROUND_RESET_PROBABILITY = 0.05
BACKGROUND_REACTIVATE_PROBABILITY = 0.005

# Default Surface
DEFAULT_SCREEN_WIDTH = 1920
DEFAULT_SCREEN_HEIGHT = 1080
