from pathlib import Path

# --- Screen and Game Settings ---
SCREEN_WIDTH, SCREEN_HEIGHT = 640, 480  # Logical resolution, also the level bounds
FPS = 60
WINDOW_TITLE = "Koda Adventure"
WINDOW_SCALE = 2  # Window size multiplier, informational only

# --- Player ---
PLAYER_WIDTH, PLAYER_HEIGHT = 16, 32
PLAYER_START = (100, 100)

# --- Physics Constants ---
GRAVITY = 0.4          # px/frame^2
MAX_FALL = 8           # terminal velocity
MOVE_SPEED = 3         # px/frame
JUMP_POWER = 7         # initial upward velocity, px/frame

# --- Colors ---
BACKGROUND_COLOR = (30, 30, 50)
PLATFORM_COLOR = (100, 100, 120)
PLAYER_COLOR = (255, 80, 80)
DEBUG_TEXT_COLOR = (230, 230, 230)

# --- Config Paths ---
SETTINGS_PATH = Path(__file__).parent / "settings.json"
