import os

# --- Display (character grid) ---
SCREEN_WIDTH = 80           # cells
SCREEN_HEIGHT = 50          # cells
CELL_PX = 12                # cell edge in pixels
WIDTH = SCREEN_WIDTH * CELL_PX
HEIGHT = SCREEN_HEIGHT * CELL_PX
FPS = 60
TITLE = "Flappy Dragon"

# --- Physics ---
FRAME_DURATION_MS = 30.0    # one physics step once the accumulator passes this
GRAVITY_STEP = 0.2          # velocity gained per physics step
TERMINAL_VELOCITY = 2.0     # cap on downward velocity

# --- Player ---
PLAYER_START_X = 5
PLAYER_START_Y = 25
PLAYER_SCREEN_X = 1         # column the dragon is drawn in

# --- Obstacles ---
GAP_CENTER_MIN = 10         # inclusive
GAP_CENTER_MAX = 40         # exclusive
GAP_BASELINE = 20           # gap size at score 0, shrinks by 1 per point

# --- Settings (defaults and cyclic bounds) ---
FLAP_VELOCITY_DEFAULT = -2.0
FLAP_VELOCITY_STEP = 0.5
FLAP_VELOCITY_LIMIT = -4.0
FLAP_VELOCITY_WRAP = -1.5
MIN_GAP_DEFAULT = 2
MIN_GAP_MAX = 10
MIN_GAP_WRAP = 1
VOLUME_DEFAULT = 5
VOLUME_MAX = 10

# --- Messages ---
ENCOURAGE_EVERY = 5         # points between encouragements
ENCOURAGE_FRAMES = 60       # frames an encouragement stays on screen
ENCOURAGEMENTS = (
    "AMAZING!",
    "MARVELOUS!",
    "UNSTOPPABLE!",
    "KEYBOARD WIZARD!",
    "FRANTIC FLYING!",
)
DEATH_MESSAGES = (
    "OOF WE HEARD THAT IN THE STANDS",
    "YOUR ARE GONNA FEEL THAT FOR AWHILE",
    "MAYBE DONT DO THAT NEXT TIME?",
    "SOMEONE CALL THE CLEAN UP CREW",
    "AH THE SATISFYING SOUND OF \"SPLAT\"",
)

# --- Colors (RGB) ---
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
CYAN = (0, 255, 255)
MAGENTA = (255, 0, 255)
LIGHTBLUE4 = (104, 131, 139)

# --- Assets ---
FONT_FILE = "terminal.ttf"
SPRITE_GLOB = "dragon_*.png"
SOUND_FILES = {
    "flap": "flap.wav",
    "point": "point.wav",
    "crash": "crash.wav",
}
SPRITE_SCALE = 2.0
SPRITE_TILT_DEG = 15.0      # degrees of nose-down tilt per unit of velocity
MONO_FONTS = "dejavusansmono,couriernew,consolas,monospace"

# --- Audio ---
AUDIO_CHANNELS = 32

# --- Environment overrides ---
ASSET_ARCHIVE = os.environ.get("FLAPPY_DRAGON_ASSETS") or None
LOG_LEVEL = os.environ.get("FLAPPY_DRAGON_LOG_LEVEL", "INFO").upper()
