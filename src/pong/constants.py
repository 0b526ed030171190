"""
Constants used by the Pong game
"""

SCREEN_CAPTION = "Pong"

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768
U32_MAX = 2**32 - 1
I32_MAX = 2**31 - 1

# Simulation
THICKNESS = 15
PADDLE_HEIGHT = 100.0
PADDLE_SPEED = 300.0  # pixels per second
PADDLE_X = 10.0
BALL_INITIAL_VELOCITY_X = -200.0
BALL_INITIAL_VELOCITY_Y = 235.0

# Horizontal band in which the ball can bounce off the paddle
PADDLE_COLLISION_MIN_X = 20.0
PADDLE_COLLISION_MAX_X = 25.0

# Timing
PHYSICS_STEP_MILLISECONDS = 16
GATE_SLICE_MILLISECONDS = 1
MAX_DELTA_TIME = 0.05  # seconds
FPS = 60
FRAME_INTERVAL_SECONDS = 1 / FPS

# Colors
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)
WHITE = (255, 255, 255)
BACKGROUND_COLOR = BLUE
WALL_COLOR = GREEN
PADDLE_COLOR = WHITE
BALL_COLOR = WHITE

# CLI
ARG_GAME = "game"
GAME_PONG = "pong"
GAME_TITLES = (GAME_PONG,)
