"""
Game constants for the tick snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"

# Keyboard bindings (press events only)
KEY_BINDINGS = {
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}

# Board settings
DEFAULT_WIDTH = 51
DEFAULT_HEIGHT = 51

# Snake seeding
INITIAL_TAIL_LENGTH = 15
INITIAL_GHOST_LENGTH = 5
GHOST_CAP = 5

# Timing: the simulation advances every 4th frame of a 60 fps budget (ms)
FRAME_RATE = 60
TICK_RATE = 4.0 * (1000.0 / FRAME_RATE)

# Cherry placement draws before falling back to the free-cell set
MAX_CHERRY_ATTEMPTS = 64
# Raw draws are non-negative 15-bit integers, wrapped into the board
CHERRY_DRAW_LIMIT = 2 ** 15
