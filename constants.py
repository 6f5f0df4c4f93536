import math

APP_TITLE = "Fortune wheel"
LOG_FILE = "fortune_wheel.log"

# Window
WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 750
WHEEL_MARGIN = 35
TICK_INTERVAL_MS = 16

# Choices
MAX_CHOICES = 50
MAX_INPUT_SIZE = 100
MAX_SEGMENT_WEIGHT = 10

# Spin physics (radians per tick)
SPIN_VELOCITY_MIN = 0.25
SPIN_VELOCITY_MAX = 0.45
BREAKING_PERCENT = 0.985
MIN_SPEED = 0.0005

# Layout
FULL_TURN = 2 * math.pi
STEPS = 100
MAX_TEXT_SIZE = 40
MIN_TEXT_SIZE = 10
MAX_RANGE_TEXT_LENGTH = 20
TRUNCATION_SUFFIX = ".."
TEXT_RADIUS_RATIO = 0.6
TEXT_CHORD_RATIO = 0.9

# Blue, red, yellow, green
PALETTE = [
    (51, 105, 232),
    (213, 15, 37),
    (238, 178, 17),
    (0, 153, 37),
]

TITLE_SIZE = 40
SPACER_AMOUNT = 20
EMPTY_WHEEL_TEXT = "Add options to spin the wheel !"
