WIDTH, HEIGHT = 800, 600
FPS = 60

PADDLE_WIDTH, PADDLE_HEIGHT = 200, 20
PADDLE_SPEED = 7.0

BALL_RADIUS = 20
BALL_SPEED_X = 7.5
BALL_SPEED_Y = 9.0
BRICK_HIT_WINDOW = 0.1  # seconds, wall clock

BRICK_COLS = 8
BRICK_ROWS = 7
BRICK_WIDTH, BRICK_HEIGHT = 200, 20
BRICK_PADDING_TOP = 20
BRICK_PADDING_LEFT = 20
BRICK_TOP_OFFSET = 20

LIVES_START = 3

BG_COLOR = (191, 176, 176)
BALL_COLOR = (84, 40, 151)
PADDLE_COLOR = (96, 67, 162)
TEXT_COLOR = (46, 46, 46)
BANNER_COLOR = (245, 240, 240)

# Checkerboard colours for the brick grid
BRICK_COLOR_ODD = (101, 73, 145)
BRICK_COLOR_EVEN = (152, 135, 171)

FONT_NAME = "helvetica"
FONT_SIZE = 16
BANNER_FONT_SIZE = 36

SCORE_KEY = "highScore"
