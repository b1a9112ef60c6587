import enum
import logging
import random
import time

from . import settings

logger = logging.getLogger(__name__)


def clamp(val, lo, hi):
    return max(lo, min(hi, val))


class Outcome(enum.Enum):
    NONE = 0
    LIFE_LOST = 1


# Game objects
class Brick:
    def __init__(self, x, y, width, height, color, column=0, row=0):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.color = color
        self.column = column
        self.row = row
        self.alive = True

    def collides(self, x, y, radius):
        # Horizontal test uses the ball centre, vertical test the ball's box
        return (
            self.x < x < self.x + self.width
            and y + radius > self.y
            and y - radius < self.y + self.height
        )

    def kill(self):
        self.alive = False

    def draw(self, canvas):
        canvas.draw_rect(self.x, self.y, self.width, self.height, self.color)


class BrickField:
    def __init__(
        self,
        columns=settings.BRICK_COLS,
        rows=settings.BRICK_ROWS,
        brick_width=settings.BRICK_WIDTH,
        brick_height=settings.BRICK_HEIGHT,
        padding_top=settings.BRICK_PADDING_TOP,
        padding_left=settings.BRICK_PADDING_LEFT,
        offset_top=settings.BRICK_TOP_OFFSET,
        field_width=settings.WIDTH,
        colors=(settings.BRICK_COLOR_ODD, settings.BRICK_COLOR_EVEN),
    ):
        self.rows = rows
        self.brick_width = brick_width
        self.brick_height = brick_height
        self.padding_top = padding_top
        self.padding_left = padding_left
        self.offset_top = offset_top
        self.field_width = field_width
        self.colors = colors
        self.columns, self.offset_left = self.layout(
            columns, brick_width, padding_left, field_width
        )
        self.bricks = []
        self.reset()

    @staticmethod
    def layout(columns, brick_width, padding_left, field_width):
        """Fit the column count to the field and centre the grid.

        Returns ``(columns, offset_left)``. Columns are dropped one at a time
        until the grid plus one spare brick width fits inside the field.
        """
        requested = columns
        occupied = columns * (brick_width + padding_left)
        while columns > 0 and occupied + brick_width > field_width:
            columns -= 1
            occupied = columns * (brick_width + padding_left)
        if columns != requested:
            logger.warning(
                "Brick grid too wide for a %s px field, using %d of %d columns",
                field_width, columns, requested,
            )
        offset_left = (field_width - occupied) * 0.5 + padding_left * 0.5
        return columns, offset_left

    @property
    def size(self):
        return self.columns * self.rows

    @property
    def alive_count(self):
        return sum(1 for brick in self if brick.alive)

    def __iter__(self):
        for column in self.bricks:
            yield from column

    def brick_at(self, column, row):
        return self.bricks[column][row]

    def alive_bricks(self):
        return [b for b in self if b.alive]

    def reset(self):
        self.bricks = []
        for col in range(self.columns):
            column = []
            for row in range(self.rows):
                x = (self.brick_width + self.padding_left) * col + self.offset_left
                y = (self.brick_height + self.padding_top) * row + self.offset_top
                color = self.colors[0] if (col + row) % 2 == 1 else self.colors[1]
                column.append(
                    Brick(x, y, self.brick_width, self.brick_height, color, col, row)
                )
            self.bricks.append(column)

    def check_collision(self, x, y, radius):
        # Column-major scan, first live hit wins
        for brick in self:
            if brick.alive and brick.collides(x, y, radius):
                brick.kill()
                logger.debug("Brick hit at column %d row %d", brick.column, brick.row)
                return brick
        return None

    def draw(self, canvas):
        for brick in self.alive_bricks():
            brick.draw(canvas)


class Paddle:
    def __init__(
        self,
        width=settings.PADDLE_WIDTH,
        height=settings.PADDLE_HEIGHT,
        field_width=settings.WIDTH,
        field_height=settings.HEIGHT,
        speed=settings.PADDLE_SPEED,
        color=settings.PADDLE_COLOR,
    ):
        self._width = width
        self._height = height
        self._y = field_height - height * 2
        self.field_width = field_width
        self.speed = speed
        self.color = color
        self.multiplier = 0
        self.reset()

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    @property
    def box(self):
        return (self._x, self._y, self._width, self._height)

    def set_velocity_multiplier(self, multiplier):
        if multiplier not in (-1, 0, 1):
            raise ValueError(f"velocity multiplier must be -1, 0 or 1, got {multiplier!r}")
        self.multiplier = multiplier

    def tick(self):
        self._x += self.speed * self.multiplier
        self._x = clamp(self._x, 0, self.field_width - self._width)

    def reset(self):
        self._x = (self.field_width - self._width) * 0.5

    def draw(self, canvas):
        canvas.draw_rect(self._x, self._y, self._width, self._height, self.color)


class Ball:
    def __init__(
        self,
        field_width=settings.WIDTH,
        field_height=settings.HEIGHT,
        radius=settings.BALL_RADIUS,
        speed_x=settings.BALL_SPEED_X,
        speed_y=settings.BALL_SPEED_Y,
        color=settings.BALL_COLOR,
        hit_window=settings.BRICK_HIT_WINDOW,
        rng=None,
        clock=time.monotonic,
    ):
        self.field_width = field_width
        self.field_height = field_height
        self.radius = radius
        self.color = color
        self.base_speed = (speed_x, speed_y)
        self.hit_window = hit_window
        self.rng = rng or random.Random()
        self.clock = clock
        self.reset()

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def vx(self):
        return self._vx

    @property
    def vy(self):
        return self._vy

    @property
    def moving(self):
        return self._vx != 0 or self._vy != 0

    @property
    def recent_brick_hit(self):
        return self._hit_expires is not None and self.clock() < self._hit_expires

    def reset(self):
        self._x = self.field_width * 0.5
        self._y = self.field_height * 0.5
        self._vx = 0.0
        self._vy = 0.0
        self._hit_expires = None

    def launch(self):
        if self.moving:
            return
        speed_x, speed_y = self.base_speed
        self._vx = speed_x * self.rng.choice((-1, 1))
        self._vy = speed_y * self.rng.choice((-1, 1))
        logger.debug("Ball launched with velocity (%s, %s)", self._vx, self._vy)

    def on_brick_hit(self):
        self._vy *= -1
        if self.recent_brick_hit:
            # Second hit inside the window: treat it as a corner and reflect both axes
            self._vx *= -1
            self._hit_expires = None
            return
        self._hit_expires = self.clock() + self.hit_window

    def tick(self, paddle_box):
        self._x += self._vx
        self._y += self._vy
        return self._collide(paddle_box)

    def _collide(self, paddle_box):
        # Checks run against the next frame's position
        r = self.radius
        x = self._x + self._vx
        y = self._y + self._vy

        # Wall collisions, top wins over the sides
        if y < r:
            self._vy *= -1
        elif x < r or x + r > self.field_width:
            self._vx *= -1

        if y > self.field_height - r:
            return Outcome.LIFE_LOST

        px, py, pw, ph = paddle_box
        if px < x < px + pw and y + r >= py and y <= py + ph:
            self._vy *= -1

        return Outcome.NONE

    def draw(self, canvas):
        canvas.draw_circle(self._x, self._y, self.radius, self.color)
