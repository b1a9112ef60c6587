import enum
import logging
import time

from . import settings
from .entities import Ball, BrickField, Outcome, Paddle

logger = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "GAME OVER"
WIN_MESSAGE = "Congratulations!! You have won"


class State(enum.Enum):
    PRE_LAUNCH = "pre_launch"
    PLAYING = "playing"
    LIFE_LOST = "life_lost"
    WON = "won"
    GAME_OVER = "game_over"


class GameSession:
    """Everything one game shares between ticks: entities, score and lives."""

    def __init__(
        self,
        field_width=settings.WIDTH,
        field_height=settings.HEIGHT,
        lives=settings.LIVES_START,
        high_score=0,
        rng=None,
        clock=time.monotonic,
    ):
        self.field_width = field_width
        self.field_height = field_height
        self.start_lives = lives
        self.ball = Ball(field_width, field_height, rng=rng, clock=clock)
        self.paddle = Paddle(field_width=field_width, field_height=field_height)
        self.field = BrickField(field_width=field_width)
        self.score = 0
        self.lives = lives
        self.high_score = high_score
        self.state = State.PRE_LAUNCH

    def reset_round(self):
        self.ball.reset()
        self.paddle.reset()
        self.state = State.PRE_LAUNCH

    def reset_game(self):
        self.reset_round()
        self.field.reset()
        self.score = 0
        self.lives = self.start_lives


class GameLoop:
    def __init__(self, session, canvas=None, announce=None, scores=None):
        self.session = session
        self.canvas = canvas
        self.announce = announce or (lambda message: None)
        self.scores = scores
        if scores is not None:
            session.high_score = scores.load()

    @property
    def state(self):
        return self.session.state

    def launch(self):
        s = self.session
        if s.state != State.PRE_LAUNCH:
            return False
        s.ball.launch()
        s.state = State.PLAYING
        return True

    def tick(self, multiplier=0):
        """Advance one fixed step and return the state reached during it."""
        s = self.session
        s.paddle.set_velocity_multiplier(multiplier)
        s.paddle.tick()

        reached = s.state
        if s.state == State.PLAYING:
            reached = self._play()

        self.render()
        return reached

    def _play(self):
        s = self.session
        if s.ball.tick(s.paddle.box) == Outcome.LIFE_LOST:
            s.lives -= 1
            if s.lives > 0:
                logger.info("Life lost, %d remaining", s.lives)
                self.announce(f"LIFE LOST - {s.lives} left")
                s.reset_round()
                return State.LIFE_LOST
            self._finish(State.GAME_OVER, GAME_OVER_MESSAGE)
            return State.GAME_OVER

        if s.field.check_collision(s.ball.x, s.ball.y, s.ball.radius) is not None:
            s.ball.on_brick_hit()
            s.score += max(s.lives, 1)

        if s.field.size and s.field.alive_count == 0:
            self._finish(State.WON, WIN_MESSAGE)
            return State.WON
        return State.PLAYING

    def _finish(self, outcome, message):
        s = self.session
        s.state = outcome
        logger.info("%s with score %d", outcome.name, s.score)
        if s.score > s.high_score:
            logger.info("New high score %d (was %d)", s.score, s.high_score)
            s.high_score = s.score
            if self.scores is not None:
                self.scores.save(s.score)
        self.announce(message)
        s.reset_game()

    def render(self):
        if self.canvas is None:
            return
        s = self.session
        c = self.canvas
        c.clear(s.field_width, s.field_height)
        s.field.draw(c)
        s.ball.draw(c)
        s.paddle.draw(c)
        c.draw_text(f"SCORE : {s.score}", 8, 20)
        c.draw_text(f"HIGHSCORE : {s.high_score}", 8, 40)
        c.draw_text(f"LIVES : {s.lives}", 8, 60)
