import argparse
import logging
import random
from pathlib import Path

import pygame

from . import settings
from .controls import Controls
from .game import GameLoop, GameSession, State
from .scores import DEFAULT_SCORES_PATH, HighScoreStore, MemoryScoreStore

logger = logging.getLogger(__name__)


class PygameCanvas:
    """Drawing surface the game renders onto, backed by a pygame Surface."""

    def __init__(self, surface, font=None, bg_color=settings.BG_COLOR, text_color=settings.TEXT_COLOR):
        self.surface = surface
        self.font = font
        self.bg_color = bg_color
        self.text_color = text_color

    def clear(self, width, height):
        self.surface.fill(self.bg_color, pygame.Rect(0, 0, width, height))

    def draw_rect(self, x, y, w, h, color):
        pygame.draw.rect(self.surface, color, pygame.Rect(round(x), round(y), round(w), round(h)))

    def draw_circle(self, cx, cy, r, color):
        pygame.draw.circle(self.surface, color, (int(cx), int(cy)), int(r))

    def draw_text(self, text, x, y, color=None):
        if self.font is None:
            return
        img = self.font.render(text, True, color or self.text_color)
        # y is the text baseline
        self.surface.blit(img, img.get_rect(bottomleft=(x, y)))


def field_size(width=None, height=None):
    """Fill in a missing dimension from the display, as the field spans the client area."""
    if width is None or height is None:
        info = pygame.display.Info()
        if width is None:
            width = info.current_w if info.current_w > 0 else settings.WIDTH
        if height is None:
            height = info.current_h if info.current_h > 0 else settings.HEIGHT
    return width, height


class BrickBreakerApp:
    def __init__(self, width=None, height=None, scores=None, seed=None):
        pygame.init()
        width, height = field_size(width, height)
        pygame.display.set_caption("Brick Breaker")
        self.screen = pygame.display.set_mode((width, height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont(settings.FONT_NAME, settings.FONT_SIZE)
        self.big_font = pygame.font.SysFont(settings.FONT_NAME, settings.BANNER_FONT_SIZE, bold=True)

        self.controls = Controls()
        self.banner = None
        self.running = False
        session = GameSession(width, height, rng=random.Random(seed))
        self.loop = GameLoop(
            session,
            canvas=PygameCanvas(self.screen, self.font),
            announce=self.announce,
            scores=scores if scores is not None else MemoryScoreStore(),
        )

    def announce(self, message):
        logger.info("%s", message)
        self.banner = message

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
            self.stop()
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.controls.release_all()
        else:
            self.controls.handle_event(event)

    def step(self):
        for event in pygame.event.get():
            self.handle_event(event)
        if self.controls.consume_launch() and self.loop.launch():
            self.banner = None
        self.loop.tick(self.controls.multiplier)
        self.draw_overlay()
        pygame.display.flip()

    def draw_overlay(self):
        if self.loop.state != State.PRE_LAUNCH:
            return
        w, h = self.screen.get_size()
        if self.banner:
            img = self.big_font.render(self.banner, True, settings.TEXT_COLOR)
            box = img.get_rect(center=(w // 2, h // 2 - 60)).inflate(40, 24)
            pygame.draw.rect(self.screen, settings.BANNER_COLOR, box, border_radius=8)
            self.screen.blit(img, img.get_rect(center=box.center))
        hint = self.font.render("Press Space to launch", True, settings.TEXT_COLOR)
        self.screen.blit(hint, hint.get_rect(center=(w // 2, h // 2 + 60)))

    def run(self):
        self.running = True
        while self.running:
            self.step()
            self.clock.tick(settings.FPS)
        pygame.quit()

    def stop(self):
        self.running = False


def build_parser():
    p = argparse.ArgumentParser(description="Brick Breaker")
    p.add_argument("--width", type=int, default=None, help="Field width in pixels (default: display width)")
    p.add_argument("--height", type=int, default=None, help="Field height in pixels (default: display height)")
    p.add_argument("--scores", default=str(DEFAULT_SCORES_PATH), help="Path to the high score file")
    p.add_argument("--no-save", action="store_true", help="Keep the high score in memory only")
    p.add_argument("--seed", type=int, default=None, help="Random seed for launch directions")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if (args.width is not None and args.width <= 0) or (args.height is not None and args.height <= 0):
        raise SystemExit("Field size must be positive")

    scores = MemoryScoreStore() if args.no_save else HighScoreStore(Path(args.scores))
    app = BrickBreakerApp(args.width, args.height, scores=scores, seed=args.seed)
    app.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
