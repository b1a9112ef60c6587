import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class FixedSigns:
    """Stands in for random.Random, handing out a fixed sequence of choices."""

    def __init__(self, *signs):
        self.signs = list(signs)

    def choice(self, seq):
        return self.signs.pop(0)


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def clear(self, width, height):
        self.calls.append(("clear", width, height))

    def draw_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def draw_circle(self, cx, cy, r, color):
        self.calls.append(("circle", cx, cy, r, color))

    def draw_text(self, text, x, y):
        self.calls.append(("text", text, x, y))

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


def place_ball(ball, x, y, vx=0.0, vy=0.0):
    ball._x = x
    ball._y = y
    ball._vx = vx
    ball._vy = vy


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def canvas():
    return RecordingCanvas()
