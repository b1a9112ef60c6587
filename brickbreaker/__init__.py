from .entities import Ball, Brick, BrickField, Outcome, Paddle
from .game import GameLoop, GameSession, State

__all__ = [
    "Ball",
    "Brick",
    "BrickField",
    "GameLoop",
    "GameSession",
    "Outcome",
    "Paddle",
    "State",
]
