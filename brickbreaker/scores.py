import json
import logging
from pathlib import Path

from . import settings

logger = logging.getLogger(__name__)

DEFAULT_SCORES_PATH = Path.home() / ".brickbreaker" / "scores.json"


class HighScoreStore:
    """Best score kept as a single named value in a JSON file."""

    def __init__(self, path=DEFAULT_SCORES_PATH, key=settings.SCORE_KEY):
        self.path = Path(path)
        self.key = key

    def load(self):
        if not self.path.exists():
            self.save(0)
            return 0
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return max(0, int(data.get(self.key, 0)))
        # int() of an inf/nan read from the file raises Overflow/ValueError
        except (OSError, ValueError, OverflowError, TypeError, AttributeError) as exc:
            logger.warning("Ignoring unreadable score file %s: %s", self.path, exc)
            return 0

    def save(self, value):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({self.key: int(value)}), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not write score file %s: %s", self.path, exc)


class MemoryScoreStore:
    def __init__(self, value=0):
        self.value = value

    def load(self):
        return self.value

    def save(self, value):
        self.value = int(value)
