"""High score persistence (JSON file next to the game)"""
import json
from pathlib import Path
from typing import Union

from tetris3d_log import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def load_high_score(path: PathLike) -> int:
    """Stored high score, or 0 when there is none or it can't be read."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return 0
    except (OSError, ValueError) as e:
        logger.warning("Could not read high score from %s: %s", path, e)
        return 0

    value = data.get("high_score") if isinstance(data, dict) else None
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        logger.warning("Ignoring malformed high score in %s", path)
        return 0
    return value


def save_high_score(path: PathLike, score: int) -> bool:
    path = Path(path)
    try:
        with path.open("w", encoding="utf-8") as f:
            json.dump({"high_score": int(score)}, f)
    except OSError as e:
        logger.warning("Could not save high score to %s: %s", path, e)
        return False
    return True


class HighScore:
    def __init__(self, path: PathLike):
        self.path = Path(path)
        self.best = load_high_score(self.path)

    def submit(self, score: int) -> bool:
        """Record a final score; True if it beat the stored best."""
        if score <= self.best:
            return False
        self.best = score
        logger.info("New high score %d", score)
        save_high_score(self.path, score)
        return True
