"""Shape catalog and random piece factory"""
import random
from typing import Dict, List, Optional, Sequence

from tetris3d_block import Block, Color
from tetris3d_config import CONFIG
from tetris3d_log import get_logger

logger = get_logger(__name__)

Template = List[List[List[int]]]

# template[i][j][k] -> width, depth, height; 1s are elements
TEMPLATES: Dict[str, Template] = {
    "cube": [[[1]]],
    "T": [[[0,0,0],[0,0,0],[0,0,0]],
          [[0,1,0],[1,1,1],[0,0,0]],
          [[0,0,0],[0,0,0],[0,0,0]]],
    "Z": [[[0,0,0],[0,0,0],[0,0,0]],
          [[0,1,0],[1,1,0],[1,0,0]],
          [[0,0,0],[0,0,0],[0,0,0]]],
    "I": [[[0,0,0],[0,1,0],[0,0,0]],
          [[0,0,0],[0,1,0],[0,0,0]],
          [[0,0,0],[0,1,0],[0,0,0]]],
    "L": [[[0,0,0],[0,0,0],[0,0,0]],
          [[0,1,0],[0,1,0],[0,1,1]],
          [[0,0,0],[0,0,0],[0,0,0]]],
    "S": [[[0,0,0],[0,0,0],[0,0,0]],
          [[1,1,0],[0,1,0],[0,1,1]],
          [[0,0,0],[0,0,0],[0,0,0]]],
    "corner": [[[0,1],[1,1]],
               [[0,0],[0,1]]],
    "fancy": [[[0,1,0],[0,0,0],[0,0,0]],
              [[0,1,0],[0,1,0],[0,0,0]],
              [[0,0,0],[1,1,0],[0,0,0]]],
}


class TemplateError(ValueError):
    """Raised for a shape template that is not a filled-in cube of cells."""


def validate_template(name: str, template: Sequence) -> None:
    n = len(template)
    if n == 0:
        raise TemplateError(f"Template {name!r} is empty")
    for plane in template:
        if len(plane) != n or any(len(col) != n for col in plane):
            raise TemplateError(f"Template {name!r} is not cubical (side {n})")
    if not any(v for plane in template for col in plane for v in col):
        raise TemplateError(f"Template {name!r} has no occupied cells")


class PieceFactory:
    """
    Builds single-colored Blocks from a random template.

    The random source is held by the factory; pass a seeded ``random.Random``
    for a reproducible piece sequence.
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 templates: Optional[Dict[str, Template]] = None,
                 colors: Sequence[Color] = tuple(Color)):
        if rng is None:
            rng = random.Random(CONFIG["SEED"])
        self.rng = rng
        self.templates = dict(TEMPLATES if templates is None else templates)
        if not self.templates:
            raise TemplateError("Template catalog is empty")
        for name, template in self.templates.items():
            validate_template(name, template)
        self.names = sorted(self.templates)
        self.colors = list(colors)
        if not self.colors:
            raise ValueError("At least one color is required")

    def spawn_at(self, x: int, y: int, z: int) -> Block:
        name = self.rng.choice(self.names)
        color = self.rng.choice(self.colors)
        logger.debug("Spawning %s (%s) at (%d, %d, %d)", name, color.value, x, y, z)
        return Block.from_template(self.templates[name], color, x, y, z)
