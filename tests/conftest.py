import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from tetris3d_block import Block, Color, Element
from tetris3d_board import Board


def make_block(size, cells, x=0, y=0, z=0, color=Color.RED):
    """Block of the given side with elements at the listed local (i, j, k) cells."""
    template = [[[0] * size for _ in range(size)] for _ in range(size)]
    for i, j, k in cells:
        template[i][j][k] = 1
    return Block.from_template(template, color, x, y, z)


def fill_level(board, z, color=Color.BLUE, skip=()):
    for x in range(board.width):
        for y in range(board.depth):
            if (x, y) not in skip:
                board.grid[x][y][z] = Element(color)


def shape_of(block):
    return {(i, j, k) for i, j, k, _ in block.occupied()}


class FixedFactory:
    """Hands out the same template every time, recording spawn anchors."""
    def __init__(self, size=1, cells=((0, 0, 0),), color=Color.GREEN):
        self.size = size
        self.cells = cells
        self.color = color
        self.spawned = []

    def spawn_at(self, x, y, z):
        self.spawned.append((x, y, z))
        return make_block(self.size, self.cells, x, y, z, self.color)


@pytest.fixture
def board():
    return Board(5, 5, 10)


@pytest.fixture
def config():
    return {
        "WIDTH": 5,
        "DEPTH": 5,
        "HEIGHT": 10,
        "GRAVITY_TICKS": 3,
        "POINTS_PER_LEVEL": 10,
    }


@pytest.fixture
def rng():
    return random.Random(1234)
