"""Board: collision, contact, commit, level reduction"""
from typing import List, Optional

from tetris3d_block import Block, Element
from tetris3d_log import get_logger

logger = get_logger(__name__)

# grid[x][y][z]
Grid = List[List[List[Optional[Element]]]]


def empty_grid(width: int, depth: int, height: int) -> Grid:
    return [[[None] * height for _ in range(depth)] for _ in range(width)]


class Board:
    """The well: width x depth x height cells of Optional[Element]."""

    def __init__(self, width: int, depth: int, height: int):
        self.width = width
        self.depth = depth
        self.height = height
        self.grid: Grid = empty_grid(width, depth, height)
        # bumped on every grid change
        self.revision = 0

    def element_at(self, x: int, y: int, z: int) -> Optional[Element]:
        return self.grid[x][y][z]

    def can_place_legally(self, block: Block) -> bool:
        """Cells above the ceiling are allowed; walls, floor and taken cells are not."""
        for x, y, z, _ in block.world_cells():
            if x < 0 or x >= self.width or y < 0 or y >= self.depth or z < 0:
                return False
            if z >= self.height:
                continue
            if self.grid[x][y][z] is not None:
                return False
        return True

    def is_in_contact(self, block: Block) -> bool:
        """True if any element of the block rests on the floor or on a committed element."""
        for x, y, z, _ in block.world_cells():
            if z == 0:
                return True
            if not (0 <= x < self.width and 0 <= y < self.depth):
                continue
            if 1 <= z <= self.height and self.grid[x][y][z - 1] is not None:
                return True
        return False

    def add_block(self, block: Block) -> bool:
        """Commit a legally placed block. Returns True on overflow, in which case nothing is written."""
        cells = list(block.world_cells())
        if any(z >= self.height for _, _, z, _ in cells):
            logger.debug("Block at %s overflows height %d", block.anchor, self.height)
            return True
        for x, y, z, e in cells:
            self.grid[x][y][z] = e
        self.revision += 1
        return False

    def is_level_full(self, z: int) -> bool:
        return all(self.grid[x][y][z] is not None
                   for x in range(self.width) for y in range(self.depth))

    def reduce_levels(self) -> int:
        """Remove every full level at once, shifting the rest down. Returns the number removed."""
        reduced = 0
        new_grid = empty_grid(self.width, self.depth, self.height)
        for z in range(self.height):
            if self.is_level_full(z):
                reduced += 1
                continue
            for x in range(self.width):
                for y in range(self.depth):
                    new_grid[x][y][z - reduced] = self.grid[x][y][z]
        self.grid = new_grid
        if reduced:
            self.revision += 1
            logger.debug("Reduced %d level(s)", reduced)
        return reduced

    def filled_count(self) -> int:
        return sum(1 for plane in self.grid for col in plane for e in col if e is not None)

    def drop_position(self, block: Block) -> Block:
        """The block moved straight down as far as it stays legal."""
        while True:
            lower = block.translated(0, 0, -1)
            if not self.can_place_legally(lower):
                return block
            block = lower
