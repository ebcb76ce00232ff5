"""Element and Block model, 90 degree rotations about each axis"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple


class Color(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"


@dataclass(frozen=True)
class Element:
    color: Color


# cells[i][j][k] -> width, depth, height
Cells = Tuple[Tuple[Tuple[Optional[Element], ...], ...], ...]


def _freeze(cells: Sequence) -> Cells:
    return tuple(tuple(tuple(col) for col in plane) for plane in cells)


@dataclass(frozen=True)
class Block:
    """
    A falling piece: a cube of side ``size`` whose cells hold an Element or None,
    anchored at (x, y, z) in board coordinates.

    Blocks never change; translated() and rotated_*() return new instances.
    """
    cells: Cells
    x: int = 0
    y: int = 0
    z: int = 0

    def __post_init__(self):
        cells = _freeze(self.cells)
        n = len(cells)
        for plane in cells:
            if len(plane) != n or any(len(col) != n for col in plane):
                raise ValueError(f"Block cells must be a cube, got side {n} with ragged planes")
        object.__setattr__(self, "cells", cells)

    @staticmethod
    def from_template(template: Sequence, color: Color, x: int = 0, y: int = 0, z: int = 0) -> "Block":
        element = Element(color)
        cells = [[[element if v else None for v in col] for col in plane] for plane in template]
        return Block(cells, x, y, z)

    @property
    def size(self) -> int:
        return len(self.cells)

    @property
    def anchor(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def element_at(self, i: int, j: int, k: int) -> Optional[Element]:
        return self.cells[i][j][k]

    def occupied(self) -> Iterator[Tuple[int, int, int, Element]]:
        """Yield (i, j, k, element) for every non-empty local cell."""
        for i, plane in enumerate(self.cells):
            for j, col in enumerate(plane):
                for k, e in enumerate(col):
                    if e is not None:
                        yield i, j, k, e

    def world_cells(self) -> Iterator[Tuple[int, int, int, Element]]:
        for i, j, k, e in self.occupied():
            yield self.x + i, self.y + j, self.z + k, e

    def occupied_count(self) -> int:
        return sum(1 for _ in self.occupied())

    # transforms

    def translated(self, dx: int, dy: int, dz: int) -> "Block":
        return Block(self.cells, self.x + dx, self.y + dy, self.z + dz)

    def _rebuilt(self, source) -> "Block":
        n = self.size
        cells = [[[source(i, j, k) for k in range(n)] for j in range(n)] for i in range(n)]
        return Block(cells, self.x, self.y, self.z)

    def rotated_x(self) -> "Block":
        n, c = self.size, self.cells
        return self._rebuilt(lambda i, j, k: c[i][n - 1 - k][j])

    def rotated_y(self) -> "Block":
        n, c = self.size, self.cells
        return self._rebuilt(lambda i, j, k: c[k][j][n - 1 - i])

    def rotated_z(self) -> "Block":
        n, c = self.size, self.cells
        return self._rebuilt(lambda i, j, k: c[n - 1 - j][i][k])
