from __future__ import annotations

import random
from dataclasses import InitVar, dataclass, field
from typing import Iterator, List, Optional, Tuple

from dotloop.components.dot_color import DotColor
from dotloop.constants import BOARD_SIZE


@dataclass(slots=True)
class Grid:
    """Square board of dot colors stored row-major with row 0 at the bottom.

    Cells are addressed as ``(x, y)`` where ``x`` is the column and ``y`` the row;
    ``index(x, y) == y * size + x``. Out-of-range coordinates raise ``IndexError``.
    Built without ``cells`` the board starts full, drawn from ``rng``.
    """
    size: int = BOARD_SIZE
    cells: List[DotColor] = field(default_factory=list)
    rng: InitVar[Optional[random.Random]] = None

    def __post_init__(self, rng: Optional[random.Random]) -> None:
        if not self.cells:
            self.cells = [DotColor.random(rng) for _ in range(self.size * self.size)]
        elif len(self.cells) != self.size * self.size:
            raise ValueError(f"Grid of size {self.size} needs {self.size * self.size} cells, got {len(self.cells)}")

    def index(self, x: int, y: int) -> int:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"cell ({x}, {y}) is outside the {self.size}x{self.size} board")
        return y * self.size + x

    def get(self, x: int, y: int) -> DotColor:
        return self.cells[self.index(x, y)]

    def set(self, x: int, y: int, color: DotColor) -> None:
        self.cells[self.index(x, y)] = color

    def swap(self, a: Tuple[int, int], b: Tuple[int, int]) -> None:
        ia = self.index(*a)
        ib = self.index(*b)
        self.cells[ia], self.cells[ib] = self.cells[ib], self.cells[ia]

    def fill_random(self, rng: random.Random | None = None) -> None:
        for i in range(len(self.cells)):
            self.cells[i] = DotColor.random(rng)

    def positions(self) -> Iterator[Tuple[int, int]]:
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)

    def empty_count(self) -> int:
        return sum(1 for color in self.cells if color.is_empty)
