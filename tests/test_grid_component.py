import random

import pytest

from dotloop.components.dot_color import DotColor
from dotloop.components.grid import Grid
from dotloop.constants import BOARD_SIZE
from dotloop.systems.board_ops import get_grid
from dotloop.world import create_world


def test_index_is_row_major():
    grid = Grid(size=BOARD_SIZE)
    assert grid.index(0, 0) == 0
    assert grid.index(3, 0) == 3
    assert grid.index(0, 1) == BOARD_SIZE
    assert grid.index(4, 7) == 7 * BOARD_SIZE + 4


def test_out_of_range_access_raises():
    grid = Grid(size=BOARD_SIZE)
    for x, y in [(-1, 0), (0, -1), (BOARD_SIZE, 0), (0, BOARD_SIZE)]:
        with pytest.raises(IndexError):
            grid.get(x, y)
        with pytest.raises(IndexError):
            grid.set(x, y, DotColor.RED)


def test_wrong_cell_count_rejected():
    with pytest.raises(ValueError):
        Grid(size=3, cells=[DotColor.RED] * 8)


def test_set_then_get():
    grid = Grid(size=4)
    grid.set(2, 3, DotColor.YELLOW)
    assert grid.get(2, 3) is DotColor.YELLOW
    assert grid.cells[grid.index(2, 3)] is DotColor.YELLOW


def test_fresh_world_board_is_full():
    world = create_world(rng=random.Random(5))
    grid = get_grid(world)
    assert len(grid.cells) == BOARD_SIZE * BOARD_SIZE
    assert grid.empty_count() == 0


def test_default_grid_has_no_empty_cells():
    grid = Grid()
    assert len(grid.cells) == BOARD_SIZE * BOARD_SIZE
    assert grid.empty_count() == 0


def test_constructor_draws_from_supplied_rng():
    a = Grid(size=5, rng=random.Random(21))
    b = Grid(size=5, rng=random.Random(21))
    assert a.cells == b.cells
    assert a.empty_count() == 0


def test_explicit_cells_are_kept():
    cells = [DotColor.RED, DotColor.EMPTY, DotColor.BLUE, DotColor.GREEN]
    grid = Grid(size=2, cells=list(cells))
    assert grid.cells == cells
    assert grid.empty_count() == 1
