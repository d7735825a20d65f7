from dotloop.components.dot_color import DotColor
from dotloop.systems.board_ops import column_is_settled, finish_trail, get_grid, get_trail, resolve_trail
from tests.helpers import make_session


def test_loop_clears_every_dot_of_its_color():
    session, _ = make_session(fill=DotColor.BLUE)
    grid = get_grid(session.world)
    for x, y in [(0, 0), (0, 1), (1, 1), (1, 0), (5, 5), (9, 9)]:
        grid.set(x, y, DotColor.RED)
    trail = get_trail(session.world)
    trail.positions = [(0, 0), (0, 1), (1, 1), (1, 0), (0, 0)]

    assert finish_trail(session.world) == 6
    assert len(trail) == 0
    assert grid.empty_count() == 0
    assert all(column_is_settled(grid, x) for x in range(grid.size))
    # Blue dots only move; the refill can add more but never removes any.
    assert sum(1 for c in grid.cells if c is DotColor.BLUE) >= 94


def test_plain_trail_clears_only_its_cells():
    session, _ = make_session(fill=DotColor.BLUE)
    grid = get_grid(session.world)
    grid.set(3, 3, DotColor.RED)
    grid.set(3, 4, DotColor.RED)
    get_trail(session.world).positions = [(3, 3), (3, 4)]

    result = resolve_trail(session.world)
    assert result is not None
    assert result.count == 2
    assert not result.loop
    assert result.color is DotColor.RED
    assert result.positions == [(3, 3), (3, 4)]
    assert result.refill.new_tiles == [(3, 8), (3, 9)]
    for x in range(grid.size):
        top = grid.size if x != 3 else 8
        assert all(grid.get(x, y) is DotColor.BLUE for y in range(top))
    assert grid.empty_count() == 0


def test_short_trail_is_not_resolved():
    session, _ = make_session()
    grid = get_grid(session.world)
    trail = get_trail(session.world)
    before = list(grid.cells)

    assert finish_trail(session.world) == 0
    assert grid.cells == before

    trail.positions = [(2, 2)]
    assert finish_trail(session.world) == 0
    assert resolve_trail(session.world) is None
    assert trail.positions == [(2, 2)]
    assert grid.cells == before
