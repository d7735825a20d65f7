from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from esper import World

from dotloop.components.dot_color import DotColor
from dotloop.components.grid import Grid
from dotloop.components.session_state import SessionState
from dotloop.components.trail import Trail
from dotloop.constants import REROLL_LIMIT

Position = Tuple[int, int]


@dataclass(slots=True)
class Reroll:
    position: Position
    attempt: int
    previous: DotColor
    color: DotColor


@dataclass(slots=True)
class RefillReport:
    """What a compaction/refill pass did to the board."""
    new_tiles: List[Position] = field(default_factory=list)
    rerolls: List[Reroll] = field(default_factory=list)
    swaps: int = 0


@dataclass(slots=True)
class TrailClear:
    positions: List[Position]
    color: DotColor
    loop: bool
    refill: RefillReport

    @property
    def count(self) -> int:
        return len(self.positions)


def get_grid(world: World) -> Grid:
    for _, grid in world.get_component(Grid):
        return grid
    raise RuntimeError("Grid component not found")


def get_trail(world: World) -> Trail:
    for _, trail in world.get_component(Trail):
        return trail
    raise RuntimeError("Trail component not found")


def get_session_state(world: World) -> SessionState:
    for _, state in world.get_component(SessionState):
        return state
    raise RuntimeError("SessionState component not found")


def world_rng(world: World) -> random.Random:
    candidate = getattr(world, "random", None)
    if isinstance(candidate, random.Random):
        return candidate
    return random.Random()


def is_adjacent(a: Position, b: Position) -> bool:
    ax, ay = a
    bx, by = b
    return abs(ax - bx) + abs(ay - by) == 1


def can_connect(trail: Sequence[Position], grid: Grid, x: int, y: int) -> bool:
    """Return True if (x, y) may be appended to trail.

    An empty trail accepts any cell. Otherwise the cell must be orthogonally adjacent
    to the head, must not step straight back onto the previous entry and must share
    the head's color.
    """
    if not trail:
        return True
    old = trail[-1]
    if not is_adjacent(old, (x, y)):
        return False
    if len(trail) >= 2 and trail[-2] == (x, y):
        return False
    return grid.get(*old) == grid.get(x, y)


def has_loop(trail: Sequence[Position]) -> bool:
    """Any coordinate appearing twice anywhere in the trail counts as a loop."""
    seen: set[Position] = set()
    for pos in trail:
        if pos in seen:
            return True
        seen.add(pos)
    return False


def clear_trail_cells(grid: Grid, trail: Sequence[Position]) -> Tuple[List[Position], DotColor, bool]:
    """Empty the cells a finished trail removes; returns (cleared, trail_color, loop).

    A loop wipes every dot of the trail's color from the board. A plain trail
    clears its own cells, one entry per trail position.
    """
    trail_color = grid.get(*trail[0])
    loop = has_loop(trail)
    cleared: List[Position] = []
    if loop:
        for pos in grid.positions():
            if grid.get(*pos) == trail_color:
                grid.set(pos[0], pos[1], DotColor.EMPTY)
                cleared.append(pos)
    else:
        for pos in trail:
            grid.set(pos[0], pos[1], DotColor.EMPTY)
            cleared.append(pos)
    return cleared, trail_color, loop


def compact_column(grid: Grid, x: int) -> int:
    """Bubble empty cells of column x upward until a full pass makes no swap."""
    swaps = 0
    found_empty = True
    while found_empty:
        found_empty = False
        for y in range(grid.size - 1):
            if grid.get(x, y).is_empty and not grid.get(x, y + 1).is_empty:
                grid.swap((x, y), (x, y + 1))
                swaps += 1
                found_empty = True
    return swaps


def _creates_trivial_square(grid: Grid, x: int, y: int) -> bool:
    # Neighbourhood of the new dot S, with 3 directly below it:
    #   1 S 5
    #   2 3 4
    # Degenerate when S==1==2==3 or S==3==4==5.
    color = grid.get(x, y)
    below = grid.get(x, y - 1)
    if x > 1:
        if grid.get(x - 1, y) == color and grid.get(x - 1, y - 1) == color and below == color:
            return True
    if x < grid.size - 1:
        if below == color and grid.get(x + 1, y - 1) == color and grid.get(x + 1, y) == color:
            return True
    return False


def fill_column(grid: Grid, x: int, rng: random.Random, report: RefillReport) -> bool:
    """Fill the empty run on top of column x with fresh dots.

    Returns False without touching the column while an empty cell still sits
    below a dot, meaning the column needs more compaction first.
    """
    first_empty: int | None = None
    seen_dot = False
    for y in range(grid.size - 1, -1, -1):
        if grid.get(x, y).is_empty:
            if seen_dot:
                return False
            first_empty = y
        else:
            seen_dot = True
    if first_empty is None:
        return True
    for y in range(first_empty, grid.size):
        grid.set(x, y, DotColor.random(rng))
        report.new_tiles.append((x, y))
        if y == 0:
            continue
        for attempt in range(REROLL_LIMIT):
            if _creates_trivial_square(grid, x, y):
                previous = grid.get(x, y)
                grid.set(x, y, DotColor.random(rng))
                report.rerolls.append(Reroll(position=(x, y), attempt=attempt, previous=previous, color=grid.get(x, y)))
    return True


def drop_remaining(grid: Grid, rng: random.Random | None = None) -> RefillReport:
    """Compact and refill every column, left to right, until none holds an empty cell."""
    rng = rng or random.Random()
    report = RefillReport()
    for x in range(grid.size):
        while True:
            report.swaps += compact_column(grid, x)
            if fill_column(grid, x, rng, report):
                break
    return report


def resolve_trail(world: World, *, rng: random.Random | None = None) -> TrailClear | None:
    """Clear the finished trail, refill the board and reset the trail.

    Returns None, leaving board and trail untouched, when the trail is too short
    to complete.
    """
    trail = get_trail(world)
    if len(trail) < 2:
        return None
    grid = get_grid(world)
    cleared, color, loop = clear_trail_cells(grid, trail.positions)
    trail.clear()
    refill = drop_remaining(grid, rng or world_rng(world))
    return TrailClear(positions=cleared, color=color, loop=loop, refill=refill)


def finish_trail(world: World, *, rng: random.Random | None = None) -> int:
    """Resolve the current trail and return how many dots it cleared (0 if it was too short)."""
    result = resolve_trail(world, rng=rng)
    return result.count if result else 0


def column_is_settled(grid: Grid, x: int) -> bool:
    """True when no empty cell in column x has a dot above it."""
    seen_empty = False
    for y in range(grid.size):
        if grid.get(x, y).is_empty:
            seen_empty = True
        elif seen_empty:
            return False
    return True


def describe_grid(grid: Grid, trail: Sequence[Position] = ()) -> List[str]:
    """Text rendering of the board, top row first.

    Each cell shows its glyph plus a marker: (H) trail head, (T) trail member,
    (A) connectable from the current trail, (X) otherwise.
    """
    head = trail[-1] if trail else None
    lines: List[str] = []
    for y in range(grid.size - 1, -1, -1):
        cells: List[str] = []
        for x in range(grid.size):
            glyph = grid.get(x, y).glyph
            if (x, y) == head:
                marker = "H"
            elif (x, y) in trail:
                marker = "T"
            elif can_connect(trail, grid, x, y):
                marker = "A"
            else:
                marker = "X"
            cells.append(f"{glyph}({marker})")
        lines.append(" ".join(cells))
    return lines
