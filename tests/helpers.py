from __future__ import annotations

import random
from typing import Iterable, Sequence

from dotloop.components.dot_color import DotColor
from dotloop.components.grid import Grid
from dotloop.events.bus import EventBus
from dotloop.session import Session
from dotloop.systems.board_ops import get_grid

GLYPHS = {color.glyph: color for color in DotColor}


class ScriptedRandom(random.Random):
    """Random source that hands out queued colors first, then falls back to a seeded stream."""

    def __init__(self, picks: Iterable[DotColor] = (), seed: int = 0):
        super().__init__(seed)
        self.picks = list(picks)

    def choice(self, seq):
        if self.picks:
            return self.picks.pop(0)
        return super().choice(seq)


def grid_from_rows(rows: Sequence[str]) -> Grid:
    """Build a grid from glyph rows listed top row first, e.g. ["RB", "GY"]."""
    size = len(rows)
    for row in rows:
        assert len(row) == size, "rows must describe a square board"
    # Rows arrive top first; cells are stored bottom row first.
    cells = [GLYPHS[glyph] for row in reversed(rows) for glyph in row]
    return Grid(size=size, cells=cells)


def paint_all(grid: Grid, color: DotColor) -> None:
    for x, y in grid.positions():
        grid.set(x, y, color)


def make_session(seed: int = 1234, *, fill: DotColor | None = None) -> tuple[Session, EventBus]:
    bus = EventBus()
    session = Session(bus, rng=ScriptedRandom(seed=seed))
    if fill is not None:
        paint_all(get_grid(session.world), fill)
    return session, bus


def record(bus: EventBus, name: str) -> list[dict]:
    received: list[dict] = []
    bus.subscribe(name, lambda sender, **payload: received.append(payload))
    return received
