"""Game session facade.

Wires a world, an event bus and the rule systems together and exposes the
command/query surface a presentation layer talks to. Commands are emitted on
the bus; blinker delivers synchronously so each command has fully applied by
the time it returns.
"""
from __future__ import annotations

import random
from typing import Tuple

from esper import World

from dotloop.components.dot_color import DotColor
from dotloop.events.bus import EventBus, EVENT_DOT_CLICK, EVENT_RESET_REQUEST
from dotloop.systems.board_ops import Position, can_connect, get_grid, get_session_state, get_trail
from dotloop.systems.game_flow_system import GameFlowSystem
from dotloop.systems.match_resolution import MatchResolutionSystem
from dotloop.systems.trail import TrailSystem
from dotloop.world import create_world


class Session:
    def __init__(self, event_bus: EventBus | None = None, *, rng: random.Random | None = None):
        self.event_bus = event_bus or EventBus()
        self.world: World = create_world(rng=rng)
        self.trail_system = TrailSystem(self.world, self.event_bus)
        self.match_resolution_system = MatchResolutionSystem(self.world, self.event_bus)
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)

    # Commands

    def click(self, x: int, y: int) -> None:
        # Validates the coordinate; out-of-range clicks raise IndexError.
        get_grid(self.world).index(x, y)
        self.event_bus.emit(EVENT_DOT_CLICK, x=x, y=y)

    def reset(self) -> None:
        self.event_bus.emit(EVENT_RESET_REQUEST)

    # Queries

    @property
    def size(self) -> int:
        return get_grid(self.world).size

    def color_at(self, x: int, y: int) -> DotColor:
        return get_grid(self.world).get(x, y)

    def colors(self) -> Tuple[DotColor, ...]:
        return tuple(get_grid(self.world).cells)

    def trail(self) -> Tuple[Position, ...]:
        return tuple(get_trail(self.world).positions)

    def trail_contains(self, x: int, y: int) -> bool:
        return get_trail(self.world).contains(x, y)

    def is_trail_head(self, x: int, y: int) -> bool:
        return get_trail(self.world).head() == (x, y)

    def can_connect(self, x: int, y: int) -> bool:
        grid = get_grid(self.world)
        grid.index(x, y)
        return can_connect(get_trail(self.world).positions, grid, x, y)

    def score(self) -> int:
        return get_session_state(self.world).score

    def moves_left(self) -> int:
        return get_session_state(self.world).moves_left

    def is_terminal(self) -> bool:
        return get_session_state(self.world).terminal

    def status_text(self) -> str:
        return f"Score: {self.score()}, moves left: {self.moves_left()}"
