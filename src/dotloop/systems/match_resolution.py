from esper import World

from dotloop.events.bus import (
    EventBus,
    EVENT_TRAIL_COMPLETE,
    EVENT_MATCH_CLEARED,
    EVENT_DOT_REROLLED,
    EVENT_REFILL_COMPLETED,
    EVENT_SCORE_CHANGED,
    EVENT_GAME_OVER,
)
from dotloop.systems.board_ops import get_session_state, resolve_trail, world_rng


class MatchResolutionSystem:
    """Resolves completed trails: clears dots, refills the board, scores and spends a move."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TRAIL_COMPLETE, self.on_trail_complete)

    def on_trail_complete(self, sender, **kwargs):
        state = get_session_state(self.world)
        if state.terminal:
            return
        result = resolve_trail(self.world, rng=world_rng(self.world))
        if result is None:
            return
        self.event_bus.emit(
            EVENT_MATCH_CLEARED,
            positions=list(result.positions),
            color=result.color,
            loop=result.loop,
            count=result.count,
        )
        for reroll in result.refill.rerolls:
            x, y = reroll.position
            self.event_bus.emit(
                EVENT_DOT_REROLLED,
                x=x,
                y=y,
                attempt=reroll.attempt,
                previous=reroll.previous,
                color=reroll.color,
            )
        if result.refill.new_tiles:
            self.event_bus.emit(EVENT_REFILL_COMPLETED, new_tiles=list(result.refill.new_tiles))
        state.score += result.count
        state.moves_left -= 1
        self.event_bus.emit(
            EVENT_SCORE_CHANGED,
            score=state.score,
            delta=result.count,
            moves_left=state.moves_left,
        )
        if state.terminal:
            self.event_bus.emit(EVENT_GAME_OVER, score=state.score)
