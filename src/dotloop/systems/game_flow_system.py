from esper import World

from dotloop.events.bus import EventBus, EVENT_RESET_REQUEST, EVENT_SESSION_RESET
from dotloop.systems.board_ops import get_grid, get_session_state, get_trail, world_rng


class GameFlowSystem:
    """Handles reset requests by starting a new game on the existing board entity."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_RESET_REQUEST, self.on_reset_request)

    def on_reset_request(self, sender, **kwargs):
        get_grid(self.world).fill_random(world_rng(self.world))
        get_trail(self.world).clear()
        get_session_state(self.world).restart()
        self.event_bus.emit(EVENT_SESSION_RESET)
