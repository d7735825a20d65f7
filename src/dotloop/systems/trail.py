from esper import World

from dotloop.events.bus import (
    EventBus,
    EVENT_DOT_CLICK,
    EVENT_CLICK_IGNORED,
    EVENT_TRAIL_STARTED,
    EVENT_TRAIL_EXTENDED,
    EVENT_TRAIL_CANCELLED,
    EVENT_TRAIL_COMPLETE,
)
from dotloop.systems.board_ops import can_connect, get_grid, get_session_state, get_trail


class TrailSystem:
    """Turns dot clicks into trail edits.

    Clicking the head of a trail of two or more dots completes it; a click that
    extends the trail is appended; anything else throws the trail away.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_DOT_CLICK, self.on_dot_click)

    def on_dot_click(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        state = get_session_state(self.world)
        if state.terminal:
            self.event_bus.emit(EVENT_CLICK_IGNORED, x=x, y=y, reason='terminal')
            return
        trail = get_trail(self.world)
        if not trail.positions:
            trail.append(x, y)
            self.event_bus.emit(EVENT_TRAIL_STARTED, x=x, y=y)
            return
        if len(trail) >= 2 and trail.head() == (x, y):
            # Resolution (and clearing of the trail) happens in MatchResolutionSystem.
            self.event_bus.emit(EVENT_TRAIL_COMPLETE, trail=list(trail.positions))
            return
        grid = get_grid(self.world)
        if can_connect(trail.positions, grid, x, y):
            trail.append(x, y)
            self.event_bus.emit(EVENT_TRAIL_EXTENDED, x=x, y=y, length=len(trail))
            return
        discarded = list(trail.positions)
        trail.clear()
        self.event_bus.emit(EVENT_TRAIL_CANCELLED, x=x, y=y, trail=discarded)
