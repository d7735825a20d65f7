from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep systems alive even when the caller drops them.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_MOUSE_MOVE = "mouse_move"            # payload: x, y
EVENT_DOT_CLICK = "dot_click"              # payload: x, y
EVENT_CLICK_IGNORED = "click_ignored"      # payload: x, y, reason=str


# ============================================================================
# TRAIL
# ============================================================================
EVENT_TRAIL_STARTED = "trail_started"      # payload: x, y
EVENT_TRAIL_EXTENDED = "trail_extended"    # payload: x, y, length=int
EVENT_TRAIL_CANCELLED = "trail_cancelled"  # payload: x, y, trail=list[(x,y)]
EVENT_TRAIL_COMPLETE = "trail_complete"    # payload: trail=list[(x,y)]


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_MATCH_CLEARED = "match_cleared"          # payload: positions=[(x,y),...], color=DotColor, loop=bool, count=int
EVENT_DOT_REROLLED = "dot_rerolled"            # payload: x, y, attempt=int, previous=DotColor, color=DotColor
EVENT_REFILL_COMPLETED = "refill_completed"    # payload: new_tiles=[(x,y),...]


# ============================================================================
# SCORING & GAME FLOW
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"      # payload: score=int, delta=int, moves_left=int
EVENT_GAME_OVER = "game_over"              # payload: score=int
EVENT_RESET_REQUEST = "reset_request"      # payload: None
EVENT_SESSION_RESET = "session_reset"      # payload: None
