import sys, os, random
ROOT=os.path.dirname(__file__); SRC=os.path.join(ROOT,'src')
if SRC not in sys.path: sys.path.insert(0,SRC)
from dotloop.session import Session
from dotloop.events.bus import (EVENT_DOT_CLICK, EVENT_TRAIL_STARTED, EVENT_TRAIL_EXTENDED, EVENT_TRAIL_CANCELLED,
                                EVENT_TRAIL_COMPLETE, EVENT_MATCH_CLEARED, EVENT_DOT_REROLLED, EVENT_REFILL_COMPLETED,
                                EVENT_SCORE_CHANGED, EVENT_GAME_OVER, EVENT_CLICK_IGNORED)
from dotloop.systems.board_ops import describe_grid, get_grid, get_trail

session=Session(rng=random.Random(int(sys.argv[1]) if len(sys.argv)>1 else 7))
for ev in [EVENT_DOT_CLICK, EVENT_TRAIL_STARTED, EVENT_TRAIL_EXTENDED, EVENT_TRAIL_CANCELLED, EVENT_TRAIL_COMPLETE,
           EVENT_MATCH_CLEARED, EVENT_DOT_REROLLED, EVENT_REFILL_COMPLETED, EVENT_SCORE_CHANGED, EVENT_GAME_OVER,
           EVENT_CLICK_IGNORED]:
    session.event_bus.subscribe(ev, lambda s, _ev=ev, **k: print(_ev, k))

# Click every vertical pair that shares a color, closing each as a two-dot trail.
for x in range(session.size):
    for y in range(session.size-1):
        if session.is_terminal():
            break
        if session.color_at(x,y)==session.color_at(x,y+1):
            session.click(x,y); session.click(x,y+1); session.click(x,y+1)
print('\n'.join(describe_grid(get_grid(session.world), get_trail(session.world).positions)))
print(session.status_text())
