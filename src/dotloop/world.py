import random

from esper import World
from dotloop.components.grid import Grid
from dotloop.components.trail import Trail
from dotloop.components.session_state import SessionState
from dotloop.constants import BOARD_SIZE, MOVE_LIMIT


def create_world(rng: random.Random | None = None) -> World:
    """Build a world holding one freshly randomized board, an empty trail and a full move budget."""
    world = World()
    setattr(world, "random", rng or random.Random())

    # Board, trail and counters share one entity; systems look each up by component type.
    world.create_entity(
        Grid(size=BOARD_SIZE, rng=world.random),
        Trail(),
        SessionState(score=0, moves_left=MOVE_LIMIT, move_limit=MOVE_LIMIT),
    )
    return world
