"""Dot colors: four playable colors plus the EMPTY sentinel for cleared cells."""
from __future__ import annotations

import random
from enum import Enum
from typing import Tuple

from dotloop.constants import DOT_RGB


class DotColor(Enum):
    RED = 'red'
    BLUE = 'blue'
    GREEN = 'green'
    YELLOW = 'yellow'
    EMPTY = 'empty'

    @property
    def glyph(self) -> str:
        return self.value[0].upper()

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return DOT_RGB[self.value]

    @property
    def is_empty(self) -> bool:
        return self is DotColor.EMPTY

    @classmethod
    def random(cls, rng: random.Random | None = None) -> DotColor:
        """Draw uniformly from the playable colors; EMPTY is never in the pool."""
        return (rng or random).choice(PLAYABLE_COLORS)


PLAYABLE_COLORS: Tuple[DotColor, ...] = (
    DotColor.RED,
    DotColor.BLUE,
    DotColor.GREEN,
    DotColor.YELLOW,
)
