"""Small numeric helpers and shared enums."""

from __future__ import annotations

import random
from enum import Enum

_rng = random.SystemRandom()


class Direction(Enum):
    """Horizontal heading of a moving actor."""

    DEFAULT = "default"
    LEFT = "left"
    RIGHT = "right"


def get_random(start: int, end: int) -> int:
    """Return a uniformly chosen integer in the closed range [start, end]."""
    if start > end:
        raise ValueError(f"empty range: start {start} is greater than end {end}")
    return _rng.randint(start, end)