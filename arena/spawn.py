"""
Enemy spawn points and spawn timing
"""

from __future__ import annotations
import math
import random
from dataclasses import dataclass

from .config import SPAWN_CONFIG

# Heading ranges (degrees, [lo, hi)) that point inwards from each edge
EDGE_HEADINGS = {
    "top": (91, 269),
    "right": (181, 359),
    "bottom": (-271, 89),
    "left": (1, 179),
}


@dataclass
class SpawnPoint:
    """Where an enemy appears and where it heads (degrees)"""
    x: float
    y: float
    direction: int


def random_between(rng, lo: float, hi: float) -> float:
    return rng.random() * (hi - lo) + lo


def calculate_spawn_point(
    width: float,
    height: float,
    margin: float = SPAWN_CONFIG["margin"],
    rng=random,
) -> SpawnPoint:
    """Pick a field edge uniformly and a heading biased into the field"""
    roll = rng.random()
    if roll < 0.25:
        side = "top"
        x, y = random_between(rng, margin, width - margin), margin
    elif roll < 0.5:
        side = "right"
        x, y = width - margin, random_between(rng, margin, height - margin)
    elif roll < 0.75:
        side = "bottom"
        x, y = random_between(rng, margin, width - margin), height - margin
    else:
        side = "left"
        x, y = margin, random_between(rng, margin, height - margin)

    lo, hi = EDGE_HEADINGS[side]
    direction = math.floor(random_between(rng, lo, hi))
    return SpawnPoint(x=x, y=y, direction=direction)


class SpawnScheduler:
    """
    Timer plus cap gating enemy creation.

    The timer accumulates elapsed ms while it is below the frequency or the
    field is full; once both allow it, `ready` reports True and the caller
    spawns and calls `reset`.
    """

    def __init__(
        self,
        frequency: float = SPAWN_CONFIG["frequency"],
        max_enemies: int = SPAWN_CONFIG["max_enemies"],
    ):
        if frequency < 0:
            raise ValueError(f"spawn frequency must be >= 0, got {frequency}")
        if max_enemies < 1:
            raise ValueError(f"max_enemies must be >= 1, got {max_enemies}")
        self.frequency = frequency
        self.max_enemies = max_enemies
        self.timer = 0.0

    def ready(self, dt: float, live_enemies: int) -> bool:
        if self.timer < self.frequency or live_enemies >= self.max_enemies:
            self.timer += dt
            return False
        return True

    def reset(self):
        self.timer = 0.0

    def expire(self):
        """Make the next check spawn immediately (if there is room)"""
        self.timer = math.inf
