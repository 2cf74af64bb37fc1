"""
Geometry helpers for the play field
"""

from __future__ import annotations
import math
import random
from dataclasses import dataclass
from typing import Tuple, Optional
import numpy as np


@dataclass(frozen=True)
class Hitbox:
    """Axis-aligned bounding box, field coordinates (y grows downwards)"""
    left: float
    right: float
    top: float
    bottom: float


def hitbox(x: float, y: float, width: float, height: float) -> Hitbox:
    """Bounding box of a rectangle centered at (x, y)"""
    return Hitbox(
        left=x - width * 0.5,
        right=x + width * 0.5,
        top=y - height * 0.5,
        bottom=y + height * 0.5,
    )


def overlaps(a: Hitbox, b: Hitbox) -> bool:
    """Inclusive AABB test, touching edges collide"""
    return (
        a.left <= b.right
        and a.right >= b.left
        and a.top <= b.bottom
        and a.bottom >= b.top
    )


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def heading_vector(heading: float) -> Tuple[float, float]:
    """Unit step for a heading in radians; 0 points up, pi/2 points right"""
    return math.sin(heading), -math.cos(heading)


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
