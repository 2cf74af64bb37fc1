import math
import random

import numpy as np
import pytest

from arena.geometry import Hitbox, hitbox, overlaps, clamp, heading_vector, seed_everything


def test_hitbox_is_centered_with_full_extents():
    box = hitbox(10, 20, 4, 6)
    assert box == Hitbox(left=8, right=12, top=17, bottom=23)
    assert box.right - box.left == 4
    assert box.bottom - box.top == 6
    assert (box.left + box.right) / 2 == 10
    assert (box.top + box.bottom) / 2 == 20


def test_touching_edges_collide():
    a = hitbox(0, 0, 2, 2)
    assert overlaps(a, hitbox(2, 0, 2, 2))
    assert overlaps(a, hitbox(0, 2, 2, 2))
    assert overlaps(a, hitbox(2, 2, 2, 2))


def test_separated_boxes_do_not_collide():
    a = hitbox(0, 0, 2, 2)
    assert not overlaps(a, hitbox(2.5, 0, 2, 2))
    assert not overlaps(a, hitbox(0, -2.5, 2, 2))


def test_contained_box_collides():
    assert overlaps(hitbox(50, 50, 100, 100), hitbox(50, 50, 2, 2))


def test_overlaps_is_symmetric():
    rng = random.Random(3)
    for _ in range(200):
        a = hitbox(rng.uniform(0, 100), rng.uniform(0, 100), rng.uniform(1, 30), rng.uniform(1, 30))
        b = hitbox(rng.uniform(0, 100), rng.uniform(0, 100), rng.uniform(1, 30), rng.uniform(1, 30))
        assert overlaps(a, b) == overlaps(b, a)


@pytest.mark.parametrize("x, expected", [(-5, 0), (0, 0), (3, 3), (10, 10), (11, 10)])
def test_clamp(x, expected):
    assert clamp(x, 0, 10) == expected


def test_heading_zero_points_up():
    dx, dy = heading_vector(0)
    assert dx == 0
    assert dy == -1


def test_heading_quarter_turn_points_right():
    dx, dy = heading_vector(math.pi / 2)
    assert dx == pytest.approx(1)
    assert dy == pytest.approx(0, abs=1e-12)


def test_seed_everything_repeats_sequences():
    seed_everything(11)
    first = (random.random(), np.random.rand())
    seed_everything(11)
    assert (random.random(), np.random.rand()) == first


def test_seed_everything_ignores_none():
    seed_everything(None)
