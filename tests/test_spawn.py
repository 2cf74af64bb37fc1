import random

import pytest

from arena.spawn import EDGE_HEADINGS, SpawnPoint, SpawnScheduler, calculate_spawn_point

from conftest import SequenceRng


def test_top_edge():
    point = calculate_spawn_point(640, 480, 25, rng=SequenceRng([0.1, 0.5, 0.0]))
    assert point == SpawnPoint(x=320, y=25, direction=91)


def test_right_edge():
    point = calculate_spawn_point(640, 480, 25, rng=SequenceRng([0.3, 0.5, 0.0]))
    assert point == SpawnPoint(x=615, y=240, direction=181)


def test_bottom_edge_heading_wraps_below_zero():
    point = calculate_spawn_point(640, 480, 25, rng=SequenceRng([0.6, 0.0, 0.0]))
    assert point == SpawnPoint(x=25, y=455, direction=-271)


def test_left_edge():
    point = calculate_spawn_point(640, 480, 25, rng=SequenceRng([0.9, 0.0, 0.5]))
    assert point == SpawnPoint(x=25, y=25, direction=90)


@pytest.mark.parametrize("roll, side", [(0.0, "top"), (0.25, "right"), (0.5, "bottom"), (0.75, "left")])
def test_headings_stay_below_upper_bound(roll, side):
    point = calculate_spawn_point(640, 480, 25, rng=SequenceRng([roll, 0.5, 0.999999]))
    lo, hi = EDGE_HEADINGS[side]
    assert lo <= point.direction < hi
    assert point.direction == hi - 1


def test_random_spawns_stay_on_the_field():
    rng = random.Random(5)
    for _ in range(500):
        point = calculate_spawn_point(640, 480, 25, rng=rng)
        assert 25 <= point.x <= 615
        assert 25 <= point.y <= 455
        assert -271 <= point.direction < 359
        assert point.x in (25, 615) or point.y in (25, 455)


def test_scheduler_spawns_at_threshold_below_cap():
    scheduler = SpawnScheduler(frequency=1000, max_enemies=5)
    scheduler.timer = 1000
    assert scheduler.ready(16, live_enemies=4)


def test_scheduler_accumulates_at_cap():
    scheduler = SpawnScheduler(frequency=1000, max_enemies=5)
    scheduler.timer = 1000
    assert not scheduler.ready(16, live_enemies=5)
    assert scheduler.timer == 1016


def test_scheduler_accumulates_until_frequency():
    scheduler = SpawnScheduler(frequency=1000, max_enemies=5)
    assert not scheduler.ready(500, 0)
    assert not scheduler.ready(500, 0)
    assert scheduler.timer == 1000
    assert scheduler.ready(0, 0)


def test_scheduler_handles_huge_dt():
    scheduler = SpawnScheduler(frequency=1000, max_enemies=5)
    assert not scheduler.ready(10 ** 9, 0)
    assert scheduler.ready(16, 0)


def test_scheduler_reset_and_expire():
    scheduler = SpawnScheduler(frequency=1000, max_enemies=5)
    scheduler.expire()
    assert scheduler.ready(0, 0)
    scheduler.reset()
    assert scheduler.timer == 0
    assert not scheduler.ready(0, 0)


@pytest.mark.parametrize("kwargs", [{"frequency": -1}, {"max_enemies": 0}])
def test_scheduler_rejects_bad_config(kwargs):
    with pytest.raises(ValueError):
        SpawnScheduler(**kwargs)
