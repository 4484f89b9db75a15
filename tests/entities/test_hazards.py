"""
test_hazards.py
---------------
Unit tests for the falling bomb and its fuse.
"""

import pytest

from popshot.entities.hazards import Bomb


def test_bomb_spawns_above_canvas(bounds, make_rng):
    bomb = Bomb.spawn(bounds, make_rng(randoms=[0.0]))
    assert (bomb.x, bomb.y) == (25, -50)
    assert bomb.fuse == 15.0


def test_fuse_counts_down_and_never_goes_negative(bounds):
    bomb = Bomb(300, 0, bounds=bounds)
    for _ in range(30):
        bomb.update(0.5)
    assert bomb.fuse == 0.0
    assert bomb.fuse_expired

    bomb.update(0.5)
    assert bomb.fuse == 0.0


def test_fuse_not_expired_before_full_time(bounds):
    bomb = Bomb(300, 0, bounds=bounds)
    for _ in range(29):
        bomb.update(0.5)
    assert bomb.fuse == pytest.approx(0.5)
    assert not bomb.fuse_expired


def test_bomb_does_not_detonate_itself(bounds):
    bomb = Bomb(300, 0, fuse_ms=100.0, bounds=bounds)
    bomb.update(1.0)
    assert bomb.fuse_expired
    assert not bomb.detonated
    assert not bomb.marked_for_deletion


def test_bomb_cleaned_up_far_below_canvas(bounds):
    bomb = Bomb(300, bounds.height + 299, bounds=bounds)
    bomb.update(0.1)
    assert bomb.marked_for_deletion


@pytest.mark.parametrize("tick_ms", [10, 20, 25, 16.5])
def test_fuse_burns_out_on_the_tick_reaching_full_time(bounds, tick_ms):
    bomb = Bomb(300, 0, bounds=bounds)
    ticks = 0
    while not bomb.fuse_expired:
        bomb.update(tick_ms / 1000.0)
        ticks += 1

    assert ticks == -(-15_000 // tick_ms)
    assert bomb.fuse_ms == 0.0
