"""
test_simulation_step.py
-----------------------
Tests for one world tick: timers, auto-fire, the spawn accumulator,
entity motion and fuse detonations.
"""

from unittest.mock import MagicMock

import pytest

from popshot.core.services.event_manager import FullAutoExpiredEvent
from popshot.entities.entity_state import RoundState
from popshot.entities.feedback import BulletTrace
from popshot.entities.hazards import Bomb
from popshot.entities.targets import Balloon
from popshot.systems.world.simulation_step import SimulationStep


@pytest.fixture
def policy():
    return MagicMock()


@pytest.fixture
def step(context, resolver, policy):
    return SimulationStep(context, policy, resolver)


# ===========================================================
# Hazard Fuse
# ===========================================================

def test_bomb_goes_off_when_fuse_burns_down(context, step, spawn_into):
    bomb = spawn_into(Bomb(640, 100))
    fuses = []

    for tick in range(1, 31):
        step.advance(500)
        fuses.append(bomb.fuse)
        if tick < 30:
            assert not bomb.detonated, f"early detonation on tick {tick}"

    assert bomb.detonated
    assert min(fuses) == 0.0
    assert bomb not in context.spawn_manager.entities


@pytest.mark.parametrize("tick_ms", [10, 20, 25, 50, 100])
def test_bomb_detonates_after_exactly_fifteen_seconds(step, spawn_into, tick_ms):
    bomb = spawn_into(Bomb(640, 100))
    elapsed = 0

    while not bomb.detonated and elapsed < 20_000:
        step.advance(tick_ms)
        elapsed += tick_ms

    assert bomb.detonated
    assert elapsed == 15_000


def test_bomb_falls_while_fuse_burns(step, spawn_into):
    bomb = spawn_into(Bomb(640, 100))
    step.advance(1000)
    assert bomb.y == pytest.approx(160)
    assert bomb.fuse == pytest.approx(14.0)


# ===========================================================
# Spawning
# ===========================================================

def test_spawn_fires_only_after_interval_is_exceeded(context, step, policy):
    interval = step.spawn_interval_ms()
    assert interval == 1100

    step.advance(interval)
    policy.spawn.assert_not_called()

    step.advance(1)
    policy.spawn.assert_called_once_with(context)
    assert context.spawn_timer_ms == 0.0


def test_at_most_one_spawn_per_tick(context, step, policy):
    step.advance(10_000)
    assert policy.spawn.call_count == 1


def test_party_mode_shortens_interval(context, step, policy):
    context.ledger.activate_party()
    assert step.spawn_interval_ms() == 40

    step.advance(41)

    policy.spawn.assert_called_once()


# ===========================================================
# Auto-fire
# ===========================================================

def test_auto_fire_pops_target_at_aim(context, step, spawn_into):
    balloon = spawn_into(Balloon(300, 300))
    context.ledger.activate_full_auto()
    context.ledger.set_aim(300, 300)

    step.advance(10)

    assert balloon not in context.spawn_manager.entities
    assert context.score == 13
    assert context.stats.auto_shots == 1
    assert context.ledger.primary_ammo == 50

    traces = [f for f in context.spawn_manager.feedback if isinstance(f, BulletTrace)]
    assert len(traces) == 1
    assert traces[0].y == 720
    assert 590 <= traces[0].x <= 690


def test_auto_fire_needs_an_aim_point(context, step):
    context.ledger.activate_full_auto()
    step.advance(200)
    assert context.stats.auto_shots == 0


def test_auto_fire_cadence(context, step):
    context.ledger.activate_full_auto()
    context.ledger.set_aim(1000, 50)

    step.advance(10)      # primed shot
    step.advance(160)     # two more

    assert context.stats.auto_shots == 3


def test_auto_fire_stops_when_round_is_over(context, step):
    context.ledger.activate_full_auto()
    context.ledger.set_aim(300, 300)
    context.state = RoundState.ENDED_WON

    step.advance(10)

    assert context.stats.auto_shots == 0
    assert not context.ledger.full_auto_active


def test_full_auto_expires_with_event(context, step):
    expired = MagicMock()
    context.events.subscribe(FullAutoExpiredEvent, expired)
    context.ledger.activate_full_auto()

    step.advance(4999)
    assert context.ledger.full_auto_active

    step.advance(1)
    assert not context.ledger.full_auto_active
    expired.assert_called_once()


# ===========================================================
# Sweep
# ===========================================================

def test_marked_entities_are_swept(context, step, spawn_into):
    gone = spawn_into(Balloon(300, 300))
    kept = spawn_into(Balloon(500, 300))
    gone.mark_for_deletion()

    step.advance(16)

    assert context.spawn_manager.entities == [kept]
