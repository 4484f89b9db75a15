"""
test_combat_resolver.py
-----------------------
Unit tests for primary hits, area hits and hazard detonation.

Responsibilities
----------------
- Primary hits resolve at most one entity, newest first.
- Area hits sum every elimination into one score change.
- Detonations are idempotent and spare pickups.
- Attacks without ammunition change nothing.
"""

import math
from unittest.mock import MagicMock

import pytest

from popshot.core.services.event_manager import (
    BossKilledEvent, HazardDetonatedEvent, PickupCollectedEvent, ScoreChangedEvent, TargetPoppedEvent,
)
from popshot.entities.bosses import Godzilla
from popshot.entities.feedback import FloatingText
from popshot.entities.hazards import Bomb
from popshot.entities.items import AmmoDrop, BirthdayCap, GoldenClock, MagazineDrop, ShotgunDrop
from popshot.entities.targets import Balloon, Bird


@pytest.fixture
def fixed_rolls(context, monkeypatch):
    """Boss hit bonus and creature penalties always roll 3."""
    monkeypatch.setattr(context.rng, "randint", lambda a, b: 3)


def listen(context, event_type):
    listener = MagicMock()
    context.events.subscribe(event_type, listener)
    return listener


# ===========================================================
# Primary Attack
# ===========================================================

class TestPrimary:

    def test_pops_plain_target(self, context, resolver, spawn_into):
        popped = listen(context, TargetPoppedEvent)
        balloon = spawn_into(Balloon(300, 300))

        result = resolver.resolve_primary(300, 300)

        assert result.affected == [balloon]
        assert result.score_delta == 13
        assert context.score == 13
        assert balloon.marked_for_deletion
        assert context.ledger.primary_ammo == 49
        popped.assert_called_once()

    def test_only_newest_overlapping_entity_is_hit(self, context, resolver, spawn_into):
        older = spawn_into(Balloon(300, 300))
        newer = spawn_into(Balloon(310, 300))

        resolver.resolve_primary(305, 300)

        assert newer.marked_for_deletion
        assert not older.marked_for_deletion

    def test_negative_target_costs_points(self, context, resolver, spawn_into):
        context.score = 100
        spawn_into(Bird(300, 300, scale=1.0))

        resolver.resolve_primary(300, 300)

        assert context.score == 70

    def test_empty_click_spends_ammo_only(self, context, resolver, spawn_into):
        spawn_into(Balloon(300, 300))

        result = resolver.resolve_primary(900, 100)

        assert not result.hit
        assert context.score == 0
        assert context.ledger.primary_ammo == 49

    def test_no_ammo_is_a_no_op(self, context, resolver, spawn_into):
        balloon = spawn_into(Balloon(300, 300))
        context.ledger.primary_ammo = 0

        assert resolver.resolve_primary(300, 300) is None
        assert context.score == 0
        assert not balloon.marked_for_deletion
        assert context.ledger.primary_ammo == 0

    def test_non_finite_point_hits_nothing(self, context, resolver, spawn_into):
        spawn_into(Balloon(300, 300))
        result = resolver.resolve_primary(math.nan, 300)
        assert not result.hit

    def test_full_auto_click_only_moves_aim(self, context, resolver, spawn_into):
        balloon = spawn_into(Balloon(300, 300))
        context.ledger.activate_full_auto()

        assert resolver.resolve_primary(300, 300) is None
        assert context.ledger.aim == (300, 300)
        assert context.ledger.primary_ammo == 50
        assert not balloon.marked_for_deletion

    def test_auto_shot_does_not_spend_ammo(self, context, resolver, spawn_into):
        spawn_into(Balloon(300, 300))

        result = resolver.resolve_primary(300, 300, consume_ammo=False)

        assert result.kind == "auto"
        assert context.ledger.primary_ammo == 50
        assert context.stats.auto_shots == 1


# ===========================================================
# Bosses
# ===========================================================

class TestBossHits:

    def test_ten_hits_kill_once(self, context, resolver, spawn_into, fixed_rolls):
        kills = listen(context, BossKilledEvent)
        boss = spawn_into(Godzilla(400, 700, size_class=1))

        results = [resolver.resolve_primary(400, 650) for _ in range(10)]

        assert boss.marked_for_deletion
        assert [len(r.killed_bosses) for r in results] == [0] * 9 + [1]
        assert context.score == 10 * 3 + 25
        kills.assert_called_once()

    def test_hit_after_kill_misses(self, context, resolver, spawn_into, fixed_rolls):
        boss = spawn_into(Godzilla(400, 700, size_class=1))
        boss.hp = 1
        resolver.resolve_primary(400, 650)

        result = resolver.resolve_primary(400, 650)

        assert not result.hit
        assert context.score == 3 + 25


# ===========================================================
# Pickups
# ===========================================================

class TestPickups:

    def test_magazine_adds_primary_without_score(self, context, resolver, spawn_into):
        collected = listen(context, PickupCollectedEvent)
        drop = spawn_into(MagazineDrop(300, 300))

        result = resolver.resolve_primary(300, 300)

        assert result.bonus == "primary_ammo"
        assert context.ledger.primary_ammo == 59
        assert context.score == 0
        assert drop.marked_for_deletion
        collected.assert_called_once()

    def test_shotgun_drop_adds_secondary(self, context, resolver, spawn_into):
        spawn_into(ShotgunDrop(300, 300))
        resolver.resolve_primary(300, 300)
        assert context.ledger.secondary_ammo == 10

    def test_clock_adds_ten_seconds(self, context, resolver, spawn_into):
        spawn_into(GoldenClock(300, 300))
        before = context.time_left_ms
        resolver.resolve_primary(300, 300)
        assert context.time_left_ms == before + 10_000

    def test_ammo_drop_starts_full_auto(self, context, resolver, spawn_into):
        spawn_into(AmmoDrop(300, 300))
        resolver.resolve_primary(300, 300)
        assert context.ledger.full_auto_active

    def test_birthday_cap_starts_party(self, context, resolver, spawn_into):
        spawn_into(BirthdayCap(300, 300))
        resolver.resolve_primary(300, 300)
        assert context.ledger.party_active


# ===========================================================
# Area Attack
# ===========================================================

class TestArea:

    @pytest.mark.parametrize("offset, eliminated", [
        (50, True),
        (149, True),
        (150, False),
    ])
    def test_blast_reach_includes_target_radius(self, context, resolver, spawn_into, offset, eliminated):
        balloon = spawn_into(Balloon(300 + offset, 300))
        resolver.resolve_area(300, 300)
        assert balloon.marked_for_deletion is eliminated

    def test_one_aggregate_delta(self, context, resolver, spawn_into):
        changes = listen(context, ScoreChangedEvent)
        spawn_into(Balloon(300, 300))
        spawn_into(Balloon(350, 300))
        spawn_into(Bird(300, 350, scale=1.0))

        result = resolver.resolve_area(300, 300)

        assert result.score_delta == 13 + 13 - 30
        changes.assert_called_once()
        assert len([f for f in context.spawn_manager.feedback if isinstance(f, FloatingText)]) == 1
        assert context.ledger.secondary_ammo == 4

    def test_pickups_are_immune(self, context, resolver, spawn_into):
        drop = spawn_into(AmmoDrop(300, 300))
        resolver.resolve_area(300, 300)
        assert not drop.marked_for_deletion
        assert not context.ledger.full_auto_active

    def test_hazard_only_triggers_on_direct_hit(self, context, resolver, spawn_into):
        near = spawn_into(Bomb(360, 300))
        resolver.resolve_area(300, 300)
        assert not near.detonated

        resolver.resolve_area(330, 300)
        assert near.detonated

    def test_boss_takes_five_by_box_distance(self, context, resolver, spawn_into):
        boss = spawn_into(Godzilla(400, 700, size_class=2))     # 288 tall, 172.8 wide
        # 100 px left of the box's left edge, level with its middle
        resolver.resolve_area(400 - 86.4 - 100, 550)
        assert boss.hp == 13

        resolver.resolve_area(400 - 86.4 - 121, 550)
        assert boss.hp == 13

    def test_boss_kill_points_from_area(self, context, resolver, spawn_into):
        boss = spawn_into(Godzilla(400, 700, size_class=1))
        boss.hp = 5

        result = resolver.resolve_area(400, 600)

        assert result.killed_bosses == [boss]
        assert context.score == 25

    def test_no_secondary_ammo_is_a_no_op(self, context, resolver, spawn_into):
        balloon = spawn_into(Balloon(300, 300))
        context.ledger.secondary_ammo = 0

        assert resolver.resolve_area(300, 300) is None
        assert not balloon.marked_for_deletion


# ===========================================================
# Detonation
# ===========================================================

class TestDetonation:

    def test_direct_hit_detonates_and_clears_radius(self, context, resolver, spawn_into):
        near = spawn_into(Balloon(500, 300))
        far = spawn_into(Balloon(700, 300))
        bomb = spawn_into(Bomb(300, 300))

        result = resolver.resolve_primary(300, 300)

        assert bomb.detonated and bomb.marked_for_deletion
        assert near.marked_for_deletion
        assert not far.marked_for_deletion
        assert result.total_delta == 13

    def test_detonate_is_idempotent(self, context, resolver, spawn_into):
        blasts = listen(context, HazardDetonatedEvent)
        spawn_into(Balloon(400, 300))
        bomb = spawn_into(Bomb(300, 300))

        first = resolver.detonate(bomb)
        second = resolver.detonate(bomb)

        assert first.score_delta == 13
        assert second is None
        assert context.score == 13
        blasts.assert_called_once()

    def test_spares_pickups_and_other_hazards(self, context, resolver, spawn_into):
        drop = spawn_into(MagazineDrop(350, 300))
        other = spawn_into(Bomb(320, 300))
        bomb = spawn_into(Bomb(300, 300))

        resolver.detonate(bomb)

        assert not drop.marked_for_deletion
        assert not other.marked_for_deletion

    @pytest.mark.parametrize("size_class, hp_left, points", [
        (1, 0, 25),
        (2, 8, 0),
    ])
    def test_bosses_take_ten(self, context, resolver, spawn_into, size_class, hp_left, points):
        boss = spawn_into(Godzilla(400, 600, size_class=size_class))
        bomb = spawn_into(Bomb(300, 500))

        resolver.detonate(bomb)

        assert boss.hp == hp_left
        assert context.score == points
