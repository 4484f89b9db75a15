"""
test_spawn_manager.py
---------------------
Unit tests for the live entity container and its sweep.
"""

import pytest

from popshot.entities.feedback import FloatingText
from popshot.entities.targets import Balloon
from popshot.systems.entity_management.spawn_manager import SpawnManager


@pytest.fixture
def manager():
    return SpawnManager()


def test_sweep_preserves_survivor_order(manager):
    balloons = [manager.add(Balloon(i * 100, 300)) for i in range(5)]
    balloons[1].mark_for_deletion()
    balloons[3].mark_for_deletion()

    removed = manager.sweep()

    assert removed == 2
    assert manager.entities == [balloons[0], balloons[2], balloons[4]]


def test_feedback_swept_but_not_counted(manager):
    label = manager.add_feedback(FloatingText(0, 0, "+1"))
    label.mark_for_deletion()

    assert manager.sweep() == 0
    assert manager.feedback == []


def test_update_skips_marked_entities(manager):
    live = manager.add(Balloon(0, 300, speed=100.0))
    dead = manager.add(Balloon(100, 300, speed=100.0))
    dead.mark_for_deletion()

    manager.update(1.0)

    assert live.y == pytest.approx(200)
    assert dead.y == pytest.approx(300)


def test_live_queries(manager):
    manager.add(Balloon(0, 300))
    marked = manager.add(Balloon(100, 300))
    marked.mark_for_deletion()

    assert manager.live_entities() == [manager.entities[0]]
    assert manager.any_live("balloon")
    assert not manager.any_live("bird")
    assert len(manager.live_of(lambda tag: tag == "balloon")) == 1


def test_spawn_stats_and_reset(manager):
    manager.add(Balloon(0, 300))
    manager.add_feedback(FloatingText(0, 0, "x"))

    stats = manager.get_spawn_stats()
    assert stats["lifetime_stats"]["by_tag"] == {"balloon": 1}
    assert stats["active_feedback"] == 1

    manager.reset()
    assert manager.entities == [] and manager.feedback == []
