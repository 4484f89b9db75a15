"""
test_session_stats.py
---------------------
Unit tests for the cross-round session counters.
"""

from popshot.core.runtime.session_stats import SessionStats


def test_shot_counters_by_kind():
    stats = SessionStats()
    stats.add_shot("primary")
    stats.add_shot("primary")
    stats.add_shot("secondary")
    stats.add_shot("auto")

    assert stats.primary_shots == 2
    assert stats.secondary_shots == 1
    assert stats.auto_shots == 1
    assert stats.total_shots == 4


def test_record_round_tracks_outcomes_and_bests():
    stats = SessionStats()
    stats.record_round(1, 40, won=True)
    stats.record_round(2, 12, won=False)

    assert stats.rounds_won == 1
    assert stats.rounds_lost == 1
    assert stats.best_round_score == 40
    assert stats.max_round_reached == 2


def test_reset_keeps_high_score():
    stats = SessionStats()
    stats.record_score(120)
    stats.add_pops(3)
    stats.reset()

    assert stats.high_score == 120
    assert stats.targets_popped == 0


def test_as_dict_shape():
    stats = SessionStats()
    stats.add_boss_kill()
    data = stats.as_dict()

    assert data["bosses_killed"] == 1
    assert set(data["shots"]) == {"primary", "secondary", "auto"}
