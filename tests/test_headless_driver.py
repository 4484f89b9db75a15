"""
test_headless_driver.py
-----------------------
Smoke tests for the `python -m popshot` driver.
"""

from unittest.mock import patch

import pytest

from popshot.__main__ import main, play
from popshot.entities.entity_state import RoundState
from popshot.entities.targets import Balloon
from popshot.systems.level.round_controller import RoundController


@pytest.mark.slow
@pytest.mark.integration
def test_seeded_session_is_reproducible():
    first = play(rounds=2, seed=7, tick_ms=50, shots_per_second=4)
    second = play(rounds=2, seed=7, tick_ms=50, shots_per_second=4)

    assert first.score == second.score
    assert first.stats.as_dict() == second.stats.as_dict()
    assert first.state in (RoundState.ENDED_WON, RoundState.ENDED_LOST)


@pytest.mark.slow
@pytest.mark.integration
def test_main_prints_round_summary(capsys):
    assert main(["--rounds", "1", "--tick-ms", "100"]) == 0

    out = capsys.readouterr().out
    assert "Round  1" in out
    assert "Session stats" in out


def test_rejects_non_positive_tick():
    with pytest.raises(SystemExit):
        main(["--tick-ms", "0"])


def test_summary_lists_spawns_by_tag(capsys):
    controller = RoundController(seed=3)
    controller.start_round(1)
    manager = controller.context.spawn_manager
    manager.add(Balloon(200, 300))
    manager.add(Balloon(400, 300)).mark_for_deletion()
    manager.sweep()

    with patch("popshot.__main__.play", return_value=controller):
        assert main(["--rounds", "1"]) == 0

    out = capsys.readouterr().out
    assert "Spawn stats" in out
    assert "total_spawned        2" in out
    assert "total_swept          1" in out
    assert "balloon              2" in out
