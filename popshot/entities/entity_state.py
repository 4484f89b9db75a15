"""
entity_state.py
---------------
Defines runtime state enumerations for entities and rounds.
Contains only states that change over time during gameplay.
"""

from enum import IntEnum


class GopherState(IntEnum):
    """
    Pop-up lifecycle of a gopher.

    RISING -> climbs out of its hole to the peek height
    WAITING -> holds still until its wait timer runs out
    HIDING -> sinks back and expires once fully underground
    """
    RISING = 0
    WAITING = 1
    HIDING = 2


class RoundState(IntEnum):
    """
    Round controller lifecycle.

    IDLE is only held before the first start_round call. Both ended
    states accept a new start_round or retry_round.
    """
    IDLE = 0
    RUNNING = 1
    ENDED_WON = 2
    ENDED_LOST = 3

    @property
    def is_ended(self) -> bool:
        return self in (RoundState.ENDED_WON, RoundState.ENDED_LOST)
