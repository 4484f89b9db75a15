"""
round_context.py
----------------
The single owned value holding all mutable round state.

The round controller creates one RoundContext and threads it through the
spawn policy, the simulation step and the combat resolver. There is no
module-level game state; tests build a context directly.
"""

import random
from typing import Optional

from popshot.core.debug.debug_logger import DebugLogger
from popshot.core.runtime.session_stats import SessionStats
from popshot.core.services.event_manager import EventManager, ScoreChangedEvent
from popshot.entities.base_entity import CanvasBounds
from popshot.entities.entity_state import RoundState
from popshot.systems.entity_management.spawn_manager import SpawnManager
from popshot.systems.resources.resource_ledger import ResourceLedger


class RoundContext:
    """
    Score, clock, counters and collections for the current round.

    Attributes:
        bounds: Canvas size handed to entities at construction
        rng: Random source for spawning, combat rolls and spread
        events: EventManager for telemetry
        spawn_manager: Live entities and feedback
        ledger: Ammunition and temporary modes
        stats: Session-wide counters (survive across rounds)
        state: RoundState of the owning controller
        config: RoundConfig of the current round (None before the first start)
        score: Cumulative score
        score_at_round_start: Checkpoint restored by retries
        time_left_ms: Remaining round time
        spawn_timer_ms: Spawn accumulator
        spawn_counts: Per-round spawns per cascade rule
    """

    def __init__(self, width: float = None, height: float = None, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None, events: Optional[EventManager] = None):
        defaults = CanvasBounds()
        self.bounds = CanvasBounds(width or defaults.width, height or defaults.height)
        self.rng = rng if rng is not None else random.Random(seed)
        self.events = events if events is not None else EventManager()
        self.spawn_manager = SpawnManager()
        self.ledger = ResourceLedger(self.events)
        self.stats = SessionStats()

        self.state = RoundState.IDLE
        self.config = None
        self.round_number = 0

        self.score = 0
        self.score_at_round_start = 0
        self.time_left_ms = 0.0
        self.spawn_timer_ms = 0.0
        self.spawn_counts = {}

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def is_running(self) -> bool:
        return self.state == RoundState.RUNNING

    @property
    def round_score(self) -> int:
        """Points gained since the round-start checkpoint (may be negative)."""
        return self.score - self.score_at_round_start

    # ===========================================================
    # Round Reset
    # ===========================================================

    def begin_round(self, config):
        """Reset every per-round field for a fresh start of `config`."""
        self.config = config
        self.round_number = config.round_number
        self.time_left_ms = config.duration_ms
        self.spawn_timer_ms = 0.0
        self.spawn_counts = {}
        self.spawn_manager.reset()
        self.ledger.refill()
        self.ledger.aim = None

    # ===========================================================
    # Score
    # ===========================================================

    def add_score(self, delta: int, floor: Optional[int] = None) -> int:
        """
        Apply a score change and announce it.

        Args:
            delta: Signed change
            floor: Lowest score the change may produce (None = unbounded)

        Returns:
            int: The change actually applied
        """
        new_score = self.score + delta
        if floor is not None:
            new_score = max(floor, new_score)

        applied = new_score - self.score
        if applied == 0:
            return 0

        self.score = new_score
        self.stats.record_score(new_score)
        DebugLogger.trace(f"Score {applied:+d} -> {self.score}", category="combat")
        self.events.dispatch(ScoreChangedEvent(score=self.score, delta=applied, round_number=self.round_number))
        return applied

    def add_feedback(self, item):
        return self.spawn_manager.add_feedback(item)
