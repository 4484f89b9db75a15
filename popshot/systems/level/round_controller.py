"""
round_controller.py
-------------------
Round state machine and the public surface of the simulation core.

Responsibilities
----------------
- Start, retry and advance rounds with the score checkpoint rules.
- Drive the round clock and decide won/lost at time-out.
- Forward attacks to the combat resolver while the round runs.
- Report telemetry, outcomes and render hints to outside collaborators.

States: IDLE -> RUNNING -> ENDED_WON | ENDED_LOST, and back to RUNNING on
any start. Ticking or attacking before the first start is a programmer
error and raises RoundNotStartedError; after the round ends the same
calls quietly do nothing.
"""

import math
from dataclasses import dataclass
from typing import Callable, List, Optional

from popshot.core.debug.debug_logger import DebugLogger
from popshot.core.errors import RoundNotStartedError
from popshot.core.runtime.round_context import RoundContext
from popshot.core.services.event_manager import RoundLostEvent, RoundStartedEvent, RoundWonEvent
from popshot.entities.entity_state import RoundState
from popshot.systems.combat.combat_resolver import CombatResolver
from popshot.systems.level.round_config import RoundTable
from popshot.systems.level.spawn_policy import SpawnPolicy
from popshot.systems.world.simulation_step import SimulationStep


@dataclass(frozen=True)
class Telemetry:
    """Per-tick snapshot handed to the UI callback."""
    score: int
    round_score: int
    primary_ammo: float         # math.inf while full-auto runs
    secondary_ammo: int
    round_number: int
    time_left: int              # whole seconds, rounded up
    target: int
    full_auto_active: bool


class RoundController:
    """Owns one RoundContext and runs rounds on it."""

    def __init__(self, context: Optional[RoundContext] = None,
                 round_table: Optional[RoundTable] = None,
                 spawn_policy: Optional[SpawnPolicy] = None,
                 on_ui_update: Optional[Callable[[Telemetry], None]] = None,
                 on_round_won: Optional[Callable[[int, int], None]] = None,
                 on_round_lost: Optional[Callable[[int], None]] = None,
                 seed: Optional[int] = None):
        """
        Args:
            context: Round state to drive (a fresh one is built when None)
            round_table: Round configuration (loaded from rounds.json when None)
            spawn_policy: Spawn cascade (loaded from spawn_table.json when None)
            on_ui_update: Called with a Telemetry snapshot after every tick
            on_round_won: Called with (score, round_number) on a win
            on_round_lost: Called with (score) on a loss
            seed: Seed for a freshly built context's random source
        """
        DebugLogger.section("Initializing Round Controller")

        self.context = context if context is not None else RoundContext(seed=seed)
        self.round_table = round_table if round_table is not None else RoundTable.load()
        self.spawn_policy = spawn_policy if spawn_policy is not None else SpawnPolicy.load()

        self.on_ui_update = on_ui_update
        self.on_round_won = on_round_won
        self.on_round_lost = on_round_lost

        self.resolver = CombatResolver(self.context)
        self.step = SimulationStep(self.context, self.spawn_policy, self.resolver)

        DebugLogger.init_entry("RoundController Initialized")

    # ===========================================================
    # Properties
    # ===========================================================

    @property
    def state(self) -> RoundState:
        return self.context.state

    @property
    def stats(self):
        return self.context.stats

    @property
    def score(self) -> int:
        return self.context.score

    @property
    def round_number(self) -> int:
        return self.context.round_number

    @property
    def events(self):
        return self.context.events

    # ===========================================================
    # Round Lifecycle
    # ===========================================================

    def start_round(self, round_number: int):
        """
        Start (or restart) a round.

        Moving to a higher round checkpoints the current score. Starting
        the same or a lower round rolls the score back to the checkpoint.

        Raises:
            ValueError: round_number is below 1
        """
        ctx = self.context
        config = self.round_table.config_for(round_number)
        retry = ctx.round_number > 0 and round_number <= ctx.round_number

        if round_number > ctx.round_number:
            ctx.score_at_round_start = ctx.score
        elif ctx.score != ctx.score_at_round_start:
            ctx.add_score(ctx.score_at_round_start - ctx.score)

        ctx.begin_round(config)
        ctx.state = RoundState.RUNNING

        DebugLogger.system(
            f"Round {round_number} {'retry' if retry else 'start'}: "
            f"target {config.min_points}, {config.duration:.0f}s, "
            f"spawn every {config.spawn_interval_ms:.0f}ms, speed x{config.speed_multiplier}",
            category="round"
        )
        ctx.events.dispatch(RoundStartedEvent(
            round_number=round_number, target=config.min_points,
            duration=config.duration, retry=retry,
        ))

    def retry_round(self):
        """Restart the current round from its score checkpoint."""
        if self.context.round_number < 1:
            raise RoundNotStartedError("retry")
        self.start_round(self.context.round_number)

    def next_round(self):
        """Start the round after the current one."""
        self._require_started("advance")
        self.start_round(self.context.round_number + 1)

    def abandon(self):
        """End a running round as lost without reporting an outcome."""
        self._require_started("abandon")
        if not self.context.is_running:
            return
        self.context.state = RoundState.ENDED_LOST
        self.context.ledger.cancel_modes()
        DebugLogger.system(f"Round {self.context.round_number} abandoned", category="round")

    # ===========================================================
    # Tick
    # ===========================================================

    def tick(self, delta_ms: float) -> Optional[Telemetry]:
        """
        Advance the round by delta_ms milliseconds.

        Returns:
            Telemetry after the tick, or None if the round already ended
        """
        self._require_started("tick")
        ctx = self.context
        if not ctx.is_running:
            return None

        if not math.isfinite(delta_ms) or delta_ms < 0:
            DebugLogger.warn(f"Ignoring invalid tick delta {delta_ms}", category="timing")
            return self.snapshot()

        ctx.time_left_ms -= delta_ms
        if ctx.time_left_ms <= 0:
            ctx.time_left_ms = 0.0
            self._end_round()
        else:
            self.step.advance(delta_ms)

        telemetry = self.snapshot()
        if self.on_ui_update:
            self.on_ui_update(telemetry)
        return telemetry

    def _end_round(self):
        ctx = self.context
        won = ctx.round_score >= ctx.config.min_points
        ctx.state = RoundState.ENDED_WON if won else RoundState.ENDED_LOST
        ctx.ledger.cancel_modes()
        ctx.stats.record_round(ctx.round_number, ctx.round_score, won)

        DebugLogger.system(
            f"Round {ctx.round_number} {'won' if won else 'lost'}: "
            f"{ctx.round_score}/{ctx.config.min_points} (total {ctx.score})",
            category="round"
        )

        if won:
            ctx.events.dispatch(RoundWonEvent(score=ctx.score, round_number=ctx.round_number))
            if self.on_round_won:
                self.on_round_won(ctx.score, ctx.round_number)
        else:
            ctx.events.dispatch(RoundLostEvent(score=ctx.score, round_number=ctx.round_number))
            if self.on_round_lost:
                self.on_round_lost(ctx.score)

    # ===========================================================
    # Player Input
    # ===========================================================

    def resolve_primary(self, x: float, y: float):
        """Point attack. Returns an AttackResult, or None if nothing was fired."""
        self._require_started("attack")
        if not self.context.is_running:
            return None
        return self.resolver.resolve_primary(x, y)

    def resolve_area(self, x: float, y: float):
        """Area attack. Returns an AttackResult, or None if nothing was fired."""
        self._require_started("attack")
        if not self.context.is_running:
            return None
        return self.resolver.resolve_area(x, y)

    def set_aim(self, x: float, y: float):
        """Track the pointer so full-auto fires where the player aims."""
        self.context.ledger.set_aim(x, y)

    # ===========================================================
    # Queries
    # ===========================================================

    def snapshot(self) -> Telemetry:
        ctx = self.context
        return Telemetry(
            score=ctx.score,
            round_score=ctx.round_score,
            primary_ammo=ctx.ledger.primary_display,
            secondary_ammo=ctx.ledger.secondary_ammo,
            round_number=ctx.round_number,
            time_left=math.ceil(ctx.time_left_ms / 1000.0),
            target=ctx.config.min_points if ctx.config else 0,
            full_auto_active=ctx.ledger.full_auto_active,
        )

    def render_hints(self) -> List:
        """Render hints for live entities then feedback, skipping unplaceable ones."""
        manager = self.context.spawn_manager
        hints = []
        for item in manager.live_entities() + [f for f in manager.feedback if not f.marked_for_deletion]:
            hint = item.render_hint()
            if hint is not None:
                hints.append(hint)
        return hints

    # ===========================================================
    # Internal
    # ===========================================================

    def _require_started(self, operation: str):
        if self.context.state == RoundState.IDLE:
            raise RoundNotStartedError(operation)
