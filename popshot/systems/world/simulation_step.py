"""
simulation_step.py
------------------
One synchronous pass of the world for a single driver tick.

Order per tick
--------------
1. Mode timers (full-auto, party) count down and may expire.
2. Auto-fire shots due from the cadence accumulator.
3. Spawn accumulator; at most one spawn per tick.
4. Per-entity motion and state updates.
5. Interaction rules (trampling, snatching, fuse detonations).
6. Sweep of everything marked for deletion.

The round clock and the round-end decision belong to the round
controller, which calls advance() only while the round is running.
"""

from popshot.core.debug.debug_logger import DebugLogger
from popshot.core.runtime.game_settings import Resources, Timing
from popshot.entities.feedback import BulletTrace
from popshot.systems.world.interaction_rules import InteractionRules


class SimulationStep:
    """Advances a RoundContext by one tick."""

    def __init__(self, context, spawn_policy, resolver):
        """
        Args:
            context: RoundContext to advance
            spawn_policy: SpawnPolicy consulted when the spawn timer fires
            resolver: CombatResolver used by auto-fire and detonations
        """
        self.context = context
        self.spawn_policy = spawn_policy
        self.resolver = resolver
        self.interactions = InteractionRules(context, resolver)

    def advance(self, delta_ms: float):
        """
        Run one tick.

        Args:
            delta_ms: Elapsed time in milliseconds
        """
        ctx = self.context

        ctx.ledger.advance_timers(delta_ms)
        self._auto_fire(delta_ms)
        self._spawn(delta_ms)

        ctx.spawn_manager.update(delta_ms / 1000.0)
        self.interactions.apply()
        ctx.spawn_manager.sweep()

    # ===========================================================
    # Auto-fire
    # ===========================================================

    def _auto_fire(self, delta_ms: float) -> int:
        """Fire every shot the cadence owes, each with fresh spread."""
        ctx = self.context
        shots = ctx.ledger.due_auto_shots(delta_ms)
        fired = 0

        for _ in range(shots):
            if not ctx.is_running:
                DebugLogger.trace("Auto-fire cancelled: round not running", category="resources")
                ctx.ledger.cancel_modes()
                break

            aim_x, aim_y = ctx.ledger.aim
            spread = Resources.FULL_AUTO_SPREAD
            shot_x = aim_x + (ctx.rng.random() * 2 * spread - spread)
            shot_y = aim_y + (ctx.rng.random() * 2 * spread - spread)

            jitter = Resources.TRACE_ORIGIN_JITTER
            origin_x = ctx.bounds.width / 2 + (ctx.rng.random() * 2 * jitter - jitter)
            ctx.add_feedback(BulletTrace(origin_x, ctx.bounds.height, shot_x, shot_y))

            self.resolver.resolve_primary(shot_x, shot_y, consume_ammo=False)
            fired += 1

        return fired

    # ===========================================================
    # Spawning
    # ===========================================================

    def spawn_interval_ms(self) -> float:
        if self.context.ledger.party_active:
            return Timing.PARTY_SPAWN_INTERVAL_MS
        return self.context.config.spawn_interval_ms

    def _spawn(self, delta_ms: float):
        ctx = self.context
        ctx.spawn_timer_ms += delta_ms
        if ctx.spawn_timer_ms > self.spawn_interval_ms():
            self.spawn_policy.spawn(ctx)
            ctx.spawn_timer_ms = 0.0
