"""
resource_ledger.py
------------------
Ammunition counters and the two temporary modes (full-auto, party).

Responsibilities
----------------
- Debit primary/secondary ammunition, never below zero.
- Run the full-auto countdown and its fire-cadence accumulator.
- Run the party-mode countdown.
- Emit an expiry event when either mode reverts to baseline.

All timers are in milliseconds, matching the tick driver.
"""

import math
from typing import Optional

from popshot.core.debug.debug_logger import DebugLogger
from popshot.core.runtime.game_settings import Resources
from popshot.core.services.event_manager import FullAutoExpiredEvent, PartyModeExpiredEvent


class ResourceLedger:
    """Per-round resource state. Refilled by the round controller at round start."""

    UNLIMITED = math.inf

    def __init__(self, events=None, primary_ammo: int = Resources.PRIMARY_AMMO,
                 secondary_ammo: int = Resources.SECONDARY_AMMO):
        """
        Args:
            events: EventManager receiving mode expiry events (optional)
            primary_ammo: Primary ammunition granted at each refill
            secondary_ammo: Secondary ammunition granted at each refill
        """
        self.events = events
        self.starting_primary = primary_ammo
        self.starting_secondary = secondary_ammo

        self.primary_ammo = primary_ammo
        self.secondary_ammo = secondary_ammo

        self.full_auto_remaining_ms = 0.0
        self.fire_accumulator_ms = 0.0
        self.party_remaining_ms = 0.0

        self.aim: Optional[tuple] = None

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def refill(self):
        """Restore starting ammunition and cancel both modes."""
        self.primary_ammo = self.starting_primary
        self.secondary_ammo = self.starting_secondary
        self.cancel_modes()
        DebugLogger.state(
            f"Ledger refilled: primary={self.primary_ammo} secondary={self.secondary_ammo}",
            category="resources"
        )

    def cancel_modes(self):
        """Drop both modes silently (round over or restarted)."""
        self.full_auto_remaining_ms = 0.0
        self.fire_accumulator_ms = 0.0
        self.party_remaining_ms = 0.0

    # ===========================================================
    # Ammunition
    # ===========================================================

    def spend_primary(self) -> bool:
        """Debit one primary round. Returns False when empty."""
        if self.primary_ammo <= 0:
            return False
        self.primary_ammo -= 1
        return True

    def spend_secondary(self) -> bool:
        """Debit one secondary round. Returns False when empty."""
        if self.secondary_ammo <= 0:
            return False
        self.secondary_ammo -= 1
        return True

    def add_primary(self, amount: int = Resources.PICKUP_PRIMARY):
        self.primary_ammo += max(0, amount)

    def add_secondary(self, amount: int = Resources.PICKUP_SECONDARY):
        self.secondary_ammo += max(0, amount)

    @property
    def primary_display(self):
        """Primary count for telemetry; UNLIMITED while full-auto runs."""
        return self.UNLIMITED if self.full_auto_active else self.primary_ammo

    # ===========================================================
    # Full-auto
    # ===========================================================

    @property
    def full_auto_active(self) -> bool:
        return self.full_auto_remaining_ms > 0

    def activate_full_auto(self, duration_ms: float = Resources.FULL_AUTO_DURATION_MS):
        """
        Start (or restart) full-auto.

        The cadence accumulator is primed so the first shot goes out on
        the next tick.
        """
        self.full_auto_remaining_ms = duration_ms
        self.fire_accumulator_ms = Resources.FULL_AUTO_CADENCE_MS
        DebugLogger.action(f"Full-auto for {duration_ms / 1000:.1f}s", category="resources")

    def set_aim(self, x: float, y: float):
        self.aim = (x, y)

    def due_auto_shots(self, delta_ms: float) -> int:
        """
        Advance the cadence accumulator and return how many shots are due.

        Returns 0 when full-auto is off or no aim point is known.
        """
        if not self.full_auto_active or self.aim is None:
            return 0

        self.fire_accumulator_ms += delta_ms
        shots = int(self.fire_accumulator_ms // Resources.FULL_AUTO_CADENCE_MS)
        self.fire_accumulator_ms -= shots * Resources.FULL_AUTO_CADENCE_MS
        return shots

    # ===========================================================
    # Party Mode
    # ===========================================================

    @property
    def party_active(self) -> bool:
        return self.party_remaining_ms > 0

    def activate_party(self, duration_ms: float = Resources.PARTY_DURATION_MS) -> bool:
        """Start party mode. A second activation while it runs is ignored."""
        if self.party_active:
            return False
        self.party_remaining_ms = duration_ms
        DebugLogger.action(f"Party mode for {duration_ms / 1000:.1f}s", category="resources")
        return True

    # ===========================================================
    # Timers
    # ===========================================================

    def advance_timers(self, delta_ms: float):
        """
        Count both modes down and emit an expiry event for each that ends.

        A mode expires on the tick its remaining time reaches zero, so a
        5000 ms mode is gone after exactly 5000 ms of ticks.
        """
        if self.full_auto_active:
            self.full_auto_remaining_ms = max(0.0, self.full_auto_remaining_ms - delta_ms)
            if not self.full_auto_active:
                self.fire_accumulator_ms = 0.0
                DebugLogger.state("Full-auto expired", category="resources")
                self._dispatch(FullAutoExpiredEvent())

        if self.party_active:
            self.party_remaining_ms = max(0.0, self.party_remaining_ms - delta_ms)
            if not self.party_active:
                DebugLogger.state("Party mode expired", category="resources")
                self._dispatch(PartyModeExpiredEvent())

    def _dispatch(self, event):
        if self.events is not None:
            self.events.dispatch(event)
