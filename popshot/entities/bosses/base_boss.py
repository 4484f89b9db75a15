"""
base_boss.py
------------
Shared health pool and crossing motion for boss-class entities.

Bosses use a bottom-center anchored box for hit-tests, lose hp per hit
instead of dying outright, and award kill points exactly once, on the
hit that takes hp to zero.
"""

import random

from popshot.core.debug.debug_logger import DebugLogger
from popshot.core.runtime.game_settings import Timing
from popshot.entities.base_entity import BaseEntity


class BaseBoss(BaseEntity):
    """
    Multi-hit entity crossing the canvas horizontally.

    Subclasses provide the size, hp and kill points in __init__ and
    their own spawn(). Ambient cues are requested through
    `wants_to_vocalize`, which the simulation step consumes.
    """

    WALK_RATE = 5.0

    def __init__(self, x, y, width, height, hp, kill_points, speed,
                 direction=1, bounds=None, rng=None):
        super().__init__(x, y, width / 2, speed, bounds)
        self.width = width
        self.height = height
        self.hp = hp
        self.max_hp = hp
        self.kill_points = kill_points
        self.direction = direction
        self.rng = rng or random.Random()

        self.walk_cycle = 0.0
        self.vocalize_timer = 0.0
        self.wants_to_vocalize = False
        self.killed = False

    # ===========================================================
    # Health
    # ===========================================================

    @property
    def is_alive(self) -> bool:
        return not self.killed and not self.marked_for_deletion

    def take_damage(self, amount: int) -> bool:
        """
        Remove hp and mark the boss dead when it runs out.

        Returns:
            bool: True only for the call that killed the boss
        """
        if not self.is_alive:
            return False

        self.hp = max(0, self.hp - amount)
        if self.hp > 0:
            DebugLogger.trace(f"{type(self).__name__} hp {self.hp}/{self.max_hp}", category="combat")
            return False

        self.killed = True
        self.mark_for_deletion()
        DebugLogger.action(f"{type(self).__name__} killed (+{self.kill_points})", category="combat")
        return True

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, dt):
        self.move(dt)
        self.walk_cycle += self.WALK_RATE * dt
        self._update_vocalize(dt)

        if self.exited_horizontally(self.width):
            self.mark_for_deletion()

    def move(self, dt):
        self.pos.x += self.speed * self.direction * dt

    def _update_vocalize(self, dt):
        self.vocalize_timer += dt
        if self.vocalize_timer > Timing.VOCALIZE_MIN_GAP and self.rng.random() < Timing.VOCALIZE_CHANCE:
            self.wants_to_vocalize = True
            self.vocalize_timer = 0.0

    def consume_vocalize(self) -> bool:
        """Return and clear the pending ambient cue."""
        pending = self.wants_to_vocalize
        self.wants_to_vocalize = False
        return pending

    # ===========================================================
    # Rendering
    # ===========================================================

    def animation_phase(self) -> float:
        return self.walk_cycle

    def _hint_extra(self) -> dict:
        return {"hp": self.hp, "max_hp": self.max_hp}
