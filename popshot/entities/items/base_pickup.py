"""
base_pickup.py
--------------
Base class for bonus pickups.

Pickups are single-hit and never change the score. Hitting one applies
the effect named by `bonus_type`; area attacks and detonations pass over
them entirely.
"""

import math

from popshot.core.runtime.game_settings import Bounds
from popshot.entities.base_entity import BaseEntity, CanvasBounds


class BasePickup(BaseEntity):
    """
    Falling pickup with an optional horizontal sway.

    Subclasses set BONUS_TYPE, RADIUS, SPEED and, for swaying drops,
    SWAY_RATE / SWAY_DRIFT.
    """

    BONUS_TYPE = None
    RADIUS = 20
    SPEED = 90.0
    SWAY_RATE = 0.0     # radians per second, 0 disables sway
    SWAY_DRIFT = 0.0    # px/s at the peak of the sway
    EDGE_MARGIN = 30

    def __init__(self, x, y, bounds=None):
        super().__init__(x, y, self.RADIUS, self.SPEED, bounds)
        self.bonus_type = self.BONUS_TYPE
        self.sway = 0.0

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        x = rng.random() * (bounds.width - 2 * cls.EDGE_MARGIN) + cls.EDGE_MARGIN
        return cls(x, -50, bounds=bounds)

    def update(self, dt):
        self.pos.y += self.speed * dt
        if self.SWAY_RATE:
            self.sway += dt
            self.pos.x += math.sin(self.sway * self.SWAY_RATE) * self.SWAY_DRIFT * dt

        if self.pos.y > self.bounds.height + Bounds.PICKUP_CLEANUP_MARGIN:
            self.mark_for_deletion()

    def animation_phase(self) -> float:
        return self.sway

    def _hint_extra(self) -> dict:
        return {"bonus_type": self.bonus_type}
