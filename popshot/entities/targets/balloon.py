"""
balloon.py
----------
Rising balloons: the default score target and its rare golden variant.
"""

import math

from popshot.entities.base_entity import BaseEntity, CanvasBounds
from popshot.entities.entity_types import EntityCategory, VariantTag


class Balloon(BaseEntity):
    """Floats straight up from below the canvas. Faster balloons are worth more."""

    __registry_category__ = EntityCategory.TARGET
    __registry_name__ = VariantTag.BALLOON

    RADIUS = 30
    BASE_POINTS = 10
    SPEED_BONUS_STEP = 50   # +1 point per 50 px/s

    def __init__(self, x, y, speed=150.0, radius=None, points=None, bounds=None):
        super().__init__(x, y, radius or self.RADIUS, speed, bounds)
        self.points = points if points is not None else self.BASE_POINTS + int(speed // self.SPEED_BONUS_STEP)
        self.bob = 0.0

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        x = rng.uniform(cls.RADIUS, bounds.width - cls.RADIUS)
        speed = (rng.random() * 200 + 100) * speed_multiplier
        return cls(x, bounds.height + cls.RADIUS, speed=speed, bounds=bounds)

    def update(self, dt):
        self.pos.y -= self.speed * dt
        self.bob += dt
        if self.pos.y + self.radius < 0:
            self.mark_for_deletion()

    def animation_phase(self) -> float:
        return self.bob

    def _hint_extra(self) -> dict:
        return {"points": self.points}


class GoldenBalloon(Balloon):
    """Double-speed balloon with a side-to-side wobble and a flat 100 points."""

    __registry_category__ = EntityCategory.TARGET
    __registry_name__ = VariantTag.GOLDEN_BALLOON

    RADIUS = 25
    POINTS = 100
    SPEED_MULTIPLIER = 2.0
    WOBBLE_RATE = 5.0       # radians per second
    WOBBLE_DRIFT = 120.0    # px/s at the peak of the sway

    def __init__(self, x, y, speed=300.0, wobble=0.0, bounds=None):
        super().__init__(x, y, speed=speed, radius=self.RADIUS, points=self.POINTS, bounds=bounds)
        self.wobble = wobble

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        # Golden balloons keep their own speed regardless of the round
        x = rng.uniform(Balloon.RADIUS, bounds.width - Balloon.RADIUS)
        speed = (rng.random() * 200 + 100) * cls.SPEED_MULTIPLIER
        wobble = rng.random() * math.tau
        return cls(x, bounds.height + Balloon.RADIUS, speed=speed, wobble=wobble, bounds=bounds)

    def update(self, dt):
        super().update(dt)
        self.wobble += dt * self.WOBBLE_RATE
        self.pos.x += math.sin(self.wobble) * self.WOBBLE_DRIFT * dt

    def animation_phase(self) -> float:
        return self.wobble
