"""
bird.py
-------
Airborne nuisance crossing the upper half of the canvas.
Hitting one costs points; bigger birds are easier to hit and cost more.
"""

import math

from popshot.entities.base_entity import BaseEntity, CanvasBounds
from popshot.entities.entity_types import EntityCategory, VariantTag


class Bird(BaseEntity):

    __registry_category__ = EntityCategory.TARGET
    __registry_name__ = VariantTag.BIRD

    BASE_RADIUS = 25
    PENALTY_PER_SCALE = 30
    BOUNCE_PERIOD = 50.0    # px of travel per radian of vertical bounce
    BOUNCE_SPEED = 120.0
    FLAP_RATE = 10.0

    def __init__(self, x, y, scale=1.0, speed=150.0, direction=1, bounds=None):
        super().__init__(x, y, self.BASE_RADIUS * scale, speed, bounds)
        self.scale = scale
        self.direction = direction
        self.points = -int(self.PENALTY_PER_SCALE * scale)
        self.flap = 0.0

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        scale = rng.random() * 0.8 + 0.5
        radius = cls.BASE_RADIUS * scale
        start_left = rng.random() > 0.5
        x = -radius if start_left else bounds.width + radius
        y = rng.random() * (bounds.height / 2)
        speed = (rng.random() * 150 + 100) * speed_multiplier
        return cls(x, y, scale=scale, speed=speed, direction=1 if start_left else -1, bounds=bounds)

    def update(self, dt):
        self.pos.x += self.speed * self.direction * dt
        self.pos.y += math.sin(self.pos.x / self.BOUNCE_PERIOD) * self.BOUNCE_SPEED * dt
        self.flap += self.FLAP_RATE * dt

        if self.exited_horizontally(self.radius):
            self.mark_for_deletion()

    def animation_phase(self) -> float:
        return self.flap

    def _hint_extra(self) -> dict:
        return {"scale": self.scale, "points": self.points}
