"""
dragon.py
---------
Rare, fast flyer in the top third of the canvas. Shooting it costs 100 points.
"""

import math

from popshot.entities.base_entity import BaseEntity, CanvasBounds
from popshot.entities.entity_types import EntityCategory, VariantTag


class Dragon(BaseEntity):

    __registry_category__ = EntityCategory.TARGET
    __registry_name__ = VariantTag.DRAGON

    RADIUS = 50
    SPEED = 250.0
    POINTS = -100
    WAVE_RATE = 5.0
    WAVE_SPEED = 120.0

    def __init__(self, x, y, direction=1, bounds=None):
        super().__init__(x, y, self.RADIUS, self.SPEED, bounds)
        self.direction = direction
        self.points = self.POINTS
        self.time = 0.0

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        y = rng.random() * (bounds.height / 3)
        start_left = rng.random() > 0.5
        x = -cls.RADIUS * 2 if start_left else bounds.width + cls.RADIUS * 2
        return cls(x, y, direction=1 if start_left else -1, bounds=bounds)

    def update(self, dt):
        self.time += dt
        self.pos.x += self.speed * self.direction * dt
        self.pos.y += math.sin(self.time * self.WAVE_RATE) * self.WAVE_SPEED * dt

        if self.exited_horizontally(self.radius * 2):
            self.mark_for_deletion()

    def animation_phase(self) -> float:
        return self.time
