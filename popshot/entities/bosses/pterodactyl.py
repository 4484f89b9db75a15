"""
pterodactyl.py
--------------
Flying predator boss. Glides across the upper canvas and snatches birds.
"""

import math

from popshot.entities.base_entity import CanvasBounds
from popshot.entities.bosses.base_boss import BaseBoss
from popshot.entities.entity_types import EntityCategory, VariantTag


class Pterodactyl(BaseBoss):

    __registry_category__ = EntityCategory.BOSS
    __registry_name__ = VariantTag.PTERODACTYL

    WIDTH = 150.0
    HEIGHT = 70.0
    HP = 8
    KILL_POINTS = 40
    SPEED = 140.0
    GLIDE_RATE = 2.0
    GLIDE_SPEED = 40.0
    WALK_RATE = 8.0     # wing beat

    def __init__(self, x, y, direction=1, bounds=None, rng=None):
        super().__init__(x, y, self.WIDTH, self.HEIGHT, self.HP, self.KILL_POINTS,
                         self.SPEED, direction=direction, bounds=bounds, rng=rng)
        self.time = 0.0

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        start_left = rng.random() > 0.5
        y = cls.HEIGHT + rng.random() * (bounds.height / 3)
        x = -cls.WIDTH if start_left else bounds.width + cls.WIDTH
        return cls(x, y, direction=1 if start_left else -1, bounds=bounds, rng=rng)

    def move(self, dt):
        super().move(dt)
        self.time += dt
        self.pos.y += math.sin(self.time * self.GLIDE_RATE) * self.GLIDE_SPEED * dt
