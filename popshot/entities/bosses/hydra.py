"""
hydra.py
--------
Late-round ground boss. Wider and tougher than Godzilla, same trampling rule.
"""

import math

from popshot.entities.base_entity import CanvasBounds
from popshot.entities.bosses.base_boss import BaseBoss
from popshot.entities.entity_types import EntityCategory, VariantTag


class Hydra(BaseBoss):

    __registry_category__ = EntityCategory.BOSS
    __registry_name__ = VariantTag.HYDRA

    HEIGHT_RATIO = 0.45
    ASPECT = 0.9
    HP = 30
    KILL_POINTS = 100
    SPEED = 35.0
    HEADS = 3

    def __init__(self, x, y, direction=1, bounds=None, rng=None):
        height = (bounds or CanvasBounds()).height * self.HEIGHT_RATIO
        super().__init__(x, y, height * self.ASPECT, height, self.HP, self.KILL_POINTS,
                         self.SPEED, direction=direction, bounds=bounds, rng=rng)

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        start_left = rng.random() > 0.5
        width = bounds.height * cls.HEIGHT_RATIO * cls.ASPECT
        x = -width if start_left else bounds.width + width
        return cls(x, bounds.height, direction=1 if start_left else -1, bounds=bounds, rng=rng)

    @property
    def heads_left(self) -> int:
        """One head drops for every third of the health pool lost."""
        if self.hp <= 0:
            return 0
        return max(1, math.ceil(self.hp * self.HEADS / self.max_hp))

    def _hint_extra(self) -> dict:
        extra = super()._hint_extra()
        extra["heads"] = self.heads_left
        return extra
