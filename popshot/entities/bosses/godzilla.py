"""
godzilla.py
-----------
Ground boss that walks along the bottom edge and tramples small creatures.
Comes in three size classes; bigger ones are slower, tougher and worth more.
"""

from popshot.entities.base_entity import CanvasBounds
from popshot.entities.bosses.base_boss import BaseBoss
from popshot.entities.entity_types import EntityCategory, VariantTag


# size class -> (height as fraction of canvas, hp, kill points)
SIZE_CLASSES = {
    1: (0.3, 10, 25),
    2: (0.4, 18, 50),
    3: (0.5, 25, 75),
}


class Godzilla(BaseBoss):

    __registry_category__ = EntityCategory.BOSS
    __registry_name__ = VariantTag.GODZILLA

    ASPECT = 0.6
    BASE_SPEED = 60.0
    SPEED_PER_SIZE = 5.0

    def __init__(self, x, y, size_class=1, direction=1, bounds=None, rng=None):
        scale, hp, kill_points = SIZE_CLASSES[size_class]
        height = (bounds or CanvasBounds()).height * scale
        width = height * self.ASPECT
        speed = self.BASE_SPEED - self.SPEED_PER_SIZE * size_class
        super().__init__(x, y, width, height, hp, kill_points, speed,
                         direction=direction, bounds=bounds, rng=rng)
        self.size_class = size_class

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        size_class = rng.randint(1, 3)
        start_left = rng.random() > 0.5
        width = bounds.height * SIZE_CLASSES[size_class][0] * cls.ASPECT
        x = -width if start_left else bounds.width + width
        return cls(x, bounds.height, size_class=size_class,
                   direction=1 if start_left else -1, bounds=bounds, rng=rng)

    def _hint_extra(self) -> dict:
        extra = super()._hint_extra()
        extra["size_class"] = self.size_class
        return extra
