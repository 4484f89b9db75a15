"""
ground_critters.py
------------------
Small ground creatures that scurry along the bottom edge.
Shooting them costs points; ground bosses trample them.
"""

from popshot.core.runtime.game_settings import Bounds
from popshot.entities.base_entity import BaseEntity, CanvasBounds
from popshot.entities.entity_types import EntityCategory, VariantTag


class _GroundCritter(BaseEntity):
    """Shared straight-line runner. Not registered on its own."""

    RADIUS = 15
    SPEED = 100.0
    POINTS = -10
    GROUND_OFFSET = 20
    STRIDE_RATE = 12.0

    def __init__(self, x, y, direction=1, bounds=None):
        super().__init__(x, y, self.RADIUS, self.SPEED, bounds)
        self.direction = direction
        self.points = self.POINTS
        self.stride = 0.0

    def update(self, dt):
        self.pos.x += self.speed * self.direction * dt
        self.stride += self.STRIDE_RATE * dt
        if self.exited_horizontally(Bounds.CREATURE_EXIT_MARGIN):
            self.mark_for_deletion()

    def animation_phase(self) -> float:
        return self.stride


class Mouse(_GroundCritter):
    """Runs left to right."""

    __registry_category__ = EntityCategory.CREATURE
    __registry_name__ = VariantTag.MOUSE

    SPEED = 150.0
    POINTS = -20
    GROUND_OFFSET = 20

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        return cls(-30, bounds.height - cls.GROUND_OFFSET, direction=1, bounds=bounds)


class Hedgehog(_GroundCritter):
    """Waddles right to left, slower than a mouse and worth a bigger penalty."""

    __registry_category__ = EntityCategory.CREATURE
    __registry_name__ = VariantTag.HEDGEHOG

    SPEED = 80.0
    POINTS = -30
    GROUND_OFFSET = 15
    STRIDE_RATE = 6.0

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        return cls(bounds.width + 30, bounds.height - cls.GROUND_OFFSET, direction=-1, bounds=bounds)
