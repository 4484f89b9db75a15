"""
pickups.py
----------
Concrete pickups. Each maps to one BonusType effect.

GoldenClock   -> extra round time
AmmoDrop      -> full-auto mode
MagazineDrop  -> primary ammunition
ShotgunDrop   -> secondary ammunition
BirthdayCap   -> party mode
"""

from popshot.core.runtime.game_settings import Bounds
from popshot.entities.base_entity import CanvasBounds
from popshot.entities.entity_types import BonusType, EntityCategory, VariantTag
from popshot.entities.items.base_pickup import BasePickup


class GoldenClock(BasePickup):
    """Flies fast across the upper half from the left edge."""

    __registry_category__ = EntityCategory.PICKUP
    __registry_name__ = VariantTag.GOLDEN_CLOCK

    BONUS_TYPE = BonusType.TIME
    RADIUS = 25
    SPEED = 300.0
    WING_RATE = 20.0

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        return cls(-50, rng.random() * (bounds.height / 2), bounds=bounds)

    def update(self, dt):
        self.pos.x += self.speed * dt
        self.sway += self.WING_RATE * dt
        if self.pos.x > self.bounds.width + Bounds.CLOCK_CLEANUP_MARGIN:
            self.mark_for_deletion()


class AmmoDrop(BasePickup):

    __registry_category__ = EntityCategory.PICKUP
    __registry_name__ = VariantTag.AMMO_DROP

    BONUS_TYPE = BonusType.FULL_AUTO
    RADIUS = 25
    SPEED = 80.0
    SWAY_RATE = 2.0
    SWAY_DRIFT = 30.0


class MagazineDrop(BasePickup):

    __registry_category__ = EntityCategory.PICKUP
    __registry_name__ = VariantTag.MAGAZINE_DROP

    BONUS_TYPE = BonusType.PRIMARY_AMMO
    RADIUS = 15
    SPEED = 90.0


class ShotgunDrop(BasePickup):

    __registry_category__ = EntityCategory.PICKUP
    __registry_name__ = VariantTag.SHOTGUN_DROP

    BONUS_TYPE = BonusType.SECONDARY_AMMO
    RADIUS = 20
    SPEED = 90.0


class BirthdayCap(BasePickup):

    __registry_category__ = EntityCategory.PICKUP
    __registry_name__ = VariantTag.BIRTHDAY_CAP

    BONUS_TYPE = BonusType.PARTY
    RADIUS = 25
    SPEED = 100.0
    SWAY_RATE = 3.0
    SWAY_DRIFT = 90.0
    EDGE_MARGIN = 25
