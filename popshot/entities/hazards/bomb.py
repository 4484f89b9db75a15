"""
bomb.py
-------
Falling bomb with a fuse. Detonates when the fuse runs out or on a direct hit.

The bomb only counts its fuse down. Detonation itself (blast radius,
scoring, removal) is resolved by the combat resolver so that the fuse
path and the direct-hit path share one idempotent implementation.

The fuse is kept in milliseconds like every other round timer, so whole
millisecond ticks burn it down exactly.
"""

from popshot.core.runtime.game_settings import Bounds
from popshot.entities.base_entity import BaseEntity, CanvasBounds
from popshot.entities.entity_types import EntityCategory, VariantTag


class Bomb(BaseEntity):

    __registry_category__ = EntityCategory.HAZARD
    __registry_name__ = VariantTag.BOMB

    RADIUS = 25
    SPEED = 60.0
    FUSE_TIME_MS = 15_000.0
    FUSE_TOLERANCE_MS = 1e-6    # float remainder left by fractional-ms ticks
    EDGE_MARGIN = 25

    def __init__(self, x, y, fuse_ms=FUSE_TIME_MS, bounds=None):
        super().__init__(x, y, self.RADIUS, self.SPEED, bounds)
        self.fuse_ms = fuse_ms
        self.detonated = False

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        x = rng.random() * (bounds.width - 2 * cls.EDGE_MARGIN) + cls.EDGE_MARGIN
        return cls(x, -50, bounds=bounds)

    @property
    def fuse(self) -> float:
        """Remaining fuse in seconds."""
        return self.fuse_ms / 1000.0

    @property
    def fuse_expired(self) -> bool:
        return self.fuse_ms <= self.FUSE_TOLERANCE_MS

    def update(self, dt):
        self.pos.y += self.speed * dt
        self.fuse_ms = max(0.0, self.fuse_ms - dt * 1000.0)
        if self.fuse_expired:
            self.fuse_ms = 0.0

        if self.pos.y > self.bounds.height + Bounds.HAZARD_CLEANUP_MARGIN:
            self.mark_for_deletion()

    def animation_phase(self) -> float:
        """Blink rate rises as the fuse burns down."""
        return 1.0 - self.fuse_ms / self.FUSE_TIME_MS

    def _hint_extra(self) -> dict:
        return {"fuse": self.fuse}
