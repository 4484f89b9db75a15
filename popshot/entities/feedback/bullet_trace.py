"""
bullet_trace.py
---------------
Tracer line drawn for each full-auto shot, from the bottom edge to the impact point.
"""

from popshot.core.runtime.game_settings import Timing
from popshot.entities.base_entity import BaseEntity
from popshot.entities.entity_types import EntityCategory, VariantTag


class BulletTrace(BaseEntity):

    __registry_category__ = EntityCategory.FEEDBACK
    __registry_name__ = VariantTag.BULLET_TRACE

    def __init__(self, start_x, start_y, target_x, target_y, lifetime=Timing.BULLET_TRACE_LIFETIME):
        super().__init__(start_x, start_y, 1.0, 0.0)
        self.target_x = target_x
        self.target_y = target_y
        self.lifetime = lifetime
        self.life = lifetime

    def update(self, dt):
        self.life -= dt
        if self.life <= 0:
            self.mark_for_deletion()

    def hit_test(self, x, y) -> bool:
        return False

    def animation_phase(self) -> float:
        return max(0.0, self.life / self.lifetime)

    def _hint_extra(self) -> dict:
        return {"target": (self.target_x, self.target_y)}
