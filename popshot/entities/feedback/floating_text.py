"""
floating_text.py
----------------
Short-lived score and status text that drifts upward and fades.
"""

from popshot.core.runtime.game_settings import Timing
from popshot.entities.base_entity import BaseEntity
from popshot.entities.entity_types import EntityCategory, VariantTag


class FloatingText(BaseEntity):

    __registry_category__ = EntityCategory.FEEDBACK
    __registry_name__ = VariantTag.FLOATING_TEXT

    def __init__(self, x, y, text, color="white", lifetime=Timing.FLOATING_TEXT_LIFETIME):
        super().__init__(x, y, 0.0, Timing.FLOATING_TEXT_RISE_SPEED)
        self.text = text
        self.color = color
        self.lifetime = lifetime
        self.life = lifetime

    @classmethod
    def for_points(cls, x, y, points: int, prefix: str = ""):
        """Signed score text, green for gains and red for losses."""
        sign = "+" if points >= 0 else ""
        color = "lime" if points >= 0 else "red"
        return cls(x, y, f"{prefix}{sign}{points}", color)

    def update(self, dt):
        self.pos.y -= self.speed * dt
        self.life -= dt
        if self.life <= 0:
            self.mark_for_deletion()

    def hit_test(self, x, y) -> bool:
        return False

    @property
    def opacity(self) -> float:
        return max(0.0, self.life / self.lifetime)

    def animation_phase(self) -> float:
        return self.opacity

    def _hint_extra(self) -> dict:
        return {"text": self.text, "color": self.color}
