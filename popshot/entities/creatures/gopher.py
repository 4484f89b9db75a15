"""
gopher.py
---------
Gopher popping out of a hole at the bottom edge.

Lifecycle: RISING to the peek height, WAITING for a fixed time,
then HIDING back underground where it expires.
"""

from popshot.entities.base_entity import BaseEntity, CanvasBounds
from popshot.entities.entity_state import GopherState
from popshot.entities.entity_types import EntityCategory, VariantTag


class Gopher(BaseEntity):

    __registry_category__ = EntityCategory.CREATURE
    __registry_name__ = VariantTag.GOPHER

    RADIUS = 20
    SPEED = 50.0
    POINTS = -25
    PEEK_HEIGHT = 40
    WAIT_TIME = 1.5
    EDGE_MARGIN = 50

    def __init__(self, x, y, bounds=None):
        super().__init__(x, y, self.RADIUS, self.SPEED, bounds)
        self.points = self.POINTS
        self.state = GopherState.RISING
        self.timer = 0.0
        self.hole_y = y
        self.target_y = y - self.PEEK_HEIGHT

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        x = rng.uniform(cls.EDGE_MARGIN, bounds.width - cls.EDGE_MARGIN)
        return cls(x, bounds.height, bounds=bounds)

    def update(self, dt):
        if self.state == GopherState.RISING:
            self.pos.y = max(self.target_y, self.pos.y - self.speed * dt)
            if self.pos.y <= self.target_y:
                self.state = GopherState.WAITING
                self.timer = self.WAIT_TIME

        elif self.state == GopherState.WAITING:
            self.timer -= dt
            if self.timer <= 0:
                self.timer = 0.0
                self.state = GopherState.HIDING

        elif self.state == GopherState.HIDING:
            self.pos.y += self.speed * dt
            if self.pos.y >= self.hole_y + self.radius:
                self.mark_for_deletion()

    def animation_phase(self) -> float:
        """Fraction of the body above ground, 0..1."""
        return min(1.0, max(0.0, (self.hole_y - self.pos.y) / self.PEEK_HEIGHT))

    def _hint_extra(self) -> dict:
        return {"state": self.state.name.lower()}
