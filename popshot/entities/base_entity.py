"""
base_entity.py
--------------
Foundational class for every simulated object (targets, creatures,
bosses, hazards, pickups, feedback).

Coordinate System
-----------------
- Circular variants: self.pos is the center, self.radius the hit circle.
- Rectangular variants set width/height; self.pos is then the midpoint
  of the bottom edge and hit-tests use the anchored box.

Lifecycle
---------
`marked_for_deletion` is the only removal signal. Entities never remove
themselves from a collection; SpawnManager.sweep() compacts them out at
the end of the tick.
"""

from dataclasses import dataclass, field
from typing import Optional

import pygame

from popshot.core.debug.debug_logger import DebugLogger
from popshot.core.runtime.game_settings import Display
from popshot.core.utils.hit_geometry import (
    is_finite_point, point_in_anchor_rect, point_in_circle,
)
from popshot.systems.entity_management.entity_registry import EntityRegistry


# ===========================================================
# Shared Value Types
# ===========================================================

@dataclass(frozen=True)
class CanvasBounds:
    """Canvas size read by entities at construction."""
    width: float = Display.WIDTH
    height: float = Display.HEIGHT


@dataclass(frozen=True)
class RenderHint:
    """
    Everything a presentation layer needs to draw one entity.

    Attributes:
        tag: Variant tag
        x, y: Anchor position (center, or bottom-center for boxes)
        phase: Variant animation phase (wobble, flap, walk cycle ...)
        radius: Hit circle radius, 0 for boxes
        width, height: Box size, None for circles
        facing: +1 moving right, -1 moving left
        extra: Variant payload (hp ratio, fuse, text ...)
    """
    tag: str
    x: float
    y: float
    phase: float = 0.0
    radius: float = 0.0
    width: Optional[float] = None
    height: Optional[float] = None
    facing: int = 1
    extra: dict = field(default_factory=dict)


# ===========================================================
# Base Entity
# ===========================================================

class BaseEntity:
    """
    Base class for all simulated entities.

    Subclasses set __registry_category__ / __registry_name__ and are
    registered on definition. They override update(), spawn() and, where
    they carry variant state, _hint_extra().
    """

    __registry_category__ = None
    __registry_name__ = None

    def __init_subclass__(cls, **kwargs):
        """Auto-register variants when they're defined."""
        super().__init_subclass__(**kwargs)
        EntityRegistry.auto_register(cls)

    # ===================================================================
    # Initialization
    # ===================================================================

    def __init__(self, x: float, y: float, radius: float = 0.0, speed: float = 0.0,
                 bounds: Optional[CanvasBounds] = None):
        """
        Args:
            x: Anchor X position
            y: Anchor Y position
            radius: Hit circle radius
            speed: Scalar speed in pixels per second
            bounds: Canvas the entity lives on
        """
        self.pos = pygame.Vector2(x, y)
        self.radius = radius
        self.speed = speed
        self.width = None
        self.height = None
        self.direction = 1
        self.bounds = bounds or CanvasBounds()
        self.marked_for_deletion = False

    @classmethod
    def spawn(cls, bounds: CanvasBounds, rng, speed_multiplier: float = 1.0):
        """
        Create the variant at its natural entry point.

        Args:
            bounds: Canvas the entity enters
            rng: random.Random used for placement and size rolls
            speed_multiplier: Round speed multiplier (ignored by fixed-speed variants)
        """
        raise NotImplementedError(f"{cls.__name__} cannot be spawned by the policy")

    # ===================================================================
    # Identity
    # ===================================================================

    @property
    def tag(self) -> str:
        return type(self).__registry_name__

    @property
    def category(self) -> str:
        return type(self).__registry_category__

    @property
    def x(self) -> float:
        return self.pos.x

    @property
    def y(self) -> float:
        return self.pos.y

    # ===================================================================
    # Core Update Loop
    # ===================================================================

    def update(self, dt: float):
        """
        Per-tick update. Override in subclasses.

        Args:
            dt: Delta time in seconds
        """
        pass

    def mark_for_deletion(self):
        if self.marked_for_deletion:
            return
        self.marked_for_deletion = True
        DebugLogger.trace(f"[{type(self).__name__}] marked for deletion", category="entity")

    # ===================================================================
    # Hit Testing
    # ===================================================================

    @property
    def is_rectangular(self) -> bool:
        return bool(self.width) and bool(self.height)

    def hit_test(self, x: float, y: float) -> bool:
        """
        Check whether a point lands on this entity.

        Non-finite inputs or positions never hit.
        """
        if self.marked_for_deletion:
            return False
        if not is_finite_point(x, y) or not is_finite_point(self.pos.x, self.pos.y):
            return False
        if self.is_rectangular:
            return point_in_anchor_rect(x, y, self.pos.x, self.pos.y, self.width, self.height)
        return point_in_circle(x, y, self.pos.x, self.pos.y, self.radius)

    # ===================================================================
    # Rendering
    # ===================================================================

    def animation_phase(self) -> float:
        return 0.0

    def _hint_extra(self) -> dict:
        return {}

    def render_hint(self) -> Optional[RenderHint]:
        """Describe this entity for a presentation layer, or None if it can't be placed."""
        if not is_finite_point(self.pos.x, self.pos.y):
            return None
        return RenderHint(
            tag=self.tag,
            x=self.pos.x,
            y=self.pos.y,
            phase=self.animation_phase(),
            radius=self.radius,
            width=self.width,
            height=self.height,
            facing=self.direction,
            extra=self._hint_extra(),
        )

    # ===================================================================
    # Bounds
    # ===================================================================

    def exited_horizontally(self, margin: float) -> bool:
        """True once the entity has crossed the far edge in its travel direction."""
        if self.direction > 0:
            return self.pos.x > self.bounds.width + margin
        return self.pos.x < -margin

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} "
            f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"tag={self.tag}>"
        )
