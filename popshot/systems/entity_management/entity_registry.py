"""
entity_registry.py
------------------
Central dispatch table from variant tag to entity class.

Responsibilities
----------------
- Maintain the mapping of entity classes by category and tag.
- Let variant modules register themselves on import via __init_subclass__.
- Provide the `spawn()` factory used by the spawn policy and combat feedback.
"""

from popshot.core.debug.debug_logger import DebugLogger
from popshot.entities.entity_types import EntityCategory, category_of


class EntityRegistry:
    """Global registry and factory for creating entities by tag."""

    _registry = {}  # {category: {tag: class}}
    _by_tag = {}    # {tag: class}

    # ===========================================================
    # Registration
    # ===========================================================
    @classmethod
    def register(cls, category: str, name: str, entity_class):
        """Register an entity class under a specific category."""
        cls._registry.setdefault(category, {})[name] = entity_class
        cls._by_tag[name] = entity_class
        DebugLogger.state(
            f"Registered entity [{category}:{name}] -> {entity_class.__name__}",
            category="loading"
        )

    @classmethod
    def auto_register(cls, entity_class):
        """
        Auto-register an entity using its __registry__ attributes.
        Called automatically via __init_subclass__ in BaseEntity.

        Validates:
        - Category and name are non-empty strings
        - Category is in EntityCategory.REGISTRY_VALID
        - Category agrees with the tag classification table
        - No duplicate registrations (warns if overwriting)
        """
        category = getattr(entity_class, '__registry_category__', None)
        name = getattr(entity_class, '__registry_name__', None)

        # Abstract bases carry no registration attributes
        if not category or not name:
            return

        if not isinstance(category, str) or not isinstance(name, str):
            DebugLogger.warn(
                f"[Registry] Invalid registry attributes on {entity_class.__name__}",
                category="loading"
            )
            return

        if category not in EntityCategory.REGISTRY_VALID:
            DebugLogger.warn(
                f"[Registry] Unknown category '{category}' for {entity_class.__name__}. "
                f"Valid categories: {sorted(EntityCategory.REGISTRY_VALID)}",
                category="loading"
            )
            return

        expected = category_of(name)
        if expected is not None and expected != category:
            DebugLogger.warn(
                f"[Registry] {entity_class.__name__} registers '{name}' as '{category}' "
                f"but the tag is classified as '{expected}'",
                category="loading"
            )
            return

        existing = cls.get(category, name)
        if existing is not None and existing is not entity_class:
            DebugLogger.warn(
                f"[Registry] Overwriting [{category}:{name}]: "
                f"{existing.__name__} → {entity_class.__name__}",
                category="loading"
            )

        cls.register(category, name, entity_class)

    # ===========================================================
    # Lookup
    # ===========================================================
    @classmethod
    def get(cls, category: str, name: str):
        """
        Retrieve an entity class by category and name.

        Returns:
            Entity class or None if not found
        """
        return cls._registry.get(category, {}).get(name)

    @classmethod
    def get_by_tag(cls, tag: str):
        return cls._by_tag.get(tag)

    # ===========================================================
    # Factory
    # ===========================================================
    @classmethod
    def spawn(cls, tag: str, bounds, rng, speed_multiplier: float = 1.0):
        """
        Create a variant at its natural entry point.

        Args:
            tag: Variant tag (see VariantTag)
            bounds: CanvasBounds the entity enters
            rng: random.Random shared with the round
            speed_multiplier: Round speed multiplier

        Returns:
            Entity instance or None if the tag is unknown
        """
        entity_cls = cls._by_tag.get(tag)
        if entity_cls is None:
            DebugLogger.warn(
                f"[Registry] Cannot spawn unregistered entity '{tag}'. "
                f"Available: {sorted(cls._by_tag)}",
                category="spawn"
            )
            return None

        return entity_cls.spawn(bounds, rng, speed_multiplier)
