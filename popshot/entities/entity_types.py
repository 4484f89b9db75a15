"""
entity_types.py
---------------
Variant tags, categories and the classification helpers built on them.

Combat and interaction code never type-checks entity classes. It asks
these helpers about the entity's tag instead, so membership of a variant
in a class (boss, hazard, ground creature, ...) is decided in one place.
"""


class EntityCategory:
    """
    High-level semantic grouping for entities.
    Used for both runtime classification AND registry registration.

    Example:
        class Balloon(BaseEntity):
            __registry_category__ = EntityCategory.TARGET
            __registry_name__ = VariantTag.BALLOON
    """
    TARGET = "target"       # plain scoring, dies on first hit
    CREATURE = "creature"   # plain scoring with negative points
    BOSS = "boss"           # multi-hit health pool
    HAZARD = "hazard"       # fuse and detonation
    PICKUP = "pickup"       # bonus effect, no score
    FEEDBACK = "feedback"   # transient, never hit-tested

    REGISTRY_VALID = frozenset({TARGET, CREATURE, BOSS, HAZARD, PICKUP, FEEDBACK})


class VariantTag:
    """Registry name of every concrete variant."""
    BALLOON = "balloon"
    GOLDEN_BALLOON = "golden_balloon"
    BIRD = "bird"
    DRAGON = "dragon"

    MOUSE = "mouse"
    HEDGEHOG = "hedgehog"
    GOPHER = "gopher"

    GODZILLA = "godzilla"
    HYDRA = "hydra"
    PTERODACTYL = "pterodactyl"

    BOMB = "bomb"

    GOLDEN_CLOCK = "golden_clock"
    AMMO_DROP = "ammo_drop"
    MAGAZINE_DROP = "magazine_drop"
    SHOTGUN_DROP = "shotgun_drop"
    BIRTHDAY_CAP = "birthday_cap"

    FLOATING_TEXT = "floating_text"
    BULLET_TRACE = "bullet_trace"


class BonusType:
    """Effect applied when a pickup is hit."""
    TIME = "time"
    FULL_AUTO = "full_auto"
    PRIMARY_AMMO = "primary_ammo"
    SECONDARY_AMMO = "secondary_ammo"
    PARTY = "party"


# ===========================================================
# Classification
# ===========================================================

TAG_CATEGORY = {
    VariantTag.BALLOON: EntityCategory.TARGET,
    VariantTag.GOLDEN_BALLOON: EntityCategory.TARGET,
    VariantTag.BIRD: EntityCategory.TARGET,
    VariantTag.DRAGON: EntityCategory.TARGET,
    VariantTag.MOUSE: EntityCategory.CREATURE,
    VariantTag.HEDGEHOG: EntityCategory.CREATURE,
    VariantTag.GOPHER: EntityCategory.CREATURE,
    VariantTag.GODZILLA: EntityCategory.BOSS,
    VariantTag.HYDRA: EntityCategory.BOSS,
    VariantTag.PTERODACTYL: EntityCategory.BOSS,
    VariantTag.BOMB: EntityCategory.HAZARD,
    VariantTag.GOLDEN_CLOCK: EntityCategory.PICKUP,
    VariantTag.AMMO_DROP: EntityCategory.PICKUP,
    VariantTag.MAGAZINE_DROP: EntityCategory.PICKUP,
    VariantTag.SHOTGUN_DROP: EntityCategory.PICKUP,
    VariantTag.BIRTHDAY_CAP: EntityCategory.PICKUP,
    VariantTag.FLOATING_TEXT: EntityCategory.FEEDBACK,
    VariantTag.BULLET_TRACE: EntityCategory.FEEDBACK,
}

GROUND_CREATURES = frozenset({VariantTag.MOUSE, VariantTag.HEDGEHOG, VariantTag.GOPHER})
AIRBORNE_NUISANCES = frozenset({VariantTag.BIRD})
GROUND_BOSSES = frozenset({VariantTag.GODZILLA, VariantTag.HYDRA})
FLYING_PREDATORS = frozenset({VariantTag.PTERODACTYL})


def category_of(tag: str) -> str | None:
    return TAG_CATEGORY.get(tag)


def is_boss_class(tag: str) -> bool:
    return TAG_CATEGORY.get(tag) == EntityCategory.BOSS


def is_hazard_class(tag: str) -> bool:
    return TAG_CATEGORY.get(tag) == EntityCategory.HAZARD


def is_pickup_class(tag: str) -> bool:
    return TAG_CATEGORY.get(tag) == EntityCategory.PICKUP


def is_feedback_class(tag: str) -> bool:
    return TAG_CATEGORY.get(tag) == EntityCategory.FEEDBACK


def is_plain_scoring(tag: str) -> bool:
    """Targets and creatures: signed points, removed on first hit."""
    return TAG_CATEGORY.get(tag) in (EntityCategory.TARGET, EntityCategory.CREATURE)


def is_ground_creature(tag: str) -> bool:
    return tag in GROUND_CREATURES


def is_airborne_nuisance(tag: str) -> bool:
    return tag in AIRBORNE_NUISANCES


def is_ground_boss(tag: str) -> bool:
    return tag in GROUND_BOSSES


def is_flying_predator(tag: str) -> bool:
    return tag in FLYING_PREDATORS
