"""
test_entity_registry.py
-----------------------
Unit tests for tag-based variant registration and spawning.
"""

from popshot.entities.base_entity import BaseEntity
from popshot.entities.entity_types import EntityCategory, VariantTag
from popshot.entities.targets import Balloon
from popshot.systems.entity_management.entity_registry import EntityRegistry

# Registers every variant
import popshot.systems.level.spawn_policy  # noqa: F401


def test_variants_register_under_their_category():
    assert EntityRegistry.get(EntityCategory.TARGET, VariantTag.BALLOON) is Balloon
    for tag in (VariantTag.GODZILLA, VariantTag.HYDRA, VariantTag.PTERODACTYL):
        assert EntityRegistry.get(EntityCategory.BOSS, tag) is EntityRegistry.get_by_tag(tag)
        assert EntityRegistry.get_by_tag(tag) is not None


def test_abstract_bases_are_not_registered():
    names = list(EntityRegistry._registry[EntityCategory.PICKUP])
    assert len(names) == 5
    assert None not in names


def test_mismatched_category_is_rejected():
    class MislabelledBalloon(BaseEntity):
        __registry_category__ = EntityCategory.BOSS
        __registry_name__ = VariantTag.BALLOON

    assert EntityRegistry.get_by_tag(VariantTag.BALLOON) is Balloon
    assert EntityRegistry.get(EntityCategory.BOSS, VariantTag.BALLOON) is None


def test_spawn_by_tag(bounds, make_rng):
    rng = make_rng(randoms=[0.0], uniform=200.0)
    balloon = EntityRegistry.spawn(VariantTag.BALLOON, bounds, rng, 1.0)

    assert isinstance(balloon, Balloon)
    assert balloon.x == 200.0


def test_spawn_unknown_tag_returns_none(bounds, make_rng):
    assert EntityRegistry.spawn("unicorn", bounds, make_rng()) is None
    assert EntityRegistry.get_by_tag("unicorn") is None
