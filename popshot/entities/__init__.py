"""
popshot/entities/__init__.py
----------------------------
Entity module exports.

Provides the lightweight state enums and tag constants used across all
entity variants. Variant classes live in the subpackages (targets,
creatures, bosses, hazards, items, feedback) and register themselves
with the EntityRegistry when imported.

Exports:
    GopherState    - Gopher pop-up lifecycle (RISING, WAITING, HIDING)
    RoundState     - Round controller lifecycle (IDLE, RUNNING, ENDED_*)
    EntityCategory - Semantic groupings (TARGET, BOSS, HAZARD, ...)
    VariantTag     - Registry name of each variant
    BonusType      - Pickup effect tags
"""

from popshot.entities.entity_state import GopherState, RoundState
from popshot.entities.entity_types import EntityCategory, VariantTag, BonusType

__all__ = [
    # States
    'GopherState',
    'RoundState',
    # Types
    'EntityCategory',
    'VariantTag',
    'BonusType',
]
