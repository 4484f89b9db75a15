"""
Entity management system exports.

Provides the tag registry and the live entity container.
"""

from popshot.systems.entity_management.entity_registry import EntityRegistry
from popshot.systems.entity_management.spawn_manager import SpawnManager

__all__ = [
    'EntityRegistry',
    'SpawnManager',
]
