"""
Boss package.
Imports all boss types to trigger auto-registration.
"""

from .base_boss import BaseBoss
from .godzilla import Godzilla
from .hydra import Hydra
from .pterodactyl import Pterodactyl

__all__ = [
    'BaseBoss',
    'Godzilla',
    'Hydra',
    'Pterodactyl',
]
