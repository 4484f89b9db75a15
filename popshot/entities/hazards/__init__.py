"""
Hazard package.
Imports all hazard types to trigger auto-registration.
"""

from .bomb import Bomb

__all__ = [
    'Bomb',
]
