"""
Ground creature package.
Imports all creature types to trigger auto-registration.
"""

from .ground_critters import Mouse, Hedgehog
from .gopher import Gopher

__all__ = [
    'Mouse',
    'Hedgehog',
    'Gopher',
]
