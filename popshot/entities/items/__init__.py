"""
Pickup package.
Imports all pickup types to trigger auto-registration.
"""

from .base_pickup import BasePickup
from .pickups import GoldenClock, AmmoDrop, MagazineDrop, ShotgunDrop, BirthdayCap

__all__ = [
    'BasePickup',
    'GoldenClock',
    'AmmoDrop',
    'MagazineDrop',
    'ShotgunDrop',
    'BirthdayCap',
]
