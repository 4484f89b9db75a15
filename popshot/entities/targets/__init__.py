"""
Score target package.
Imports all target types to trigger auto-registration.
"""

from .balloon import Balloon, GoldenBalloon
from .bird import Bird
from .dragon import Dragon

__all__ = [
    'Balloon',
    'GoldenBalloon',
    'Bird',
    'Dragon',
]
