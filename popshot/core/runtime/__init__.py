"""
Runtime configuration exports.

Provides gameplay constants and session statistics. All exports are
lightweight with no initialization overhead. RoundContext is imported
from its own module since it pulls in the entity layer.
"""

from popshot.core.runtime.game_settings import (
    Display,
    Bounds,
    Combat,
    Resources,
    Interaction,
    Timing,
)
from popshot.core.runtime.session_stats import SessionStats

__all__ = [
    # Canvas
    'Display',
    'Bounds',
    # Rules
    'Combat',
    'Resources',
    'Interaction',
    'Timing',
    # Session
    'SessionStats',
]
