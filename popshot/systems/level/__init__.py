"""
Level system exports.

Provides the round table, the spawn cascade and the round controller.
"""

from popshot.systems.level.round_config import RoundConfig, RoundTable
from popshot.systems.level.spawn_policy import SpawnPolicy, SpawnRule, FallbackBands
from popshot.systems.level.round_controller import RoundController, Telemetry

__all__ = [
    'RoundConfig',
    'RoundTable',
    'SpawnPolicy',
    'SpawnRule',
    'FallbackBands',
    'RoundController',
    'Telemetry',
]
