"""
Core services exports.

Provides the event system and configuration loading.
"""

from popshot.core.services.config_manager import load_config
from popshot.core.services.event_manager import (
    EventManager,
    BaseEvent,
    ScoreChangedEvent,
    RoundStartedEvent,
    RoundWonEvent,
    RoundLostEvent,
    FullAutoExpiredEvent,
    PartyModeExpiredEvent,
    PickupCollectedEvent,
    TargetPoppedEvent,
    BossSpawnedEvent,
    BossVocalizeEvent,
    BossKilledEvent,
    CreatureEatenEvent,
    HazardDetonatedEvent,
)

__all__ = [
    # Config
    'load_config',
    # Events
    'EventManager',
    'BaseEvent',
    'ScoreChangedEvent',
    'RoundStartedEvent',
    'RoundWonEvent',
    'RoundLostEvent',
    'FullAutoExpiredEvent',
    'PartyModeExpiredEvent',
    'PickupCollectedEvent',
    'TargetPoppedEvent',
    'BossSpawnedEvent',
    'BossVocalizeEvent',
    'BossKilledEvent',
    'CreatureEatenEvent',
    'HazardDetonatedEvent',
]
