"""
event_manager.py
----------------
Typed pub-sub channel between the simulation core and its observers.

The round context owns one EventManager. Presentation, audio and
score-submission layers subscribe to the events below instead of being
called by the engine directly.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Type
from popshot.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class ScoreChangedEvent(BaseEvent):
    """Dispatched after any resolution that changed the score."""
    score: int
    delta: int
    round_number: int


@dataclass(frozen=True)
class RoundStartedEvent(BaseEvent):
    round_number: int
    target: int
    duration: float
    retry: bool = False


@dataclass(frozen=True)
class RoundWonEvent(BaseEvent):
    score: int
    round_number: int


@dataclass(frozen=True)
class RoundLostEvent(BaseEvent):
    score: int
    round_number: int


@dataclass(frozen=True)
class FullAutoExpiredEvent(BaseEvent):
    """Dispatched when the full-auto countdown reaches zero."""
    pass


@dataclass(frozen=True)
class PartyModeExpiredEvent(BaseEvent):
    """Dispatched when the high spawn-rate mode ends."""
    pass


@dataclass(frozen=True)
class PickupCollectedEvent(BaseEvent):
    bonus_type: str
    position: tuple


@dataclass(frozen=True)
class TargetPoppedEvent(BaseEvent):
    """Dispatched for each plain target removed by a primary hit."""
    tag: str
    points: int
    position: tuple


@dataclass(frozen=True)
class BossSpawnedEvent(BaseEvent):
    tag: str


@dataclass(frozen=True)
class BossVocalizeEvent(BaseEvent):
    """Ambient cue raised by a live boss (roar, screech)."""
    tag: str
    position: tuple


@dataclass(frozen=True)
class BossKilledEvent(BaseEvent):
    tag: str
    kill_points: int
    position: tuple


@dataclass(frozen=True)
class CreatureEatenEvent(BaseEvent):
    """Dispatched when a boss tramples or snatches a small creature."""
    boss_tag: str
    creature_tag: str
    penalty: int
    position: tuple


@dataclass(frozen=True)
class HazardDetonatedEvent(BaseEvent):
    tag: str
    position: tuple
    affected: int
    score_delta: int


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}
        DebugLogger.init("EventManager initialized", category="event_manager")

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        subscribers = self._subscribers.setdefault(event_type, [])
        if callback in subscribers:
            return

        subscribers.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Remove a callback from an event type.

        Args:
            event_type: Event class
            callback: Function to remove
        """
        subscribers = self._subscribers.get(event_type)
        if subscribers and callback in subscribers:
            subscribers.remove(callback)

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and skipped so one observer cannot
        interrupt a tick that has already settled its state.

        Args:
            event: Event instance to dispatch
        """
        subscribers = self._subscribers.get(type(event))
        if not subscribers:
            return

        for callback in list(subscribers):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.fail(
                    f"Error in event callback {callback_name}: {e}",
                    category="event"
                )

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Optional[Type[BaseEvent]] = None) -> int:
        """
        Get count of subscribers.

        Args:
            event_type: Specific event type, or None for total

        Returns:
            Number of subscribers
        """
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
