"""Couche application: service de partie et bus d'évènements."""

from .event_bus import EventBus
from .events import ActionAppliedEvent, GameEndedEvent, GameStartedEvent
from .game_service import GameService

__all__ = [
    "EventBus",
    "GameService",
    "GameStartedEvent",
    "ActionAppliedEvent",
    "GameEndedEvent",
]
