"""Services d'application pour orchestrer le moteur Marble Solitaire."""

from .event_bus import EventBus
from .events import GameEndedEvent, GameStartedEvent, MoveAppliedEvent
from .game_service import GameService

__all__ = [
    "EventBus",
    "GameService",
    "GameStartedEvent",
    "MoveAppliedEvent",
    "GameEndedEvent",
]
