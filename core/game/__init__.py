"""Game engine and state management."""

from core.game.events import GameEvent, EventType, EventEmitter
from core.game.state import GamePhase
from core.game.scheduler import Scheduler, ScheduledCall
from core.game.engine import MemoryGame

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "GamePhase",
    "Scheduler",
    "ScheduledCall",
    "MemoryGame",
]
