"""Events published by the memory game engine."""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of game events."""

    # Game flow
    GAME_STARTED = auto()
    GAME_OVER = auto()
    CARDS_SHUFFLED = auto()

    # Selections
    CARD_FLIPPED = auto()
    MATCH_FOUND = auto()
    MISMATCH = auto()
    INVALID_SELECTION = auto()

    # Mismatch flip-back
    FLIP_BACK_SCHEDULED = auto()
    FLIP_BACK_CANCELLED = auto()
    CARDS_FLIPPED_BACK = auto()

    # Emitted once after every mutation, carrying the headline counters
    STATE_CHANGED = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable game event.

    ``data`` holds the payload: card snapshots, counters, or the reason
    a selection was ignored.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        details = ", ".join(f"{key}={value}" for key, value in self.data.items())
        return f"{self.event_type.name}({details})"


EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Synchronous publish/subscribe hub.

    Handlers registered for a specific EventType run before catch-all
    handlers (registered with ``None``), in subscription order. A handler
    may subscribe or unsubscribe while an event is being delivered; the
    change applies from the next event.
    """

    def __init__(self, history_limit: int = 500) -> None:
        self._handlers: defaultdict[EventType | None, list[EventHandler]] = defaultdict(list)
        self._history: deque[GameEvent] = deque(maxlen=history_limit)

    def subscribe(self, handler: EventHandler, event_type: EventType | None = None) -> None:
        """
        Register a handler.

        Args:
            handler: Called with each matching event
            event_type: Event type to listen for, or None for every event
        """
        self._handlers[event_type].append(handler)

    def unsubscribe(self, handler: EventHandler, event_type: EventType | None = None) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        """Record ``event`` and deliver it to subscribers."""
        self._history.append(event)

        recipients = [*self._handlers.get(event.event_type, ()), *self._handlers.get(None, ())]
        for handler in recipients:
            handler(event)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Build a GameEvent from keyword data, emit it and return it."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Most recent events, oldest first."""
        return list(self._history)

    def clear_history(self) -> None:
        self._history.clear()
