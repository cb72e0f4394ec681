"""Tests for the event system."""

from core.game.events import EventEmitter, EventType, GameEvent


class TestGameEvent:
    """Tests for the GameEvent class."""

    def test_event_defaults(self):
        """Test events carry an empty payload by default."""
        event = GameEvent(EventType.CARDS_SHUFFLED)
        assert event.data == {}
        assert event.timestamp is not None

    def test_event_str(self):
        """Test string representation."""
        event = GameEvent(EventType.GAME_OVER, {"score": 4})
        assert str(event) == "GAME_OVER(score=4)"


class TestEventEmitter:
    """Tests for the EventEmitter class."""

    def test_typed_subscription(self):
        """Test handlers only see their event type."""
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append, EventType.MATCH_FOUND)

        emitter.emit_new(EventType.MISMATCH)
        emitter.emit_new(EventType.MATCH_FOUND, score=2)

        assert len(seen) == 1
        assert seen[0].data["score"] == 2

    def test_catch_all_runs_after_typed(self):
        """Test type-specific handlers run before catch-all handlers."""
        emitter = EventEmitter()
        order = []
        emitter.subscribe(lambda e: order.append("all"))
        emitter.subscribe(lambda e: order.append("typed"), EventType.GAME_STARTED)

        emitter.emit_new(EventType.GAME_STARTED)

        assert order == ["typed", "all"]

    def test_unsubscribe(self):
        """Test removed handlers are not called."""
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append)
        emitter.unsubscribe(seen.append)

        emitter.emit_new(EventType.GAME_STARTED)
        assert seen == []

    def test_unsubscribe_unknown_handler(self):
        """Test removing a handler that was never added."""
        emitter = EventEmitter()
        emitter.unsubscribe(print, EventType.GAME_OVER)

    def test_handler_may_unsubscribe_during_emit(self):
        """Test a handler can remove itself while being called."""
        emitter = EventEmitter()
        seen = []

        def once(event):
            seen.append(event)
            emitter.unsubscribe(once)

        emitter.subscribe(once)
        emitter.emit_new(EventType.GAME_STARTED)
        emitter.emit_new(EventType.GAME_STARTED)

        assert len(seen) == 1

    def test_history(self):
        """Test emitted events are recorded."""
        emitter = EventEmitter()
        event = emitter.emit_new(EventType.CARDS_SHUFFLED)

        assert emitter.history == [event]

        emitter.clear_history()
        assert emitter.history == []

    def test_history_limit(self):
        """Test the history keeps only the newest events."""
        emitter = EventEmitter(history_limit=3)
        for moves in range(5):
            emitter.emit_new(EventType.STATE_CHANGED, moves=moves)

        assert [e.data["moves"] for e in emitter.history] == [2, 3, 4]
