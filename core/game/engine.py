"""Memory game engine with state machine."""

import logging
from random import Random
from typing import Any, Callable, Sequence, Union
from uuid import UUID

from transitions import Machine

from core.cards import DEFAULT_SYMBOLS, MIN_PAIRS, Card, CardSnapshot, Deck
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.scheduler import ScheduledCall, Scheduler
from core.game.state import GamePhase

logger = logging.getLogger(__name__)

# Anything select_card can resolve to a card in the deck
CardRef = Union[Card, CardSnapshot, UUID]

# Event queued during a command, emitted once the state is consistent
PendingEvent = tuple[EventType, dict[str, Any]]


class MemoryGame:
    """
    Memory game engine using a state machine.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events and return values only.
    All mutations run synchronously on the caller's thread; the
    mismatch flip-back is advanced by ``update(dt)``.
    """

    # State machine states
    STATES = [p.name.lower() for p in GamePhase]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "pick_first", "source": "waiting_for_first", "dest": "waiting_for_second"},
        {"trigger": "resolve_pair", "source": "waiting_for_second", "dest": "waiting_for_first"},
        {"trigger": "finish", "source": "waiting_for_second", "dest": "game_over"},
        {"trigger": "restart", "source": "*", "dest": "waiting_for_first"},
    ]

    def __init__(
        self,
        symbols: Sequence[str] = DEFAULT_SYMBOLS,
        pair_count: int | None = None,
        min_pairs: int = MIN_PAIRS,
        max_pairs: int | None = None,
        flip_back_delay: float | None = 1.0,
        match_points: int = 2,
        mismatch_penalty: int = 1,
        rng: Random | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        """
        Initialize a new memory game and deal the first deck.

        Args:
            symbols: Distinct card contents to draw pairs from
            pair_count: Default number of pairs (largest valid count if None)
            min_pairs: Smallest allowed pair count
            max_pairs: Largest allowed pair count (bounded by len(symbols))
            flip_back_delay: Seconds before a mismatched pair turns face down,
                0 for immediately, None to leave it to the next selection
            match_points: Points awarded for a match
            mismatch_penalty: Points deducted for a mismatch (score floors at 0)
            rng: Random number generator for reproducible games
            scheduler: Scheduler for the flip-back (a private one if None)
        """
        self.symbols: tuple[str, ...] = tuple(dict.fromkeys(symbols))
        if min_pairs < 1:
            raise ValueError("Minimum pair count must be at least 1")
        if len(self.symbols) < min_pairs:
            raise ValueError(
                f"Need at least {min_pairs} distinct symbols, got {len(self.symbols)}"
            )
        if flip_back_delay is not None and flip_back_delay < 0:
            raise ValueError("Flip-back delay must be non-negative")

        self.min_pairs = min_pairs
        upper = len(self.symbols) if max_pairs is None else min(max_pairs, len(self.symbols))
        self.max_pairs = max(min_pairs, upper)
        if pair_count is None or not self.min_pairs <= pair_count <= self.max_pairs:
            pair_count = self.max_pairs
        self.default_pairs = pair_count

        self.flip_back_delay = flip_back_delay
        self.match_points = match_points
        self.mismatch_penalty = mismatch_penalty

        self._rng = rng or Random()
        self.scheduler = scheduler or Scheduler()
        self.events = EventEmitter()

        self.deck = Deck(rng=self._rng)
        self.score = 0
        self.moves = 0
        self._pending: Card | None = None
        self._flip_back_call: ScheduledCall | None = None

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="waiting_for_first",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        self.start_new_game()

    @property
    def phase(self) -> GamePhase:
        """Get current game phase as enum."""
        return GamePhase[self._machine_state.upper()]  # type: ignore

    @property
    def game_over(self) -> bool:
        """True once every card is matched."""
        return self.phase == GamePhase.GAME_OVER

    @property
    def cards(self) -> list[CardSnapshot]:
        """Snapshots of all cards in deck order."""
        return self.deck.snapshots()

    @property
    def pending_selection(self) -> CardSnapshot | None:
        """The first card of an in-progress comparison, if any."""
        return self._pending.snapshot() if self._pending else None

    @property
    def pair_count(self) -> int:
        """Number of pairs in the current deck."""
        return self.deck.pair_count

    @property
    def matched_pairs(self) -> int:
        """Number of pairs found so far."""
        return self.deck.matched_count // 2

    @property
    def has_pending_flip_back(self) -> bool:
        """Check if a mismatched pair is waiting to turn face down."""
        return self._flip_back_call is not None and self._flip_back_call.is_pending

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def unsubscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Unsubscribe from game events."""
        self.events.unsubscribe(handler, event_type)

    def start_new_game(self, pair_count: int | None = None) -> None:
        """
        Replace the whole game state with a freshly shuffled deck.

        Args:
            pair_count: Number of pairs; out-of-range or None uses the default
        """
        if pair_count is None or not self.min_pairs <= pair_count <= self.max_pairs:
            if pair_count is not None:
                logger.warning(
                    "Pair count %d outside [%d, %d], using %d",
                    pair_count,
                    self.min_pairs,
                    self.max_pairs,
                    self.default_pairs,
                )
            pair_count = self.default_pairs

        cancelled = self._cancel_flip_back()

        self.deck = Deck.build(self.symbols, pair_count, rng=self._rng)
        self.score = 0
        self.moves = 0
        self._pending = None
        self.restart()

        logger.info("New game with %d pairs", pair_count)
        if cancelled:
            self.events.emit_new(EventType.FLIP_BACK_CANCELLED)
        self.events.emit_new(EventType.GAME_STARTED, pair_count=pair_count)
        self._notify()

    def shuffle_cards(self) -> None:
        """Reorder the deck without touching any card or counter state."""
        self.deck.shuffle()
        self.events.emit_new(EventType.CARDS_SHUFFLED)
        self._notify()

    def is_selectable(self, card: CardRef) -> bool:
        """Check if selecting ``card`` would change the game."""
        found = self._resolve(card)
        return found is not None and not found.is_matched and not found.is_face_up

    def select_card(self, card: CardRef) -> bool:
        """
        Select a card.

        The first pick of a pair turns every unmatched card face down and
        records the pending selection. The second pick counts a move and
        resolves match or mismatch. Invalid picks are ignored.

        Every state change, phase transition included, is complete before
        any observer hears about it.

        Args:
            card: The card, its snapshot, or its id

        Returns:
            True if the selection changed the game state
        """
        found = self._resolve(card)
        if found is None:
            return self._reject("unknown_card")
        if found.is_matched:
            return self._reject("already_matched", card=found.snapshot())
        if found.is_face_up:
            return self._reject("already_face_up", card=found.snapshot())

        if self._pending is None:
            outcome = self._select_first(found)
        else:
            outcome = self._select_second(found)

        for event_type, data in outcome:
            self.events.emit_new(event_type, **data)
        self._notify()
        return True

    def update(self, dt: float) -> None:
        """
        Advance deferred actions (the mismatch flip-back).

        Args:
            dt: Delta time in seconds
        """
        self.scheduler.update(dt)

    def _resolve(self, card: CardRef) -> Card | None:
        """Find the deck card a reference points to."""
        if isinstance(card, UUID):
            return self.deck.get(card)
        if isinstance(card, (Card, CardSnapshot)):
            return self.deck.get(card.id)
        return None

    def _reject(self, reason: str, **data) -> bool:
        """Ignore an invalid selection."""
        logger.debug("Ignored selection: %s", reason)
        self.events.emit_new(EventType.INVALID_SELECTION, reason=reason, **data)
        return False

    def _select_first(self, card: Card) -> list[PendingEvent]:
        """Start a new comparison with ``card``."""
        # A newer pick supersedes any flip-back still waiting
        cancelled = self._cancel_flip_back()
        self.deck.flip_all_down()

        self._pending = card
        card.flip_up()
        self.pick_first()

        outcome = [(EventType.FLIP_BACK_CANCELLED, {})] if cancelled else []
        outcome.append(self._flipped(card))
        return outcome

    def _select_second(self, card: Card) -> list[PendingEvent]:
        """Complete the comparison against the pending card."""
        first = self._pending
        self.moves += 1
        self._pending = None
        card.flip_up()
        outcome = [self._flipped(card)]

        if first.content == card.content:
            first.mark_matched()
            card.mark_matched()
            self.score += self.match_points
            logger.debug("Match %s (score %d)", card.content, self.score)
            outcome.append(
                (
                    EventType.MATCH_FOUND,
                    {"cards": (first.snapshot(), card.snapshot()), "score": self.score, "moves": self.moves},
                )
            )

            if self.deck.all_matched:
                self.finish()
                logger.info("Game over: score %d in %d moves", self.score, self.moves)
                outcome.append((EventType.GAME_OVER, {"score": self.score, "moves": self.moves}))
            else:
                self.resolve_pair()
            return outcome

        self.score = max(0, self.score - self.mismatch_penalty)
        logger.debug("Mismatch %s/%s (score %d)", first.content, card.content, self.score)
        outcome.append(
            (
                EventType.MISMATCH,
                {"cards": (first.snapshot(), card.snapshot()), "score": self.score, "moves": self.moves},
            )
        )
        self.resolve_pair()
        outcome.extend(self._schedule_flip_back((first.id, card.id)))
        return outcome

    def _schedule_flip_back(self, card_ids: tuple[UUID, UUID]) -> list[PendingEvent]:
        """Arrange for a mismatched pair to turn face down."""
        if self.flip_back_delay is None:
            return []
        if self.flip_back_delay == 0:
            flipped = self._flip_back(card_ids)
            return [(EventType.CARDS_FLIPPED_BACK, {"cards": flipped})] if flipped else []

        self._flip_back_call = self.scheduler.call_later(
            self.flip_back_delay,
            lambda: self._on_flip_back_due(card_ids),
            name="flip-back",
        )
        return [(EventType.FLIP_BACK_SCHEDULED, {"delay": self.flip_back_delay})]

    def _on_flip_back_due(self, card_ids: tuple[UUID, UUID]) -> None:
        self._flip_back_call = None
        flipped = self._flip_back(card_ids)
        if flipped:
            self.events.emit_new(EventType.CARDS_FLIPPED_BACK, cards=flipped)
            self._notify()

    def _flip_back(self, card_ids: tuple[UUID, UUID]) -> tuple[CardSnapshot, ...]:
        """Turn the given cards face down unless newer state owns them."""
        pending_id = self._pending.id if self._pending else None
        flipped = []
        for card_id in card_ids:
            card = self.deck.get(card_id)
            if card is None or card.is_matched or card.id == pending_id:
                continue
            if card.is_face_up:
                card.flip_down()
                flipped.append(card.snapshot())

        if flipped:
            logger.debug("Flipped back %d card(s)", len(flipped))
        return tuple(flipped)

    def _cancel_flip_back(self) -> bool:
        """Drop a waiting flip-back. Returns True if one was pending."""
        cancelled = self.has_pending_flip_back
        if cancelled:
            self._flip_back_call.cancel()
        self._flip_back_call = None
        return cancelled

    def _flipped(self, card: Card) -> PendingEvent:
        return EventType.CARD_FLIPPED, {"card": card.snapshot(), "index": self.deck.find(card.id)}

    def _notify(self) -> None:
        """Tell observers that the observable state changed."""
        self.events.emit_new(
            EventType.STATE_CHANGED,
            score=self.score,
            moves=self.moves,
            game_over=self.game_over,
            phase=self.phase.name,
        )
