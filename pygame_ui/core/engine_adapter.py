"""Adapter connecting the core memory engine to the PyGame UI."""

import logging
from dataclasses import dataclass
from random import Random
from typing import Callable, Optional, Sequence
from uuid import UUID

from config import GameConfig
from core.cards import CardSnapshot
from core.game.engine import MemoryGame
from core.game.events import EventType, GameEvent
from core.game.state import GamePhase
from pygame_ui.config import UI_SYMBOLS

logger = logging.getLogger(__name__)


@dataclass
class UICardInfo:
    """Card information for the UI layer."""

    id: UUID
    content: str
    face_up: bool = False
    matched: bool = False

    @classmethod
    def from_snapshot(cls, card: CardSnapshot) -> "UICardInfo":
        """Create UICardInfo from a core card snapshot."""
        return cls(
            id=card.id,
            content=card.content,
            face_up=card.is_face_up,
            matched=card.is_matched,
        )


@dataclass
class GameSnapshot:
    """Snapshot of game state for UI rendering."""

    phase: GamePhase
    cards: list[UICardInfo]
    score: int
    moves: int
    game_over: bool
    pair_count: int
    matched_pairs: int
    pending_id: Optional[UUID]
    flip_back_pending: bool


class EngineAdapter:
    """Adapter between the core MemoryGame and PyGame UI.

    Subscribes to engine events and translates them to UI callbacks.
    Provides a clean interface for UI code to interact with the engine.
    """

    def __init__(
        self,
        game_config: GameConfig = None,
        symbols: Sequence[str] = UI_SYMBOLS,
    ):
        """Initialize the adapter.

        Args:
            game_config: Game settings (read from the environment if None)
            symbols: Card contents the UI can render
        """
        self.game_config = game_config or GameConfig()
        self.symbols = tuple(symbols)

        # UI callbacks
        self._on_state_change: Optional[Callable[[GameSnapshot], None]] = None
        self._on_match: Optional[Callable[[str], None]] = None
        self._on_mismatch: Optional[Callable[[], None]] = None
        self._on_game_over: Optional[Callable[[int, int], None]] = None
        self._on_invalid_selection: Optional[Callable[[str], None]] = None

        self.game = self._create_game()
        self.game.subscribe(self._handle_event)

    def _create_game(self) -> MemoryGame:
        """Create the engine from the game settings."""
        cfg = self.game_config
        rng = Random(cfg.seed) if cfg.seed is not None else None
        return MemoryGame(
            symbols=self.symbols,
            pair_count=cfg.pair_count,
            min_pairs=cfg.min_pairs,
            max_pairs=cfg.max_pairs,
            flip_back_delay=cfg.flip_back_delay,
            match_points=cfg.match_points,
            mismatch_penalty=cfg.mismatch_penalty,
            rng=rng,
        )

    def _handle_event(self, event: GameEvent) -> None:
        """Handle events from the core engine."""
        etype = event.event_type
        data = event.data

        if etype == EventType.STATE_CHANGED:
            if self._on_state_change:
                self._on_state_change(self.get_snapshot())
        elif etype == EventType.MATCH_FOUND:
            if self._on_match:
                self._on_match(data["cards"][0].content)
        elif etype == EventType.MISMATCH:
            if self._on_mismatch:
                self._on_mismatch()
        elif etype == EventType.GAME_OVER:
            if self._on_game_over:
                self._on_game_over(data.get("score", 0), data.get("moves", 0))
        elif etype == EventType.INVALID_SELECTION:
            if self._on_invalid_selection:
                self._on_invalid_selection(data.get("reason", "invalid"))

    # Public API for UI

    def set_callbacks(
        self,
        on_state_change: Callable[[GameSnapshot], None] = None,
        on_match: Callable[[str], None] = None,
        on_mismatch: Callable[[], None] = None,
        on_game_over: Callable[[int, int], None] = None,
        on_invalid_selection: Callable[[str], None] = None,
    ) -> None:
        """Set UI callback functions.

        Args:
            on_state_change: Called after every engine mutation (snapshot)
            on_match: Called when a pair is found (content)
            on_mismatch: Called when two cards differ
            on_game_over: Called when every pair is found (score, moves)
            on_invalid_selection: Called on an ignored click (reason)
        """
        self._on_state_change = on_state_change
        self._on_match = on_match
        self._on_mismatch = on_mismatch
        self._on_game_over = on_game_over
        self._on_invalid_selection = on_invalid_selection

    @property
    def score(self) -> int:
        """Get current score."""
        return self.game.score

    @property
    def moves(self) -> int:
        """Get current move count."""
        return self.game.moves

    @property
    def game_over(self) -> bool:
        """Check if every pair has been found."""
        return self.game.game_over

    def get_snapshot(self) -> GameSnapshot:
        """Get a snapshot of the current game state."""
        pending = self.game.pending_selection
        return GameSnapshot(
            phase=self.game.phase,
            cards=[UICardInfo.from_snapshot(c) for c in self.game.cards],
            score=self.game.score,
            moves=self.game.moves,
            game_over=self.game.game_over,
            pair_count=self.game.pair_count,
            matched_pairs=self.game.matched_pairs,
            pending_id=pending.id if pending else None,
            flip_back_pending=self.game.has_pending_flip_back,
        )

    # Game actions

    def select(self, card_id: UUID) -> bool:
        """Select the card with ``card_id``."""
        return self.game.select_card(card_id)

    def is_selectable(self, card_id: UUID) -> bool:
        """Check if clicking the card would do anything."""
        return self.game.is_selectable(card_id)

    def shuffle(self) -> None:
        """Shuffle the cards on the table."""
        self.game.shuffle_cards()

    def new_game(self, pair_count: int = None) -> None:
        """Start a completely new game."""
        logger.debug("New game requested (pairs=%s)", pair_count)
        self.game.start_new_game(pair_count)

    def update(self, dt: float) -> None:
        """Advance engine timers."""
        self.game.update(dt)

    def close(self) -> int:
        """Detach from the engine and drop its pending timers.

        Returns:
            Number of scheduled calls cancelled
        """
        self.game.unsubscribe(self._handle_event)
        return self.game.scheduler.cancel_all()
