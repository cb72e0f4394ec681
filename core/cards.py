"""Card and Deck classes for the memory game."""

from dataclasses import dataclass, field
from random import Random
from typing import Iterable, Iterator, Sequence
from uuid import UUID, uuid4

# Symbols used when no custom set is supplied
DEFAULT_SYMBOLS: tuple[str, ...] = ("😀", "😎", "🥳", "🤖", "👻", "🐶", "🐱", "🦊")

MIN_PAIRS = 2


@dataclass(frozen=True, slots=True)
class CardSnapshot:
    """Immutable view of a card handed to observers."""

    id: UUID
    content: str
    is_face_up: bool
    is_matched: bool

    def __str__(self) -> str:
        if self.is_matched:
            return f"[{self.content}]"
        return self.content if self.is_face_up else "??"


@dataclass(eq=False, slots=True)
class Card:
    """
    A single memory card.

    Identity is the ``id``, never the position in the deck, so two cards
    with equal content stay distinguishable after a shuffle.
    """

    content: str
    is_face_up: bool = False
    is_matched: bool = False
    id: UUID = field(default_factory=uuid4)

    def __repr__(self) -> str:
        return f"Card({self.content!r}, face_up={self.is_face_up}, matched={self.is_matched})"

    def flip_up(self) -> None:
        """Turn the card face up."""
        self.is_face_up = True

    def flip_down(self) -> None:
        """Turn the card face down (matched cards stay up)."""
        if not self.is_matched:
            self.is_face_up = False

    def mark_matched(self) -> None:
        """Mark the card as matched. Matched cards are always face up."""
        self.is_matched = True
        self.is_face_up = True

    def snapshot(self) -> CardSnapshot:
        """Return an immutable copy of the current card state."""
        return CardSnapshot(
            id=self.id,
            content=self.content,
            is_face_up=self.is_face_up,
            is_matched=self.is_matched,
        )


class Deck:
    """An ordered sequence of cards where every content appears exactly twice."""

    def __init__(self, cards: Iterable[Card] = (), rng: Random | None = None) -> None:
        """
        Initialize a deck.

        Args:
            cards: Cards in deck order
            rng: Random number generator for shuffling
        """
        self._rng = rng or Random()
        self._cards: list[Card] = list(cards)

    @classmethod
    def build(
        cls,
        symbols: Sequence[str],
        pair_count: int,
        rng: Random | None = None,
    ) -> "Deck":
        """
        Build a shuffled deck of ``pair_count`` pairs.

        Args:
            symbols: Distinct symbols to draw from
            pair_count: Number of pairs (must not exceed len(symbols))
            rng: Random number generator for symbol choice and shuffling

        Returns:
            A new shuffled deck
        """
        distinct = list(dict.fromkeys(symbols))
        if not 0 < pair_count <= len(distinct):
            raise ValueError(
                f"Pair count must be between 1 and {len(distinct)}, got {pair_count}"
            )

        rng = rng or Random()
        if pair_count == len(distinct):
            chosen = distinct
        else:
            chosen = rng.sample(distinct, pair_count)

        cards = [Card(symbol) for symbol in chosen for _ in range(2)]
        deck = cls(cards, rng=rng)
        deck.shuffle()
        return deck

    def shuffle(self) -> None:
        """Reorder the cards with a uniform random permutation."""
        self._rng.shuffle(self._cards)

    def find(self, card_id: UUID) -> int | None:
        """Return the index of the card with ``card_id``, or None."""
        for index, card in enumerate(self._cards):
            if card.id == card_id:
                return index
        return None

    def get(self, card_id: UUID) -> Card | None:
        """Return the card with ``card_id``, or None."""
        index = self.find(card_id)
        return self._cards[index] if index is not None else None

    def flip_all_down(self) -> None:
        """Turn every non-matched card face down."""
        for card in self._cards:
            card.flip_down()

    @property
    def all_matched(self) -> bool:
        """Check if every card has been matched."""
        return bool(self._cards) and all(card.is_matched for card in self._cards)

    @property
    def matched_count(self) -> int:
        """Return the number of matched cards."""
        return sum(1 for card in self._cards if card.is_matched)

    @property
    def pair_count(self) -> int:
        """Return the number of pairs in the deck."""
        return len(self._cards) // 2

    def snapshots(self) -> list[CardSnapshot]:
        """Return immutable copies of all cards in deck order."""
        return [card.snapshot() for card in self._cards]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    def __str__(self) -> str:
        return " ".join(str(card.snapshot()) for card in self._cards)
