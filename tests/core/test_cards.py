"""Tests for Card and Deck classes."""

import pytest
from collections import Counter
from random import Random

from hypothesis import given, strategies as st

from core.cards import DEFAULT_SYMBOLS, Card, CardSnapshot, Deck


class TestCard:
    """Tests for the Card class."""

    def test_card_creation(self):
        """Test creating a card."""
        card = Card("A")
        assert card.content == "A"
        assert not card.is_face_up
        assert not card.is_matched

    def test_cards_with_equal_content_are_distinct(self):
        """Test that identity does not come from content."""
        card1 = Card("A")
        card2 = Card("A")
        assert card1.id != card2.id
        assert card1 != card2

    def test_flip_up_and_down(self):
        """Test flipping a card."""
        card = Card("A")
        card.flip_up()
        assert card.is_face_up
        card.flip_down()
        assert not card.is_face_up

    def test_matched_card_stays_face_up(self):
        """Test that a matched card cannot be flipped down."""
        card = Card("A")
        card.mark_matched()
        assert card.is_matched
        assert card.is_face_up

        card.flip_down()
        assert card.is_face_up

    def test_snapshot_copies_state(self):
        """Test snapshots are immutable copies."""
        card = Card("A")
        card.flip_up()
        snap = card.snapshot()

        assert isinstance(snap, CardSnapshot)
        assert snap.id == card.id
        assert snap.is_face_up

        card.flip_down()
        assert snap.is_face_up  # Snapshot unaffected

        with pytest.raises(AttributeError):
            snap.is_face_up = False

    def test_snapshot_str(self):
        """Test string representation hides face-down content."""
        card = Card("A")
        assert str(card.snapshot()) == "??"
        card.flip_up()
        assert str(card.snapshot()) == "A"
        card.mark_matched()
        assert str(card.snapshot()) == "[A]"


class TestDeck:
    """Tests for the Deck class."""

    def test_build_full_deck(self):
        """Test building with every default symbol."""
        deck = Deck.build(DEFAULT_SYMBOLS, len(DEFAULT_SYMBOLS), rng=Random(1))
        assert len(deck) == 16
        counts = Counter(card.content for card in deck)
        assert set(counts) == set(DEFAULT_SYMBOLS)
        assert all(count == 2 for count in counts.values())

    def test_build_subset(self):
        """Test building fewer pairs than available symbols."""
        deck = Deck.build(DEFAULT_SYMBOLS, 3, rng=Random(1))
        counts = Counter(card.content for card in deck)
        assert len(deck) == 6
        assert len(counts) == 3
        assert set(counts) <= set(DEFAULT_SYMBOLS)

    def test_build_ignores_duplicate_symbols(self):
        """Test that repeated symbols count once."""
        deck = Deck.build(["A", "A", "B"], 2, rng=Random(1))
        assert sorted(card.content for card in deck) == ["A", "A", "B", "B"]

    def test_build_too_many_pairs_raises(self):
        """Test that asking for more pairs than symbols raises."""
        with pytest.raises(ValueError):
            Deck.build(["A", "B"], 3)

    def test_build_zero_pairs_raises(self):
        """Test that zero pairs is rejected."""
        with pytest.raises(ValueError):
            Deck.build(["A", "B"], 0)

    def test_build_starts_face_down(self):
        """Test new cards are face down and unmatched."""
        deck = Deck.build(DEFAULT_SYMBOLS, 4)
        assert not any(card.is_face_up or card.is_matched for card in deck)

    def test_build_is_reproducible_with_seed(self):
        """Test that the same seed gives the same order."""
        deck1 = Deck.build(DEFAULT_SYMBOLS, 8, rng=Random(7))
        deck2 = Deck.build(DEFAULT_SYMBOLS, 8, rng=Random(7))
        assert [c.content for c in deck1] == [c.content for c in deck2]

    def test_shuffle_keeps_cards(self):
        """Test shuffling changes order but not membership."""
        deck = Deck.build(DEFAULT_SYMBOLS, 8, rng=Random(3))
        ids_before = [card.id for card in deck]

        deck.shuffle()
        ids_after = [card.id for card in deck]

        assert set(ids_before) == set(ids_after)
        assert ids_before != ids_after

    def test_find_and_get(self):
        """Test looking up cards by id."""
        cards = [Card("A"), Card("B"), Card("A"), Card("B")]
        deck = Deck(cards)
        assert deck.find(cards[2].id) == 2
        assert deck.get(cards[3].id) is cards[3]
        assert deck.find(Card("A").id) is None
        assert deck.get(Card("A").id) is None

    def test_flip_all_down_skips_matched(self):
        """Test the sweep leaves matched cards up."""
        cards = [Card("A"), Card("B"), Card("A"), Card("B")]
        deck = Deck(cards)
        cards[0].mark_matched()
        cards[1].flip_up()

        deck.flip_all_down()

        assert cards[0].is_face_up
        assert not cards[1].is_face_up

    def test_all_matched(self):
        """Test detection of a finished deck."""
        cards = [Card("A"), Card("A")]
        deck = Deck(cards)
        assert not deck.all_matched
        cards[0].mark_matched()
        assert not deck.all_matched
        cards[1].mark_matched()
        assert deck.all_matched
        assert deck.matched_count == 2

    def test_empty_deck_is_not_all_matched(self):
        """Test an empty deck never counts as finished."""
        assert not Deck().all_matched

    @given(
        pair_count=st.integers(min_value=1, max_value=len(DEFAULT_SYMBOLS)),
        seed=st.integers(min_value=0, max_value=10_000),
    )
    def test_every_symbol_appears_exactly_twice(self, pair_count, seed):
        """Property: decks are even and every content appears twice."""
        deck = Deck.build(DEFAULT_SYMBOLS, pair_count, rng=Random(seed))
        counts = Counter(card.content for card in deck)

        assert len(deck) % 2 == 0
        assert len(deck) == pair_count * 2
        assert len(counts) == pair_count
        assert all(count == 2 for count in counts.values())
        assert len({card.id for card in deck}) == len(deck)
