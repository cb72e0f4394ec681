"""Pytest fixtures for memory game tests."""

import pytest
from random import Random

from core.cards import Card, Deck
from core.game import MemoryGame


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def game(rng):
    """A new game instance with the default symbols."""
    return MemoryGame(rng=rng)


@pytest.fixture
def make_game(rng):
    """Factory for a game whose deck is laid out in a fixed order."""

    def _make(contents, **kwargs):
        kwargs.setdefault("rng", rng)
        game = MemoryGame(symbols=sorted(set(contents)), **kwargs)
        game.deck = Deck([Card(content) for content in contents], rng=rng)
        return game

    return _make


@pytest.fixture
def abab_game(make_game):
    """Two pairs laid out as A B A B, no automatic flip-back."""
    return make_game(["A", "B", "A", "B"], flip_back_delay=None)


@pytest.fixture
def aa_game(make_game):
    """A single pair, which needs min_pairs lowered to 1."""
    return make_game(["A", "A"], min_pairs=1)


@pytest.fixture
def events(game):
    """Collects every event emitted by the default game."""
    collected = []
    game.subscribe(collected.append)
    return collected
