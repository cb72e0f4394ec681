"""Core memory game engine - 100% UI-agnostic."""

from core.cards import Card, CardSnapshot, Deck, DEFAULT_SYMBOLS, MIN_PAIRS

__all__ = [
    "Card",
    "CardSnapshot",
    "Deck",
    "DEFAULT_SYMBOLS",
    "MIN_PAIRS",
]
