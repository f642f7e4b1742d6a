"""Card and deck primitives."""

from spidertaire.cards.schema import Card, Color, InvalidRankError, Rank, Suit
from spidertaire.cards.deck import Deck

__all__ = [
    "Card",
    "Color",
    "Deck",
    "InvalidRankError",
    "Rank",
    "Suit",
]
