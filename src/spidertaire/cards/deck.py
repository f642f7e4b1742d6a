"""Deck construction for the one-, two- and four-suit variants."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterator, Optional

from spidertaire.cards.schema import Card, Rank, Suit


def _run(suit: Suit) -> list[Card]:
    """All thirteen ranks of one suit, King down to Ace."""
    return [Card(rank=rank, suit=suit) for rank in Rank]


@dataclass
class Deck:
    """An ordered, mutable sequence of cards (52 when freshly built)."""

    cards: list[Card] = field(default_factory=list)

    @classmethod
    def from_suit(cls, suit: Suit) -> "Deck":
        """52 cards of a single suit: four full runs."""
        cards: list[Card] = []
        for _ in range(4):
            cards.extend(_run(suit))
        return cls(cards)

    @classmethod
    def from_suits(cls, first: Suit, second: Suit) -> "Deck":
        """52 cards alternating 13-card runs of two suits, twice over."""
        cards: list[Card] = []
        for _ in range(2):
            cards.extend(_run(first))
            cards.extend(_run(second))
        return cls(cards)

    @classmethod
    def standard(cls) -> "Deck":
        """The conventional 52-card deck, suit-major."""
        cards: list[Card] = []
        for suit in Suit:
            cards.extend(_run(suit))
        return cls(cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def copy(self) -> "Deck":
        return Deck(list(self.cards))

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Randomly order the cards in place."""
        if rng is None:
            random.shuffle(self.cards)
        else:
            rng.shuffle(self.cards)

    def combine(self, other: "Deck") -> None:
        """Move every card of ``other`` onto the end of this deck."""
        if other is self:
            raise ValueError("Cannot combine a deck with itself; combine a copy")
        self.cards.extend(other.cards)
        other.cards.clear()

    def draw(self, count: int) -> list[Card]:
        """Remove and return the first ``count`` cards."""
        drawn = self.cards[:count]
        del self.cards[:count]
        return drawn
