"""Card ranks, suits and the card value object."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InvalidRankError(ValueError):
    """Raised when a numeric rank code falls outside 1..13."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Unexpected card value: {value}")
        self.value = value


class Rank(Enum):
    """Playing card ranks, highest first."""

    KING = "K"
    QUEEN = "Q"
    JACK = "J"
    TEN = "10"
    NINE = "9"
    EIGHT = "8"
    SEVEN = "7"
    SIX = "6"
    FIVE = "5"
    FOUR = "4"
    THREE = "3"
    TWO = "2"
    ACE = "A"

    @property
    def label(self) -> str:
        return self.value

    @property
    def number(self) -> int:
        """Numeric rank: K=13 down to A=1."""
        return _RANK_NUMBERS[self]

    @classmethod
    def from_number(cls, number: int) -> "Rank":
        """Inverse of ``number``.

        Raises:
            InvalidRankError: if ``number`` is not in 1..13
        """
        try:
            return _RANKS_BY_NUMBER[number]
        except KeyError:
            raise InvalidRankError(number) from None

    @property
    def predecessor(self) -> Optional["Rank"]:
        """The next-higher rank, or None for the King."""
        return _RANKS_BY_NUMBER.get(self.number + 1)

    @property
    def successor(self) -> Optional["Rank"]:
        """The next-lower rank, or None for the Ace."""
        return _RANKS_BY_NUMBER.get(self.number - 1)


_RANK_NUMBERS = {rank: 13 - i for i, rank in enumerate(Rank)}
_RANKS_BY_NUMBER = {number: rank for rank, number in _RANK_NUMBERS.items()}


class Color(Enum):
    """Suit colors (display only)."""

    RED = "red"
    BLACK = "black"


class Suit(Enum):
    """Playing card suits."""

    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"
    SPADES = "S"

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self]

    @property
    def color(self) -> Color:
        if self in (Suit.HEARTS, Suit.DIAMONDS):
            return Color.RED
        return Color.BLACK


# Unicode card symbols
SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}


@dataclass(frozen=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit.symbol}"
