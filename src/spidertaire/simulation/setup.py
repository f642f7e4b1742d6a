"""New-game construction: deck per difficulty and the initial layout."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

from spidertaire.cards.deck import Deck
from spidertaire.cards.schema import Suit
from spidertaire.simulation.state import (
    NUM_COLUMNS,
    AvailableSet,
    GameState,
    GridPosition,
    Visibility,
)

logger = logging.getLogger(__name__)

HIDDEN_CARD_COUNT = 44
SHOWN_CARD_COUNT = 10
AVAILABLE_SET_COUNT = 5


class Difficulty(Enum):
    """Number of suits in play."""

    EASY = "easy"      # One suit
    MEDIUM = "medium"  # Two suits
    HARD = "hard"      # Four suits


def build_deck(difficulty: Difficulty) -> Deck:
    """Build the 104-card deck for a difficulty (two identical 52-card builds)."""
    if difficulty is Difficulty.EASY:
        deck = Deck.from_suit(Suit.SPADES)
    elif difficulty is Difficulty.MEDIUM:
        deck = Deck.from_suits(Suit.SPADES, Suit.HEARTS)
    else:
        deck = Deck.standard()
    deck.combine(deck.copy())
    return deck


def _grid_position(index: int) -> GridPosition:
    return GridPosition(index % NUM_COLUMNS, index // NUM_COLUMNS)


def create_initial_state(
    difficulty: Difficulty = Difficulty.EASY,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Shuffle a fresh deck and lay out a new game.

    The first 44 cards go face down row-major across the ten columns, the
    next 10 continue the same layout face up, and the remaining 50 become
    five available sets in deal order.
    """
    deck = build_deck(difficulty)
    deck.shuffle(rng)
    logger.info(f"New {difficulty.value} game with {len(deck)} cards")

    state = GameState()
    for index, card in enumerate(deck.draw(HIDDEN_CARD_COUNT)):
        state.place(card, _grid_position(index), Visibility.HIDDEN)
    for offset, card in enumerate(deck.draw(SHOWN_CARD_COUNT)):
        state.place(card, _grid_position(HIDDEN_CARD_COUNT + offset), Visibility.SHOWN)

    for _ in range(AVAILABLE_SET_COUNT):
        state.available_sets.append(AvailableSet(tuple(deck.draw(NUM_COLUMNS))))

    return state
