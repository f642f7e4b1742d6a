"""Mutable tableau state: a card arena plus a position index."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from spidertaire.cards.schema import Card

NUM_COLUMNS = 10


class TableauDesyncError(RuntimeError):
    """The position index and the card arena disagree."""


class Visibility(Enum):
    """Whether a tableau card is face down or face up."""

    HIDDEN = "hidden"
    SHOWN = "shown"


@dataclass(frozen=True)
class GridPosition:
    """A (column, row) cell of the tableau; rows grow downward."""

    column: int
    row: int

    def next_row(self) -> "GridPosition":
        """The cell directly beneath this one."""
        return GridPosition(self.column, self.row + 1)

    def __str__(self) -> str:
        return f"({self.column},{self.row})"


@dataclass
class PlacedCard:
    """A card on the tableau."""

    card_id: int
    card: Card
    position: GridPosition
    visibility: Visibility

    @property
    def is_shown(self) -> bool:
        return self.visibility is Visibility.SHOWN


@dataclass(frozen=True)
class AvailableSet:
    """Ten reserve cards, dealt one per column."""

    cards: tuple[Card, ...]

    def __post_init__(self):
        """Convert lists to tuples and check the size."""
        if isinstance(self.cards, list):
            object.__setattr__(self, "cards", tuple(self.cards))
        if len(self.cards) != NUM_COLUMNS:
            raise ValueError(
                f"Available set needs {NUM_COLUMNS} cards, got {len(self.cards)}"
            )


@dataclass
class GameState:
    """The single mutable game context.

    ``cards`` is an arena keyed by a stable id; ``grid`` maps each occupied
    position to the id of the card on it and is the only occupancy record.
    """

    cards: dict[int, PlacedCard] = field(default_factory=dict)
    grid: dict[GridPosition, int] = field(default_factory=dict)
    available_sets: list[AvailableSet] = field(default_factory=list)
    _next_id: int = field(default=0, repr=False)

    def place(
        self,
        card: Card,
        position: GridPosition,
        visibility: Visibility,
    ) -> PlacedCard:
        """Add a new card to the tableau."""
        if position in self.grid:
            raise TableauDesyncError(f"grid and cards are out of sync: {position} already occupied")
        placed = PlacedCard(
            card_id=self._next_id,
            card=card,
            position=position,
            visibility=visibility,
        )
        self._next_id += 1
        self.cards[placed.card_id] = placed
        self.grid[position] = placed.card_id
        return placed

    def card_at(self, position: GridPosition) -> Optional[PlacedCard]:
        card_id = self.grid.get(position)
        if card_id is None:
            return None
        return self.cards[card_id]

    def is_occupied(self, position: GridPosition) -> bool:
        return position in self.grid

    def shown_cards(self) -> Iterator[PlacedCard]:
        return (c for c in self.cards.values() if c.visibility is Visibility.SHOWN)

    def hidden_cards(self) -> Iterator[PlacedCard]:
        return (c for c in self.cards.values() if c.visibility is Visibility.HIDDEN)

    def lift(self, card_id: int) -> PlacedCard:
        """Take a card out of the position index (it stays in the arena)."""
        placed = self.cards[card_id]
        if self.grid.get(placed.position) != card_id:
            raise TableauDesyncError(
                f"grid and cards are out of sync: card {card_id} not at {placed.position}"
            )
        del self.grid[placed.position]
        return placed

    def drop(self, card_id: int, position: GridPosition) -> PlacedCard:
        """Put a lifted card back into the index at ``position``."""
        if position in self.grid:
            raise TableauDesyncError(f"grid and cards are out of sync: {position} already occupied")
        placed = self.cards[card_id]
        placed.position = position
        self.grid[position] = card_id
        return placed

    def column_heights(self) -> list[int]:
        """Landing row per column: max occupied row + 1, or 0 when empty."""
        heights = [0] * NUM_COLUMNS
        for position in self.grid:
            if position.row >= heights[position.column]:
                heights[position.column] = position.row + 1
        return heights
