"""JSON serialization for tableau state."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, List

from spidertaire.cards.schema import Card, Rank, Suit
from spidertaire.simulation.state import (
    AvailableSet,
    GameState,
    GridPosition,
    Visibility,
)

if TYPE_CHECKING:
    from spidertaire.simulation.movegen import LegalMove


def _card_to_dict(card: Card) -> Dict[str, str]:
    # Enums are stored by name (e.g. "KING", "SPADES")
    return {"rank": card.rank.name, "suit": card.suit.name}


def _card_from_dict(data: Dict[str, str]) -> Card:
    return Card(rank=Rank[data["rank"]], suit=Suit[data["suit"]])


def state_to_dict(state: GameState) -> Dict[str, Any]:
    """Convert GameState to JSON-serializable dict."""
    cells = []
    for position, card_id in sorted(
        state.grid.items(), key=lambda item: (item[0].column, item[0].row)
    ):
        placed = state.cards[card_id]
        cells.append({
            "column": position.column,
            "row": position.row,
            **_card_to_dict(placed.card),
            "visibility": placed.visibility.name,
        })
    return {
        "cells": cells,
        "available_sets": [
            [_card_to_dict(card) for card in available.cards]
            for available in state.available_sets
        ],
    }


def state_to_json(state: GameState, indent: int = 2) -> str:
    """Serialize GameState to JSON string."""
    return json.dumps(state_to_dict(state), indent=indent)


def state_from_dict(data: Dict[str, Any]) -> GameState:
    """Create GameState from dict.

    Card ids are reassigned in cell order; only positions, cards and
    visibility survive a round trip.
    """
    state = GameState()
    for cell in data["cells"]:
        state.place(
            _card_from_dict(cell),
            GridPosition(cell["column"], cell["row"]),
            Visibility[cell["visibility"]],
        )
    for cards in data.get("available_sets", []):
        state.available_sets.append(
            AvailableSet(tuple(_card_from_dict(card) for card in cards))
        )
    return state


def state_from_json(json_str: str) -> GameState:
    """Deserialize GameState from JSON string."""
    return state_from_dict(json.loads(json_str))


def legal_moves_to_list(moves: List["LegalMove"]) -> List[List[List[int]]]:
    """Serialize moves as ``[[[col, row], [col, row]], ...]``."""
    return [
        [
            [move.source.column, move.source.row],
            [move.target.column, move.target.row],
        ]
        for move in moves
    ]
