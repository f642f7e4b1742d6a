"""Host-facing game context."""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from spidertaire.simulation.movegen import (
    LegalMove,
    apply_move,
    deal_available_set,
    generate_legal_moves,
    reveal_hidden_cards,
)
from spidertaire.simulation.serialization import state_to_dict, legal_moves_to_list
from spidertaire.simulation.setup import Difficulty, create_initial_state
from spidertaire.simulation.state import GameState, GridPosition, Visibility


class SpiderGame:
    """One game of Spider Solitaire.

    Wraps a ``GameState`` and exposes the two input entry points a host
    needs (select a tableau cell, deal the next available set) plus the
    read side it draws from. Callers must deliver input events one at a
    time.
    """

    def __init__(self, state: GameState) -> None:
        self.state = state
        self.moves_made = 0
        self.deals_made = 0

    @classmethod
    def new(
        cls,
        difficulty: Difficulty = Difficulty.EASY,
        seed: Optional[int] = None,
    ) -> "SpiderGame":
        """Start a new game, shuffled with ``seed`` when given."""
        return cls(create_initial_state(difficulty, random.Random(seed)))

    @property
    def legal_moves(self) -> List[LegalMove]:
        return generate_legal_moves(self.state)

    def tick(self) -> List[GridPosition]:
        """Per-frame pass: reveal any uncovered hidden cards."""
        return reveal_hidden_cards(self.state)

    def select_cell(self, position: GridPosition) -> Optional[LegalMove]:
        """Move the card at ``position`` to its first legal destination.

        Destinations the run cannot land on are skipped.

        Returns:
            The move that was applied, or None if the cell has none
        """
        for move in self.legal_moves:
            if move.source == position and self.play(move):
                return move
        return None

    def play(self, move: LegalMove) -> bool:
        applied = apply_move(self.state, move)
        if applied:
            self.moves_made += 1
        return applied

    def deal(self) -> bool:
        dealt = deal_available_set(self.state)
        if dealt:
            self.deals_made += 1
        return dealt

    @property
    def reserve_count(self) -> int:
        return len(self.state.available_sets)

    @property
    def hidden_count(self) -> int:
        return sum(1 for _ in self.state.hidden_cards())

    @property
    def shown_count(self) -> int:
        return sum(1 for _ in self.state.shown_cards())

    def visibility_at(self, position: GridPosition) -> Optional[Visibility]:
        placed = self.state.card_at(position)
        return placed.visibility if placed else None

    def snapshot(self) -> Dict[str, Any]:
        """Everything a host needs to draw one frame."""
        data = state_to_dict(self.state)
        data["legal_moves"] = legal_moves_to_list(self.legal_moves)
        return data
