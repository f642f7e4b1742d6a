"""Move generation and application for the tableau."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from spidertaire.simulation.state import (
    GameState,
    GridPosition,
    TableauDesyncError,
    Visibility,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LegalMove:
    """Move the card at ``source`` to the empty cell ``target``."""

    source: GridPosition
    target: GridPosition

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"


def generate_legal_moves(state: GameState) -> List[LegalMove]:
    """Generate every legal single-card placement.

    A shown card may go directly beneath any shown card exactly one rank
    above it, provided that cell is empty. Suits and columns are ignored,
    so the reference may sit in the candidate's own column. The result is
    only valid until the state next changes.
    """
    moves: List[LegalMove] = []
    shown = list(state.shown_cards())

    for candidate in shown:
        for reference in shown:
            if reference.card.rank.successor != candidate.card.rank:
                continue
            target = reference.position.next_row()
            if not state.is_occupied(target):
                moves.append(LegalMove(source=candidate.position, target=target))

    return moves


def apply_move(state: GameState, move: LegalMove) -> bool:
    """Apply a move if it is currently legal.

    The moved card takes every shown card stacked below it in its column
    along, keeping their row offsets. The run is not checked for rank or
    suit continuity. Hidden cards left uncovered are then revealed.

    A move under a card of the same column leaves a gap above the run. A
    later run dropped into such a gap may be longer than the gap; that move
    stays legal but is refused here, since landing would cover cards.

    Returns:
        False (and leaves the state untouched) if the move is not legal or
        the run would land on a card outside it
    """
    if move not in generate_legal_moves(state):
        logger.debug(f"ignoring {move}: not a legal move")
        return False

    source = move.source
    moved = state.card_at(source)
    if moved is None:
        raise TableauDesyncError(f"grid and cards are out of sync: no card at {source}")

    cascade = sorted(
        (
            placed for placed in state.shown_cards()
            if placed.card_id != moved.card_id
            and placed.position.column == source.column
            and placed.position.row > source.row
        ),
        key=lambda placed: placed.position.row,
    )

    relocations = [(moved.card_id, move.target)]
    for placed in cascade:
        new_position = GridPosition(
            move.target.column,
            move.target.row + (placed.position.row - source.row),
        )
        relocations.append((placed.card_id, new_position))

    run_ids = {card_id for card_id, _ in relocations}
    for _, new_position in relocations:
        occupant = state.grid.get(new_position)
        if occupant is not None and occupant not in run_ids:
            logger.warning(f"ignoring {move}: run would land on the card at {new_position}")
            return False

    # Lift everything first so the run can land without colliding with itself
    for card_id, _ in relocations:
        state.lift(card_id)

    for card_id, new_position in relocations:
        logger.debug(f"moving {state.cards[card_id].position} to {new_position}")
        state.drop(card_id, new_position)

    reveal_hidden_cards(state)
    return True


def reveal_hidden_cards(state: GameState) -> List[GridPosition]:
    """Turn face up every hidden card with nothing beneath it.

    Returns:
        Positions of the cards that were flipped
    """
    revealed: List[GridPosition] = []
    for placed in list(state.hidden_cards()):
        if not state.is_occupied(placed.position.next_row()):
            placed.visibility = Visibility.SHOWN
            revealed.append(placed.position)
    if revealed:
        logger.debug(f"revealed {len(revealed)} card(s)")
    return revealed


def deal_available_set(state: GameState) -> bool:
    """Deal the next available set, one shown card onto each column.

    Each card lands one row below the lowest card of its column (row 0 for
    an empty column). Empty columns do not block the deal.

    Returns:
        False if no available sets remain
    """
    if not state.available_sets:
        logger.debug("not dealing: no available sets left")
        return False

    max_rows = state.column_heights()
    logger.debug(f"adding available set to max rows: {max_rows}")
    available = state.available_sets.pop(0)
    for column, card in enumerate(available.cards):
        state.place(card, GridPosition(column, max_rows[column]), Visibility.SHOWN)
    return True
