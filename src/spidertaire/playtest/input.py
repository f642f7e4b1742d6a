"""Human input handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from spidertaire.simulation.movegen import LegalMove
from spidertaire.simulation.state import NUM_COLUMNS, GridPosition


@dataclass
class InputResult:
    """Result of human input."""

    move: Optional[LegalMove] = None
    cell: Optional[GridPosition] = None  # Picked like a click; first legal move applies
    deal: bool = False
    quit: bool = False
    error: Optional[str] = None


class HumanPlayer:
    """Handles human player input."""

    def get_command(self, moves: list[LegalMove], prompt: str = "> ") -> InputResult:
        """Read one command.

        Accepts a move number from the presented list, a ``col row`` cell
        pick, ``d`` to deal or ``q`` to quit.
        """
        try:
            raw = input(prompt).strip().lower()
        except (EOFError, KeyboardInterrupt):
            return InputResult(quit=True)

        return self.parse(raw, moves)

    def parse(self, raw: str, moves: list[LegalMove]) -> InputResult:
        if raw in ("q", "quit", "exit"):
            return InputResult(quit=True)

        if raw in ("d", "deal"):
            return InputResult(deal=True)

        if not raw:
            return InputResult(error="Enter a move number, 'col row', 'd' or 'q'.")

        parts = raw.replace(",", " ").split()
        try:
            numbers = [int(p) for p in parts]
        except ValueError:
            return InputResult(error=f"Invalid input '{raw}'. Enter a number, 'd' or 'q'.")

        if len(numbers) == 2:
            column, row = numbers
            if not 0 <= column < NUM_COLUMNS or row < 0:
                return InputResult(error=f"No such cell ({column},{row}).")
            return InputResult(cell=GridPosition(column, row))

        if len(numbers) != 1:
            return InputResult(error=f"Invalid input '{raw}'.")

        # Validate range (1-indexed for human)
        choice = numbers[0]
        if choice < 1 or choice > len(moves):
            if not moves:
                return InputResult(error="No legal moves. Deal with 'd' or quit with 'q'.")
            return InputResult(error=f"Invalid choice {choice}. Enter 1-{len(moves)}.")

        return InputResult(move=moves[choice - 1])
