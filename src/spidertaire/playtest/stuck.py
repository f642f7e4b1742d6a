"""Detection of games that cannot go on."""

from __future__ import annotations

from typing import Optional

from spidertaire.simulation.game import SpiderGame


class StuckDetector:
    """Ends a session when nothing can be played or the turn limit is hit."""

    def __init__(self, max_turns: int = 500):
        self.max_turns = max_turns

    def check(self, game: SpiderGame, turn: int) -> Optional[str]:
        """Return a reason string if the game is stuck, else None."""
        if turn > self.max_turns:
            return f"Turn limit reached ({self.max_turns})"
        if not game.legal_moves and game.reserve_count == 0:
            return "No legal moves and no sets left to deal"
        return None
