"""AI player implementations."""

import random
from abc import ABC, abstractmethod
from typing import List, Optional

from spidertaire.simulation.game import SpiderGame
from spidertaire.simulation.movegen import LegalMove


class AIPlayer(ABC):
    """Base class for AI players."""

    @abstractmethod
    def choose_action(
        self,
        game: SpiderGame,
        legal_moves: List[LegalMove],
        can_deal: bool,
    ) -> Optional[LegalMove]:
        """Choose a move, or None to deal the next available set."""
        pass


class RandomPlayer(AIPlayer):
    """Player that chooses randomly from legal moves and the deal."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def choose_action(
        self,
        game: SpiderGame,
        legal_moves: List[LegalMove],
        can_deal: bool,
    ) -> Optional[LegalMove]:
        """Choose uniformly from legal moves plus the deal."""
        options: List[Optional[LegalMove]] = list(legal_moves)
        if can_deal:
            options.append(None)
        if not options:
            raise ValueError("No legal actions available")
        return self.rng.choice(options)
