"""Playtest session management."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from spidertaire.simulation.game import SpiderGame
from spidertaire.simulation.setup import Difficulty
from spidertaire.playtest.stuck import StuckDetector
from spidertaire.playtest.display import TableauRenderer, MovePresenter
from spidertaire.playtest.input import HumanPlayer

logger = logging.getLogger(__name__)

HELP_TEXT = """=== Spidertaire ===
Move a face-up card under a face-up card one rank higher.
Cards stacked below the one you move come along with it.
Deal a new set when you run out of moves."""


@dataclass
class SessionConfig:
    """Configuration for playtest session."""

    debug: bool = False
    max_turns: int = 500
    seed: Optional[int] = None
    show_help: bool = True

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


@dataclass
class PlaytestResult:
    """Outcome of one playtest session."""

    seed: int
    turns: int
    moves_made: int
    deals_made: int
    outcome: str  # "quit", "stuck" or "turn_limit"
    stuck_reason: Optional[str] = None


class PlaytestSession:
    """Manages a human playtest session."""

    def __init__(self, config: SessionConfig):
        """Initialize session."""
        self.config = config
        self.seed = config.seed

        # Components
        self.stuck_detector = StuckDetector(max_turns=config.max_turns)
        self.renderer = TableauRenderer()
        self.presenter = MovePresenter()
        self.human_input = HumanPlayer()

        # Session state
        self.turn = 1
        self.game: Optional[SpiderGame] = None

    def run(self, output_fn: Callable[[str], None] = print) -> PlaytestResult:
        """Run the playtest session.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            PlaytestResult with the game outcome
        """
        self.game = SpiderGame.new(Difficulty.EASY, seed=self.seed)

        if self.config.show_help:
            output_fn(HELP_TEXT)
            output_fn(f"Seed: {self.seed} (use --seed {self.seed} to replay)")

        outcome = "quit"
        stuck_reason: Optional[str] = None

        while True:
            self.game.tick()

            stuck_reason = self.stuck_detector.check(self.game, self.turn)
            if stuck_reason:
                output_fn(f"\nGame over: {stuck_reason}")
                outcome = "turn_limit" if self.turn > self.config.max_turns else "stuck"
                break

            output_fn("")
            output_fn(self.renderer.render(self.game, self.config.debug))

            moves = self.game.legal_moves
            output_fn("")
            output_fn(self.presenter.present(moves, self.game))

            result = self.human_input.get_command(moves)

            if result.quit:
                break

            if result.error:
                output_fn(result.error)
                continue

            if result.deal:
                if not self.game.deal():
                    output_fn("No sets left to deal.")
                    continue
            elif result.cell is not None:
                move = self.game.select_cell(result.cell)
                if move is None:
                    output_fn(f"No legal move from {result.cell}.")
                    continue
                output_fn(f"Moved {move}")
            elif result.move is not None:
                if not self.game.play(result.move):
                    output_fn(f"Cannot move {result.move}: the run does not fit.")
                    continue

            self.turn += 1

        logger.debug(f"Session ended after {self.turn} turn(s): {outcome}")
        return PlaytestResult(
            seed=self.seed,
            turns=self.turn,
            moves_made=self.game.moves_made,
            deals_made=self.game.deals_made,
            outcome=outcome,
            stuck_reason=stuck_reason,
        )
