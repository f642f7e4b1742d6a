"""Game simulation engine."""

from dataclasses import dataclass

from spidertaire.simulation.game import SpiderGame
from spidertaire.simulation.players import AIPlayer
from spidertaire.simulation.setup import Difficulty


@dataclass(frozen=True)
class GameResult:
    """Result of a simulated game."""

    turn_count: int
    moves_made: int
    deals_made: int
    stuck: bool  # No move and no deal left before the turn limit
    hidden_remaining: int


class GameEngine:
    """Plays whole games with an AI player."""

    def simulate_game(
        self,
        player: AIPlayer,
        seed: int,
        difficulty: Difficulty = Difficulty.EASY,
        max_turns: int = 500,
    ) -> GameResult:
        """Simulate one game until it is stuck or hits ``max_turns``."""
        game = SpiderGame.new(difficulty, seed=seed)
        turn = 0
        stuck = False

        while turn < max_turns:
            game.tick()
            legal_moves = game.legal_moves
            can_deal = game.reserve_count > 0
            if not legal_moves and not can_deal:
                stuck = True
                break

            move = player.choose_action(game, legal_moves, can_deal)
            if move is None:
                game.deal()
            else:
                game.play(move)
            turn += 1

        return GameResult(
            turn_count=turn,
            moves_made=game.moves_made,
            deals_made=game.deals_made,
            stuck=stuck,
            hidden_remaining=game.hidden_count,
        )
