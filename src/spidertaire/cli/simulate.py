"""CLI command for batch simulation with random players."""

from __future__ import annotations

import logging

import click

from spidertaire.simulation.engine import GameEngine
from spidertaire.simulation.players import RandomPlayer
from spidertaire.simulation.setup import Difficulty

logger = logging.getLogger(__name__)


@click.command()
@click.option("-n", "--games", type=int, default=10, help="Number of games to simulate")
@click.option("--seed", type=int, default=0, help="Seed of the first game")
@click.option("--max-turns", type=int, default=500, help="Turn limit per game")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(games: int, seed: int, max_turns: int, verbose: bool):
    """Simulate one-suit games with a random player and summarize them."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)

    engine = GameEngine()
    stuck_games = 0
    total_turns = 0
    total_hidden = 0

    for i in range(games):
        game_seed = seed + i
        result = engine.simulate_game(
            RandomPlayer(seed=game_seed + 1000),  # Offset to avoid correlation with shuffle
            seed=game_seed,
            difficulty=Difficulty.EASY,
            max_turns=max_turns,
        )
        logger.info(f"Game {game_seed}: {result}")
        stuck_games += int(result.stuck)
        total_turns += result.turn_count
        total_hidden += result.hidden_remaining

    if games <= 0:
        click.echo("No games simulated.")
        return

    click.echo(f"Games: {games}")
    click.echo(f"Stuck before turn limit: {stuck_games}")
    click.echo(f"Avg turns: {total_turns / games:.1f}")
    click.echo(f"Avg hidden cards left: {total_hidden / games:.1f}")


if __name__ == "__main__":
    main()
