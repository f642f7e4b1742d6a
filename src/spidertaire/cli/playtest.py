"""CLI command for playing in the terminal."""

from __future__ import annotations

import logging

import click

from spidertaire.playtest.session import PlaytestSession, SessionConfig


@click.command()
@click.option("--debug", is_flag=True, help="Show face-down cards and counters")
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--max-turns", type=int, default=500, help="Turn limit before forced end")
@click.option("--show-help/--no-help", default=True, help="Display how to play at start")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    debug: bool,
    seed: int | None,
    max_turns: int,
    show_help: bool,
    verbose: bool,
):
    """Play a one-suit game of Spider Solitaire in the terminal."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    config = SessionConfig(
        debug=debug,
        max_turns=max_turns,
        seed=seed,
        show_help=show_help,
    )
    session = PlaytestSession(config)

    try:
        result = session.run(output_fn=click.echo)
    except KeyboardInterrupt:
        click.echo("\n\nGame interrupted.")
        return

    click.echo("")
    click.echo(
        f"{result.outcome}: {result.moves_made} move(s), "
        f"{result.deals_made} deal(s) in {result.turns} turn(s)"
    )
    click.echo(f"Seed: {result.seed}")


if __name__ == "__main__":
    main()
