"""Property-based tests for move generation and application."""

import random

from hypothesis import given, settings, strategies as st
from spidertaire.simulation.game import SpiderGame
from spidertaire.simulation.setup import Difficulty
from spidertaire.simulation.state import GridPosition

TOTAL_CARDS = 104


def play_random(game: SpiderGame, rng: random.Random, steps: int) -> list[set[int]]:
    """Play random moves/deals; return the shown card ids after each step."""
    shown_history: list[set[int]] = []
    for _ in range(steps):
        moves = game.legal_moves
        if moves and (game.reserve_count == 0 or rng.random() < 0.85):
            game.play(rng.choice(moves))
        elif not game.deal():
            break
        shown_history.append({c.card_id for c in game.state.shown_cards()})
    return shown_history


def assert_consistent(game: SpiderGame) -> None:
    state = game.state
    assert len(state.grid) == len(state.cards)
    for position, card_id in state.grid.items():
        assert state.cards[card_id].position == position
    assert len(state.cards) + 10 * len(state.available_sets) == TOTAL_CARDS
    # Columns may have gaps, but no card sits at or past its column's height
    heights = state.column_heights()
    for position in state.grid:
        assert 0 <= position.row < heights[position.column]
    assert sum(heights) >= len(state.grid)


@settings(max_examples=30, deadline=None)
@given(
    seed=st.integers(min_value=0, max_value=10000),
    difficulty=st.sampled_from(list(Difficulty)),
)
def test_state_stays_consistent_property(seed: int, difficulty: Difficulty) -> None:
    """Property: grid and card arena never drift apart and no card is lost."""
    game = SpiderGame.new(difficulty, seed=seed)
    play_random(game, random.Random(seed), steps=60)

    assert_consistent(game)


@settings(max_examples=30, deadline=None)
@given(seed=st.integers(min_value=0, max_value=10000))
def test_shown_cards_never_hidden_again_property(seed: int) -> None:
    """Property: the set of face-up cards only grows."""
    game = SpiderGame.new(seed=seed)
    history = play_random(game, random.Random(seed), steps=60)

    for earlier, later in zip(history, history[1:]):
        assert earlier <= later


@settings(max_examples=30, deadline=None)
@given(seed=st.integers(min_value=0, max_value=10000))
def test_no_uncovered_hidden_card_property(seed: int) -> None:
    """Property: after every action each hidden card has a card beneath it."""
    game = SpiderGame.new(seed=seed)
    rng = random.Random(seed)

    for _ in range(40):
        play_random(game, rng, steps=1)
        for placed in game.state.hidden_cards():
            assert game.state.is_occupied(placed.position.next_row())


@settings(max_examples=30, deadline=None)
@given(seed=st.integers(min_value=0, max_value=10000))
def test_legal_moves_well_formed_property(seed: int) -> None:
    """Property: sources are face up, targets empty, one rank below."""
    game = SpiderGame.new(Difficulty.HARD, seed=seed)
    rng = random.Random(seed)

    for _ in range(30):
        state = game.state
        for move in game.legal_moves:
            source = state.card_at(move.source)
            reference = state.card_at(GridPosition(move.target.column, move.target.row - 1))
            assert source is not None and source.is_shown
            assert not state.is_occupied(move.target)
            assert reference is not None and reference.is_shown
            assert reference.card.rank.successor == source.card.rank
        play_random(game, rng, steps=1)
