"""Tests for the mutable tableau state."""

import pytest
from spidertaire.cards.schema import Card, Rank, Suit
from spidertaire.simulation.state import (
    AvailableSet,
    GameState,
    GridPosition,
    TableauDesyncError,
    Visibility,
)


def make_card(rank: str, suit: str = "S") -> Card:
    """Helper to create cards."""
    return Card(rank=Rank(rank), suit=Suit(suit))


def test_next_row() -> None:
    assert GridPosition(3, 1).next_row() == GridPosition(3, 2)


def test_grid_position_is_hashable() -> None:
    cells = {GridPosition(0, 0): "a"}
    assert cells[GridPosition(0, 0)] == "a"


def test_place_indexes_card() -> None:
    state = GameState()
    placed = state.place(make_card("9"), GridPosition(5, 1), Visibility.SHOWN)

    assert state.is_occupied(GridPosition(5, 1))
    assert state.card_at(GridPosition(5, 1)) is placed
    assert state.card_at(GridPosition(5, 2)) is None
    assert placed.is_shown


def test_ids_are_stable_and_unique() -> None:
    state = GameState()
    a = state.place(make_card("9"), GridPosition(0, 0), Visibility.HIDDEN)
    b = state.place(make_card("8"), GridPosition(0, 1), Visibility.SHOWN)

    assert a.card_id != b.card_id
    state.lift(a.card_id)
    state.drop(a.card_id, GridPosition(4, 0))
    assert state.card_at(GridPosition(4, 0)).card_id == a.card_id


def test_shown_and_hidden_partition() -> None:
    state = GameState()
    state.place(make_card("9"), GridPosition(0, 0), Visibility.HIDDEN)
    state.place(make_card("8"), GridPosition(0, 1), Visibility.SHOWN)
    state.place(make_card("7"), GridPosition(0, 2), Visibility.SHOWN)

    assert len(list(state.hidden_cards())) == 1
    assert len(list(state.shown_cards())) == 2


def test_lift_and_drop_update_index() -> None:
    state = GameState()
    placed = state.place(make_card("9"), GridPosition(0, 0), Visibility.SHOWN)

    state.lift(placed.card_id)
    assert not state.is_occupied(GridPosition(0, 0))

    state.drop(placed.card_id, GridPosition(2, 3))
    assert placed.position == GridPosition(2, 3)
    assert state.grid == {GridPosition(2, 3): placed.card_id}


def test_lift_out_of_sync_fails_fast() -> None:
    state = GameState()
    placed = state.place(make_card("9"), GridPosition(0, 0), Visibility.SHOWN)
    del state.grid[GridPosition(0, 0)]

    with pytest.raises(TableauDesyncError, match="out of sync"):
        state.lift(placed.card_id)


def test_drop_onto_occupied_cell_fails_fast() -> None:
    state = GameState()
    a = state.place(make_card("9"), GridPosition(0, 0), Visibility.SHOWN)
    state.place(make_card("8"), GridPosition(1, 0), Visibility.SHOWN)
    state.lift(a.card_id)

    with pytest.raises(TableauDesyncError):
        state.drop(a.card_id, GridPosition(1, 0))


def test_place_onto_occupied_cell_fails_fast() -> None:
    state = GameState()
    state.place(make_card("9"), GridPosition(0, 0), Visibility.SHOWN)

    with pytest.raises(TableauDesyncError):
        state.place(make_card("8"), GridPosition(0, 0), Visibility.SHOWN)


def test_column_heights() -> None:
    state = GameState()
    state.place(make_card("9"), GridPosition(0, 0), Visibility.HIDDEN)
    state.place(make_card("8"), GridPosition(0, 1), Visibility.SHOWN)
    state.place(make_card("7"), GridPosition(3, 0), Visibility.SHOWN)

    assert state.column_heights() == [2, 0, 0, 1, 0, 0, 0, 0, 0, 0]


class TestAvailableSet:
    """Tests for AvailableSet."""

    def test_needs_ten_cards(self):
        with pytest.raises(ValueError):
            AvailableSet(tuple(make_card("9") for _ in range(9)))

    def test_list_converted_to_tuple(self):
        available = AvailableSet([make_card("9")] * 10)  # type: ignore

        assert isinstance(available.cards, tuple)
        assert len(available.cards) == 10
