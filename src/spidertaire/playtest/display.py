"""Terminal display for the tableau and legal moves."""

from __future__ import annotations

from spidertaire.cards.schema import Card
from spidertaire.simulation.game import SpiderGame
from spidertaire.simulation.movegen import LegalMove
from spidertaire.simulation.state import NUM_COLUMNS, GridPosition

HIDDEN_CARD = "##"
CELL_WIDTH = 5


def format_card(card: Card) -> str:
    """Format card with unicode suit symbol."""
    return f"{card.rank.label}{card.suit.symbol}"


class TableauRenderer:
    """Renders the tableau to terminal."""

    def render(self, game: SpiderGame, debug: bool = False) -> str:
        """Render one column per tableau column, rows top to bottom."""
        lines: list[str] = []

        lines.append(f"=== Reserve: {game.reserve_count} set(s) ===")
        lines.append("")
        lines.append("    " + "".join(f"{c:<{CELL_WIDTH}}" for c in range(NUM_COLUMNS)))

        depth = max(game.state.column_heights(), default=0)
        for row in range(depth):
            cells: list[str] = []
            for column in range(NUM_COLUMNS):
                placed = game.state.card_at(GridPosition(column, row))
                if placed is None:
                    text = ""
                elif placed.is_shown or debug:
                    text = format_card(placed.card)
                    if not placed.is_shown:
                        text += "*"
                else:
                    text = HIDDEN_CARD
                cells.append(f"{text:<{CELL_WIDTH}}")
            lines.append(f"{row:>2}  " + "".join(cells).rstrip())

        if debug:
            lines.append("")
            lines.append("--- Debug Info ---")
            lines.append(f"Hidden: {game.hidden_count}  Shown: {game.shown_count}")
            lines.append(f"Moves: {game.moves_made}  Deals: {game.deals_made}")

        return "\n".join(lines)


class MovePresenter:
    """Presents legal moves to the player."""

    def present(self, moves: list[LegalMove], game: SpiderGame) -> str:
        lines: list[str] = []

        if moves:
            options: list[str] = []
            for i, move in enumerate(moves):
                placed = game.state.card_at(move.source)
                label = format_card(placed.card) if placed else "?"
                options.append(f"[{i + 1}] {label} {move}")
            lines.append("Moves: " + "  ".join(options))
        else:
            lines.append("No legal moves.")

        if game.reserve_count:
            lines.append("[d] Deal next set")
        lines.append("")
        lines.append("Enter choice, 'col row' to pick a card, or [q]uit:")

        return "\n".join(lines)
