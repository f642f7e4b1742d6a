"""Terminal playtesting for Spidertaire."""

from spidertaire.playtest.stuck import StuckDetector
from spidertaire.playtest.display import TableauRenderer, MovePresenter, format_card
from spidertaire.playtest.input import HumanPlayer, InputResult
from spidertaire.playtest.session import PlaytestSession, PlaytestResult, SessionConfig

__all__ = [
    "StuckDetector",
    "TableauRenderer",
    "MovePresenter",
    "format_card",
    "HumanPlayer",
    "InputResult",
    "PlaytestSession",
    "PlaytestResult",
    "SessionConfig",
]
