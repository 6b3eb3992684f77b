"""Collaborator contracts used by the turn controller."""

from __future__ import annotations

from typing import Protocol

from seabattle.game.core.board import BoardView
from seabattle.game.core.models import Side
from seabattle.game.core.rules import TurnResult


class InputSource(Protocol):
    """Supplies raw coordinate text for the player's turn."""

    def read_coordinate(self) -> str | None:
        """Return the next raw coordinate, or ``None`` once input is closed."""


class Presenter(Protocol):
    """Receives game notifications; owns all rendering."""

    def show_boards(self, player_view: BoardView, opponent_view: BoardView) -> None:
        """Show both boards at the start of a round; opponent ships concealed."""

    def show_turn(self, result: TurnResult) -> None:
        """Report a resolved attack."""

    def show_rejected(self, raw: str, reason: str) -> None:
        """Report player input that did not produce an attack."""

    def show_game_over(self, winner: Side) -> None:
        """Report the end of the game."""
