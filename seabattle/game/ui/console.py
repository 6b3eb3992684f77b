"""Console adapters for the turn controller's input and presentation ports."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TextIO

from seabattle.game.core.board import BoardView
from seabattle.game.core.models import CellState, ShotResult, Side
from seabattle.game.core.rules import TurnResult

CELL_SYMBOLS: dict[CellState, str] = {
    CellState.EMPTY: "~",
    CellState.OCCUPIED: "X",
    CellState.HIT: "H",
    CellState.MISS: "M",
}

PROMPT = "Enter coordinates to attack (e.g., A5): "
_CLEAR_SCREEN = "\033[2J\033[H"


def render_board(view: BoardView) -> list[str]:
    """Render a board view as text lines with column letters and row digits."""
    size = len(view)
    header = "   " + " ".join(chr(ord("A") + col) for col in range(size))
    lines = [header]
    for row_index, row in enumerate(view):
        cells = " ".join(CELL_SYMBOLS[state] for state in row)
        lines.append(f"{row_index:<2} {cells}")
    return lines


class ConsoleInput:
    """Reads raw coordinates from a line-oriented prompt."""

    def __init__(self, read_line: Callable[[str], str] | None = None) -> None:
        self._read_line = read_line if read_line is not None else input

    def read_coordinate(self) -> str | None:
        try:
            return self._read_line(PROMPT)
        except EOFError:
            return None


class ConsolePresenter:
    """Writes boards and turn results to a text stream."""

    def __init__(self, stream: TextIO | None = None, *, clear_screen: bool = False) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._clear_screen = clear_screen

    def show_boards(self, player_view: BoardView, opponent_view: BoardView) -> None:
        if self._clear_screen:
            self._stream.write(_CLEAR_SCREEN)
        self._write("Player's board:")
        for line in render_board(player_view):
            self._write(line)
        self._write("")
        self._write("Computer's board:")
        for line in render_board(opponent_view):
            self._write(line)
        self._write("")
        self._write("Player's turn.")

    def show_turn(self, result: TurnResult) -> None:
        if result.attacker is Side.PLAYER:
            self._write("Hit!" if result.outcome is ShotResult.HIT else "Miss!")
        else:
            verb = "hit" if result.outcome is ShotResult.HIT else "missed"
            self._write(f"Computer {verb} at {result.coord.label}!")
        self._write("")

    def show_rejected(self, raw: str, reason: str) -> None:
        self._write(reason)

    def show_game_over(self, winner: Side) -> None:
        if winner is Side.PLAYER:
            self._write("You sank the computer's fleet. You win!")
        else:
            self._write("The computer sank your fleet. You lose.")
        self._write("Game over. Thank you for playing!")

    def _write(self, line: str) -> None:
        self._stream.write(line + "\n")
        self._stream.flush()
