from __future__ import annotations

from collections.abc import Iterable

from seabattle.game.core.board import Board, BoardView
from seabattle.game.core.models import FleetPlacement, Side
from seabattle.game.core.rules import GameSession, TurnResult


class ScriptedInput:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.reads = 0

    def read_coordinate(self) -> str | None:
        self.reads += 1
        if not self._lines:
            return None
        return self._lines.pop(0)


class RecordingPresenter:
    def __init__(self) -> None:
        self.boards: list[tuple[BoardView, BoardView]] = []
        self.turns: list[TurnResult] = []
        self.rejected: list[tuple[str, str]] = []
        self.winner: Side | None = None

    def show_boards(self, player_view: BoardView, opponent_view: BoardView) -> None:
        self.boards.append((player_view, opponent_view))

    def show_turn(self, result: TurnResult) -> None:
        self.turns.append(result)

    def show_rejected(self, raw: str, reason: str) -> None:
        self.rejected.append((raw, reason))

    def show_game_over(self, winner: Side) -> None:
        self.winner = winner


def make_session(player_fleet: FleetPlacement, opponent_fleet: FleetPlacement) -> GameSession:
    player_board = Board()
    opponent_board = Board()
    for placement in player_fleet.ships:
        player_board.place_ship(placement)
    for placement in opponent_fleet.ships:
        opponent_board.place_ship(placement)
    return GameSession(
        player_board=player_board,
        opponent_board=opponent_board,
        player_fleet=player_fleet,
        opponent_fleet=opponent_fleet,
    )
