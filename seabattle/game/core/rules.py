"""Game session state and attack bookkeeping."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from seabattle.game.core.board import Board
from seabattle.game.core.fleet import place_fleet
from seabattle.game.core.models import (
    BOARD_SIZE,
    DEFAULT_FLEET,
    Coord,
    Fleet,
    FleetPlacement,
    ShotResult,
    Side,
)
from seabattle.game.core.shot_resolution import resolve_attack

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TurnResult:
    """One resolved attack."""

    attacker: Side
    coord: Coord
    outcome: ShotResult


@dataclass(slots=True)
class GameSession:
    """Runtime game session state."""

    player_board: Board
    opponent_board: Board
    player_fleet: FleetPlacement
    opponent_fleet: FleetPlacement
    turn: Side = Side.PLAYER
    winner: Side | None = None
    rounds: int = 0
    history: list[TurnResult] = field(default_factory=list)

    def board_of(self, side: Side) -> Board:
        """Board owned by ``side``."""
        return self.player_board if side is Side.PLAYER else self.opponent_board

    def target_board(self, attacker: Side) -> Board:
        """Board that ``attacker`` fires at."""
        return self.board_of(attacker.other)

    @property
    def is_over(self) -> bool:
        return self.winner is not None


def create_session(
    rng: random.Random,
    fleet: Fleet = DEFAULT_FLEET,
    size: int = BOARD_SIZE,
) -> GameSession:
    """Create both boards and place each side's fleet with the shared rng."""
    player_board = Board(size)
    opponent_board = Board(size)
    player_fleet = place_fleet(player_board, rng, fleet)
    opponent_fleet = place_fleet(opponent_board, rng, fleet)
    logger.info("session_created size=%d ships=%d", size, len(fleet))
    return GameSession(
        player_board=player_board,
        opponent_board=opponent_board,
        player_fleet=player_fleet,
        opponent_fleet=opponent_fleet,
    )


def fire(session: GameSession, attacker: Side, coord: Coord) -> ShotResult:
    """Resolve ``attacker``'s shot at the opposing board.

    Valid shots are appended to the history. When the target fleet is sunk the
    attacker becomes the winner; otherwise the turn passes to the other side.
    Shots out of turn or after the game ended resolve to ``INVALID``.
    """
    if session.winner is not None or session.turn is not attacker:
        return ShotResult.INVALID

    board = session.target_board(attacker)
    result = resolve_attack(board, coord)
    if result is ShotResult.INVALID:
        return result

    session.history.append(TurnResult(attacker=attacker, coord=coord, outcome=result))
    if board.all_ships_sunk():
        session.winner = attacker
        logger.info("game_won winner=%s shots=%d", attacker.value, len(session.history))
    else:
        session.turn = attacker.other
    return result
