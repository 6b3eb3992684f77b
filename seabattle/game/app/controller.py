"""Turn controller: alternates player and opponent attacks until a fleet sinks."""

from __future__ import annotations

import logging

from seabattle.game.ai.strategy import TargetingPolicy
from seabattle.game.app.ports import InputSource, Presenter
from seabattle.game.app.state_machine import GamePhase
from seabattle.game.core.coordinates import parse_coordinate
from seabattle.game.core.errors import (
    CoordinateParseError,
    InputAttemptsExhausted,
    InputClosed,
    InvalidTransition,
)
from seabattle.game.core.models import Coord, ShotResult, Side
from seabattle.game.core.rules import GameSession, fire

logger = logging.getLogger(__name__)


class TurnController:
    """State machine driving one game session.

    The controller owns both boards for the duration of the game and routes
    every attack through the session rules. It never renders; all output goes
    to the presenter.
    """

    def __init__(
        self,
        session: GameSession,
        targeting: TargetingPolicy,
        input_source: InputSource,
        presenter: Presenter,
        *,
        max_input_attempts: int | None = None,
    ) -> None:
        if max_input_attempts is not None and max_input_attempts <= 0:
            raise ValueError("max_input_attempts must be positive or None.")
        self._session = session
        self._targeting = targeting
        self._input = input_source
        self._presenter = presenter
        self._max_input_attempts = max_input_attempts
        self._phase = _phase_for(session)

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def session(self) -> GameSession:
        return self._session

    def step(self) -> GamePhase:
        """Run one transition of the state machine and return the new phase."""
        if self._phase is GamePhase.AWAITING_PLAYER_MOVE:
            self._player_move()
        elif self._phase is GamePhase.AWAITING_OPPONENT_MOVE:
            self._opponent_move()
        return self._phase

    def play(self) -> Side:
        """Run until the game is over, announce and return the winner."""
        logger.info("game_started targeting=%s", self._targeting.name)
        while self._phase is not GamePhase.GAME_OVER:
            self.step()
        winner = self._session.winner
        if winner is None:
            raise InvalidTransition("Game reached GAME_OVER without a winner.")
        logger.info(
            "game_over winner=%s rounds=%d shots=%d",
            winner.value,
            self._session.rounds,
            len(self._session.history),
        )
        self._presenter.show_game_over(winner)
        return winner

    def _player_move(self) -> None:
        session = self._session
        session.rounds += 1
        self._presenter.show_boards(
            session.player_board.snapshot(reveal_ships=True),
            session.opponent_board.snapshot(reveal_ships=False),
        )

        rejected = 0
        while True:
            raw = self._input.read_coordinate()
            if raw is None:
                raise InputClosed("Player input closed before the game finished.")
            coord, reason = self._attempt_player_attack(raw)
            if coord is not None:
                break
            self._presenter.show_rejected(raw, reason)
            rejected += 1
            if self._max_input_attempts is not None and rejected >= self._max_input_attempts:
                raise InputAttemptsExhausted(
                    f"No valid coordinate after {rejected} attempts."
                )

    def _attempt_player_attack(self, raw: str) -> tuple[Coord | None, str]:
        try:
            coord = parse_coordinate(raw)
        except CoordinateParseError as exc:
            logger.debug("player_input_rejected raw=%r reason=%s", raw, exc)
            return None, "Invalid input. Please enter a valid coordinate."

        result = fire(self._session, Side.PLAYER, coord)
        if result is ShotResult.INVALID:
            reason = _rejection_reason(self._session, coord)
            logger.debug("player_attack_rejected coord=%s reason=%s", coord.label, reason)
            return None, reason

        self._record(Side.PLAYER)
        return coord, ""

    def _opponent_move(self) -> None:
        board = self._session.player_board
        coord = self._targeting.next_target(board)
        result = fire(self._session, Side.OPPONENT, coord)
        if result is ShotResult.INVALID:
            raise InvalidTransition(
                f"Targeting policy '{self._targeting.name}' chose unavailable cell {coord.label}."
            )
        self._targeting.notify_result(coord, result)
        self._record(Side.OPPONENT)

    def _record(self, attacker: Side) -> None:
        self._presenter.show_turn(self._session.history[-1])
        if self._session.is_over:
            self._phase = GamePhase.GAME_OVER
        elif attacker is Side.PLAYER:
            self._phase = GamePhase.AWAITING_OPPONENT_MOVE
        else:
            self._phase = GamePhase.AWAITING_PLAYER_MOVE


def _phase_for(session: GameSession) -> GamePhase:
    if session.is_over:
        return GamePhase.GAME_OVER
    if session.turn is Side.OPPONENT:
        return GamePhase.AWAITING_OPPONENT_MOVE
    return GamePhase.AWAITING_PLAYER_MOVE


def _rejection_reason(session: GameSession, coord: Coord) -> str:
    if session.is_over or session.turn is not Side.PLAYER:
        return "It is not your turn."
    if not session.opponent_board.in_bounds(coord):
        return "Coordinates out of bounds. Please enter valid coordinates."
    return f"{coord.label} was already attacked. Choose another cell."
