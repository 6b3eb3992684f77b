"""Attack outcome evaluation (hit/miss/invalid)."""

from __future__ import annotations

import logging

from seabattle.game.core.board import Board
from seabattle.game.core.models import CellState, Coord, ShotResult

logger = logging.getLogger(__name__)


def resolve_attack(board: Board, coord: Coord) -> ShotResult:
    """Apply an attack to ``board`` and classify it.

    Out-of-bounds and repeated targets resolve to ``INVALID`` and leave the
    board untouched.
    """
    if not board.in_bounds(coord):
        logger.debug("attack_rejected coord=(%d, %d) reason=out_of_bounds", coord.row, coord.col)
        return ShotResult.INVALID

    state = board.cell_state(coord)
    if state.attacked:
        logger.debug("attack_rejected coord=%s reason=already_attacked", coord.label)
        return ShotResult.INVALID

    if state is CellState.OCCUPIED:
        board.mark_hit(coord)
        result = ShotResult.HIT
    else:
        board.mark_miss(coord)
        result = ShotResult.MISS
    logger.debug("attack_resolved coord=%s result=%s", coord.label, result.value)
    return result
