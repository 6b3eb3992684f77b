"""Random fleet placement by rejection sampling."""

from __future__ import annotations

import logging
import random

from seabattle.game.core.board import Board
from seabattle.game.core.errors import PlacementExhausted
from seabattle.game.core.models import (
    DEFAULT_FLEET,
    Coord,
    Fleet,
    FleetPlacement,
    Orientation,
    Ship,
    ShipPlacement,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 10_000


def place_fleet(
    board: Board,
    rng: random.Random,
    fleet: Fleet = DEFAULT_FLEET,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> FleetPlacement:
    """Place every ship of ``fleet`` on ``board`` in declared order.

    Each ship draws a uniform bow and orientation until the board accepts it.
    Raises ``PlacementExhausted`` when the fleet cannot fit on the board or a
    ship is still unplaced after ``max_attempts`` draws.
    """
    capacity = board.size * board.size
    if fleet.total_cells > capacity:
        raise PlacementExhausted(
            f"Fleet needs {fleet.total_cells} cells but the board only has {capacity}."
        )

    placements: list[ShipPlacement] = []
    for ship in fleet:
        placement = _sample_placement(board, ship, rng, max_attempts)
        board.place_ship(placement)
        placements.append(placement)

    logger.debug("fleet_placed ships=%d cells=%d", len(placements), fleet.total_cells)
    return FleetPlacement(ships=placements)


def _sample_placement(
    board: Board, ship: Ship, rng: random.Random, max_attempts: int
) -> ShipPlacement:
    for _ in range(max_attempts):
        orientation = rng.choice([Orientation.HORIZONTAL, Orientation.VERTICAL])
        row = rng.randrange(board.size)
        col = rng.randrange(board.size)
        placement = ShipPlacement(ship=ship, bow=Coord(row=row, col=col), orientation=orientation)
        if board.can_place(placement):
            return placement
    raise PlacementExhausted(
        f"Failed to place ship of length {ship.length} after {max_attempts} attempts."
    )
