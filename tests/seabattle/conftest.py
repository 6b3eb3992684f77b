from __future__ import annotations

import random

import pytest

from seabattle.game.core.board import Board
from seabattle.game.core.models import (
    Coord,
    FleetPlacement,
    Orientation,
    Ship,
    ShipPlacement,
)


def make_fixed_fleet() -> FleetPlacement:
    return FleetPlacement(
        ships=[
            ShipPlacement(Ship(1), Coord(0, 0), Orientation.HORIZONTAL),
            ShipPlacement(Ship(2), Coord(2, 0), Orientation.HORIZONTAL),
            ShipPlacement(Ship(3), Coord(4, 0), Orientation.HORIZONTAL),
            ShipPlacement(Ship(4), Coord(6, 0), Orientation.HORIZONTAL),
        ]
    )


@pytest.fixture
def fixed_fleet() -> FleetPlacement:
    return make_fixed_fleet()


@pytest.fixture
def fixed_board(fixed_fleet: FleetPlacement) -> Board:
    board = Board()
    for placement in fixed_fleet.ships:
        board.place_ship(placement)
    return board


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)
