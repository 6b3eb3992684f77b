import random

import pytest

from seabattle.game.core.board import Board
from seabattle.game.core.errors import PlacementExhausted
from seabattle.game.core.fleet import place_fleet
from seabattle.game.core.models import DEFAULT_FLEET, CellState, Fleet, Ship, ShotResult
from seabattle.game.core.shot_resolution import resolve_attack


@pytest.mark.parametrize("seed", [0, 1, 7, 42, 1337, 2024])
def test_random_placement_covers_fleet_without_overlap(seed: int) -> None:
    board = Board()
    placement = place_fleet(board, random.Random(seed))

    cells = placement.cells()
    assert len(cells) == DEFAULT_FLEET.total_cells
    assert len(set(cells)) == len(cells)
    assert board.occupied_count() == DEFAULT_FLEET.total_cells
    assert all(board.in_bounds(cell) for cell in cells)
    assert all(board.cell_state(cell) is CellState.OCCUPIED for cell in cells)


def test_placement_follows_declared_fleet_order(seeded_rng) -> None:
    fleet = Fleet(ships=(Ship(4), Ship(1), Ship(3)))
    placement = place_fleet(Board(), seeded_rng, fleet)
    assert [p.ship.length for p in placement.ships] == [4, 1, 3]


def test_placement_is_reproducible_for_a_seed() -> None:
    first = place_fleet(Board(), random.Random(99))
    second = place_fleet(Board(), random.Random(99))
    assert first.cells() == second.cells()


def test_sinking_placed_fleet_after_last_hit() -> None:
    board = Board()
    placement = place_fleet(board, random.Random(5))
    cells = placement.cells()
    for index, cell in enumerate(cells, start=1):
        assert resolve_attack(board, cell) is ShotResult.HIT
        assert board.all_ships_sunk() is (index == len(cells))


def test_fleet_larger_than_board_is_exhausted(seeded_rng) -> None:
    board = Board(size=2)
    with pytest.raises(PlacementExhausted):
        place_fleet(board, seeded_rng, Fleet(ships=(Ship(2), Ship(2), Ship(1))))
    assert board.occupied_count() == 0


def test_unplaceable_ship_is_exhausted(seeded_rng) -> None:
    with pytest.raises(PlacementExhausted):
        place_fleet(Board(size=3), seeded_rng, Fleet(ships=(Ship(4),)), max_attempts=50)
