from seabattle.game.core.board import Board
from seabattle.game.core.models import CellState, Coord, ShotResult
from seabattle.game.core.shot_resolution import resolve_attack


def test_resolve_attack_hit_and_miss(fixed_board: Board) -> None:
    assert resolve_attack(fixed_board, Coord(0, 0)) is ShotResult.HIT
    assert resolve_attack(fixed_board, Coord(9, 9)) is ShotResult.MISS
    assert fixed_board.cell_state(Coord(0, 0)) is CellState.HIT
    assert fixed_board.cell_state(Coord(9, 9)) is CellState.MISS


def test_attacking_same_cell_twice_is_invalid(fixed_board: Board) -> None:
    first = resolve_attack(fixed_board, Coord(0, 0))
    assert first in {ShotResult.HIT, ShotResult.MISS}
    before = fixed_board.snapshot()
    assert resolve_attack(fixed_board, Coord(0, 0)) is ShotResult.INVALID
    assert fixed_board.snapshot() == before

    resolve_attack(fixed_board, Coord(5, 5))
    before = fixed_board.snapshot()
    assert resolve_attack(fixed_board, Coord(5, 5)) is ShotResult.INVALID
    assert fixed_board.snapshot() == before


def test_out_of_bounds_attack_is_invalid_and_harmless(fixed_board: Board) -> None:
    before = fixed_board.snapshot()
    assert resolve_attack(fixed_board, Coord(10, 0)) is ShotResult.INVALID
    assert resolve_attack(fixed_board, Coord(0, -1)) is ShotResult.INVALID
    assert fixed_board.snapshot() == before


def test_sinking_every_ship_cell(fixed_board: Board, fixed_fleet) -> None:
    for cell in fixed_fleet.cells():
        assert resolve_attack(fixed_board, cell) is ShotResult.HIT
    assert fixed_board.all_ships_sunk()
