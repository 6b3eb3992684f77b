"""Board state representation and mutation helpers."""

from __future__ import annotations

import logging

import numpy as np

from seabattle.game.core.errors import InvalidTransition, OutOfBounds, PlacementConflict
from seabattle.game.core.models import (
    BOARD_SIZE,
    CellState,
    Coord,
    ShipPlacement,
    cells_for_placement,
)

logger = logging.getLogger(__name__)

_EMPTY = 0
_OCCUPIED = 1
_HIT = 2
_MISS = 3

_STATE_BY_CODE: tuple[CellState, ...] = (
    CellState.EMPTY,
    CellState.OCCUPIED,
    CellState.HIT,
    CellState.MISS,
)

BoardView = tuple[tuple[CellState, ...], ...]


class Board:
    """Numpy-backed N x N grid of cell states for one side.

    All cell mutation goes through ``place_ship``, ``mark_hit`` and
    ``mark_miss``. Placement is only allowed before the first attack.
    """

    __slots__ = ("_size", "_cells", "_in_play")

    def __init__(self, size: int = BOARD_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"Board size must be positive, got {size}.")
        self._size = size
        self._cells = np.zeros((size, size), dtype=np.int8)
        self._in_play = False

    @property
    def size(self) -> int:
        return self._size

    def is_within_bounds(self, row: int, col: int) -> bool:
        """Return whether ``(row, col)`` lies on the grid."""
        return 0 <= row < self._size and 0 <= col < self._size

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in board bounds."""
        return self.is_within_bounds(coord.row, coord.col)

    def cell_state(self, coord: Coord) -> CellState:
        """Return the current state of a cell."""
        self._require_in_bounds(coord)
        return _STATE_BY_CODE[int(self._cells[coord.row, coord.col])]

    def was_attacked(self, coord: Coord) -> bool:
        """Return whether this cell was previously targeted."""
        return self.cell_state(coord).attacked

    def can_place(self, placement: ShipPlacement) -> bool:
        """Return whether a placement is in bounds and non-overlapping."""
        for cell in cells_for_placement(placement):
            if not self.in_bounds(cell):
                return False
            if self._cells[cell.row, cell.col] != _EMPTY:
                return False
        return True

    def place_ship(self, placement: ShipPlacement) -> None:
        """Mark every cell of the placement as occupied, or none of them."""
        if self._in_play:
            raise InvalidTransition("Ships cannot be placed after play has begun.")
        if not self.can_place(placement):
            raise PlacementConflict(
                f"Ship of length {placement.ship.length} at {placement.bow.label} "
                f"({placement.orientation.value}) overlaps or leaves the board."
            )
        for cell in cells_for_placement(placement):
            self._cells[cell.row, cell.col] = _OCCUPIED
        logger.debug(
            "ship_placed length=%d bow=%s orientation=%s",
            placement.ship.length,
            placement.bow.label,
            placement.orientation.value,
        )

    def mark_hit(self, coord: Coord) -> None:
        """Transition an occupied cell to hit."""
        self._transition(coord, expected=_OCCUPIED, target=_HIT)

    def mark_miss(self, coord: Coord) -> None:
        """Transition an empty cell to miss."""
        self._transition(coord, expected=_EMPTY, target=_MISS)

    def all_ships_sunk(self) -> bool:
        """Return whether every occupied cell has been hit."""
        return not bool(np.any(self._cells == _OCCUPIED))

    def occupied_count(self) -> int:
        """Number of ship cells not yet hit."""
        return int(np.count_nonzero(self._cells == _OCCUPIED))

    def unattacked_cells(self) -> list[Coord]:
        """Cells that are still valid attack targets, in row-major order."""
        rows, cols = np.nonzero(self._cells < _HIT)
        return [Coord(int(row), int(col)) for row, col in zip(rows, cols)]

    def snapshot(self, *, reveal_ships: bool = True) -> BoardView:
        """Read-only copy of the grid; concealed ships read as empty water."""
        rows: list[tuple[CellState, ...]] = []
        for raw_row in self._cells:
            row: list[CellState] = []
            for code in raw_row:
                state = _STATE_BY_CODE[int(code)]
                if not reveal_ships and state is CellState.OCCUPIED:
                    state = CellState.EMPTY
                row.append(state)
            rows.append(tuple(row))
        return tuple(rows)

    def _transition(self, coord: Coord, *, expected: int, target: int) -> None:
        self._require_in_bounds(coord)
        current = int(self._cells[coord.row, coord.col])
        if current != expected:
            raise InvalidTransition(
                f"Cannot mark {coord.label} as {_STATE_BY_CODE[target].value}: "
                f"cell is {_STATE_BY_CODE[current].value}."
            )
        self._cells[coord.row, coord.col] = target
        self._in_play = True

    def _require_in_bounds(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise OutOfBounds(coord.row, coord.col, self._size)
