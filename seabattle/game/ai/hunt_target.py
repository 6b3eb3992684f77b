"""Hunt/target policy: probe around hits before hunting again."""

from __future__ import annotations

import random
from collections import deque

from seabattle.game.ai.strategy import TargetingPolicy
from seabattle.game.core.board import Board
from seabattle.game.core.errors import TargetingExhausted
from seabattle.game.core.models import BOARD_SIZE, Coord, ShotResult


class HuntTargeting(TargetingPolicy):
    """Hunt on a shuffled parity pattern; after a hit, queue its neighbours."""

    name = "hunt"

    def __init__(self, rng: random.Random, size: int = BOARD_SIZE) -> None:
        self._rng = rng
        self._size = size
        self._target_queue: deque[Coord] = deque()
        self._hunt_cells: list[Coord] = [
            Coord(r, c) for r in range(size) for c in range(size) if (r + c) % 2 == 0
        ]
        self._rng.shuffle(self._hunt_cells)

    def next_target(self, board: Board) -> Coord:
        while self._target_queue:
            coord = self._target_queue.popleft()
            if board.in_bounds(coord) and not board.was_attacked(coord):
                return coord

        while self._hunt_cells:
            coord = self._hunt_cells.pop()
            if board.in_bounds(coord) and not board.was_attacked(coord):
                return coord

        remaining = board.unattacked_cells()
        if not remaining:
            raise TargetingExhausted("Every cell on the board has been attacked.")
        return self._rng.choice(remaining)

    def notify_result(self, coord: Coord, result: ShotResult) -> None:
        if result is ShotResult.HIT:
            self._enqueue_target_neighbors(coord)

    def _enqueue_target_neighbors(self, coord: Coord) -> None:
        candidates = (
            Coord(coord.row - 1, coord.col),
            Coord(coord.row + 1, coord.col),
            Coord(coord.row, coord.col - 1),
            Coord(coord.row, coord.col + 1),
        )
        for cell in candidates:
            if not (0 <= cell.row < self._size and 0 <= cell.col < self._size):
                continue
            if cell in self._target_queue:
                continue
            self._target_queue.append(cell)
