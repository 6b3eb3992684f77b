"""Uniform random targeting without memory of earlier hits."""

from __future__ import annotations

import random

from seabattle.game.ai.strategy import TargetingPolicy
from seabattle.game.core.board import Board
from seabattle.game.core.errors import TargetingExhausted
from seabattle.game.core.models import Coord

MAX_REJECTIONS = 200


class RandomTargeting(TargetingPolicy):
    """Rejection-samples the board until an unattacked cell comes up."""

    name = "random"

    def __init__(self, rng: random.Random, max_rejections: int = MAX_REJECTIONS) -> None:
        self._rng = rng
        self._max_rejections = max_rejections

    def next_target(self, board: Board) -> Coord:
        for _ in range(self._max_rejections):
            coord = Coord(self._rng.randrange(board.size), self._rng.randrange(board.size))
            if not board.was_attacked(coord):
                return coord

        # Late game: most cells are gone, pick from what is left.
        remaining = board.unattacked_cells()
        if not remaining:
            raise TargetingExhausted("Every cell on the board has been attacked.")
        return self._rng.choice(remaining)
