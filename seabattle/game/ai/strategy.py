"""Targeting policy interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from seabattle.game.core.board import Board
from seabattle.game.core.models import Coord, ShotResult


class TargetingPolicy(ABC):
    """Chooses the automated side's next attack coordinate."""

    name = "base"

    @abstractmethod
    def next_target(self, board: Board) -> Coord:
        """Return an in-bounds coordinate not yet attacked on ``board``."""

    def notify_result(self, coord: Coord, result: ShotResult) -> None:
        """Update strategy state with the resolved outcome of a chosen target."""
