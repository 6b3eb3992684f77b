"""Game error taxonomy."""

from __future__ import annotations


class SeaBattleError(Exception):
    """Base class for all game errors."""


class OutOfBounds(SeaBattleError, IndexError):
    """Coordinate lies outside the board grid."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(f"({row}, {col}) is outside the {size}x{size} board.")
        self.row = row
        self.col = col
        self.size = size


class InvalidTransition(SeaBattleError):
    """Cell state change not allowed from the cell's current state."""


class PlacementConflict(SeaBattleError, ValueError):
    """Ship placement overlaps another ship or leaves the board."""


class PlacementExhausted(SeaBattleError):
    """Fleet could not be placed on the board."""


class CoordinateParseError(SeaBattleError, ValueError):
    """Raw coordinate text is not a letter followed by a digit."""


class TargetingExhausted(SeaBattleError):
    """No attackable cell remains for the targeting policy."""


class InputClosed(SeaBattleError):
    """Player input stream ended before the game finished."""


class InputAttemptsExhausted(SeaBattleError):
    """Player exceeded the configured number of invalid input attempts."""
