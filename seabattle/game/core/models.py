"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BOARD_SIZE = 10


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


class CellState(StrEnum):
    """State of a single board cell."""

    EMPTY = "EMPTY"
    OCCUPIED = "OCCUPIED"
    HIT = "HIT"
    MISS = "MISS"

    @property
    def attacked(self) -> bool:
        return self is CellState.HIT or self is CellState.MISS


class ShotResult(StrEnum):
    """Result of a single attack."""

    HIT = "HIT"
    MISS = "MISS"
    INVALID = "INVALID"


class Side(StrEnum):
    """Owner of a board or of the current turn."""

    PLAYER = "PLAYER"
    OPPONENT = "OPPONENT"

    @property
    def other(self) -> Side:
        return Side.OPPONENT if self is Side.PLAYER else Side.PLAYER


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int

    @property
    def label(self) -> str:
        """Console label: column letter followed by row digit, e.g. ``A5``."""
        return f"{chr(ord('A') + self.col)}{self.row}"


@dataclass(frozen=True, slots=True)
class Ship:
    """Immutable vessel descriptor."""

    length: int

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError(f"Ship length must be positive, got {self.length}.")


@dataclass(frozen=True, slots=True)
class Fleet:
    """Ordered, fixed collection of ships owned by one side."""

    ships: tuple[Ship, ...]

    @property
    def total_cells(self) -> int:
        return sum(ship.length for ship in self.ships)

    def __iter__(self):
        return iter(self.ships)

    def __len__(self) -> int:
        return len(self.ships)


DEFAULT_FLEET = Fleet(ships=(Ship(1), Ship(2), Ship(3), Ship(4)))


@dataclass(frozen=True, slots=True)
class ShipPlacement:
    """Placement of a single ship."""

    ship: Ship
    bow: Coord
    orientation: Orientation


@dataclass(slots=True)
class FleetPlacement:
    """Committed placements for one side, in placement order."""

    ships: list[ShipPlacement]

    def cells(self) -> list[Coord]:
        """All occupied cells across the fleet."""
        result: list[Coord] = []
        for placement in self.ships:
            result.extend(cells_for_placement(placement))
        return result


def cells_for_placement(placement: ShipPlacement) -> list[Coord]:
    """Compute occupied cells for a ship placement."""
    result: list[Coord] = []
    for i in range(placement.ship.length):
        if placement.orientation is Orientation.HORIZONTAL:
            result.append(Coord(placement.bow.row, placement.bow.col + i))
        else:
            result.append(Coord(placement.bow.row + i, placement.bow.col))
    return result
