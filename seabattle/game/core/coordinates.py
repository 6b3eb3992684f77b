"""Raw coordinate text parsing and formatting."""

from __future__ import annotations

from seabattle.game.core.errors import CoordinateParseError
from seabattle.game.core.models import Coord


def parse_coordinate(raw: str) -> Coord:
    """Translate text like ``A5`` into ``Coord(row=5, col=0)``.

    The letter selects the column and the digit selects the row. Bounds are
    not checked here; letters past the board edge parse fine and are rejected
    when the attack resolves.
    """
    text = raw.strip().upper()
    if len(text) != 2:
        raise CoordinateParseError(f"Expected a letter and a digit, got {raw!r}.")
    letter, digit = text[0], text[1]
    if not ("A" <= letter <= "Z"):
        raise CoordinateParseError(f"Column must be a letter, got {letter!r}.")
    if not ("0" <= digit <= "9"):
        raise CoordinateParseError(f"Row must be a digit, got {digit!r}.")
    return Coord(row=ord(digit) - ord("0"), col=ord(letter) - ord("A"))
