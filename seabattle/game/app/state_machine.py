"""Turn phases for a single game."""

from enum import Enum, auto


class GamePhase(Enum):
    """Turn controller states."""

    AWAITING_PLAYER_MOVE = auto()
    AWAITING_OPPONENT_MOVE = auto()
    GAME_OVER = auto()
