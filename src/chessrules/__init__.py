"""chessrules — a two-player chess rule engine with a console front end."""

from chessrules.core import BoardState, Color, Coordinate, Move, PieceType
from chessrules.game import (
    GameController,
    GameState,
    MoveError,
    MoveResult,
    Outcome,
    apply_move,
    legal_destinations,
    new_game,
)

__version__ = "0.1.0"

__all__ = [
    "BoardState",
    "Color",
    "Coordinate",
    "GameController",
    "GameState",
    "Move",
    "MoveError",
    "MoveResult",
    "Outcome",
    "PieceType",
    "apply_move",
    "legal_destinations",
    "new_game",
]
