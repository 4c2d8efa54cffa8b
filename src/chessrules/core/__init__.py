"""Core domain layer — pure rule logic with zero external dependencies.

Quick start::

    from chessrules.core import BoardState, Color, MoveGenerator

    board = BoardState.initial()
    gen = MoveGenerator(board)
    for move in gen.legal_moves(Color.WHITE):
        print(move)
"""

from chessrules.core.board import BoardSnapshot, BoardState
from chessrules.core.enums import Color, OutcomeKind, PieceType, SpecialMove
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import format_move, parse_square, square_name
from chessrules.core.piece import PieceState
from chessrules.core.rules import PieceRules, promotion_kind
from chessrules.core.types import ALL_SQUARES, Coordinate

__all__ = [
    # Enums
    "Color",
    "OutcomeKind",
    "PieceType",
    "SpecialMove",
    # Types / helpers
    "ALL_SQUARES",
    "Coordinate",
    "format_move",
    "parse_square",
    "promotion_kind",
    "square_name",
    # Domain objects
    "BoardSnapshot",
    "BoardState",
    "Move",
    "MoveGenerator",
    "PieceRules",
    "PieceState",
]
