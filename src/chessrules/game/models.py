"""Result and outcome models returned by the game layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from chessrules.core.enums import Color, OutcomeKind
from chessrules.core.move import Move


class MoveError(StrEnum):
    """Why a move was rejected. The game state is unchanged in every case."""

    INVALID_SQUARE = "InvalidSquare"
    NO_PIECE_AT_SQUARE = "NoPieceAtSquare"
    WRONG_SIDE_TO_MOVE = "WrongSideToMove"
    ILLEGAL_GEOMETRY = "IllegalGeometry"
    CASTLING_BLOCKED = "CastlingBlocked"
    CASTLING_THROUGH_CHECK = "CastlingThroughCheck"
    MOVE_LEAVES_KING_IN_CHECK = "MoveLeavesKingInCheck"
    GAME_ALREADY_OVER = "GameAlreadyOver"

    @property
    def message(self) -> str:
        """Human-friendly reason for display."""
        return _ERROR_MESSAGES[self]


_ERROR_MESSAGES: dict[MoveError, str] = {
    MoveError.INVALID_SQUARE: "Invalid square.",
    MoveError.NO_PIECE_AT_SQUARE: "There is no piece on that square.",
    MoveError.WRONG_SIDE_TO_MOVE: "That piece belongs to the other side.",
    MoveError.ILLEGAL_GEOMETRY: "That piece cannot move there.",
    MoveError.CASTLING_BLOCKED: "Castling is not available.",
    MoveError.CASTLING_THROUGH_CHECK: "Cannot castle out of, through or into check.",
    MoveError.MOVE_LEAVES_KING_IN_CHECK: "That move would leave your king in check.",
    MoveError.GAME_ALREADY_OVER: "The game is over.",
}


class IllegalMoveError(ValueError):
    """Raised by :meth:`MoveResult.unwrap` for a rejected move."""

    def __init__(self, error: MoveError) -> None:
        super().__init__(f"{error.value}: {error.message}")
        self.error = error


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Either the applied move or the reason it was rejected."""

    move: Move | None = None
    error: MoveError | None = None

    @classmethod
    def accepted(cls, move: Move) -> MoveResult:
        return cls(move=move)

    @classmethod
    def rejected(cls, error: MoveError) -> MoveResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Move:
        if self.error is not None or self.move is None:
            raise IllegalMoveError(self.error or MoveError.ILLEGAL_GEOMETRY)
        return self.move


@dataclass(frozen=True, slots=True)
class Outcome:
    """Game outcome; ``winner`` is only set for checkmate."""

    kind: OutcomeKind = OutcomeKind.IN_PROGRESS
    winner: Color | None = None

    @classmethod
    def in_progress(cls) -> Outcome:
        return cls()

    @classmethod
    def checkmate(cls, winner: Color) -> Outcome:
        return cls(OutcomeKind.CHECKMATE, winner)

    @classmethod
    def stalemate(cls) -> Outcome:
        return cls(OutcomeKind.STALEMATE)

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.IN_PROGRESS

    def __str__(self) -> str:
        if self.kind == OutcomeKind.CHECKMATE and self.winner is not None:
            return f"Checkmate! {self.winner.name.capitalize()} wins!"
        if self.kind == OutcomeKind.STALEMATE:
            return "Stalemate! Draw!"
        return "In progress"
