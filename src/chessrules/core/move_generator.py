"""Pseudo-legal and legal move generation.

Legality is decided the simple way: the move is played on the live board,
the mover's king is tested for check, and the board is restored from a
snapshot.
"""

from __future__ import annotations

from dataclasses import replace

from chessrules.core.board import BoardState
from chessrules.core.enums import Color, PieceType, SpecialMove
from chessrules.core.move import Move
from chessrules.core.piece import PieceState
from chessrules.core.rules import PieceRules, castling_rook_square
from chessrules.core.types import ALL_SQUARES, Coordinate


def is_castling_attempt(piece: PieceState, to_sq: Coordinate) -> bool:
    """A king moving two columns along its rank."""
    from_sq = piece.coordinate
    return (
        piece.kind == PieceType.KING
        and from_sq.row == to_sq.row
        and abs(to_sq.col - from_sq.col) == 2
    )


class MoveGenerator:
    """Generates moves for pieces on a :class:`BoardState`.

    The generator mutates the board while simulating moves but always
    restores it, flags included, before returning.
    """

    __slots__ = ("_board",)

    def __init__(self, board: BoardState) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_moves(self, piece: PieceState) -> list[Coordinate]:
        """Destinations the geometry allows that do not hold a friendly piece."""
        board = self._board
        from_sq = piece.coordinate
        targets: list[Coordinate] = []
        for to_sq in ALL_SQUARES:
            occupant = board.piece_at(to_sq)
            if occupant is not None and occupant.color == piece.color:
                continue
            if PieceRules.is_valid_move(piece, from_sq, to_sq, board):
                targets.append(to_sq)
        return targets

    def legal_moves(self, color: Color) -> list[Move]:
        """All strictly legal moves for *color*.

        Ordered by source square, then destination square, both row-major.
        Promotions are listed once, as a Queen promotion.
        """
        legal: list[Move] = []
        for piece in self._board.pieces(color):
            for to_sq in self.pseudo_legal_moves(piece):
                move = self._try_move(piece, to_sq)
                if move is not None:
                    legal.append(move)
        return legal

    def has_legal_move(self, color: Color) -> bool:
        for piece in self._board.pieces(color):
            for to_sq in self.pseudo_legal_moves(piece):
                if self._try_move(piece, to_sq) is not None:
                    return True
        return False

    def legal_destinations(self, sq: Coordinate) -> set[Coordinate]:
        """Legal destinations for whatever piece stands on *sq*."""
        piece = self._board.piece_at(sq)
        if piece is None:
            return set()
        return {
            to_sq
            for to_sq in self.pseudo_legal_moves(piece)
            if self._try_move(piece, to_sq) is not None
        }

    def is_legal(self, piece: PieceState, to_sq: Coordinate) -> bool:
        occupant = self._board.piece_at(to_sq)
        if occupant is not None and occupant.color == piece.color:
            return False
        if not PieceRules.is_valid_move(piece, piece.coordinate, to_sq, self._board):
            return False
        return self._try_move(piece, to_sq) is not None

    # -- Castling -----------------------------------------------------------

    def castling_path_safe(self, king: PieceState, to_sq: Coordinate) -> bool:
        """King not in check and never attacked on the way to *to_sq*.

        Each square after the origin, destination included, is tested with
        the king standing on it and its origin vacated.
        """
        board = self._board
        color = king.color
        if board.is_in_check(color):
            return False

        from_sq = king.coordinate
        step = 1 if to_sq.col > from_sq.col else -1
        snapshot = board.snapshot()
        try:
            for col in range(from_sq.col + step, to_sq.col + step, step):
                board.move_piece(king, Coordinate(from_sq.row, col))
                if board.is_in_check(color):
                    return False
            return True
        finally:
            board.restore(snapshot)

    # -- Execution ----------------------------------------------------------

    def execute(
        self,
        piece: PieceState,
        to_sq: Coordinate,
        promotion: PieceType = PieceType.QUEEN,
    ) -> Move:
        """Play *piece* to *to_sq* on the board and describe what happened.

        Handles the en passant capture square and the castling rook. The
        pawn is not replaced on promotion; the returned move only records
        the chosen kind.
        """
        board = self._board
        from_sq = piece.coordinate
        special = SpecialMove.NONE

        capture_sq = to_sq
        if (
            piece.kind == PieceType.PAWN
            and from_sq.col != to_sq.col
            and board.is_empty(to_sq)
        ):
            capture_sq = Coordinate(from_sq.row, to_sq.col)
            special = SpecialMove.EN_PASSANT

        captured = board.piece_at(capture_sq)
        captured_record = replace(captured) if captured is not None else None
        if captured is not None:
            board.remove_piece(capture_sq)

        if is_castling_attempt(piece, to_sq):
            rook_from = castling_rook_square(from_sq, to_sq)
            rook = board.piece_at(rook_from)
            if rook is not None:
                board.move_piece(rook, Coordinate(from_sq.row, (from_sq.col + to_sq.col) // 2))
            special = (
                SpecialMove.CASTLE_KINGSIDE
                if to_sq.col > from_sq.col
                else SpecialMove.CASTLE_QUEENSIDE
            )

        board.move_piece(piece, to_sq)

        promoted: PieceType | None = None
        if piece.kind == PieceType.PAWN and to_sq.row == piece.color.promotion_row:
            special = SpecialMove.PROMOTION
            promoted = promotion

        return Move(
            from_sq=from_sq,
            to_sq=to_sq,
            piece_kind=piece.kind,
            color=piece.color,
            captured=captured_record,
            special=special,
            promotion=promoted,
        )

    # -- Internal -----------------------------------------------------------

    def _try_move(self, piece: PieceState, to_sq: Coordinate) -> Move | None:
        """Simulate a pseudo-legal move; the move if it keeps the king safe."""
        if is_castling_attempt(piece, to_sq) and not self.castling_path_safe(piece, to_sq):
            return None

        board = self._board
        snapshot = board.snapshot()
        try:
            move = self.execute(piece, to_sq)
            in_check = board.is_in_check(piece.color)
        finally:
            board.restore(snapshot)
        return None if in_check else move
