"""GameStateMachine - applies one move at a time, all or nothing.

States: ``ToMove(White)`` → ``ToMove(Black)`` → ... until the side to move
has no legal move, then ``Terminal(Checkmate(winner))`` or
``Terminal(Stalemate)``. A rejected move leaves the board exactly as it was,
including every ``has_moved`` and ``just_advanced_two`` flag.
"""

from __future__ import annotations

import logging

from chessrules.core.board import BoardState
from chessrules.core.enums import Color, PieceType
from chessrules.core.move_generator import MoveGenerator, is_castling_attempt
from chessrules.core.piece import PieceState
from chessrules.core.rules import PieceRules, promotion_kind
from chessrules.core.types import Coordinate
from chessrules.game.models import MoveError, MoveResult, Outcome
from chessrules.game.state import GameState

_LOGGER = logging.getLogger(__name__)


class GameStateMachine:
    """Sole owner and mutator of a :class:`GameState`."""

    __slots__ = ("_state",)

    def __init__(self, state: GameState) -> None:
        self._state = state

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def _board(self) -> BoardState:
        return self._state._board

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(
        self,
        from_sq: Coordinate,
        to_sq: Coordinate,
        promotion: PieceType | str | None = None,
    ) -> MoveResult:
        """Validate and apply a move, or report why it was rejected."""
        checked = self._checked_piece(from_sq, to_sq)
        if isinstance(checked, MoveError):
            _LOGGER.debug("Rejected %s -> %s: %s", from_sq, to_sq, checked.value)
            return MoveResult.rejected(checked)

        piece = checked
        state = self._state
        board = self._board
        mover = state._mover

        snapshot = board.snapshot()
        move = MoveGenerator(board).execute(piece, to_sq, promotion_kind(promotion))
        if board.is_in_check(mover):
            board.restore(snapshot)
            _LOGGER.debug("Rejected %s -> %s: king left in check", from_sq, to_sq)
            return MoveResult.rejected(MoveError.MOVE_LEAVES_KING_IN_CHECK)

        # Committed from here on.
        if move.promotion is not None:
            board.set_piece(to_sq, PieceState(move.promotion, mover, to_sq, has_moved=True))

        for other in board.pieces():
            other.just_advanced_two = False
        if piece.kind == PieceType.PAWN and abs(to_sq.row - from_sq.row) == 2:
            piece.just_advanced_two = True

        state._history.append(move)
        state._mover = mover.opposite
        self._update_outcome()
        _LOGGER.debug("Applied %s for %s", move, mover.name)
        return MoveResult.accepted(move)

    def legal_destinations(self, sq: Coordinate) -> set[Coordinate]:
        if self._state.is_over or not _is_square(sq):
            return set()
        return MoveGenerator(self._board).legal_destinations(sq)

    # ── Internal ─────────────────────────────────────────────────────────

    def _checked_piece(self, from_sq: Coordinate, to_sq: Coordinate) -> PieceState | MoveError:
        """The piece to move, or the first reason the move is rejected."""
        state = self._state
        board = self._board
        if state.is_over:
            return MoveError.GAME_ALREADY_OVER
        if not (_is_square(from_sq) and _is_square(to_sq)):
            return MoveError.INVALID_SQUARE
        piece = board.piece_at(from_sq)
        if piece is None:
            return MoveError.NO_PIECE_AT_SQUARE
        if piece.color != state._mover:
            return MoveError.WRONG_SIDE_TO_MOVE

        if is_castling_attempt(piece, to_sq):
            if not PieceRules.is_valid_move(piece, from_sq, to_sq, board):
                return MoveError.CASTLING_BLOCKED
            if not MoveGenerator(board).castling_path_safe(piece, to_sq):
                return MoveError.CASTLING_THROUGH_CHECK
            return piece

        target = board.piece_at(to_sq)
        if target is not None and target.color == piece.color:
            return MoveError.ILLEGAL_GEOMETRY
        if not PieceRules.is_valid_move(piece, from_sq, to_sq, board):
            return MoveError.ILLEGAL_GEOMETRY
        return piece

    def _update_outcome(self) -> None:
        state = self._state
        board = self._board
        mover = state._mover
        if MoveGenerator(board).has_legal_move(mover):
            state._outcome = Outcome.in_progress()
            return
        if board.is_in_check(mover):
            state._outcome = Outcome.checkmate(mover.opposite)
        else:
            state._outcome = Outcome.stalemate()
        _LOGGER.info("Game over: %s", state._outcome)


def _is_square(value: object) -> bool:
    return isinstance(value, Coordinate) and value.is_valid


# ── Module-level facade ──────────────────────────────────────────────────────


def new_game(
    white_label: str = "White",
    black_label: str = "Black",
    board: BoardState | None = None,
    mover: Color = Color.WHITE,
) -> GameState:
    """Start a game, from the standard setup unless *board* is given."""
    state = GameState(board, mover, white_label, black_label)
    GameStateMachine(state)._update_outcome()
    return state


def apply_move(
    state: GameState,
    from_sq: Coordinate,
    to_sq: Coordinate,
    promotion: PieceType | str | None = None,
) -> MoveResult:
    return GameStateMachine(state).apply_move(from_sq, to_sq, promotion)


def legal_destinations(state: GameState, sq: Coordinate) -> set[Coordinate]:
    return GameStateMachine(state).legal_destinations(sq)
