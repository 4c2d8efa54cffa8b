"""GameState - board, side to move, history and outcome.

The state is read-only from the outside: the board is only reachable
through copies and snapshots, the history is exposed as a tuple. Mutation
happens exclusively through :class:`~chessrules.game.machine.GameStateMachine`.
"""

from __future__ import annotations

from dataclasses import replace

from chessrules.core.board import BoardState, Grid
from chessrules.core.enums import Color
from chessrules.core.move import Move
from chessrules.core.piece import PieceState
from chessrules.core.types import Coordinate
from chessrules.game.models import Outcome


class GameState:
    """Complete state of one game."""

    __slots__ = ("_board", "_mover", "_history", "_outcome", "_labels")

    def __init__(
        self,
        board: BoardState | None = None,
        mover: Color = Color.WHITE,
        white_label: str = "White",
        black_label: str = "Black",
    ) -> None:
        self._board = board if board is not None else BoardState.initial()
        self._mover = mover
        self._history: list[Move] = []
        self._outcome = Outcome.in_progress()
        self._labels: dict[Color, str] = {Color.WHITE: white_label, Color.BLACK: black_label}

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def mover(self) -> Color:
        return self._mover

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def is_over(self) -> bool:
        return self._outcome.is_terminal

    @property
    def in_check(self) -> bool:
        """Whether the side to move is currently in check."""
        return self._board.is_in_check(self._mover)

    @property
    def history(self) -> tuple[Move, ...]:
        return tuple(self._history)

    @property
    def last_move(self) -> Move | None:
        return self._history[-1] if self._history else None

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self._history)

    @property
    def white_label(self) -> str:
        return self._labels[Color.WHITE]

    @property
    def black_label(self) -> str:
        return self._labels[Color.BLACK]

    def label_for(self, color: Color) -> str:
        return self._labels[color]

    def piece_at(self, sq: Coordinate) -> PieceState | None:
        """Detached copy of the piece on *sq*."""
        piece = self._board.piece_at(sq)
        return replace(piece) if piece is not None else None

    def board_snapshot(self) -> Grid:
        """8x8 grid of ``(kind, color)`` or ``None``, row 0 = rank 8."""
        return self._board.grid()

    def board_copy(self) -> BoardState:
        return self._board.copy()

    def __repr__(self) -> str:
        return (
            f"GameState(mover={self._mover.name}, ply={self.ply_count}, "
            f"outcome={self._outcome.kind.name})"
        )
