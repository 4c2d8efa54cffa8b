"""Text rendering of the board and move history."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from chessrules.core.board import Grid
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.notation import format_move
from chessrules.core.types import BOARD_SIZE, Coordinate

_SYMBOLS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_FILE_HEADER = "   a  b  c  d  e  f  g  h"
_RULE = " --------------------------"


@dataclass(frozen=True)
class RenderStyle:
    """Escape sequences used when drawing the board."""

    reset: str
    white_piece: str
    black_piece: str
    light_square: str
    dark_square: str
    last_move: str

    @classmethod
    def ansi(cls) -> RenderStyle:
        return cls(
            reset="\x1b[0m",
            white_piece="\x1b[97m",  # bright white
            black_piece="\x1b[33m",  # yellow
            light_square="\x1b[47m",
            dark_square="\x1b[40m",
            last_move="\x1b[42m",  # green
        )

    @classmethod
    def plain(cls) -> RenderStyle:
        """No escape codes at all; for pipes and tests."""
        return cls(
            reset="",
            white_piece="",
            black_piece="",
            light_square="",
            dark_square="",
            last_move="",
        )


def piece_symbol(kind: PieceType, color: Color) -> str:
    symbol = _SYMBOLS[kind]
    return symbol if color == Color.WHITE else symbol.lower()


def render_board(grid: Grid, style: RenderStyle, last_move: Move | None = None) -> str:
    """Draw *grid* with rank 8 on top, highlighting *last_move* squares."""
    highlighted: set[Coordinate] = set()
    if last_move is not None:
        highlighted = {last_move.from_sq, last_move.to_sq}

    lines = [_FILE_HEADER, _RULE]
    for row in range(BOARD_SIZE):
        rank = BOARD_SIZE - row
        cells: list[str] = []
        for col in range(BOARD_SIZE):
            if Coordinate(row, col) in highlighted:
                bg = style.last_move
            elif (row + col) % 2 == 0:
                bg = style.light_square
            else:
                bg = style.dark_square

            cell = grid[row][col]
            if cell is None:
                cells.append(f"{bg} . {style.reset}")
                continue
            kind, color = cell
            fg = style.white_piece if color == Color.WHITE else style.black_piece
            cells.append(f"{bg}{fg} {piece_symbol(kind, color)} {style.reset}")
        lines.append(f"{rank} |{''.join(cells)}| {rank}")
    lines.extend([_RULE, _FILE_HEADER])
    return "\n".join(lines)


def render_history(history: Sequence[Move]) -> str:
    if not history:
        return "No moves yet."
    return "\n".join(f"{i}. {format_move(move)}" for i, move in enumerate(history, start=1))
