"""BoardState - piece placement on an 8x8 grid plus attack testing."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import PieceState
from chessrules.core.rules import PieceRules
from chessrules.core.types import BOARD_SIZE, Coordinate

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

Grid = tuple[tuple[tuple[PieceType, Color] | None, ...], ...]


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Memento of a board: placement plus every piece's mutable fields."""

    squares: tuple[PieceState | None, ...]
    fields: tuple[tuple[PieceState, Coordinate, bool, bool], ...]


class BoardState:
    """Mutable 64-square board. Each square holds at most one piece.

    Access with an out-of-range coordinate reads as empty and writes are
    ignored.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[PieceState | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    @staticmethod
    def _index(sq: Coordinate) -> int:
        return sq.row * BOARD_SIZE + sq.col

    # -- Element access -----------------------------------------------------

    def piece_at(self, sq: Coordinate) -> PieceState | None:
        if not sq.is_valid:
            return None
        return self._squares[self._index(sq)]

    def set_piece(self, sq: Coordinate, piece: PieceState | None) -> None:
        """Put *piece* on *sq* (``None`` empties it) and update its coordinate."""
        if not sq.is_valid:
            return
        self._squares[self._index(sq)] = piece
        if piece is not None:
            piece.coordinate = sq

    def remove_piece(self, sq: Coordinate) -> PieceState | None:
        """Empty *sq*, returning whatever stood there."""
        if not sq.is_valid:
            return None
        idx = self._index(sq)
        piece = self._squares[idx]
        self._squares[idx] = None
        return piece

    def move_piece(self, piece: PieceState, to_sq: Coordinate) -> None:
        """Relocate *piece* from its own square and mark it as moved."""
        self.remove_piece(piece.coordinate)
        self.set_piece(to_sq, piece)
        piece.has_moved = True

    def is_empty(self, sq: Coordinate) -> bool:
        return self.piece_at(sq) is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> list[PieceState]:
        """Pieces in row-major order of their squares, optionally by *color*."""
        return [
            p for p in self._squares if p is not None and (color is None or p.color == color)
        ]

    def king_square(self, color: Color) -> Coordinate:
        """Return the single king square for *color*."""
        for piece in self.pieces(color):
            if piece.kind == PieceType.KING:
                return piece.coordinate
        raise ValueError(f"No {color.name} king on board")

    def grid(self) -> Grid:
        """Immutable 8x8 view of ``(kind, color)`` pairs for rendering."""
        cells = [None if p is None else (p.kind, p.color) for p in self._squares]
        return tuple(
            tuple(cells[row * BOARD_SIZE : (row + 1) * BOARD_SIZE]) for row in range(BOARD_SIZE)
        )

    # -- Attack detection ---------------------------------------------------

    def is_square_attacked(self, sq: Coordinate, by_color: Color) -> bool:
        """Is *sq* attacked by any piece of *by_color*?"""
        return any(PieceRules.attacks(p, sq, self) for p in self.pieces(by_color))

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return self.is_square_attacked(self.king_square(color), color.opposite)

    # -- Snapshot / copying -------------------------------------------------

    def snapshot(self) -> BoardSnapshot:
        squares = tuple(self._squares)
        return BoardSnapshot(
            squares=squares,
            fields=tuple(
                (p, p.coordinate, p.has_moved, p.just_advanced_two)
                for p in squares
                if p is not None
            ),
        )

    def restore(self, snapshot: BoardSnapshot) -> None:
        """Put back exactly the pieces, and piece flags, of *snapshot*."""
        self._squares = list(snapshot.squares)
        for piece, coordinate, has_moved, just_advanced_two in snapshot.fields:
            piece.coordinate = coordinate
            piece.has_moved = has_moved
            piece.just_advanced_two = just_advanced_two

    def copy(self) -> BoardState:
        """Deep copy; pieces are duplicated, not shared."""
        b = BoardState()
        for piece in self.pieces():
            b.set_piece(
                piece.coordinate,
                PieceState(
                    piece.kind,
                    piece.color,
                    piece.coordinate,
                    piece.has_moved,
                    piece.just_advanced_two,
                ),
            )
        return b

    def clear(self) -> None:
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> BoardState:
        return cls()

    @classmethod
    def initial(cls) -> BoardState:
        """Standard starting position, White on rows 6 and 7."""
        b = cls()
        for col, kind in enumerate(_BACK_RANK):
            for color in Color:
                b.set_piece(
                    Coordinate(color.home_row, col),
                    PieceState(kind, color, Coordinate(color.home_row, col)),
                )
                b.set_piece(
                    Coordinate(color.pawn_row, col),
                    PieceState(PieceType.PAWN, color, Coordinate(color.pawn_row, col)),
                )
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> BoardState:
        """Build a board from eight rows of symbols, rank 8 first.

        ``.`` marks an empty square; whitespace inside a row is ignored::

            BoardState.from_diagram('''
                r . . . k . . r
                . . . . . . . .
                ...
                R . . . K . . R
            ''')

        All pieces start unmoved.
        """
        rows = ["".join(line.split()) for line in diagram.strip().splitlines()]
        rows = [row for row in rows if row]
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Diagram must contain {BOARD_SIZE} rows, got {len(rows)}")
        b = cls()
        for row_idx, text in enumerate(rows):
            if len(text) != BOARD_SIZE:
                raise ValueError(f"Invalid diagram row width: {text!r}")
            for col_idx, ch in enumerate(text):
                if ch == ".":
                    continue
                sq = Coordinate(row_idx, col_idx)
                b.set_piece(sq, PieceState.from_char(ch, sq))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            start = row * BOARD_SIZE
            cells = [str(p) if p else "." for p in self._squares[start : start + BOARD_SIZE]]
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

