"""Move-generator tests, including perft counts for well-known positions.

Reference values: https://www.chessprogramming.org/Perft_Results
(counts below depth 3 contain no promotions, which are listed once here).
"""

import pytest

from chessrules.core.board import BoardState
from chessrules.core.enums import Color, PieceType, SpecialMove
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import parse_square
from chessrules.core.types import (
    A5, B4, C1, C3, D1, D2, D4, E1, E3, E4, F1, F2, G1,
    Coordinate,
)
from chessrules.game.machine import apply_move, new_game
from chessrules.game.state import GameState


def perft(board: BoardState, color: Color, depth: int) -> int:
    """Count leaf nodes at *depth*, playing each move on a board copy."""
    moves = MoveGenerator(board).legal_moves(color)
    if depth == 1:
        return len(moves)
    nodes = 0
    for move in moves:
        state = new_game(board=board.copy(), mover=color)
        apply_move(state, move.from_sq, move.to_sq).unwrap()
        nodes += perft(state.board_copy(), color.opposite, depth - 1)
    return nodes


def _play(state: GameState, *moves: str) -> None:
    for text in moves:
        origin, target = text.split()
        apply_move(state, parse_square(origin), parse_square(target)).unwrap()


KIWIPETE = """
    r . . . k . . r
    p . p p q p b .
    b n . . p n p .
    . . . P N . . .
    . p . . P . . .
    . . N . . Q . p
    P P P B B P P P
    R . . . K . . R
"""

CASTLING_DIAGRAM = """
    r . . . k . . r
    . . . . . . . .
    . . . . . . . .
    . . . . . . . .
    . . . . . . . .
    . . . . . . . .
    . . . . . . . .
    R . . . K . . R
"""

POS3 = """
    . . . . . . . .
    . . p . . . . .
    . . . p . . . .
    K P . . . . . r
    . R . . . p . k
    . . . . . . . .
    . . . . P . P .
    . . . . . . . .
"""


class TestInitialPosition:
    def test_twenty_legal_moves(self, initial_board: BoardState) -> None:
        moves = MoveGenerator(initial_board).legal_moves(Color.WHITE)
        assert len(moves) == 20
        assert sum(m.piece_kind == PieceType.PAWN for m in moves) == 16
        assert sum(m.piece_kind == PieceType.KNIGHT for m in moves) == 4

    def test_black_also_has_twenty(self, initial_board: BoardState) -> None:
        assert len(MoveGenerator(initial_board).legal_moves(Color.BLACK)) == 20

    def test_deterministic_order(self, initial_board: BoardState) -> None:
        moves = MoveGenerator(initial_board).legal_moves(Color.WHITE)
        keys = [(m.from_sq, m.to_sq) for m in moves]
        assert keys == sorted(keys)

    def test_generation_leaves_board_untouched(self, initial_board: BoardState) -> None:
        before = initial_board.copy()
        MoveGenerator(initial_board).legal_moves(Color.WHITE)
        MoveGenerator(initial_board).legal_moves(Color.BLACK)
        assert initial_board == before

    def test_pseudo_legal_excludes_friendly_squares(self, initial_board: BoardState) -> None:
        rook = initial_board.piece_at(Coordinate(7, 0))
        assert rook is not None
        assert MoveGenerator(initial_board).pseudo_legal_moves(rook) == []


class TestLegality:
    def test_pinned_bishop_stays_on_the_pin(self) -> None:
        board = BoardState.from_diagram(
            """
            . . . . . . . k
            . . . . . . . .
            . . . . . . . .
            q . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . B . . . .
            . . . . K . . .
            """
        )
        assert MoveGenerator(board).legal_destinations(D2) == {C3, B4, A5}

    def test_only_check_evasions(self) -> None:
        board = BoardState.from_diagram(
            """
            . . . . r . . k
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            R . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . K . . .
            """
        )
        moves = MoveGenerator(board).legal_moves(Color.WHITE)
        assert {(m.from_sq, m.to_sq) for m in moves} == {
            (Coordinate(4, 0), E4),
            (E1, D1),
            (E1, D2),
            (E1, F1),
            (E1, F2),
        }

    def test_castling_listed_when_safe(self) -> None:
        board = BoardState.from_diagram(CASTLING_DIAGRAM)
        targets = MoveGenerator(board).legal_destinations(E1)
        assert {G1, C1} <= targets

    def test_castling_not_listed_through_attacked_square(self) -> None:
        board = BoardState.from_diagram(CASTLING_DIAGRAM)
        board.set_piece(
            Coordinate(1, 5),
            board.remove_piece(Coordinate(0, 7)),  # black rook h8 -> f7
        )
        targets = MoveGenerator(board).legal_destinations(E1)
        assert G1 not in targets
        assert F1 not in targets
        assert C1 in targets

    def test_castle_move_is_tagged(self) -> None:
        board = BoardState.from_diagram(CASTLING_DIAGRAM)
        specials = {
            m.to_sq: m.special
            for m in MoveGenerator(board).legal_moves(Color.WHITE)
            if m.from_sq == E1
        }
        assert specials[G1] == SpecialMove.CASTLE_KINGSIDE
        assert specials[C1] == SpecialMove.CASTLE_QUEENSIDE

    def test_is_legal(self, initial_board: BoardState) -> None:
        gen = MoveGenerator(initial_board)
        pawn = initial_board.piece_at(Coordinate(6, 4))
        king = initial_board.piece_at(E1)
        assert pawn is not None and king is not None
        assert gen.is_legal(pawn, E4)
        assert not gen.is_legal(pawn, Coordinate(3, 4))
        assert not gen.is_legal(king, F2)
        assert not gen.is_legal(king, G1)

    def test_execute_castle_moves_rook(self) -> None:
        board = BoardState.from_diagram(CASTLING_DIAGRAM)
        king = board.piece_at(E1)
        assert king is not None
        move = MoveGenerator(board).execute(king, G1)
        assert move.is_castle and not move.is_capture
        rook = board.piece_at(F1)
        assert rook is not None and rook.kind == PieceType.ROOK


class TestEnPassantWindow:
    def test_available_right_after_double_step(self, game: GameState) -> None:
        _play(game, "h2 h3", "d7 d5", "h3 h4", "d5 d4", "e2 e4")
        board = game.board_copy()
        moves = MoveGenerator(board).legal_moves(Color.BLACK)
        ep = [m for m in moves if m.from_sq == D4 and m.to_sq == E3]
        assert len(ep) == 1
        assert ep[0].special == SpecialMove.EN_PASSANT
        assert ep[0].captured is not None and ep[0].captured.coordinate == E4

    def test_gone_one_ply_later(self, game: GameState) -> None:
        _play(game, "h2 h3", "d7 d5", "h3 h4", "d5 d4", "e2 e4", "a7 a6", "a2 a3")
        board = game.board_copy()
        assert E3 not in MoveGenerator(board).legal_destinations(D4)


class TestPerft:
    def test_start_depth_2(self, initial_board: BoardState) -> None:
        assert perft(initial_board, Color.WHITE, 2) == 400

    def test_kiwipete_depth_1(self) -> None:
        assert perft(BoardState.from_diagram(KIWIPETE), Color.WHITE, 1) == 48

    @pytest.mark.slow
    def test_kiwipete_depth_2(self) -> None:
        assert perft(BoardState.from_diagram(KIWIPETE), Color.WHITE, 2) == 2_039

    def test_pos3_depth_1(self) -> None:
        assert perft(BoardState.from_diagram(POS3), Color.WHITE, 1) == 14

    def test_pos3_depth_2(self) -> None:
        assert perft(BoardState.from_diagram(POS3), Color.WHITE, 2) == 191
