"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from chessrules.core.board import BoardState
from chessrules.game.controller import GameController
from chessrules.game.machine import new_game
from chessrules.game.state import GameState

# Kings and rooks on their home squares, nothing in between.
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


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    QtCore = pytest.importorskip("PyQt6.QtCore")

    app = QtCore.QCoreApplication.instance()
    if app is None:
        app = QtCore.QCoreApplication([])
    yield app


@pytest.fixture
def initial_board() -> BoardState:
    return BoardState.initial()


@pytest.fixture
def game() -> GameState:
    """Fresh game from the standard setup, White to move."""
    return new_game("Alice", "Bob")


@pytest.fixture
def castling_game() -> GameState:
    return new_game(board=BoardState.from_diagram(CASTLING_DIAGRAM))


@pytest.fixture
def controller() -> GameController:
    return GameController("W", "B")
