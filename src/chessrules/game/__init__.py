"""Game management layer — state machine, read-only state, session controller.

Quick start::

    from chessrules.game import apply_move, new_game
    from chessrules.core.types import E2, E4

    state = new_game("Alice", "Bob")
    result = apply_move(state, E2, E4)
    assert result.ok
"""

from chessrules.game.controller import GameController, GameEvents
from chessrules.game.machine import (
    GameStateMachine,
    apply_move,
    legal_destinations,
    new_game,
)
from chessrules.game.models import IllegalMoveError, MoveError, MoveResult, Outcome
from chessrules.game.state import GameState

__all__ = [
    # Models
    "IllegalMoveError",
    "MoveError",
    "MoveResult",
    "Outcome",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "GameStateMachine",
    # Facade
    "apply_move",
    "legal_destinations",
    "new_game",
]
