"""Qt bridge re-emitting controller events as signals for a GUI board."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal

from chessrules.core.enums import Color
from chessrules.core.move import Move
from chessrules.game.controller import GameController
from chessrules.game.models import MoveError, Outcome
from chessrules.game.state import GameState


class GameSignals(QObject):
    """Thread-affine signal hub; connect Qt widgets to these signals."""

    move_applied = pyqtSignal(object)  # Move
    move_rejected = pyqtSignal(str)  # MoveError value
    check = pyqtSignal(object)  # Color in check
    game_over = pyqtSignal(object)  # Outcome

    def attach(self, controller: GameController) -> None:
        """Subscribe to *controller* events."""
        events = controller.events
        events.on_move.append(self._relay_move)
        events.on_rejected.append(self._relay_rejected)
        events.on_check.append(self._relay_check)
        events.on_game_over.append(self._relay_game_over)

    def _relay_move(self, move: Move, state: GameState) -> None:
        self.move_applied.emit(move)

    def _relay_rejected(self, error: MoveError) -> None:
        self.move_rejected.emit(error.value)

    def _relay_check(self, color: Color) -> None:
        self.check.emit(color)

    def _relay_game_over(self, outcome: Outcome) -> None:
        self.game_over.emit(outcome)
