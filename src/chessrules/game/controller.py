"""GameController - session-level orchestrator around the state machine.

Accepts moves as coordinates or algebraic text and notifies listeners via
simple callbacks so front ends and tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.notation import parse_square
from chessrules.core.types import Coordinate
from chessrules.game.machine import GameStateMachine, new_game
from chessrules.game.models import MoveError, MoveResult, Outcome
from chessrules.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]
RejectedCallback = Callable[[MoveError], None]
CheckCallback = Callable[[Color], None]  # color now in check
GameOverCallback = Callable[[Outcome], None]

SquareInput = Coordinate | str


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


class GameController:
    """Runs one game at a time and reports what happens to listeners.

    Single-threaded: every call completes before returning.
    """

    __slots__ = ("_machine", "events")

    def __init__(self, white_label: str = "White", black_label: str = "Black") -> None:
        self._machine = GameStateMachine(new_game(white_label, black_label))
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._machine.state

    @property
    def current_label(self) -> str:
        state = self.state
        return state.label_for(state.mover)

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(self, white_label: str = "White", black_label: str = "Black") -> None:
        self._machine = GameStateMachine(new_game(white_label, black_label))
        _LOGGER.info("New game: %s vs %s", white_label, black_label)

    def submit_move(
        self,
        from_sq: SquareInput,
        to_sq: SquareInput,
        promotion: PieceType | str | None = None,
    ) -> MoveResult:
        """Apply a move given as coordinates or square names like ``"e2"``."""
        try:
            origin = _to_coordinate(from_sq)
            target = _to_coordinate(to_sq)
        except ValueError:
            result = MoveResult.rejected(MoveError.INVALID_SQUARE)
        else:
            result = self._machine.apply_move(origin, target, promotion)

        move = result.move
        if move is None:
            if result.error is not None:
                self._emit_rejected(result.error)
            return result

        state = self.state
        for cb in self.events.on_move:
            cb(move, state)

        if state.is_over:
            for cb in self.events.on_game_over:
                cb(state.outcome)
        elif state.in_check:
            for cb in self.events.on_check:
                cb(state.mover)
        return result

    def legal_destinations(self, sq: SquareInput) -> set[Coordinate]:
        """Legal targets for the piece on *sq*; empty for unparseable input."""
        try:
            origin = _to_coordinate(sq)
        except ValueError:
            return set()
        return self._machine.legal_destinations(origin)

    # ── Internal ─────────────────────────────────────────────────────────

    def _emit_rejected(self, error: MoveError) -> None:
        for cb in self.events.on_rejected:
            cb(error)


def _to_coordinate(sq: SquareInput) -> Coordinate:
    if isinstance(sq, Coordinate):
        return sq
    if isinstance(sq, str):
        return parse_square(sq)
    raise ValueError(f"Not a square: {sq!r}")
