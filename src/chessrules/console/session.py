"""Interactive text loop driving a :class:`GameController`."""

from __future__ import annotations

import logging
from typing import TextIO

from chessrules.console.render import RenderStyle, render_board, render_history
from chessrules.core.enums import Color
from chessrules.core.notation import parse_square, square_name
from chessrules.game.controller import GameController
from chessrules.game.models import MoveError, Outcome

_LOGGER = logging.getLogger(__name__)

BANNER = (
    "Chess Game Started!\n"
    "Enter moves like: e2 e4 (add q, r, b or n to choose a promotion)\n"
    "Commands: 'quit', 'history', 'legal e2'"
)


class ConsoleSession:
    """Reads commands line by line and prints the game as it goes."""

    __slots__ = ("_controller", "_style", "_in", "_out")

    def __init__(
        self,
        controller: GameController,
        style: RenderStyle,
        stdin: TextIO,
        stdout: TextIO,
    ) -> None:
        self._controller = controller
        self._style = style
        self._in = stdin
        self._out = stdout

        events = controller.events
        events.on_rejected.append(self._on_rejected)
        events.on_check.append(self._on_check)
        events.on_game_over.append(self._on_game_over)

    def run(self) -> int:
        self._print(BANNER)
        while not self._controller.state.is_over:
            state = self._controller.state
            self._print(render_board(state.board_snapshot(), self._style, state.last_move))
            self._print(f"\n{self._controller.current_label}'s turn: ", end="")
            line = self._in.readline()
            if not line:
                _LOGGER.debug("Input closed, leaving the game loop")
                break
            if not self.handle(line):
                break
        state = self._controller.state
        if state.is_over:
            self._print(render_board(state.board_snapshot(), self._style, state.last_move))
        self._print("Game Over!")
        return 0

    def handle(self, line: str) -> bool:
        """Process one command; ``False`` means the player asked to quit."""
        command = line.strip().lower()
        if command == "quit":
            return False
        if command == "history":
            self._print("\nMove History:")
            self._print(render_history(self._controller.state.history))
            return True
        if command == "legal" or command.startswith("legal "):
            self._show_legal(command[len("legal") :].strip())
            return True

        parts = command.split()
        if len(parts) in (2, 3):
            promotion = parts[2] if len(parts) == 3 else None
            result = self._controller.submit_move(parts[0], parts[1], promotion)
            if not result.ok:
                self._print("Move failed, please try again.")
        else:
            self._print("Invalid input! Please use the format 'e2 e4'.")
        return True

    # ── Internal ─────────────────────────────────────────────────────────

    def _show_legal(self, square: str) -> None:
        if not square:
            self._print("Please specify a square (e.g., 'legal e2').")
            return
        try:
            origin = parse_square(square)
        except ValueError:
            self._print("Invalid square.")
            return
        piece = self._controller.state.piece_at(origin)
        if piece is None:
            self._print(f"No piece at {square}")
            return
        targets = sorted(self._controller.legal_destinations(origin))
        self._print(f"Legal moves for {piece.kind.name.capitalize()} at {square}:")
        self._print(" ".join(square_name(sq) for sq in targets) if targets else "None")

    def _on_rejected(self, error: MoveError) -> None:
        self._print(f"Invalid move: {error.message}")

    def _on_check(self, color: Color) -> None:
        self._print(f"{self._controller.state.label_for(color)} is in check!")

    def _on_game_over(self, outcome: Outcome) -> None:
        self._print(str(outcome))

    def _print(self, text: str, end: str = "\n") -> None:
        self._out.write(text + end)
        self._out.flush()
