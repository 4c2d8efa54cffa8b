"""Text front end: board rendering and the interactive command loop."""

from chessrules.console.render import RenderStyle, render_board, render_history
from chessrules.console.session import ConsoleSession

__all__ = ["ConsoleSession", "RenderStyle", "render_board", "render_history"]
