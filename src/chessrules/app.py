"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chessrules.console.render import RenderStyle
from chessrules.console.session import ConsoleSession
from chessrules.game.controller import GameController


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessrules",
        description="Two-player chess in the terminal.",
    )
    parser.add_argument("--white", default="Player 1 (White)", help="White player's name")
    parser.add_argument("--black", default="Player 2 (Black)", help="Black player's name")
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Draw the board without ANSI colours",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Launch a console game on stdin/stdout."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    style = RenderStyle.plain() if args.plain else RenderStyle.ansi()
    controller = GameController(args.white, args.black)
    return ConsoleSession(controller, style, sys.stdin, sys.stdout).run()


if __name__ == "__main__":
    sys.exit(main())
