"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from plychess.core.board import Board
from plychess.ui.game_loop import GameLoop
from plychess.ui.i18n import LANGUAGES, set_language
from plychess.ui.settings import LOG_LEVELS, AppSettings

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plychess",
        description="Two-player chess on the console.",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Draw pieces with letters instead of Unicode chess symbols",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors (also honoured via NO_COLOR)",
    )
    parser.add_argument(
        "--language",
        choices=LANGUAGES,
        default="English",
        help="Interface language (default: English)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        type=str.upper,
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def settings_from_args(argv: list[str] | None = None) -> AppSettings:
    """Build :class:`AppSettings` from command-line arguments."""
    args = _build_parser().parse_args(argv)
    return AppSettings(
        language=args.language,
        log_level=args.log_level,
        glyphs="ascii" if args.ascii else "unicode",
        use_color=not args.no_color and "NO_COLOR" not in os.environ,
    )


def main(argv: list[str] | None = None) -> int:
    """Launch an interactive game on stdin/stdout."""
    settings = settings_from_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    set_language(settings.language)
    _LOGGER.debug("Starting with %s", settings)

    loop = GameLoop(Board.initial(), settings, sys.stdin, sys.stdout)
    loop.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
