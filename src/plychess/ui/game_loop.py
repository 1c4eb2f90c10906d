"""Interactive console loop: render, read a move, apply, repeat."""

from __future__ import annotations

import logging
from typing import TextIO

from plychess.core.board import Board
from plychess.core.errors import MoveError
from plychess.ui.display import render_board
from plychess.ui.i18n import t
from plychess.ui.input import PositionParseError, QuitGame, query_input
from plychess.ui.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


class GameLoop:
    """Drives one console session on *board* until the user quits.

    Engine and parse failures are reported and the user is asked again;
    only :class:`QuitGame` ends :meth:`run`.
    """

    __slots__ = ("_board", "_settings", "_reader", "_writer")

    def __init__(
        self,
        board: Board,
        settings: AppSettings,
        reader: TextIO,
        writer: TextIO,
    ) -> None:
        self._board = board
        self._settings = settings
        self._reader = reader
        self._writer = writer

    @property
    def board(self) -> Board:
        return self._board

    def run(self) -> int:
        """Play until quit; returns the number of moves applied."""
        applied = 0
        while True:
            self._show_board()
            try:
                start, end = query_input(self._reader, self._writer)
            except QuitGame as exc:
                self._say(t().parsing_failed.format(reason=exc))
                break
            except PositionParseError as exc:
                self._say(t().parsing_failed.format(reason=exc))
                self._say("")
                continue

            try:
                self._board.move_piece(start, end)
            except MoveError as exc:
                self._say(t().movement_failed.format(reason=t().move_error(exc)))
            else:
                applied += 1
            self._say("")

        _LOGGER.info("Session ended after %d moves", applied)
        return applied

    def _show_board(self) -> None:
        s = self._settings
        self._say(render_board(self._board, glyphs=s.glyphs, use_color=s.use_color))
        self._say("")
        side = t().color_name(self._board.side_to_move)
        self._say(t().current_move.format(side=side))

    def _say(self, text: str) -> None:
        self._writer.write(text + "\n")
