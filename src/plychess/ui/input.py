"""Two-character coordinate input, e.g. ``e2`` then ``e4``."""

from __future__ import annotations

from typing import TextIO

from plychess.core.errors import SquareOutOfRange
from plychess.core.types import Square, checked_square
from plychess.ui.i18n import t

QUIT_SENTINEL = "qq"


class PositionParseError(ValueError):
    """Base class for malformed coordinate input."""


class InvalidPosition(PositionParseError):
    def __str__(self) -> str:
        return t().error_invalid_position


class InsufficientArgs(PositionParseError):
    def __str__(self) -> str:
        return t().error_insufficient_args


class QuitGame(Exception):
    """The user asked to end the session."""

    def __str__(self) -> str:
        return t().quitting


def parse_position(text: str) -> Square:
    """Parse one fixed-width coordinate: a file letter then a rank digit."""
    token = text.strip()
    if len(token) < 2:
        raise InsufficientArgs()
    if token == QUIT_SENTINEL:
        raise QuitGame()
    if len(token) > 2 or token[1] not in "0123456789":
        raise InvalidPosition()
    try:
        return checked_square(token[0], int(token[1]))
    except SquareOutOfRange:
        raise InvalidPosition() from None


def _read_position(prompt: str, reader: TextIO, writer: TextIO) -> Square:
    writer.write(prompt + "\n")
    writer.flush()
    line = reader.readline()
    if not line:
        raise QuitGame()
    return parse_position(line)


def query_input(reader: TextIO, writer: TextIO) -> tuple[Square, Square]:
    """Prompt for the piece to move and its target square."""
    start = _read_position(t().prompt_piece, reader, writer)
    end = _read_position(t().prompt_target, reader, writer)
    return start, end
