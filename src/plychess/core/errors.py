"""Exceptions raised by the core domain layer.

All of them are recoverable: callers are expected to report the ``reason``
to the user and carry on.
"""

from __future__ import annotations


class SquareOutOfRange(ValueError):
    """A file/rank pair or a linear index does not address a board cell."""


class MoveError(ValueError):
    """Base class for a rejected :meth:`Board.move_piece` call."""

    reason = "Specified move is impossible."

    def __init__(self) -> None:
        super().__init__(self.reason)


class EmptySquareSelected(MoveError):
    """The start square holds no piece."""

    reason = "An empty field was selected."


class WrongSideSelected(MoveError):
    """The start square holds a piece of the side not to move."""

    reason = "Wrong piece was selected."


class IllegalDestination(MoveError):
    """The end square is not among the piece's legal destinations."""

    reason = "Specified move is impossible."
