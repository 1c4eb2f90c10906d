"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from plychess.core import Board, parse_square

    board = Board.initial()
    board.move_piece(parse_square("e2"), parse_square("e4"))
    print(board.side_to_move)  # black
"""

from plychess.core.board import Board
from plychess.core.enums import Color, PieceType
from plychess.core.errors import (
    EmptySquareSelected,
    IllegalDestination,
    MoveError,
    SquareOutOfRange,
    WrongSideSelected,
)
from plychess.core.move_generator import MoveGenerator
from plychess.core.piece import Piece
from plychess.core.types import (
    Square,
    checked_square,
    is_valid_square,
    make_square,
    parse_square,
    square_from_index,
    square_index,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "EmptySquareSelected",
    "IllegalDestination",
    "MoveError",
    "SquareOutOfRange",
    "WrongSideSelected",
    # Types / helpers
    "Square",
    "checked_square",
    "is_valid_square",
    "make_square",
    "parse_square",
    "square_from_index",
    "square_index",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
]
