"""Board - piece placement on an 8x8 board plus the side to move."""

from __future__ import annotations

import logging

from plychess.core.enums import Color, PieceType
from plychess.core.errors import (
    EmptySquareSelected,
    IllegalDestination,
    WrongSideSelected,
)
from plychess.core.move_generator import MoveGenerator
from plychess.core.piece import Piece
from plychess.core.types import FILES, Square, make_square

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board that validates and applies moves.

    The side to move flips after every accepted :meth:`move_piece` call and
    at no other time.
    """

    __slots__ = ("_squares", "_side_to_move")

    def __init__(self, side_to_move: Color = Color.WHITE) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self._side_to_move = side_to_move

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position, white to move."""
        b = cls()
        for f in FILES:
            b[make_square(f, 2)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 7)] = Piece(Color.BLACK, PieceType.PAWN)

        for f, pt in zip(FILES, _BACK_RANK):
            b[make_square(f, 1)] = Piece(Color.WHITE, pt)
            b[make_square(f, 8)] = Piece(Color.BLACK, pt)
        return b

    @classmethod
    def empty(cls, side_to_move: Color = Color.WHITE) -> Board:
        """Board with no pieces, for setting up arbitrary positions."""
        return cls(side_to_move)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq.index] = piece

    def piece_at(self, sq: Square) -> Piece | None:
        return self[sq]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    @property
    def side_to_move(self) -> Color:
        return self._side_to_move

    # -- Query helpers ------------------------------------------------------

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Squares the piece on *sq* may move to (empty if *sq* is empty)."""
        return MoveGenerator(self).destinations(sq)

    # -- Moves --------------------------------------------------------------

    def move_piece(self, start: Square, end: Square) -> None:
        """Move the piece on *start* to *end*, capturing whatever stands there.

        Raises:
            EmptySquareSelected: *start* holds no piece.
            WrongSideSelected: the piece on *start* is not the side to move's.
            IllegalDestination: *end* is not a legal destination.

        The board is left untouched when an exception is raised.
        """
        piece = self[start]
        if piece is None:
            _LOGGER.debug("Rejected %s%s: empty start square", start, end)
            raise EmptySquareSelected()
        if piece.color != self._side_to_move:
            _LOGGER.debug("Rejected %s%s: %s to move", start, end, self._side_to_move)
            raise WrongSideSelected()
        if end not in self.legal_destinations(start):
            _LOGGER.debug("Rejected %s%s: illegal destination", start, end)
            raise IllegalDestination()

        captured = self[end]
        self[end] = piece.mark_moved()
        self[start] = None
        self._side_to_move = self._side_to_move.opposite

        if captured is not None:
            _LOGGER.debug("%s %s%s captures %s", piece.color, start, end, captured)
        else:
            _LOGGER.debug("%s %s%s", piece.color, start, end)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board(self._side_to_move)
        b._squares = self._squares.copy()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._squares == other._squares
            and self._moved_flags() == other._moved_flags()
            and self._side_to_move == other._side_to_move
        )

    def _moved_flags(self) -> list[bool]:
        # Piece equality ignores the pawn moved flag; board equality must not.
        return [p is not None and p.moved for p in self._squares]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(8, 0, -1):
            row = []
            for f in FILES:
                p = self[make_square(f, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
