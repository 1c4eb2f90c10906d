"""Per-piece destination generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from plychess.core.enums import Color, PieceType
from plychess.core.types import Square

if TYPE_CHECKING:
    from plychess.core.board import Board
    from plychess.core.piece import Piece


# (file delta, rank delta)
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, -1), (-1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


class MoveGenerator:
    """Computes the destination squares of a single piece on a :class:`Board`.

    Generation never looks at whose turn it is: captures are decided by the
    color of the piece standing on the origin square. Nothing here detects
    check, so king moves into attacked squares are offered too.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def destinations(self, sq: Square) -> list[Square]:
        """Legal destinations of the piece on *sq* (empty if *sq* is empty)."""
        piece = self._board[sq]
        if piece is None:
            return []

        moves: list[Square] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(sq, piece, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(sq, piece.color, KNIGHT_OFFSETS, moves)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(sq, piece.color, BISHOP_DIRS, moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(sq, piece.color, ROOK_DIRS, moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(sq, piece.color, QUEEN_DIRS, moves)
        else:
            self._gen_steps(sq, piece.color, KING_OFFSETS, moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for df, dr in offsets:
            to_sq = sq.offset(df, dr)
            if not to_sq.is_valid:
                continue
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for df, dr in directions:
            to_sq = sq.offset(df, dr)
            while to_sq.is_valid:
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    to_sq = to_sq.offset(df, dr)
                    continue
                if target.color != color:
                    moves.append(to_sq)
                break

    def _gen_pawn(self, sq: Square, piece: Piece, moves: list[Square]) -> None:
        board = self._board
        color = piece.color
        forward = color.pawn_direction

        one_step = sq.offset(0, forward)
        if one_step.is_valid and board.is_empty(one_step):
            moves.append(one_step)

        for df in (-1, 1):
            cap_sq = sq.offset(df, forward)
            if not cap_sq.is_valid:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                moves.append(cap_sq)

        # Only the landing square is checked; a piece on the skipped square
        # does not block the double step.
        if not piece.moved:
            two_step = sq.offset(0, 2 * forward)
            if two_step.is_valid and board.is_empty(two_step):
                moves.append(two_step)
