"""Text rendering of the board.

Example - board at its starting position (ASCII glyphs, no color)::

    +---+---+---+---+---+---+---+---+
    | r | n | b | q | k | b | n | r | 8
    +---+---+---+---+---+---+---+---+
    | p | p | p | p | p | p | p | p | 7
    ...
    | R | N | B | Q | K | B | N | R | 1
    +---+---+---+---+---+---+---+---+
      a   b   c   d   e   f   g   h
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from plychess.core.enums import Color, PieceType
from plychess.core.piece import Piece
from plychess.core.types import FILES, make_square

if TYPE_CHECKING:
    from plychess.core.board import Board

_BORDER = "+---+---+---+---+---+---+---+---+"
_RESET = "\x1b[0m"
_COLORS: dict[Color, str] = {
    Color.WHITE: "\x1b[1;37m",
    Color.BLACK: "\x1b[1;31m",
}

# With color on, both sides share the filled glyphs and differ by color only.
_SOLID: dict[PieceType, str] = {
    PieceType.KING: "♚",
    PieceType.QUEEN: "♛",
    PieceType.ROOK: "♜",
    PieceType.BISHOP: "♝",
    PieceType.KNIGHT: "♞",
    PieceType.PAWN: "♟",
}


def piece_glyph(piece: Piece, *, glyphs: str = "unicode", use_color: bool = True) -> str:
    """Single-cell representation of *piece*."""
    if glyphs == "ascii":
        text = str(piece)
    elif use_color:
        text = _SOLID[piece.piece_type]
    else:
        text = piece.symbol
    if use_color:
        return f"{_COLORS[piece.color]}{text}{_RESET}"
    return text


def render_board(board: Board, *, glyphs: str = "unicode", use_color: bool = True) -> str:
    """Grid with rank 8 on top and file labels underneath."""
    lines: list[str] = []
    for rank in range(8, 0, -1):
        lines.append(_BORDER)
        cells = []
        for f in FILES:
            piece = board.piece_at(make_square(f, rank))
            if piece is None:
                cells.append("   ")
            else:
                cells.append(f" {piece_glyph(piece, glyphs=glyphs, use_color=use_color)} ")
        lines.append(f"|{'|'.join(cells)}| {rank}")
    lines.append(_BORDER)
    lines.append("".join(f"  {f} " for f in FILES).rstrip())
    return "\n".join(lines)
