"""Tests for board rendering."""

from plychess.core.board import Board
from plychess.core.enums import Color, PieceType
from plychess.core.piece import Piece
from plychess.core.types import E4
from plychess.ui.display import piece_glyph, render_board


class TestRenderBoard:
    def test_ascii_layout(self) -> None:
        lines = render_board(Board.initial(), glyphs="ascii", use_color=False).splitlines()
        assert len(lines) == 18
        assert lines[0] == "+---+---+---+---+---+---+---+---+"
        assert lines[1] == "| r | n | b | q | k | b | n | r | 8"
        assert lines[3] == "| p | p | p | p | p | p | p | p | 7"
        assert lines[5] == "|   |   |   |   |   |   |   |   | 6"
        assert lines[15] == "| R | N | B | Q | K | B | N | R | 1"
        assert lines[-1] == "  a   b   c   d   e   f   g   h"

    def test_unicode_without_color(self) -> None:
        board = Board.empty()
        board[E4] = Piece(Color.WHITE, PieceType.KING)
        text = render_board(board, glyphs="unicode", use_color=False)
        assert "| ♔ |" in text
        assert "\x1b[" not in text

    def test_color_marks_sides(self) -> None:
        text = render_board(Board.initial(), glyphs="unicode", use_color=True)
        assert "\x1b[1;31m♜\x1b[0m" in text
        assert "\x1b[1;37m♜\x1b[0m" in text


class TestPieceGlyph:
    def test_ascii_colored(self) -> None:
        glyph = piece_glyph(Piece(Color.BLACK, PieceType.KNIGHT), glyphs="ascii", use_color=True)
        assert glyph == "\x1b[1;31mn\x1b[0m"

    def test_outline_glyph_for_white(self) -> None:
        glyph = piece_glyph(Piece(Color.WHITE, PieceType.QUEEN), use_color=False)
        assert glyph == "♕"
