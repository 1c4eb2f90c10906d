"""Tests for the interactive console loop."""

import io

from plychess.core.board import Board
from plychess.core.enums import Color, PieceType
from plychess.core.piece import Piece
from plychess.core.types import E2, E4
from plychess.ui.game_loop import GameLoop
from plychess.ui.i18n import set_language
from plychess.ui.settings import AppSettings


def _run(script: str, board: Board | None = None) -> tuple[GameLoop, int, str]:
    out = io.StringIO()
    loop = GameLoop(
        board if board is not None else Board.initial(),
        AppSettings(glyphs="ascii", use_color=False),
        io.StringIO(script),
        out,
    )
    applied = loop.run()
    return loop, applied, out.getvalue()


class TestGameLoop:
    def test_quit_immediately(self) -> None:
        loop, applied, text = _run("qq\n")
        assert applied == 0
        assert "Current move is: white" in text
        assert "Parsing position failed, reason: quitting game" in text
        assert loop.board == Board.initial()

    def test_end_of_input_quits(self) -> None:
        _, applied, _ = _run("")
        assert applied == 0

    def test_move_applied(self) -> None:
        loop, applied, text = _run("e2\ne4\nqq\n")
        assert applied == 1
        assert loop.board.side_to_move == Color.BLACK
        assert loop.board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert loop.board[E2] is None
        assert "Current move is: black" in text

    def test_engine_failure_reported(self) -> None:
        loop, applied, text = _run("e7\ne6\ne2\ne5\nqq\n")
        assert applied == 0
        assert "Movement failed, reason: Wrong piece was selected." in text
        assert "Movement failed, reason: Specified move is impossible." in text
        assert loop.board.side_to_move == Color.WHITE

    def test_empty_square_reported(self) -> None:
        _, _, text = _run("e4\ne5\nqq\n")
        assert "Movement failed, reason: An empty field was selected." in text

    def test_parse_failure_reprompts(self) -> None:
        _, applied, text = _run("z9\ne\ne2\ne4\nqq\n")
        assert applied == 1
        assert "Parsing position failed, reason: invalid position specified" in text
        assert "Parsing position failed, reason: insufficient arguments provided" in text

    def test_several_plies(self) -> None:
        loop, applied, _ = _run("e2\ne4\ne7\ne5\ng1\nf3\nqq\n")
        assert applied == 3
        assert loop.board.side_to_move == Color.BLACK

    def test_board_rendered_each_turn(self) -> None:
        _, _, text = _run("e2\ne4\nqq\n")
        assert text.count("  a   b   c   d   e   f   g   h") == 2

    def test_russian(self) -> None:
        set_language("Russian")
        _, _, text = _run("e7\ne6\nqq\n")
        assert "Сейчас ходят: белые" in text
        assert "Ход не выполнен, причина: Выбрана чужая фигура." in text
