"""Tests for coordinate parsing and prompting."""

import io

import pytest

from plychess.core.types import E2, E4, H8
from plychess.ui.i18n import set_language
from plychess.ui.input import (
    InsufficientArgs,
    InvalidPosition,
    PositionParseError,
    QuitGame,
    parse_position,
    query_input,
)


class TestParsePosition:
    def test_valid(self) -> None:
        assert parse_position("e2") == E2
        assert parse_position("h8") == H8

    def test_surrounding_whitespace(self) -> None:
        assert parse_position("  e4\n") == E4

    @pytest.mark.parametrize("text", ["", "e", "\n", " 4 "])
    def test_insufficient(self, text: str) -> None:
        with pytest.raises(InsufficientArgs):
            parse_position(text)

    @pytest.mark.parametrize("text", ["z9", "e9", "e0", "i1", "ex", "E2", "e22", "4e"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidPosition):
            parse_position(text)

    def test_quit_sentinel(self) -> None:
        with pytest.raises(QuitGame):
            parse_position("qq")

    def test_quit_is_not_a_parse_error(self) -> None:
        assert not issubclass(QuitGame, PositionParseError)

    def test_messages(self) -> None:
        assert str(InvalidPosition()) == "invalid position specified"
        assert str(InsufficientArgs()) == "insufficient arguments provided"
        assert str(QuitGame()) == "quitting game"

    def test_messages_follow_language(self) -> None:
        set_language("Russian")
        assert str(QuitGame()) == "выход из игры"


class TestQueryInput:
    def test_reads_pair(self) -> None:
        out = io.StringIO()
        assert query_input(io.StringIO("e2\ne4\n"), out) == (E2, E4)
        text = out.getvalue()
        assert "Select piece (example: d2), 'qq' - quits:" in text
        assert "Select move (example: d4), 'qq' - quits:" in text

    def test_quit_on_second_prompt(self) -> None:
        with pytest.raises(QuitGame):
            query_input(io.StringIO("e2\nqq\n"), io.StringIO())

    def test_end_of_input_quits(self) -> None:
        with pytest.raises(QuitGame):
            query_input(io.StringIO(""), io.StringIO())
        with pytest.raises(QuitGame):
            query_input(io.StringIO("e2\n"), io.StringIO())

    def test_parse_error_propagates(self) -> None:
        with pytest.raises(InvalidPosition):
            query_input(io.StringIO("e2\nz9\n"), io.StringIO())
