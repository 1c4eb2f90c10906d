"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from plychess.core.board import Board
from plychess.ui.i18n import set_language


@pytest.fixture(autouse=True)
def _reset_language() -> Iterator[None]:
    """Reset shared i18n state between tests."""
    set_language("English")
    yield
    set_language("English")


@pytest.fixture
def board() -> Board:
    """Fresh board in the starting position."""
    return Board.initial()


@pytest.fixture
def empty_board() -> Board:
    """Board with no pieces, white to move."""
    return Board.empty()
