"""Internationalisation strings for the console UI.

Usage::

    from plychess.ui.i18n import t, set_language

    set_language("Russian")
    print(t().prompt_piece)
    print(t().current_move.format(side=t().color_name(Color.WHITE)))
"""

from __future__ import annotations

from dataclasses import dataclass

from plychess.core.enums import Color
from plychess.core.errors import (
    EmptySquareSelected,
    MoveError,
    WrongSideSelected,
)


@dataclass(frozen=True)
class Strings:
    # ── Prompts ──────────────────────────────────────────────────────────
    prompt_piece: str
    prompt_target: str
    current_move: str  # "Current move is: {side}"

    # ── Failure reports ──────────────────────────────────────────────────
    movement_failed: str  # "Movement failed, reason: {reason}"
    parsing_failed: str  # "Parsing position failed, reason: {reason}"

    # Engine reasons
    error_empty_square: str
    error_wrong_side: str
    error_illegal_destination: str

    # Input reasons
    error_invalid_position: str
    error_insufficient_args: str
    quitting: str

    color_white: str
    color_black: str

    def color_name(self, color: Color) -> str:
        return self.color_white if color == Color.WHITE else self.color_black

    def move_error(self, exc: MoveError) -> str:
        if isinstance(exc, EmptySquareSelected):
            return self.error_empty_square
        if isinstance(exc, WrongSideSelected):
            return self.error_wrong_side
        return self.error_illegal_destination


_EN = Strings(
    prompt_piece="Select piece (example: d2), 'qq' - quits:",
    prompt_target="Select move (example: d4), 'qq' - quits:",
    current_move="Current move is: {side}",
    movement_failed="Movement failed, reason: {reason}",
    parsing_failed="Parsing position failed, reason: {reason}",
    error_empty_square="An empty field was selected.",
    error_wrong_side="Wrong piece was selected.",
    error_illegal_destination="Specified move is impossible.",
    error_invalid_position="invalid position specified",
    error_insufficient_args="insufficient arguments provided",
    quitting="quitting game",
    color_white="white",
    color_black="black",
)

_RU = Strings(
    prompt_piece="Выберите фигуру (пример: d2), 'qq' - выход:",
    prompt_target="Выберите ход (пример: d4), 'qq' - выход:",
    current_move="Сейчас ходят: {side}",
    movement_failed="Ход не выполнен, причина: {reason}",
    parsing_failed="Не удалось разобрать позицию, причина: {reason}",
    error_empty_square="Выбрано пустое поле.",
    error_wrong_side="Выбрана чужая фигура.",
    error_illegal_destination="Такой ход невозможен.",
    error_invalid_position="указана неверная позиция",
    error_insufficient_args="недостаточно аргументов",
    quitting="выход из игры",
    color_white="белые",
    color_black="чёрные",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
