"""Console front end: board rendering, coordinate input and the game loop."""

from plychess.ui.display import render_board
from plychess.ui.game_loop import GameLoop
from plychess.ui.input import (
    InsufficientArgs,
    InvalidPosition,
    PositionParseError,
    QuitGame,
    parse_position,
    query_input,
)
from plychess.ui.settings import AppSettings

__all__ = [
    "AppSettings",
    "GameLoop",
    "InsufficientArgs",
    "InvalidPosition",
    "PositionParseError",
    "QuitGame",
    "parse_position",
    "query_input",
    "render_board",
]
