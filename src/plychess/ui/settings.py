"""User-configurable console settings."""

from __future__ import annotations

from dataclasses import dataclass

GLYPH_SETS: tuple[str, ...] = ("unicode", "ascii")
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "WARNING"

    # Board
    glyphs: str = "unicode"
    use_color: bool = True

    def __post_init__(self) -> None:
        if self.glyphs not in GLYPH_SETS:
            raise ValueError(f"Unknown glyph set: {self.glyphs!r}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        self.log_level = self.log_level.upper()
