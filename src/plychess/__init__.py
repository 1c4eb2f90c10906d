"""plychess — a two-player console chess board with per-piece move rules."""

__version__ = "0.1.0"
