"""Square value and coordinate helpers.

Board layout (Little-Endian Rank-File mapping)::

    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

A :class:`Square` may be built off the board on purpose: move generation
steps past the edges while probing candidates. Such squares must be checked
with :meth:`Square.is_valid` before they are used to address the board;
:meth:`Square.index` refuses them.
"""

from __future__ import annotations

from dataclasses import dataclass

from plychess.core.errors import SquareOutOfRange

FILES = "abcdefgh"
RANKS = range(1, 9)


@dataclass(frozen=True, slots=True)
class Square:
    """A (file, rank) pair, e.g. ``Square("e", 4)``."""

    file: str
    rank: int

    @property
    def is_valid(self) -> bool:
        return is_valid_square(self.file, self.rank)

    @property
    def index(self) -> int:
        """Linear index 0–63; raises :class:`SquareOutOfRange` if off-board."""
        return square_index(self.file, self.rank)

    @property
    def name(self) -> str:
        return f"{self.file}{self.rank}"

    def offset(self, file_delta: int, rank_delta: int) -> Square:
        """Neighbouring square, unchecked (may be off the board)."""
        return Square(chr(ord(self.file) + file_delta), self.rank + rank_delta)

    def __str__(self) -> str:
        return self.name


def make_square(file: str, rank: int) -> Square:
    """Build a square without bounds checking."""
    return Square(file, rank)


def is_valid_square(file: str, rank: int) -> bool:
    """True iff *file* is 'a'–'h' and *rank* is 1–8."""
    return (
        isinstance(file, str)
        and isinstance(rank, int)
        and len(file) == 1
        and "a" <= file <= "h"
        and 1 <= rank <= 8
    )


def checked_square(file: str, rank: int) -> Square:
    """Build a square, raising :class:`SquareOutOfRange` if it is off-board."""
    if not is_valid_square(file, rank):
        raise SquareOutOfRange(f"Square out of range: {file!s}{rank!s}")
    return Square(file, rank)


def square_index(file: str, rank: int) -> int:
    """Canonical index ``(file - 'a') + (rank - 1) * 8``."""
    if not is_valid_square(file, rank):
        raise SquareOutOfRange(f"Square out of range: {file!s}{rank!s}")
    return (ord(file) - ord("a")) + (rank - 1) * 8


def square_from_index(index: int) -> Square:
    """Inverse of :func:`square_index`, e.g. 28 → e4."""
    if not 0 <= index < 64:
        raise SquareOutOfRange(f"Square index out of range: {index}")
    return Square(FILES[index & 7], (index >> 3) + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → ``Square('e', 4)``."""
    if len(name) != 2 or name[1] not in "0123456789":
        raise ValueError(f"Invalid square name: {name!r}")
    return checked_square(name[0], int(name[1]))


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (square_from_index(i) for i in range(0, 8))
A2, B2, C2, D2, E2, F2, G2, H2 = (square_from_index(i) for i in range(8, 16))
A3, B3, C3, D3, E3, F3, G3, H3 = (square_from_index(i) for i in range(16, 24))
A4, B4, C4, D4, E4, F4, G4, H4 = (square_from_index(i) for i in range(24, 32))
A5, B5, C5, D5, E5, F5, G5, H5 = (square_from_index(i) for i in range(32, 40))
A6, B6, C6, D6, E6, F6, G6, H6 = (square_from_index(i) for i in range(40, 48))
A7, B7, C7, D7, E7, F7, G7, H7 = (square_from_index(i) for i in range(48, 56))
A8, B8, C8, D8, E8, F8, G8, H8 = (square_from_index(i) for i in range(56, 64))
