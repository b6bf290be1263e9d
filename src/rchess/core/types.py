"""Square value type and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=(0,0) index 0, b1=(0,1) index 1, ..., h1=(0,7) index 7
    ...
    a8=(7,0) index 56, ..., h8=(7,7) index 63
"""

from __future__ import annotations

from dataclasses import dataclass

from rchess.core.errors import InvalidEncodingError

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable (rank, file) coordinate, both in ``0..7``."""

    rank: int
    file: int

    def __post_init__(self) -> None:
        if not (0 <= self.rank < 8 and 0 <= self.file < 8):
            raise InvalidEncodingError(
                f"Square out of range: rank={self.rank!r}, file={self.file!r}"
            )

    # ── Serialisation ────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``Square(0, 0).name == 'a1'``."""
        return _FILES[self.file] + _RANKS[self.rank]

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse an algebraic name, e.g. 'e4' → ``Square(3, 4)``."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise InvalidEncodingError(f"Invalid square name: {name!r}")
        return cls(_RANKS.index(name[1]), _FILES.index(name[0]))

    # ── Index form ───────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        """Flat index 0–63."""
        return self.rank * 8 + self.file

    @classmethod
    def from_index(cls, index: int) -> Square:
        if not 0 <= index < 64:
            raise InvalidEncodingError(f"Square index out of range: {index!r}")
        return cls(index >> 3, index & 7)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4'."""
    return Square.parse(name)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(7, 7)`` → 'h8'."""
    return sq.name


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(0, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(1, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(2, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(3, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(4, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(5, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(6, f) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(7, f) for f in range(8))
