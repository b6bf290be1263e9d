"""Castling availability flags and their FEN field codec."""

from __future__ import annotations

from enum import IntFlag, auto

from rchess.core.errors import InvalidEncodingError


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    def encode(self) -> str:
        """FEN castling field, e.g. ``'KQkq'``; ``'-'`` when nothing is set."""
        text = "".join(ch for ch, right in _FEN_ORDER if self & right)
        return text or "-"

    @classmethod
    def decode(cls, text: str) -> CastlingRights:
        """Parse a FEN castling field.

        Starts from :attr:`NONE` and sets one flag per letter. A ``'-'``
        anywhere in the field clears every flag set so far.
        """
        if not text:
            raise InvalidEncodingError(f"Invalid FEN castling field: {text!r}")
        rights = cls.NONE
        for ch in text:
            if ch == "-":
                rights = cls.NONE
                continue
            right = _FEN_LETTERS.get(ch)
            if right is None:
                raise InvalidEncodingError(f"Invalid FEN castling field: {text!r}")
            rights |= right
        return rights


_FEN_ORDER: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)
_FEN_LETTERS: dict[str, CastlingRights] = dict(_FEN_ORDER)
