"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from rchess.core.enums import Color, PieceType
from rchess.core.errors import InvalidEncodingError

# Lowercase FEN letter per kind; white pieces use the uppercase form.
_KIND_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_CHAR_KINDS: dict[str, PieceType] = {v: k for k, v in _KIND_CHARS.items()}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_KIND_MASK = 0b0111
_COLOR_SHIFT = 3


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    # ── Binary form ──────────────────────────────────────────────────────

    def encode(self) -> int:
        """Pack into one byte: kind in bits 0-2, color in bit 3 (0 = white)."""
        return int(self.piece_type) | (int(self.color) << _COLOR_SHIFT)

    @classmethod
    def from_byte(cls, value: int) -> Piece | None:
        """Inverse of :meth:`encode`; ``0`` is an empty square."""
        if value == 0:
            return None
        if not 0 < value <= 0xFF:
            raise InvalidEncodingError(f"Invalid piece byte: {value!r}")
        try:
            piece_type = PieceType(value & _KIND_MASK)
        except ValueError:
            raise InvalidEncodingError(f"Invalid piece byte: {value!r}") from None
        color = Color((value >> _COLOR_SHIFT) & 1)
        return cls(color, piece_type)

    # ── Text form ────────────────────────────────────────────────────────

    @property
    def char(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        lower = _KIND_CHARS[self.piece_type]
        return lower.upper() if self.color == Color.WHITE else lower

    def __str__(self) -> str:
        return self.char

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        if len(char) != 1 or not char.isascii():
            raise InvalidEncodingError(f"Invalid piece character: {char!r}")
        try:
            piece_type = _CHAR_KINDS[char.lower()]
        except KeyError:
            raise InvalidEncodingError(f"Invalid piece character: {char!r}") from None
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, piece_type)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
