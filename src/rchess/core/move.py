"""Move variants and the undo record produced by applying one."""

from __future__ import annotations

from dataclasses import dataclass

from rchess.core.castling import CastlingRights
from rchess.core.enums import Color, PieceType
from rchess.core.types import Square

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Base of the closed set of move variants below.

    Moves are built by a move generator and trusted as given: the captured
    and promoted kinds travel with the move so undo never has to read the
    board to find out what was there.
    """

    from_sq: Square
    to_sq: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{self.from_sq.name}{self.to_sq.name}"

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)


@dataclass(frozen=True, slots=True)
class Quiet(Move):
    """Non-capturing move, including single and double pawn pushes."""


@dataclass(frozen=True, slots=True)
class Capture(Move):
    captured: PieceType


@dataclass(frozen=True, slots=True)
class Promotion(Move):
    """Pawn reaching the last rank; ``captured`` is set for capture-promotions."""

    promotion: PieceType
    captured: PieceType | None = None

    def __str__(self) -> str:
        return f"{self.from_sq.name}{self.to_sq.name}{_PROMO_CHARS.get(self.promotion, '')}"


@dataclass(frozen=True, slots=True)
class EnPassantCapture(Move):
    captured: PieceType = PieceType.PAWN

    @property
    def captured_sq(self) -> Square:
        """Square of the captured pawn: mover's starting rank, destination file."""
        return Square(self.from_sq.rank, self.to_sq.file)


@dataclass(frozen=True, slots=True)
class Castling(Move):
    """King move of two files; the rook hop is implied by ``to_sq.file``."""


@dataclass(frozen=True, slots=True)
class UndoRecord:
    """State snapshot taken by :meth:`Position.apply` before mutating.

    ``mover`` is the side that made the move; restored pieces are colored
    from it rather than from whoever is to move at undo time.
    """

    move: Move
    en_passant: Square | None
    castling: CastlingRights
    mover: Color
