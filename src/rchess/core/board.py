"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from rchess.core.enums import Color, PieceType
from rchess.core.errors import InvalidEncodingError
from rchess.core.piece import Piece
from rchess.core.types import Square

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board, indexed by :attr:`Square.index`."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def get(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def set(self, sq: Square, piece: Piece | None) -> None:
        """Overwrite *sq* unconditionally; ``None`` empties it."""
        self._squares[sq.index] = piece

    __getitem__ = get
    __setitem__ = set

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    # -- Placement codec ----------------------------------------------------

    def encode_placement(self) -> str:
        """FEN piece-placement field, rank 8 first."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            empty = 0
            row = ""
            for file in range(8):
                piece = self._squares[rank * 8 + file]
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    row += str(empty)
                    empty = 0
                row += piece.char
            if empty:
                row += str(empty)
            rows.append(row)
        return "/".join(rows)

    @classmethod
    def decode_placement(cls, text: str) -> Board:
        """Parse a FEN piece-placement field into a new board."""
        ranks = text.split("/")
        if len(ranks) != 8:
            raise InvalidEncodingError(
                f"Invalid FEN board (must contain 8 ranks): {text!r}"
            )
        board = cls()
        for rank_idx, rank_text in enumerate(ranks):
            rank = 7 - rank_idx
            file = 0
            for ch in rank_text:
                if ch in "12345678":
                    file += int(ch)
                else:
                    if file >= 8:
                        raise InvalidEncodingError(f"Invalid FEN rank width: {text!r}")
                    board.set(Square(rank, file), Piece.from_char(ch))
                    file += 1
                if file > 8:
                    raise InvalidEncodingError(f"Invalid FEN rank width: {text!r}")
            if file != 8:
                raise InvalidEncodingError(f"Invalid FEN rank width: {text!r}")
        return board

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b.set(Square(0, f), Piece(Color.WHITE, pt))
            b.set(Square(1, f), Piece(Color.WHITE, PieceType.PAWN))
            b.set(Square(6, f), Piece(Color.BLACK, PieceType.PAWN))
            b.set(Square(7, f), Piece(Color.BLACK, pt))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares[rank * 8 + file]
                row.append(p.char if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
