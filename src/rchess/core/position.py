"""Position — board plus metadata, with reversible move application."""

from __future__ import annotations

import logging
from typing import Final

from rchess.core.board import Board
from rchess.core.castling import CastlingRights
from rchess.core.enums import Color, PieceType
from rchess.core.errors import InvalidMoveError
from rchess.core.move import (
    Capture,
    Castling,
    EnPassantCapture,
    Move,
    Promotion,
    Quiet,
    UndoRecord,
)
from rchess.core.piece import Piece
from rchess.core.types import A1, A8, E1, E8, H1, H8, Square

_LOGGER = logging.getLogger(__name__)

_MOVE_VARIANTS: Final = (Quiet, Capture, Promotion, EnPassantCapture, Castling)

# Castling destination file -> (rook from file, rook to file).
_ROOK_HOPS: Final[dict[int, tuple[int, int]]] = {
    2: (0, 3),
    6: (7, 5),
}

# Right -> (color, king home, rook home).
_CASTLING_HOMES: Final[dict[CastlingRights, tuple[Color, Square, Square]]] = {
    CastlingRights.WHITE_KINGSIDE: (Color.WHITE, E1, H1),
    CastlingRights.WHITE_QUEENSIDE: (Color.WHITE, E1, A1),
    CastlingRights.BLACK_KINGSIDE: (Color.BLACK, E8, H8),
    CastlingRights.BLACK_QUEENSIDE: (Color.BLACK, E8, A8),
}


def _rook_hop(move: Castling) -> tuple[Square, Square]:
    try:
        rook_from, rook_to = _ROOK_HOPS[move.to_sq.file]
    except KeyError:
        raise InvalidMoveError(
            f"Invalid castling destination: {move.to_sq.name!r}"
        ) from None
    rank = move.to_sq.rank
    return Square(rank, rook_from), Square(rank, rook_to)


class Position:
    """Board + side to move + castling rights + en-passant target.

    :meth:`apply` mutates in place and returns an :class:`UndoRecord`;
    :meth:`undo` replays one. Records must be undone in LIFO order.
    :meth:`make_move` / :meth:`unmake_move` keep that stack internally.
    Halfmove/fullmove counters are not tracked here.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "_history",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self._history: list[UndoRecord] = []

    @classmethod
    def empty(cls) -> Position:
        """Empty board, white to move, every castling flag still set."""
        return cls(board=Board())

    # ── Core move operations ─────────────────────────────────────────────

    def apply(self, move: Move) -> UndoRecord:
        """Play *move* and return the record needed to take it back.

        Legality is not checked. Raises :class:`InvalidMoveError`, leaving
        the position untouched, when *move* is not one of the five variants,
        does not leave its origin square, starts from an empty square, or is a
        castling move that does not land on the c- or g-file.
        """
        if not isinstance(move, _MOVE_VARIANTS):
            _LOGGER.debug("Rejected %r: unsupported move variant", move)
            raise InvalidMoveError(f"Unsupported move variant: {move!r}")
        if move.from_sq == move.to_sq:
            _LOGGER.debug("Rejected %s: null move", move)
            raise InvalidMoveError(f"Move does not leave {move.from_sq.name!r}")
        board = self.board
        piece = board.get(move.from_sq)
        if piece is None:
            _LOGGER.debug("Rejected %s: no piece on origin square", move)
            raise InvalidMoveError(f"No piece on {move.from_sq.name!r}")
        rook_hop = _rook_hop(move) if isinstance(move, Castling) else None

        record = UndoRecord(
            move=move,
            en_passant=self.en_passant,
            castling=self.castling,
            mover=self.side_to_move,
        )

        board.set(move.from_sq, None)
        if isinstance(move, Promotion):
            board.set(move.to_sq, Piece(self.side_to_move, move.promotion))
        else:
            board.set(move.to_sq, piece)

        if isinstance(move, EnPassantCapture):
            board.set(move.captured_sq, None)
        elif rook_hop is not None:
            rook_from, rook_to = rook_hop
            board.set(rook_to, board.get(rook_from))
            board.set(rook_from, None)

        self.en_passant = self._next_en_passant(move, piece)
        self.castling = self._derive_castling(self.castling)
        self.side_to_move = self.side_to_move.opposite
        _LOGGER.debug("Applied %s (%s)", move, type(move).__name__)
        return record

    def undo(self, record: UndoRecord) -> None:
        """Revert the :meth:`apply` call that produced *record*."""
        move = record.move
        rook_hop = _rook_hop(move) if isinstance(move, Castling) else None
        board = self.board
        mover = record.mover
        opponent = mover.opposite

        if isinstance(move, Promotion):
            board.set(move.from_sq, Piece(mover, PieceType.PAWN))
            captured = (
                Piece(opponent, move.captured) if move.captured is not None else None
            )
            board.set(move.to_sq, captured)
        elif isinstance(move, Capture):
            board.set(move.from_sq, board.get(move.to_sq))
            board.set(move.to_sq, Piece(opponent, move.captured))
        elif isinstance(move, EnPassantCapture):
            board.set(move.from_sq, board.get(move.to_sq))
            board.set(move.to_sq, None)
            board.set(move.captured_sq, Piece(opponent, move.captured))
        elif isinstance(move, (Quiet, Castling)):
            board.set(move.from_sq, board.get(move.to_sq))
            board.set(move.to_sq, None)
        else:
            raise InvalidMoveError(f"Unsupported move variant: {move!r}")

        if rook_hop is not None:
            rook_from, rook_to = rook_hop
            board.set(rook_from, board.get(rook_to))
            board.set(rook_to, None)

        self.castling = record.castling
        self.en_passant = record.en_passant
        self.side_to_move = mover
        _LOGGER.debug("Undid %s (%s)", move, type(move).__name__)

    def make_move(self, move: Move) -> None:
        """Apply *move*, pushing its undo record onto the history stack."""
        self._history.append(self.apply(move))

    def unmake_move(self) -> Move:
        """Undo the last :meth:`make_move` and return the move taken back."""
        if not self._history:
            raise InvalidMoveError("No move to unmake")
        record = self._history.pop()
        self.undo(record)
        return record.move

    # ── Derived state ────────────────────────────────────────────────────

    @staticmethod
    def _next_en_passant(move: Move, piece: Piece) -> Square | None:
        if not isinstance(move, Quiet) or piece.piece_type != PieceType.PAWN:
            return None
        from_sq, to_sq = move.from_sq, move.to_sq
        if abs(to_sq.rank - from_sq.rank) != 2 or to_sq.file != from_sq.file:
            return None
        return Square((from_sq.rank + to_sq.rank) // 2, from_sq.file)

    def _derive_castling(self, castling: CastlingRights) -> CastlingRights:
        """Drop every right whose king or rook has left its home square."""
        board = self.board
        for right, (color, king_sq, rook_sq) in _CASTLING_HOMES.items():
            if not castling & right:
                continue
            king_home = board.get(king_sq) == Piece(color, PieceType.KING)
            rook_home = board.get(rook_sq) == Piece(color, PieceType.ROOK)
            if not (king_home and rook_home):
                castling &= ~right
        return castling

    # ── Serialisation ────────────────────────────────────────────────────

    @classmethod
    def from_fen(cls, fen: str) -> Position:
        from rchess.core.notation.fen import position_from_fen

        return position_from_fen(fen)

    def to_fen(self, **counters: int) -> str:
        """FEN for this position; see :func:`position_to_fen` for *counters*."""
        from rchess.core.notation.fen import position_to_fen

        return position_to_fen(self, **counters)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy without history."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
        )

    def __repr__(self) -> str:
        return f"Position({self.to_fen()!r})"
