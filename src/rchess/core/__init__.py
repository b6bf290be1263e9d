"""Core domain layer — chess position state with zero external dependencies.

Quick start::

    from rchess.core import Position, Quiet, position_from_fen, STARTING_FEN
    from rchess.core.types import E2, E4

    pos = position_from_fen(STARTING_FEN)
    record = pos.apply(Quiet(E2, E4))
    print(pos.to_fen())
    pos.undo(record)
"""

from rchess.core.board import Board
from rchess.core.castling import CastlingRights
from rchess.core.enums import Color, PieceType
from rchess.core.errors import ChessError, InvalidEncodingError, InvalidMoveError
from rchess.core.move import (
    Capture,
    Castling,
    EnPassantCapture,
    Move,
    Promotion,
    Quiet,
    UndoRecord,
)
from rchess.core.notation import (
    STARTING_FEN,
    position_from_fen,
    position_to_fen,
)
from rchess.core.piece import Piece
from rchess.core.position import Position
from rchess.core.types import Square, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Errors
    "ChessError",
    "InvalidEncodingError",
    "InvalidMoveError",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    "Position",
    # Moves
    "Move",
    "Quiet",
    "Capture",
    "Promotion",
    "EnPassantCapture",
    "Castling",
    "UndoRecord",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
