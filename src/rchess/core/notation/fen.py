"""FEN parsing and serialization."""

from __future__ import annotations

from typing import Final

from rchess.core.board import Board
from rchess.core.castling import CastlingRights
from rchess.core.enums import Color
from rchess.core.errors import InvalidEncodingError
from rchess.core.position import Position
from rchess.core.types import Square

STARTING_FEN: Final = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

# Positions do not track counters; these fill the last two fields on output.
DEFAULT_HALFMOVE_CLOCK: Final = 0
DEFAULT_FULLMOVE_NUMBER: Final = 1

_SIDE_CHARS: Final[dict[str, Color]] = {"w": Color.WHITE, "b": Color.BLACK}


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    The halfmove and fullmove fields are optional and ignored.
    """
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise InvalidEncodingError(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]

    board = Board.decode_placement(placement)

    side = _SIDE_CHARS.get(side_part)
    if side is None:
        raise InvalidEncodingError(f"Invalid FEN side-to-move field: {side_part!r}")

    castling = CastlingRights.decode(castling_part)

    ep = None if ep_part == "-" else Square.parse(ep_part)

    return Position(board, side, castling, ep)


def position_to_fen(
    pos: Position,
    *,
    halfmove_clock: int = DEFAULT_HALFMOVE_CLOCK,
    fullmove_number: int = DEFAULT_FULLMOVE_NUMBER,
) -> str:
    """Serialise a :class:`Position` to FEN.

    Counters belong to whoever sequences the game and are passed through
    verbatim.
    """
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"
    ep_str = pos.en_passant.name if pos.en_passant is not None else "-"
    return (
        f"{pos.board.encode_placement()} {side_str} {pos.castling.encode()} "
        f"{ep_str} {halfmove_clock} {fullmove_number}"
    )
