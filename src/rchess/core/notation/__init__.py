"""Notation package: FEN parsing and serialization."""

from rchess.core.notation.fen import (
    DEFAULT_FULLMOVE_NUMBER,
    DEFAULT_HALFMOVE_CLOCK,
    STARTING_FEN,
    position_from_fen,
    position_to_fen,
)

__all__ = [
    "DEFAULT_FULLMOVE_NUMBER",
    "DEFAULT_HALFMOVE_CLOCK",
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
