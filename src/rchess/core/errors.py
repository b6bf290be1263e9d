"""Exception hierarchy for the core domain layer."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for all errors raised by :mod:`rchess.core`."""


class InvalidEncodingError(ChessError, ValueError):
    """Malformed textual or binary input to one of the decoders."""


class InvalidMoveError(ChessError, ValueError):
    """A move (or its undo record) that the position cannot dispatch."""
