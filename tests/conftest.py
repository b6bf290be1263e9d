"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from rchess.core.notation import STARTING_FEN, position_from_fen
from rchess.core.position import Position

CASTLING_FEN = "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQkq - 0 1"


@pytest.fixture
def start_position() -> Position:
    """Standard initial position, white to move."""
    return position_from_fen(STARTING_FEN)


@pytest.fixture
def castling_position() -> Position:
    """Both sides with king and rooks on home squares, nothing in between."""
    return position_from_fen(CASTLING_FEN)
