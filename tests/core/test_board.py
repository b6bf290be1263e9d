"""Tests for Board."""

import pytest

from rchess.core.board import Board
from rchess.core.enums import Color, PieceType
from rchess.core.errors import InvalidEncodingError
from rchess.core.piece import Piece
from rchess.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E2, E4,
    Square,
)

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board.get(E8) == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_white_pawns(self) -> None:
        board = Board.initial()
        for file in range(8):
            assert board[Square(1, file)] == Piece(Color.WHITE, PieceType.PAWN)

    def test_black_pawns(self) -> None:
        board = Board.initial()
        for file in range(8):
            assert board[Square(6, file)] == Piece(Color.BLACK, PieceType.PAWN)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for index in range(16, 48):
            assert board.is_empty(Square.from_index(index))


class TestBoardMutation:
    def test_set_and_get(self) -> None:
        board = Board()
        knight = Piece(Color.WHITE, PieceType.KNIGHT)
        board.set(E4, knight)
        assert board.get(E4) == knight
        assert not board.is_empty(E4)

    def test_set_none_clears(self) -> None:
        board = Board.initial()
        board[E2] = None
        assert board[E2] is None
        assert board.is_empty(E2)

    def test_overwrite_replaces_piece(self) -> None:
        board = Board.initial()
        board[E2] = Piece(Color.BLACK, PieceType.QUEEN)
        assert board.get(E2) == Piece(Color.BLACK, PieceType.QUEEN)

    def test_copy_is_independent(self) -> None:
        board = Board.initial()
        clone = board.copy()
        clone[E2] = None
        assert board[E2] == Piece(Color.WHITE, PieceType.PAWN)
        assert board != clone

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board == Board()
        assert board[E1] is None

    def test_repr_diagram(self) -> None:
        lines = repr(Board.initial()).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[-1] == "  a b c d e f g h"


class TestPlacementCodec:
    def test_encode_initial(self) -> None:
        assert Board.initial().encode_placement() == STARTING_PLACEMENT

    def test_empty_board(self) -> None:
        assert Board().encode_placement() == "8/8/8/8/8/8/8/8"

    def test_trailing_empty_run_flushed(self) -> None:
        board = Board()
        board[A1] = Piece(Color.WHITE, PieceType.ROOK)
        board[H8] = Piece(Color.BLACK, PieceType.ROOK)
        assert board.encode_placement() == "7r/8/8/8/8/8/8/R7"

    def test_decode_initial(self) -> None:
        assert Board.decode_placement(STARTING_PLACEMENT) == Board.initial()

    def test_decode_places_rank_eight_first(self) -> None:
        board = Board.decode_placement("k7/8/8/8/8/8/8/7K")
        assert board[A8] == Piece(Color.BLACK, PieceType.KING)
        assert board[H1] == Piece(Color.WHITE, PieceType.KING)

    def test_round_trip(self) -> None:
        text = "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R"
        assert Board.decode_placement(text).encode_placement() == text

    @pytest.mark.parametrize(
        "text",
        [
            "8/8/8/8/8/8/8",  # seven ranks
            "8/8/8/8/8/8/8/8/8",  # nine ranks
            "7/8/8/8/8/8/8/8",  # short rank
            "9/8/8/8/8/8/8/8",  # digit out of range
            "0p7/8/8/8/8/8/8/8",  # zero digit
            "ppppppppp/8/8/8/8/8/8/8",  # wide rank
            "8/8/8/8/8/8/8/7x",  # bad piece
            "44p/8/8/8/8/8/8/8",  # digits overflow
        ],
    )
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidEncodingError):
            Board.decode_placement(text)
