"""Tests for Piece and PieceDescriptor."""

import pytest

from chessplay.core.enums import Color, PieceType
from chessplay.core.piece import Piece, PieceDescriptor
from chessplay.core.types import Square


class TestPieceDescriptor:
    def test_value_equality(self) -> None:
        a = PieceDescriptor(PieceType.KNIGHT, Color.WHITE)
        b = PieceDescriptor(PieceType.KNIGHT, Color.WHITE)
        assert a == b
        assert hash(a) == hash(b)
        assert a != PieceDescriptor(PieceType.KNIGHT, Color.BLACK)

    def test_immutable(self) -> None:
        d = PieceDescriptor(PieceType.QUEEN, Color.BLACK)
        with pytest.raises(AttributeError):
            d.color = Color.WHITE  # type: ignore[misc]

    @pytest.mark.parametrize(
        "char, piece_type, color",
        [
            ("K", PieceType.KING, Color.WHITE),
            ("q", PieceType.QUEEN, Color.BLACK),
            ("N", PieceType.KNIGHT, Color.WHITE),
            ("p", PieceType.PAWN, Color.BLACK),
        ],
    )
    def test_from_char(self, char: str, piece_type: PieceType, color: Color) -> None:
        d = PieceDescriptor.from_char(char)
        assert d == PieceDescriptor(piece_type, color)
        assert str(d) == char

    @pytest.mark.parametrize("char", ["", "x", "KK", "1"])
    def test_from_char_invalid(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            PieceDescriptor.from_char(char)

    def test_symbol(self) -> None:
        assert PieceDescriptor(PieceType.KING, Color.WHITE).symbol == "♔"
        assert PieceDescriptor(PieceType.PAWN, Color.BLACK).symbol == "♟"


class TestPiece:
    def test_starts_detached(self) -> None:
        piece = Piece(PieceType.ROOK, Color.WHITE)
        assert piece.position is None
        assert piece.is_detached

    def test_identity_equality(self) -> None:
        a = Piece(PieceType.BISHOP, Color.BLACK)
        b = Piece(PieceType.BISHOP, Color.BLACK)
        assert a != b
        assert a == a
        assert a.descriptor == b.descriptor

    def test_type_and_color_read_only(self) -> None:
        piece = Piece(PieceType.PAWN, Color.WHITE)
        with pytest.raises(AttributeError):
            piece.color = Color.BLACK  # type: ignore[misc]
        with pytest.raises(AttributeError):
            piece.piece_type = PieceType.QUEEN  # type: ignore[misc]

    def test_repr_mentions_position(self) -> None:
        piece = Piece(PieceType.KNIGHT, Color.BLACK, Square(7, 1))
        assert "b8" in repr(piece)
        assert "detached" in repr(Piece(PieceType.KNIGHT, Color.BLACK))

    def test_from_char(self) -> None:
        piece = Piece.from_char("r")
        assert piece.piece_type == PieceType.ROOK
        assert piece.color == Color.BLACK
        assert str(piece) == "r"


def test_color_helpers() -> None:
    assert Color.WHITE.opposite == Color.BLACK
    assert Color.BLACK.opposite == Color.WHITE
    assert Color.WHITE.pawn_direction == 1
    assert Color.BLACK.pawn_direction == -1
    assert str(Color.BLACK) == "black"
    assert str(PieceType.KNIGHT) == "knight"
