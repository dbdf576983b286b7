"""Piece identity and its immutable descriptor."""

from __future__ import annotations

from dataclasses import dataclass

from chessplay.core.enums import Color, PieceType
from chessplay.core.types import Square

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class PieceDescriptor:
    """Immutable ``{type, color}`` tag, the value the outside world sees."""

    piece_type: PieceType
    color: Color

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> PieceDescriptor:
        """Create descriptor from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(ptype, color)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]


class Piece:
    """A piece on (or taken off) the board.

    Type and color are fixed for life; only ``position`` changes. Equality
    is identity, so the same piece can be tracked across moves.
    """

    __slots__ = ("_descriptor", "position")

    def __init__(
        self,
        piece_type: PieceType,
        color: Color,
        position: Square | None = None,
    ) -> None:
        self._descriptor = PieceDescriptor(piece_type, color)
        self.position = position

    @classmethod
    def from_char(cls, char: str) -> Piece:
        d = PieceDescriptor.from_char(char)
        return cls(d.piece_type, d.color)

    @property
    def piece_type(self) -> PieceType:
        return self._descriptor.piece_type

    @property
    def color(self) -> Color:
        return self._descriptor.color

    @property
    def descriptor(self) -> PieceDescriptor:
        return self._descriptor

    @property
    def is_detached(self) -> bool:
        return self.position is None

    def __str__(self) -> str:
        return str(self._descriptor)

    def __repr__(self) -> str:
        where = self.position if self.position is not None else "detached"
        return f"Piece({self.color} {self.piece_type} @ {where})"
