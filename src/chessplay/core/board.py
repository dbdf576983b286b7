"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from chessplay.core.enums import BACK_ROW_ORDER, Color, PieceType
from chessplay.core.piece import Piece, PieceDescriptor
from chessplay.core.types import BOARD_SIZE, Square, all_squares, ensure_square


class Board:
    """Mutable 8x8 grid of optional pieces.

    The board is the single owner of piece placement: every live piece sits
    on exactly one square and its ``position`` mirrors that square; pieces
    taken off the board have ``position`` set to ``None``.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def get(self, sq: Square) -> Piece | None:
        sq = ensure_square(sq)
        return self._grid[sq.row][sq.col]

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.get(sq)

    def is_empty(self, sq: Square) -> bool:
        return self.get(sq) is None

    def is_occupied_by(self, sq: Square, color: Color) -> bool:
        piece = self.get(sq)
        return piece is not None and piece.color == color

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece, sq: Square) -> None:
        """Put *piece* on *sq*.

        A piece already on the board is lifted from its old square first;
        whatever stood on *sq* is detached.
        """
        sq = ensure_square(sq)
        old = piece.position
        if old is not None and self._grid[old.row][old.col] is piece:
            self._grid[old.row][old.col] = None

        occupant = self._grid[sq.row][sq.col]
        if occupant is not None and occupant is not piece:
            occupant.position = None

        self._grid[sq.row][sq.col] = piece
        piece.position = sq

    def clear(self, sq: Square) -> Piece | None:
        """Detach and return the piece on *sq* (``None`` if empty)."""
        sq = ensure_square(sq)
        piece = self._grid[sq.row][sq.col]
        if piece is not None:
            self._grid[sq.row][sq.col] = None
            piece.position = None
        return piece

    def move(self, origin: Square, target: Square) -> Piece | None:
        """Move the piece on *origin* to *target*.

        Returns the piece detached from *target*, if any. No legality check
        is done here.
        """
        piece = self.get(origin)
        if piece is None:
            raise ValueError(f"No piece on {origin} to move")
        captured = self.clear(target)
        self.place(piece, target)
        return captured

    def reset(self) -> None:
        """Remove every piece from the board."""
        for sq in all_squares():
            self.clear(sq)

    def setup_standard_position(self) -> None:
        """Clear the board and lay out the standard starting position."""
        self.reset()
        for color in Color:
            back = color.back_row
            for col, piece_type in enumerate(BACK_ROW_ORDER):
                self.place(Piece(piece_type, color), Square(back, col))
            for col in range(BOARD_SIZE):
                self.place(
                    Piece(PieceType.PAWN, color), Square(color.pawn_start_row, col)
                )

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """Live pieces in row-major order, optionally filtered by *color*."""
        return [
            piece
            for row in self._grid
            for piece in row
            if piece is not None and (color is None or piece.color == color)
        ]

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` once it has been captured."""
        for piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return piece.position
        return None

    def snapshot(self) -> dict[Square, PieceDescriptor]:
        """Read-only view: occupied square → ``{type, color}``."""
        return {
            piece.position: piece.descriptor
            for piece in self.pieces()
            if piece.position is not None
        }

    # -- Copying / factory --------------------------------------------------

    def copy(self) -> Board:
        """Independent board holding fresh pieces in the same layout."""
        b = Board()
        for piece in self.pieces():
            assert piece.position is not None
            b.place(Piece(piece.piece_type, piece.color), piece.position)
        return b

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.setup_standard_position()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        from chessplay.core.notation import board_to_diagram

        return board_to_diagram(self, coordinates=True)
