"""PieceItem: a chess piece glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsItem, QGraphicsSimpleTextItem

from chessplay.core.piece import PieceDescriptor
from chessplay.core.types import Square


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece drawn as its Unicode symbol.

    Stores its logical *square*; it never moves by itself, the scene
    recreates items from each new snapshot.
    """

    _GLYPH_RATIO = 0.72

    def __init__(
        self,
        piece: PieceDescriptor,
        square: Square,
        tile_size: int,
        fill: QColor,
        outline: QColor,
    ) -> None:
        super().__init__(piece.symbol)
        self.piece = piece
        self.square = square
        self._tile_size = tile_size

        self.setBrush(QBrush(fill))
        self.setPen(QPen(outline, 1.0))
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)
        self._update_size(tile_size)

    def place_in_tile(self, x: float, y: float) -> None:
        """Centre the glyph in the tile whose top-left corner is ``(x, y)``."""
        bounds = self.boundingRect()
        self.setPos(
            x + (self._tile_size - bounds.width()) / 2,
            y + (self._tile_size - bounds.height()) / 2,
        )

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        font = QFont("DejaVu Sans")
        font.setPixelSize(max(int(size * self._GLYPH_RATIO), 1))
        self.setFont(font)
