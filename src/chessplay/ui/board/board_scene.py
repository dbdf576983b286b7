"""BoardScene: QGraphicsScene that draws the board and reports picks."""

from __future__ import annotations

from collections.abc import Iterable

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessplay.core.enums import Color
from chessplay.core.types import BOARD_SIZE, Square, all_squares
from chessplay.game.state import GameSnapshot
from chessplay.ui.board.piece_item import PieceItem
from chessplay.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders a :class:`GameSnapshot` and turns clicks into board squares.

    The scene holds no game logic: it only translates pointer positions into
    :class:`Square` values and redraws whatever snapshot it is given.

    Signals:
        square_picked(Square): Emitted when the user clicks a board square.
    """

    square_picked = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._snapshot: GameSnapshot | None = None
        self._flipped = False
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True
        self._legal_targets: list[Square] = []

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_snapshot(
        self,
        snapshot: GameSnapshot,
        legal_targets: Iterable[Square] = (),
    ) -> None:
        """Redraw pieces and highlights from *snapshot*."""
        self._snapshot = snapshot
        self._legal_targets = list(legal_targets)
        self._sync_pieces()
        self._sync_highlights()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable pick reporting."""
        self._interactive = interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-target highlights."""
        self._show_legal_moves = visible
        self._sync_highlights()

    def piece_at(self, sq: Square) -> PieceItem | None:
        return self._piece_items.get(sq)

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        self._sync_pieces()
        self._sync_highlights()

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont("Helvetica Neue", max(9, t // 8))

        for sq in all_squares():
            x, y = self._tile_origin(sq)
            is_dark = (sq.row + sq.col) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(x, y, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_light if is_dark else self._theme.coord_dark
            # Rank numbers (left edge)
            if sq.col == (BOARD_SIZE - 1 if self._flipped else 0):
                self._add_coord(str(sq.row + 1), x + 2, y + 1, font, text_color)
            # File letters (bottom edge)
            if sq.row == (BOARD_SIZE - 1 if self._flipped else 0):
                letter = chr(ord("a") + sq.col)
                self._add_coord(letter, x + t - 12, y + t - 16, font, text_color)

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, text: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(text)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current snapshot."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._snapshot is None:
            return

        for sq, piece in self._snapshot.board.items():
            if piece.color == Color.WHITE:
                fill, outline = self._theme.white_piece, self._theme.black_piece
            else:
                fill, outline = self._theme.black_piece, self._theme.white_piece
            item = PieceItem(piece, sq, self.TILE, fill, outline)
            item.place_in_tile(*self._tile_origin(sq))
            self.addItem(item)
            self._piece_items[sq] = item

    def _sync_highlights(self) -> None:
        self._clear_items(self._highlight_items)
        self._clear_items(self._legal_dot_items)
        if self._snapshot is None or self._snapshot.selection is None:
            return

        rect = self._make_highlight(self._snapshot.selection, self._theme.highlight_from)
        self._highlight_items.append(rect)
        if self._show_legal_moves:
            for sq in self._legal_targets:
                dot = self._make_highlight(sq, self._theme.highlight_to)
                self._legal_dot_items.append(dot)

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)
        if event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_picked.emit(sq)
        event.accept()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Board square → visual (column, row), row 0 at the top."""
        if self._flipped:
            return BOARD_SIZE - 1 - sq.col, sq.row
        return sq.col, BOARD_SIZE - 1 - sq.row

    def _tile_origin(self, sq: Square) -> tuple[float, float]:
        vc, vr = self._visual_coords(sq)
        return float(vc * self.TILE), float(vr * self.TILE)

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square (``None`` outside the board)."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        if self._flipped:
            return Square(row, BOARD_SIZE - 1 - col)
        return Square(BOARD_SIZE - 1 - row, col)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        x, y = self._tile_origin(sq)
        rect = QGraphicsRectItem(x, y, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect
