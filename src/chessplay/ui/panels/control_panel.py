"""ControlPanel: game lifecycle buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget

from chessplay.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for game actions: start, end, flip."""

    start_clicked = pyqtSignal()
    end_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()
        self.set_game_active(False)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Helvetica Neue", 10)

        self._btn_start = QPushButton()
        self._btn_start.setFont(btn_font)
        self._btn_start.setMinimumHeight(40)
        self._btn_start.clicked.connect(self.start_clicked)
        layout.addWidget(self._btn_start)

        row = QHBoxLayout()
        self._btn_end = QPushButton()
        self._btn_end.setObjectName("endGameButton")
        self._btn_end.setFont(btn_font)
        self._btn_end.setMinimumHeight(36)
        self._btn_end.clicked.connect(self.end_clicked)
        row.addWidget(self._btn_end)

        self._btn_flip = QPushButton()
        self._btn_flip.setFont(btn_font)
        self._btn_flip.setMinimumHeight(36)
        self._btn_flip.clicked.connect(self.flip_clicked)
        row.addWidget(self._btn_flip)
        layout.addLayout(row)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_start.setText(s.btn_start)
        self._btn_end.setText(s.btn_end)
        self._btn_flip.setText(s.btn_flip)

    def set_game_active(self, active: bool) -> None:
        """End is only meaningful while a game is running."""
        self._btn_end.setEnabled(active)
