"""Visual theme constants and QSS styles for chessplay."""

from __future__ import annotations

from dataclasses import dataclass, field

from PyQt6.QtGui import QColor

_SELECTED = QColor(0, 0, 255, 90)  # blue glow on the picked piece
_TARGET = QColor(0, 0, 0, 45)  # legal destination overlay
_WHITE_PIECE = QColor(250, 246, 238)
_BLACK_PIECE = QColor(18, 22, 16)


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal move targets
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares
    white_piece: QColor = field(default_factory=lambda: QColor(_WHITE_PIECE))
    black_piece: QColor = field(default_factory=lambda: QColor(_BLACK_PIECE))

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(230, 198, 177),
            dark_square=QColor(1, 38, 66),
            highlight_from=_SELECTED,
            highlight_to=_TARGET,
            coord_light=QColor(230, 198, 177),
            coord_dark=QColor(1, 38, 66),
            white_piece=QColor(170, 137, 113),
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", "Arial", sans-serif;
}

QLabel#turnLabel {
    font-size: 20px;
    font-weight: bold;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}
QPushButton#endGameButton {
    background: #ff6347;
    color: #ffffff;
    font-weight: bold;
}
QPushButton#endGameButton:hover {
    background: #d32f2f;
}
QPushButton#endGameButton:disabled {
    color: #666;
    background: #2b2b2b;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
