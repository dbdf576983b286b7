"""StatusPanel: turn indicator and captured-piece ledgers."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from chessplay.core.enums import Color
from chessplay.game.interfaces import GamePhase
from chessplay.game.state import GameSnapshot
from chessplay.ui.i18n import t


class StatusPanel(QWidget):
    """Shows whose turn it is and what each side has knocked out."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._snapshot: GameSnapshot | None = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(8)

        self._turn_label = QLabel()
        self._turn_label.setObjectName("turnLabel")
        self._turn_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._turn_label)

        self._phase_label = QLabel()
        self._phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._phase_label)

        self._white_ledger = QLabel()
        self._white_ledger.setWordWrap(True)
        layout.addWidget(self._white_ledger)

        self._black_ledger = QLabel()
        self._black_ledger.setWordWrap(True)
        layout.addWidget(self._black_ledger)

        layout.addStretch()
        self.retranslate_ui()

    def set_snapshot(self, snapshot: GameSnapshot) -> None:
        self._snapshot = snapshot
        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        snap = self._snapshot
        phase = snap.phase if snap is not None else GamePhase.NOT_STARTED

        if phase == GamePhase.ACTIVE and snap is not None:
            color = s.color_name(snap.turn == Color.WHITE)
            self._turn_label.setText(s.turn_label.format(color=color))
        else:
            self._turn_label.setText("")

        if phase == GamePhase.ENDED and snap is not None and snap.outcome is not None:
            winner = s.color_name(snap.outcome.winner == Color.WHITE)
            self._phase_label.setText(s.wins_king_captured.format(color=winner))
        else:
            self._phase_label.setText(
                {
                    GamePhase.NOT_STARTED: s.phase_not_started,
                    GamePhase.ACTIVE: s.phase_active,
                    GamePhase.ENDED: s.phase_ended,
                }[phase]
            )

        white: tuple[str, ...] = ()
        black: tuple[str, ...] = ()
        if snap is not None and snap.outcome is not None:
            # The board is wiped on game over; show the final ledgers instead.
            white, black = snap.outcome.captured_white, snap.outcome.captured_black
        elif snap is not None:
            white, black = snap.captured_white, snap.captured_black
        self._white_ledger.setText(f"{s.captured_by_white}: {', '.join(white)}")
        self._black_ledger.setText(f"{s.captured_by_black}: {', '.join(black)}")

    # -- Read-back accessors -------------------------------------------------

    @property
    def turn_text(self) -> str:
        return self._turn_label.text()

    @property
    def phase_text(self) -> str:
        return self._phase_label.text()

    def ledger_text(self, color: Color) -> str:
        label = self._white_ledger if color == Color.WHITE else self._black_ledger
        return label.text()
