"""MainWindow: top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from chessplay.core.enums import Color
from chessplay.core.types import Square
from chessplay.game.controller import GameController
from chessplay.game.interfaces import GamePhase, PickOutcome
from chessplay.game.state import GameOutcome
from chessplay.ui.board.board_view import BoardView
from chessplay.ui.i18n import set_language, t
from chessplay.ui.panels.control_panel import ControlPanel
from chessplay.ui.panels.status_panel import StatusPanel
from chessplay.ui.settings import AppSettings, apply_board_settings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window: board on the left, status and controls right.

    The window never touches game state directly; it forwards picks and
    lifecycle commands to the controller and redraws from snapshots.
    """

    def __init__(
        self,
        controller: GameController | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setMinimumSize(760, 560)
        self.resize(1000, 720)

        self._controller = controller if controller is not None else GameController()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()
        self._apply_settings()
        self._refresh()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (left)
        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._status_panel = StatusPanel()
        right.addWidget(self._status_panel, stretch=1)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(260)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("")
        assert self._menu_game is not None

        self._act_start = QAction(self)
        self._act_start.setShortcut("Ctrl+N")
        self._act_start.triggered.connect(self._on_start_game)
        self._menu_game.addAction(self._act_start)

        self._act_end = QAction(self)
        self._act_end.triggered.connect(self._on_end_game)
        self._menu_game.addAction(self._act_end)

        self._act_flip = QAction(self)
        self._act_flip.setShortcut("Ctrl+F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._menu_game.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.square_picked.connect(self._on_square_picked)
        self._control_panel.start_clicked.connect(self._on_start_game)
        self._control_panel.end_clicked.connect(self._on_end_game)
        self._control_panel.flip_clicked.connect(self._on_flip)

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks."""
        events = self._controller.events
        events.on_selection_changed.append(lambda _sel: self._refresh())
        events.on_move.append(lambda _record: self._refresh())
        events.on_phase_changed.append(lambda _phase: self._refresh())
        events.on_game_over.append(self._on_game_over)

    def _apply_settings(self) -> None:
        s = self._settings
        # Language must come first so all retranslate calls use the new locale
        set_language(s.language)
        self.retranslate_ui()
        apply_board_settings(self._board_view.board_scene, s)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._menu_game.setTitle(s.menu_game)
        self._act_start.setText(s.menu_start_game)
        self._act_end.setText(s.menu_end_game)
        self._act_flip.setText(s.menu_flip_board)
        self._act_quit.setText(s.menu_quit)
        self._control_panel.retranslate_ui()
        self._status_panel.retranslate_ui()

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def status_panel(self) -> StatusPanel:
        return self._status_panel

    @property
    def control_panel(self) -> ControlPanel:
        return self._control_panel

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_square_picked(self, square: Square) -> None:
        outcome = self._controller.pick(square)
        if outcome == PickOutcome.REJECTED:
            self._status_label.setText(t().status_rejected)
        elif outcome != PickOutcome.IGNORED:
            self._status_label.setText("")

    def _on_start_game(self) -> None:
        self._controller.start_game()

    def _on_end_game(self) -> None:
        self._controller.end_game()

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        self._settings.flipped = not scene.is_flipped()
        scene.set_flipped(self._settings.flipped)

    def _on_game_over(self, outcome: GameOutcome) -> None:
        s = t()
        winner = s.color_name(outcome.winner == Color.WHITE)
        text = s.wins_king_captured.format(color=winner)
        _LOGGER.info("Presenting game-over dialog: %s", text)
        self._refresh()
        QMessageBox.information(self, s.game_over_title, text)

    # ── Rendering ────────────────────────────────────────────────────────

    def _refresh(self) -> None:
        """Redraw every widget from a fresh controller snapshot."""
        snapshot = self._controller.snapshot()
        active = snapshot.phase == GamePhase.ACTIVE

        scene = self._board_view.board_scene
        scene.set_snapshot(snapshot, self._controller.legal_targets())
        scene.set_interactive(active)
        self._status_panel.set_snapshot(snapshot)
        self._control_panel.set_game_active(active)
        self._act_end.setEnabled(active)
        if snapshot.phase == GamePhase.NOT_STARTED:
            self._status_label.setText(t().status_ready)
