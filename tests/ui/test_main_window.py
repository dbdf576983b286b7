"""Tests for MainWindow wiring between widgets and the controller."""

from __future__ import annotations

import pytest

from chessplay.core.enums import Color
from chessplay.core.notation import board_from_placement
from chessplay.core.types import parse_square
from chessplay.game.controller import GameController
from chessplay.game.interfaces import GamePhase
from chessplay.ui.main_window import MainWindow
from chessplay.ui.settings import AppSettings


def _click(window: MainWindow, *names: str) -> None:
    for name in names:
        window.board_view.square_picked.emit(parse_square(name))


@pytest.fixture
def window() -> MainWindow:
    return MainWindow(controller=GameController())


class TestIdle:
    def test_initial_state(self, window: MainWindow) -> None:
        assert window.controller.phase == GamePhase.NOT_STARTED
        assert not window.control_panel._btn_end.isEnabled()
        assert not window._act_end.isEnabled()
        assert window.status_panel.phase_text == "Not started"
        assert window._status_label.text() == "Press Start to begin a new game"
        assert not window.board_view.board_scene._interactive

    def test_picks_ignored_before_start(self, window: MainWindow) -> None:
        _click(window, "e2")
        assert window.controller.selection is None


class TestGameFlow:
    def test_start_button(self, window: MainWindow) -> None:
        window.control_panel.start_clicked.emit()

        scene = window.board_view.board_scene
        assert window.controller.phase == GamePhase.ACTIVE
        assert len(scene._piece_items) == 32
        assert scene._interactive
        assert window.control_panel._btn_end.isEnabled()
        assert window.status_panel.turn_text == "White's turn"

    def test_menu_start_action(self, window: MainWindow) -> None:
        window._act_start.trigger()
        assert window.controller.phase == GamePhase.ACTIVE

    def test_select_and_move(self, window: MainWindow) -> None:
        window.control_panel.start_clicked.emit()
        scene = window.board_view.board_scene

        _click(window, "e2")
        assert len(scene._highlight_items) == 1
        assert len(scene._legal_dot_items) == 2

        _click(window, "e4")
        assert scene._highlight_items == []
        assert scene.piece_at(parse_square("e4")) is not None
        assert window.status_panel.turn_text == "Black's turn"

    def test_rejected_move_reports_in_status_bar(self, window: MainWindow) -> None:
        window.control_panel.start_clicked.emit()
        _click(window, "e2", "e5")
        assert window._status_label.text() == "Move not allowed"
        assert window.controller.turn == Color.WHITE

        _click(window, "e2")
        assert window._status_label.text() == ""

    def test_end_button(self, window: MainWindow) -> None:
        window.control_panel.start_clicked.emit()
        _click(window, "e2", "e4")
        window.control_panel.end_clicked.emit()

        assert window.controller.phase == GamePhase.NOT_STARTED
        assert window.board_view.board_scene._piece_items == {}
        assert not window.control_panel._btn_end.isEnabled()

    def test_game_over_dialog(
        self, window: MainWindow, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        shown: list[tuple[str, str]] = []
        monkeypatch.setattr(
            "chessplay.ui.main_window.QMessageBox.information",
            lambda _parent, title, text: shown.append((title, text)),
        )
        window.controller.start_game(board_from_placement("k7/8/8/8/8/8/8/R3K3"))
        _click(window, "a1", "a8")

        assert shown == [("Game Over", "White wins by capturing the king.")]
        assert window.controller.phase == GamePhase.ENDED
        assert window.board_view.board_scene._piece_items == {}
        assert not window.board_view.board_scene._interactive
        assert window.status_panel.ledger_text(Color.WHITE) == "Captured by White: king"

        window.control_panel.start_clicked.emit()
        assert window.controller.phase == GamePhase.ACTIVE
        assert window.status_panel.ledger_text(Color.WHITE) == "Captured by White: "


class TestSettings:
    def test_flip(self, window: MainWindow) -> None:
        scene = window.board_view.board_scene
        window.control_panel.flip_clicked.emit()
        assert scene.is_flipped()
        window._act_flip.trigger()
        assert not scene.is_flipped()

    def test_settings_applied(self) -> None:
        settings = AppSettings(show_coordinates=False, flipped=True)
        window = MainWindow(settings=settings)
        scene = window.board_view.board_scene
        assert scene.is_flipped()
        assert all(not item.isVisible() for item in scene._coord_items)

    def test_russian_locale(self) -> None:
        window = MainWindow(settings=AppSettings(language="Russian"))
        assert window.control_panel._btn_start.text() == "Начать игру"
        assert window.status_panel.phase_text == "Не начата"
