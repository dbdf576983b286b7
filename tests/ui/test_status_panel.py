"""Tests for StatusPanel text."""

from __future__ import annotations

from chessplay.core.enums import Color
from chessplay.core.notation import board_from_placement
from chessplay.core.types import parse_square
from chessplay.game.controller import GameController
from chessplay.ui.i18n import set_language
from chessplay.ui.panels.status_panel import StatusPanel


def test_idle_panel() -> None:
    panel = StatusPanel()
    assert panel.turn_text == ""
    assert panel.phase_text == "Not started"
    assert panel.ledger_text(Color.WHITE) == "Captured by White: "


def test_active_turn_and_ledgers() -> None:
    ctrl = GameController()
    ctrl.start_game()
    for name in ("e2", "e4", "d7", "d5", "e4", "d5"):
        ctrl.pick(parse_square(name))

    panel = StatusPanel()
    panel.set_snapshot(ctrl.snapshot())

    assert panel.turn_text == "Black's turn"
    assert panel.phase_text == "In progress"
    assert panel.ledger_text(Color.WHITE) == "Captured by White: pawn"
    assert panel.ledger_text(Color.BLACK) == "Captured by Black: "


def test_game_over_shows_final_ledgers() -> None:
    ctrl = GameController()
    ctrl.start_game(board_from_placement("k7/8/8/8/8/8/8/R3K3"))
    ctrl.pick(parse_square("a1"))
    ctrl.pick(parse_square("a8"))

    panel = StatusPanel()
    panel.set_snapshot(ctrl.snapshot())

    assert panel.turn_text == ""
    assert panel.phase_text == "White wins by capturing the king."
    assert panel.ledger_text(Color.WHITE) == "Captured by White: king"


def test_retranslate() -> None:
    ctrl = GameController()
    ctrl.start_game()
    panel = StatusPanel()
    panel.set_snapshot(ctrl.snapshot())

    set_language("Russian")
    panel.retranslate_ui()

    assert panel.turn_text == "Ход: Белые"
    assert panel.phase_text == "Идёт игра"
