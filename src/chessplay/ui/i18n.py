"""Internationalisation strings for the chessplay UI.

Usage::

    from chessplay.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_start)          # "Начать игру"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_start_game: str
    menu_end_game: str
    menu_flip_board: str
    menu_quit: str

    status_ready: str
    status_rejected: str

    game_over_title: str
    wins_king_captured: str  # "{color} wins by capturing the king."
    color_white: str
    color_black: str

    # ── StatusPanel ──────────────────────────────────────────────────────
    turn_label: str  # "{color}'s turn"
    captured_by_white: str
    captured_by_black: str
    phase_not_started: str
    phase_active: str
    phase_ended: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_start: str
    btn_end: str
    btn_flip: str

    def color_name(self, is_white: bool) -> str:
        return self.color_white if is_white else self.color_black


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    window_title="Chessplay",
    menu_game="&Game",
    menu_start_game="&Start New Game",
    menu_end_game="&End Game",
    menu_flip_board="&Flip Board",
    menu_quit="&Quit",
    status_ready="Press Start to begin a new game",
    status_rejected="Move not allowed",
    game_over_title="Game Over",
    wins_king_captured="{color} wins by capturing the king.",
    color_white="White",
    color_black="Black",
    turn_label="{color}'s turn",
    captured_by_white="Captured by White",
    captured_by_black="Captured by Black",
    phase_not_started="Not started",
    phase_active="In progress",
    phase_ended="Game over",
    btn_start="Start New Game",
    btn_end="End Game",
    btn_flip="⟲ Flip",
)

_RU = Strings(
    window_title="Chessplay",
    menu_game="&Игра",
    menu_start_game="&Начать новую игру",
    menu_end_game="&Завершить игру",
    menu_flip_board="&Перевернуть доску",
    menu_quit="&Выход",
    status_ready="Нажмите «Начать», чтобы сыграть",
    status_rejected="Ход невозможен",
    game_over_title="Конец игры",
    wins_king_captured="{color} побеждают, взяв короля.",
    color_white="Белые",
    color_black="Чёрные",
    turn_label="Ход: {color}",
    captured_by_white="Взято белыми",
    captured_by_black="Взято чёрными",
    phase_not_started="Не начата",
    phase_active="Идёт игра",
    phase_ended="Игра окончена",
    btn_start="Начать игру",
    btn_end="Завершить",
    btn_flip="⟲ Перевернуть",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
