"""User-configurable settings and how they are applied to the window."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessplay.ui.board.board_scene import BoardScene


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "WARNING"

    # Board
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flipped: bool = False

    @property
    def log_level_value(self) -> int:
        """Numeric logging level; unknown names fall back to WARNING."""
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


def apply_board_settings(scene: BoardScene, settings: AppSettings) -> None:
    scene.set_show_coordinates(settings.show_coordinates)
    scene.set_show_legal_moves(settings.show_legal_moves)
    scene.set_flipped(settings.flipped)
