"""Abstract interfaces and small value types for the game layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Union

from chessplay.core.piece import PieceDescriptor
from chessplay.core.types import Square

if TYPE_CHECKING:
    from chessplay.core.board import Board


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Top-level lifecycle of a game."""

    NOT_STARTED = auto()
    ACTIVE = auto()
    ENDED = auto()


class PickOutcome(IntEnum):
    """What a single ``pick`` did to the game."""

    IGNORED = auto()  # no game running, or nothing selectable
    SELECTED = auto()
    MOVED = auto()
    REJECTED = auto()  # illegal target, selection dropped


# ── Selection state ──────────────────────────────────────────────────────────


class NoSelection:
    """Nothing is selected. Use the ``NO_SELECTION`` singleton."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_SELECTION"

    def __bool__(self) -> bool:
        return False


NO_SELECTION = NoSelection()


@dataclass(frozen=True, slots=True)
class Selected:
    """A piece of the side to move has been picked up from *origin*."""

    origin: Square
    piece: PieceDescriptor


Selection = Union[NoSelection, Selected]


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameController(ABC):
    """What the presentation layer may do to a game."""

    @abstractmethod
    def pick(self, square: Square) -> PickOutcome:
        """Handle a click on *square*: select a piece or try to move it."""

    @abstractmethod
    def start_game(self, board: Board | None = None) -> None:
        """Set up a fresh game (standard layout unless *board* is given)."""

    @abstractmethod
    def end_game(self) -> None:
        """Abandon the current game and clear the board."""
