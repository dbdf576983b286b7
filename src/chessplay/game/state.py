"""Game state aggregate: board, turn, selection, ledgers and phase."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessplay.core.board import Board
from chessplay.core.enums import Color, PieceType
from chessplay.core.piece import PieceDescriptor
from chessplay.core.types import Square
from chessplay.game.interfaces import NO_SELECTION, GamePhase, Selected, Selection


@dataclass(frozen=True)
class MoveRecord:
    """A completed move."""

    origin: Square
    target: Square
    piece: PieceDescriptor
    captured: PieceDescriptor | None = None

    @property
    def was_capture(self) -> bool:
        return self.captured is not None


@dataclass(frozen=True)
class GameOutcome:
    """How a finished game ended, kept after the board is cleared."""

    winner: Color
    # Type labels, keyed by the capturing side.
    captured_white: tuple[str, ...]
    captured_black: tuple[str, ...]
    moves_played: int

    def captured_by(self, color: Color) -> tuple[str, ...]:
        return self.captured_white if color == Color.WHITE else self.captured_black


@dataclass(frozen=True)
class GameSnapshot:
    """Everything a renderer needs, detached from the live state."""

    board: dict[Square, PieceDescriptor]
    turn: Color
    selection: Square | None
    # Ledgers are keyed by the capturing side.
    captured_white: tuple[str, ...]
    captured_black: tuple[str, ...]
    phase: GamePhase
    outcome: GameOutcome | None = None


def _empty_ledgers() -> dict[Color, list[PieceType]]:
    return {Color.WHITE: [], Color.BLACK: []}


@dataclass
class GameState:
    """Mutable game aggregate.

    Pure data/logic, no UI. ``GameController`` is its only writer; every
    other party reads through :meth:`snapshot`.
    """

    board: Board = field(default_factory=Board)
    turn: Color = Color.WHITE
    selection: Selection = NO_SELECTION
    phase: GamePhase = GamePhase.NOT_STARTED
    captured: dict[Color, list[PieceType]] = field(default_factory=_empty_ledgers)
    outcome: GameOutcome | None = None
    moves_played: int = 0

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None) -> None:
        """Start (or restart) a game from the standard layout or *board*."""
        # Copy first: *board* may be the live board that the reset empties.
        source = board.copy() if board is not None else None
        self._reset_common()
        if source is None:
            self.board.setup_standard_position()
        else:
            self.board = source
        self.outcome = None
        self.phase = GamePhase.ACTIVE

    def clear(self) -> None:
        """Empty the board and drop back to ``NOT_STARTED``."""
        self._reset_common()
        self.outcome = None
        self.phase = GamePhase.NOT_STARTED

    def finish(self, winner: Color) -> GameOutcome:
        """Record *winner*, then wipe the board pending the next start."""
        self.outcome = GameOutcome(
            winner=winner,
            captured_white=self._labels(Color.WHITE),
            captured_black=self._labels(Color.BLACK),
            moves_played=self.moves_played,
        )
        self._reset_common()
        self.phase = GamePhase.ENDED
        return self.outcome

    def _labels(self, color: Color) -> tuple[str, ...]:
        return tuple(pt.label for pt in self.captured[color])

    def _reset_common(self) -> None:
        self.board.reset()
        self.turn = Color.WHITE
        self.selection = NO_SELECTION
        self.captured = _empty_ledgers()
        self.moves_played = 0

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_active(self) -> bool:
        return self.phase == GamePhase.ACTIVE

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.ENDED

    @property
    def selected_square(self) -> Square | None:
        if isinstance(self.selection, Selected):
            return self.selection.origin
        return None

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=self.board.snapshot(),
            turn=self.turn,
            selection=self.selected_square,
            captured_white=self._labels(Color.WHITE),
            captured_black=self._labels(Color.BLACK),
            phase=self.phase,
            outcome=self.outcome,
        )
