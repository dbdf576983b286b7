"""GameController turns board picks into selections and moves.

Owns the only :class:`GameState`. The presentation layer feeds it picks and
lifecycle commands and subscribes to :class:`GameEvents` to re-render.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessplay.core.board import Board
from chessplay.core.enums import Color, PieceType
from chessplay.core.piece import PieceDescriptor
from chessplay.core.rules import is_legal, legal_targets
from chessplay.core.types import Square
from chessplay.game.interfaces import (
    NO_SELECTION,
    GamePhase,
    IGameController,
    PickOutcome,
    Selected,
    Selection,
)
from chessplay.game.state import GameOutcome, GameSnapshot, GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[Selection], None]
MoveCallback = Callable[[MoveRecord], None]
CaptureCallback = Callable[[PieceDescriptor, Square], None]  # piece, square
GameOverCallback = Callable[[GameOutcome], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_capture: list[CaptureCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Select-then-move state machine over a single game.

    ``pick`` never raises for gameplay reasons: an illegal target simply
    drops the selection and leaves the board untouched. Only malformed
    coordinates (:class:`~chessplay.core.types.InvalidSquare`) propagate.

    Not thread-safe; call from the UI thread.
    """

    __slots__ = ("_state", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def turn(self) -> Color:
        return self._state.turn

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def selection(self) -> Square | None:
        return self._state.selected_square

    @property
    def outcome(self) -> GameOutcome | None:
        return self._state.outcome

    def captured(self, color: Color) -> tuple[PieceType, ...]:
        """Piece types *color* has captured so far, in capture order."""
        return tuple(self._state.captured[color])

    def snapshot(self) -> GameSnapshot:
        return self._state.snapshot()

    def legal_targets(self) -> list[Square]:
        """Legal destinations for the currently selected piece."""
        selection = self._state.selection
        if not isinstance(selection, Selected):
            return []
        return legal_targets(self._state.board, selection.origin)

    # ── IGameController impl ─────────────────────────────────────────────

    def start_game(self, board: Board | None = None) -> None:
        self._state.setup(board)
        _LOGGER.info("Game started (%d pieces)", len(self._state.board.pieces()))
        self._emit_phase(GamePhase.ACTIVE)
        self._check_game_over()

    def end_game(self) -> None:
        was_running = self._state.phase != GamePhase.NOT_STARTED
        self._state.clear()
        if was_running:
            _LOGGER.info("Game ended by request")
        self._emit_phase(GamePhase.NOT_STARTED)

    def pick(self, square: Square) -> PickOutcome:
        state = self._state
        if not state.is_active:
            # Validate even when ignoring so bad coordinates always surface.
            state.board.get(square)
            return PickOutcome.IGNORED

        selection = state.selection
        if isinstance(selection, Selected):
            return self._attempt_move(selection, square)
        return self._select(square)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _select(self, square: Square) -> PickOutcome:
        state = self._state
        piece = state.board.get(square)
        if piece is None or piece.color != state.turn:
            return PickOutcome.IGNORED

        state.selection = Selected(square, piece.descriptor)
        _LOGGER.debug("Selected %s %s on %s", piece.color, piece.piece_type, square)
        self._emit_selection(state.selection)
        return PickOutcome.SELECTED

    def _attempt_move(self, selection: Selected, target: Square) -> PickOutcome:
        state = self._state
        origin, mover = selection.origin, selection.piece
        legal = is_legal(state.board, origin, target, mover.piece_type, mover.color)

        state.selection = NO_SELECTION
        if not legal:
            _LOGGER.debug("Rejected %s %s -> %s", mover.piece_type, origin, target)
            self._emit_selection(NO_SELECTION)
            self._check_game_over()
            return PickOutcome.REJECTED

        taken = state.board.move(origin, target)
        captured = taken.descriptor if taken is not None else None
        if captured is not None:
            state.captured[mover.color].append(captured.piece_type)
            _LOGGER.debug("%s captured %s on %s", mover.color, captured.piece_type, target)
            self._emit_capture(captured, target)

        state.turn = state.turn.opposite
        state.moves_played += 1
        record = MoveRecord(origin, target, mover, captured)
        _LOGGER.debug("Moved %s %s -> %s", mover.piece_type, origin, target)

        self._emit_selection(NO_SELECTION)
        self._emit_move(record)
        self._check_game_over()
        return PickOutcome.MOVED

    def _check_game_over(self) -> None:
        """End the game once either king is gone from the board."""
        board = self._state.board
        for color in (self._state.turn, self._state.turn.opposite):
            if board.find_king(color) is None:
                outcome = self._state.finish(winner=color.opposite)
                _LOGGER.info(
                    "Game over: %s wins after %d moves",
                    outcome.winner,
                    outcome.moves_played,
                )
                self._emit_game_over(outcome)
                return

    def _emit_selection(self, selection: Selection) -> None:
        for cb in self.events.on_selection_changed:
            cb(selection)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record)

    def _emit_capture(self, piece: PieceDescriptor, square: Square) -> None:
        for cb in self.events.on_capture:
            cb(piece, square)

    def _emit_game_over(self, outcome: GameOutcome) -> None:
        self._emit_phase(GamePhase.ENDED)
        for cb in self.events.on_game_over:
            cb(outcome)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
