"""Tests for GameState."""

from chessplay.core.board import Board
from chessplay.core.enums import Color, PieceType
from chessplay.core.notation import board_from_placement
from chessplay.core.piece import PieceDescriptor
from chessplay.core.types import parse_square
from chessplay.game.interfaces import NO_SELECTION, GamePhase, Selected
from chessplay.game.state import GameOutcome, GameState, MoveRecord


class TestGameStateLifecycle:
    def test_defaults(self) -> None:
        state = GameState()
        assert state.phase == GamePhase.NOT_STARTED
        assert state.turn == Color.WHITE
        assert state.selection is NO_SELECTION
        assert state.board.pieces() == []
        assert state.captured == {Color.WHITE: [], Color.BLACK: []}
        assert state.outcome is None

    def test_setup_standard(self) -> None:
        state = GameState()
        state.setup()
        assert state.is_active
        assert state.board == Board.initial()

    def test_setup_custom_board_is_copied(self) -> None:
        custom = board_from_placement("4k3/8/8/8/8/8/8/4K3")
        state = GameState()
        state.setup(custom)
        assert state.board == custom
        assert state.board is not custom
        custom.clear(parse_square("e1"))
        assert state.board.find_king(Color.WHITE) == parse_square("e1")

    def test_setup_from_own_board(self) -> None:
        state = GameState()
        state.setup()
        state.board.move(parse_square("e2"), parse_square("e4"))
        live = state.board

        state.setup(live)

        assert len(state.board.pieces()) == 32
        assert state.board.get(parse_square("e4")) is not None
        assert state.board is not live

    def test_setup_resets_previous_game(self) -> None:
        state = GameState()
        state.setup()
        state.turn = Color.BLACK
        state.captured[Color.WHITE].append(PieceType.PAWN)
        state.moves_played = 3
        state.setup()
        assert state.turn == Color.WHITE
        assert state.captured == {Color.WHITE: [], Color.BLACK: []}
        assert state.moves_played == 0

    def test_clear(self) -> None:
        state = GameState()
        state.setup()
        state.selection = Selected(
            parse_square("e2"), PieceDescriptor(PieceType.PAWN, Color.WHITE)
        )
        state.clear()
        assert state.phase == GamePhase.NOT_STARTED
        assert state.board.pieces() == []
        assert state.selection is NO_SELECTION

    def test_finish_keeps_ledgers_in_outcome(self) -> None:
        state = GameState()
        state.setup()
        state.captured[Color.WHITE].extend([PieceType.PAWN, PieceType.KING])
        state.captured[Color.BLACK].append(PieceType.KNIGHT)
        state.moves_played = 7

        outcome = state.finish(winner=Color.WHITE)

        assert outcome == GameOutcome(
            winner=Color.WHITE,
            captured_white=("pawn", "king"),
            captured_black=("knight",),
            moves_played=7,
        )
        assert outcome.captured_by(Color.BLACK) == ("knight",)
        assert state.is_game_over
        assert state.board.pieces() == []
        assert state.captured == {Color.WHITE: [], Color.BLACK: []}
        assert state.turn == Color.WHITE


class TestSnapshot:
    def test_snapshot_contents(self) -> None:
        state = GameState()
        state.setup()
        state.selection = Selected(
            parse_square("g1"), PieceDescriptor(PieceType.KNIGHT, Color.WHITE)
        )
        state.captured[Color.BLACK].append(PieceType.BISHOP)

        snap = state.snapshot()

        assert snap.phase == GamePhase.ACTIVE
        assert snap.turn == Color.WHITE
        assert snap.selection == parse_square("g1")
        assert len(snap.board) == 32
        assert snap.captured_white == ()
        assert snap.captured_black == ("bishop",)
        assert snap.outcome is None

    def test_snapshot_is_detached(self) -> None:
        state = GameState()
        state.setup()
        snap = state.snapshot()
        state.board.clear(parse_square("e1"))
        assert parse_square("e1") in snap.board


def test_move_record_capture_flag() -> None:
    pawn = PieceDescriptor(PieceType.PAWN, Color.WHITE)
    quiet = MoveRecord(parse_square("e2"), parse_square("e4"), pawn)
    capture = MoveRecord(
        parse_square("e4"),
        parse_square("d5"),
        pawn,
        PieceDescriptor(PieceType.PAWN, Color.BLACK),
    )
    assert not quiet.was_capture
    assert capture.was_capture
