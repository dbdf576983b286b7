"""Text forms of a board: FEN piece-placement field and ASCII diagrams.

Only the placement field of FEN is supported; turn, castling and move
counters have no meaning in this game.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessplay.core.piece import Piece
from chessplay.core.types import BOARD_SIZE, Square

if TYPE_CHECKING:
    from chessplay.core.board import Board

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(placement: str) -> Board:
    """Parse a FEN placement field into a :class:`Board`.

    Example: ``"4k3/8/8/8/8/8/8/R3K3"`` puts the Black king on e8 and the
    White rook and king on a1 and e1.
    """
    from chessplay.core.board import Board

    ranks = placement.strip().split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        row = BOARD_SIZE - 1 - rank_idx
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                board.place(Piece.from_char(ch), Square(row, col))
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise piece placement, rank 8 first."""
    ranks: list[str] = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        text = ""
        empty = 0
        for col in range(BOARD_SIZE):
            piece = board.get(Square(row, col))
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)


def board_to_diagram(board: Board, *, coordinates: bool = False) -> str:
    """Multi-line diagram with White at the bottom, ``.`` for empty squares."""
    rows: list[str] = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        cells = []
        for col in range(BOARD_SIZE):
            piece = board.get(Square(row, col))
            cells.append(str(piece) if piece is not None else ".")
        line = " ".join(cells)
        rows.append(f"{row + 1} {line}" if coordinates else line)
    if coordinates:
        rows.append("  a b c d e f g h")
    return "\n".join(rows)
