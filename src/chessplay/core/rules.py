"""Move legality: per-piece movement rules and path-clearance checks.

Everything here is a pure function of the board it is given; nothing is
mutated. There is no notion of check, so a move that exposes the mover's
own king is still legal.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessplay.core.enums import Color, PieceType
from chessplay.core.types import Square, all_squares, ensure_square

if TYPE_CHECKING:
    from chessplay.core.board import Board

_Rule = Callable[["Board", Square, Square, Color], bool]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_straight(origin: Square, target: Square) -> bool:
    """Same row xor same column (zero displacement is not a line)."""
    return (origin.row == target.row) != (origin.col == target.col)


def is_diagonal(origin: Square, target: Square) -> bool:
    d_row = abs(target.row - origin.row)
    return d_row != 0 and d_row == abs(target.col - origin.col)


def path_is_clear(board: Board, origin: Square, target: Square) -> bool:
    """Whether every square strictly between *origin* and *target* is empty.

    Requires the two squares to share a row, a column or an exact diagonal;
    neither endpoint is inspected.
    """
    if not (is_straight(origin, target) or is_diagonal(origin, target)):
        raise ValueError(f"{origin} and {target} are not on a common line")

    step_row = _sign(target.row - origin.row)
    step_col = _sign(target.col - origin.col)
    row, col = origin.row + step_row, origin.col + step_col
    while (row, col) != (target.row, target.col):
        if board.get(Square(row, col)) is not None:
            return False
        row += step_row
        col += step_col
    return True


# -- Per-piece rules --------------------------------------------------------


def _pawn(board: Board, origin: Square, target: Square, color: Color) -> bool:
    direction = color.pawn_direction
    d_row = target.row - origin.row
    d_col = target.col - origin.col

    if d_col == 0:
        if d_row == direction:
            return board.is_empty(target)
        if d_row == 2 * direction and origin.row == color.pawn_start_row:
            between = Square(origin.row + direction, origin.col)
            return board.is_empty(between) and board.is_empty(target)
        return False

    if abs(d_col) == 1 and d_row == direction:
        return board.is_occupied_by(target, color.opposite)
    return False


def _rook(board: Board, origin: Square, target: Square, color: Color) -> bool:
    return is_straight(origin, target) and path_is_clear(board, origin, target)


def _knight(board: Board, origin: Square, target: Square, color: Color) -> bool:
    deltas = {abs(target.row - origin.row), abs(target.col - origin.col)}
    return deltas == {1, 2}


def _bishop(board: Board, origin: Square, target: Square, color: Color) -> bool:
    return is_diagonal(origin, target) and path_is_clear(board, origin, target)


def _queen(board: Board, origin: Square, target: Square, color: Color) -> bool:
    return _rook(board, origin, target, color) or _bishop(board, origin, target, color)


def _king(board: Board, origin: Square, target: Square, color: Color) -> bool:
    d_row = abs(target.row - origin.row)
    d_col = abs(target.col - origin.col)
    return max(d_row, d_col) == 1


_RULES: dict[PieceType, _Rule] = {
    PieceType.PAWN: _pawn,
    PieceType.ROOK: _rook,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}


# -- Public API -------------------------------------------------------------


def is_legal(
    board: Board,
    origin: Square,
    target: Square,
    piece_type: PieceType,
    color: Color,
) -> bool:
    """Decide whether a *piece_type* of *color* may go from *origin* to *target*.

    A destination holding a piece of the mover's own color is always
    rejected, before any piece-specific rule is consulted.
    """
    ensure_square(origin)
    if board.is_occupied_by(target, color):
        return False
    if origin == target:
        return False
    return _RULES[piece_type](board, origin, target, color)


def legal_targets(board: Board, origin: Square) -> list[Square]:
    """All squares the piece on *origin* may move to, in row-major order."""
    piece = board.get(origin)
    if piece is None:
        return []
    return [
        sq
        for sq in all_squares()
        if is_legal(board, origin, sq, piece.piece_type, piece.color)
    ]
