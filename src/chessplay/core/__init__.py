"""Core domain layer: board model and move legality, no external dependencies.

Quick start::

    from chessplay.core import Board, Square, is_legal, PieceType, Color

    board = Board.initial()
    is_legal(board, Square(1, 4), Square(3, 4), PieceType.PAWN, Color.WHITE)
"""

from chessplay.core.board import Board
from chessplay.core.enums import BACK_ROW_ORDER, Color, PieceType
from chessplay.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_diagram,
    board_to_placement,
)
from chessplay.core.piece import Piece, PieceDescriptor
from chessplay.core.rules import is_legal, legal_targets, path_is_clear
from chessplay.core.types import (
    BOARD_SIZE,
    InvalidSquare,
    Square,
    all_squares,
    ensure_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "BACK_ROW_ORDER",
    "Color",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "InvalidSquare",
    "Square",
    "all_squares",
    "ensure_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    "PieceDescriptor",
    # Rules
    "is_legal",
    "legal_targets",
    "path_is_clear",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_diagram",
    "board_to_placement",
]
