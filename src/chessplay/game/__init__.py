"""Game management layer: controller, selection state machine, game state.

Quick start::

    from chessplay.core import Square
    from chessplay.game import GameController

    ctrl = GameController()
    ctrl.start_game()
    ctrl.pick(Square(1, 4))  # select the e2 pawn
    ctrl.pick(Square(3, 4))  # e2-e4
"""

from chessplay.game.controller import GameController, GameEvents
from chessplay.game.interfaces import (
    NO_SELECTION,
    GamePhase,
    IGameController,
    NoSelection,
    PickOutcome,
    Selected,
    Selection,
)
from chessplay.game.state import GameOutcome, GameSnapshot, GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    "NO_SELECTION",
    "NoSelection",
    "PickOutcome",
    "Selected",
    "Selection",
    # Concrete
    "GameController",
    "GameEvents",
    "GameOutcome",
    "GameSnapshot",
    "GameState",
    "MoveRecord",
]
