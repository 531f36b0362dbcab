"""
Low Dice Game Engine.

Pure Python game state with zero UI/persistence dependencies.
Handles dice rolling, multiset arithmetic, scoring, seating and win detection.
"""

from lowdice.engine.base import Die, Player, Turn
from lowdice.engine.dice import min_max_faces, roll_dice, subtract_dice
from lowdice.engine.errors import (
    DataIntegrityError,
    DiceGameError,
    InvalidArgumentError,
    InvalidMoveError,
    InvalidStateError,
)
from lowdice.engine.game import Game, new_game
from lowdice.engine.round import Round

__all__ = [
    # Data Classes
    "Die",
    "Player",
    "Turn",
    "Round",
    "Game",
    # Operations
    "new_game",
    "subtract_dice",
    "roll_dice",
    "min_max_faces",
    # Errors
    "DiceGameError",
    "InvalidArgumentError",
    "InvalidStateError",
    "DataIntegrityError",
    "InvalidMoveError",
]
