"""
Low Dice Persistence Layer.

Snapshot models and JSON save/load for resuming games.
"""

from lowdice.persistence.models import (
    DieRecord,
    GameRecord,
    PlayerRecord,
    RoundRecord,
    TurnRecord,
)
from lowdice.persistence.snapshot import dump_game, load_game, read_game, save_game

__all__ = [
    "DieRecord",
    "GameRecord",
    "PlayerRecord",
    "RoundRecord",
    "TurnRecord",
    "dump_game",
    "load_game",
    "read_game",
    "save_game",
]
