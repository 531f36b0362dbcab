"""
Low Dice - Game Snapshots

JSON save/load of a game's recorded state, so play can resume later
from exactly where it stopped.
"""

import random
from pathlib import Path

from lowdice.engine import Game
from lowdice.persistence.models import GameRecord


def dump_game(game: Game, *, indent: int | None = None) -> str:
    """Serialize a game to a JSON string."""
    return GameRecord.from_game(game).model_dump_json(indent=indent)


def load_game(data: str | bytes, rng: random.Random | None = None) -> Game:
    """
    Rebuild a game from a JSON string produced by dump_game.

    Raises:
        pydantic.ValidationError: If the JSON does not describe a game
        InvalidArgumentError: If a recorded turn kept dice it was not offered
    """
    return GameRecord.model_validate_json(data).to_game(rng=rng)


def save_game(game: Game, path: str | Path) -> Path:
    """Write a game snapshot to a file."""
    path = Path(path)
    path.write_text(dump_game(game, indent=2), encoding="utf-8")
    return path


def read_game(path: str | Path, rng: random.Random | None = None) -> Game:
    """Load a game snapshot written by save_game."""
    return load_game(Path(path).read_text(encoding="utf-8"), rng=rng)
