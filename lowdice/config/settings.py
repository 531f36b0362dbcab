"""
Low Dice - Application Settings

Loads the default game configuration from environment variables (prefix
LOWDICE_) or a .env file using Pydantic Settings, and configures logging.
"""

import logging
import random
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lowdice.engine import Game, Player, new_game

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _default_dice_values() -> dict[int, int]:
    # Standard six-sided dice, but fours are worth nothing.
    return {1: 1, 2: 2, 3: 3, 4: 0, 5: 5, 6: 6}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game rules
    total_rounds: int = Field(default=4, ge=0)
    dice_per_round: int = Field(default=5, ge=0)
    dice_values: dict[int, int] = Field(default_factory=_default_dice_values, min_length=1)

    # Players, in registration order; ids are assigned 1..N
    player_types: list[str] = Field(default_factory=lambda: ["lowest_die"] * 4)

    # Randomness
    rng_seed: int | None = None

    # Application
    debug: bool = False
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LOWDICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    def build_players(self) -> list[Player]:
        """Players for the configured types, numbered from 1."""
        return [
            Player(id=index, type=player_type)
            for index, player_type in enumerate(self.player_types, start=1)
        ]

    def build_game(self, rng: random.Random | None = None, game_id: int = 0) -> Game:
        """Create a new game from these settings."""
        if rng is None:
            rng = random.Random(self.rng_seed)
        return new_game(
            self.build_players(),
            self.total_rounds,
            self.dice_per_round,
            self.dice_values,
            game_id=game_id,
            rng=rng,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(level: str | int = "INFO") -> None:
    """Send log records to stderr at the given level."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
