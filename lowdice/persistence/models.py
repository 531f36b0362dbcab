"""
Low Dice - Snapshot Models

Pydantic models that mirror the engine's Game, Round, Turn, Die and Player
structures field-for-field, so a game can be saved and resumed later.
"""

import random

from pydantic import BaseModel, Field

from lowdice.engine import Die, Game, Player, Round, Turn


class DieRecord(BaseModel):
    """Mirrors `Die`."""

    face_value: int
    actual_value: int

    model_config = {"from_attributes": True, "frozen": True}

    def to_die(self) -> Die:
        return Die(face_value=self.face_value, actual_value=self.actual_value)


class PlayerRecord(BaseModel):
    """Mirrors `Player`."""

    id: int
    type: str

    model_config = {"from_attributes": True}

    def to_player(self) -> Player:
        return Player(id=self.id, type=self.type)


class TurnRecord(BaseModel):
    """Mirrors `Turn`."""

    player_id: int
    turn_number: int = Field(ge=1)
    available_dice: list[DieRecord] = Field(default_factory=list)
    kept_dice: list[DieRecord] = Field(min_length=1)

    model_config = {"from_attributes": True}

    def to_turn(self) -> Turn:
        return Turn(
            player_id=self.player_id,
            turn_number=self.turn_number,
            available_dice=tuple(die.to_die() for die in self.available_dice),
            kept_dice=tuple(die.to_die() for die in self.kept_dice),
        )


class RoundRecord(BaseModel):
    """Mirrors `Round`."""

    round_number: int
    starting_player_id: int
    turns: list[TurnRecord] = Field(default_factory=list)

    model_config = {"from_attributes": True}

    def to_round(self) -> Round:
        return Round(
            round_number=self.round_number,
            starting_player_id=self.starting_player_id,
            turns=[turn.to_turn() for turn in self.turns],
        )


class GameRecord(BaseModel):
    """Mirrors `Game` (everything except the random source)."""

    id: int = 0
    players: list[PlayerRecord] = Field(default_factory=list)
    completed_rounds: list[RoundRecord] = Field(default_factory=list)
    total_rounds: int = 0
    dice_per_round: int = 0
    dice_values: dict[int, int] = Field(default_factory=dict)
    winning_player_ids: list[int] | None = None

    model_config = {"from_attributes": True}

    @classmethod
    def from_game(cls, game: Game) -> "GameRecord":
        """Capture the recorded state of a game."""
        return cls.model_validate(game)

    def to_game(self, rng: random.Random | None = None) -> Game:
        """Rebuild a Game, attaching a random source for further rolls."""
        return Game(
            id=self.id,
            players=[player.to_player() for player in self.players],
            completed_rounds=[game_round.to_round() for game_round in self.completed_rounds],
            total_rounds=self.total_rounds,
            dice_per_round=self.dice_per_round,
            dice_values=dict(self.dice_values),
            winning_player_ids=(
                list(self.winning_player_ids)
                if self.winning_player_ids is not None else None
            ),
            rng=rng if rng is not None else random.Random(),
        )
