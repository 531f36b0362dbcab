"""
Low Dice - Game Engine Value Types

This module defines the leaf data structures of a game in progress: dice,
players and turns. All classes are immutable (frozen dataclasses) so they
can be shared freely, compared by value and used as multiset keys.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence

from lowdice.engine.errors import InvalidArgumentError


@dataclass(frozen=True)
class Die:
    """
    A single rolled die.

    Attributes:
        face_value: The face that came up on the roll
        actual_value: Points the face is worth in this game
    """
    face_value: int
    actual_value: int

    def __str__(self) -> str:
        return f"Die(face={self.face_value}, worth={self.actual_value})"


@dataclass(frozen=True)
class Player:
    """
    A participant in a game.

    Attributes:
        id: Unique id within the game
        type: Opaque strategy tag used to look up the player's agent
    """
    id: int
    type: str


@dataclass(frozen=True)
class Turn:
    """
    One decision point: a player choosing dice to keep from those offered.

    Attributes:
        player_id: Id of the player who acted
        turn_number: 1-based position among the player's decisions this round
        available_dice: Dice offered to the player
        kept_dice: Non-empty sub-multiset of available_dice that was kept
    """
    player_id: int
    turn_number: int
    available_dice: tuple[Die, ...] = field(default_factory=tuple)
    kept_dice: tuple[Die, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Normalize dice to tuples and check kept dice were available."""
        object.__setattr__(self, "available_dice", tuple(self.available_dice))
        object.__setattr__(self, "kept_dice", tuple(self.kept_dice))

        if self.turn_number < 1:
            raise InvalidArgumentError(
                f"Turn number must be 1 or greater, got {self.turn_number}."
            )
        if not self.kept_dice:
            raise InvalidArgumentError(
                f"Player {self.player_id} must keep at least one die on turn {self.turn_number}."
            )

        shortfall = Counter(self.kept_dice) - Counter(self.available_dice)
        if shortfall:
            missing = ", ".join(str(die) for die in shortfall.elements())
            raise InvalidArgumentError(
                f"Player {self.player_id} kept dice that were not available: {missing}."
            )

    @property
    def kept_score(self) -> int:
        """Sum of the actual values of the kept dice."""
        return sum(die.actual_value for die in self.kept_dice)

    @classmethod
    def from_sequences(
        cls,
        player_id: int,
        turn_number: int,
        available_dice: Sequence[Die],
        kept_dice: Sequence[Die],
    ) -> "Turn":
        """Create a Turn from any sequence types."""
        return cls(
            player_id=player_id,
            turn_number=turn_number,
            available_dice=tuple(available_dice),
            kept_dice=tuple(kept_dice),
        )
