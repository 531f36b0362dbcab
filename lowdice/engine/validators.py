"""
Low Dice - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive InvalidArgumentError
exceptions.
"""

from typing import Mapping, Sequence

from lowdice.engine.base import Player
from lowdice.engine.errors import InvalidArgumentError


def validate_dice_count(count: int, name: str = "Dice count") -> int:
    """
    Validate a number of dice (or rounds) that may be zero but not negative.

    Args:
        count: Count to validate
        name: Label used in the error message

    Returns:
        Validated count

    Raises:
        InvalidArgumentError: If count is not a non-negative integer
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(count).__name__}.")

    if count < 0:
        raise InvalidArgumentError(f"{name} cannot be negative, got {count}.")

    return count


def validate_dice_values(dice_values: Mapping[int, int] | None) -> dict[int, int]:
    """
    Validate and copy a face-value to actual-value table.

    Args:
        dice_values: Mapping of die face to the points it is worth

    Returns:
        Validated table as a new dict

    Raises:
        InvalidArgumentError: If the table is missing, empty or non-integer
    """
    if dice_values is None:
        raise InvalidArgumentError("A dice value table is required.")

    if not dice_values:
        raise InvalidArgumentError("Dice value table must map at least one face.")

    table: dict[int, int] = {}
    for face, value in dice_values.items():
        if isinstance(face, bool) or not isinstance(face, int):
            raise InvalidArgumentError(f"Die face must be an integer, got {face!r}.")
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(
                f"Value of face {face} must be an integer, got {value!r}."
            )
        table[face] = value

    return table


def validate_players(players: Sequence[Player] | None) -> list[Player]:
    """
    Validate the players registered for a game.

    Args:
        players: Players in registration order

    Returns:
        Validated players as a new list

    Raises:
        InvalidArgumentError: If players is None or ids repeat
    """
    if players is None:
        raise InvalidArgumentError("A list of players is required.")

    seen: set[int] = set()
    for player in players:
        if not isinstance(player, Player):
            raise InvalidArgumentError(
                f"Expected a Player, got {type(player).__name__}."
            )
        if player.id in seen:
            raise InvalidArgumentError(f"Duplicate player id {player.id}.")
        seen.add(player.id)

    return list(players)
