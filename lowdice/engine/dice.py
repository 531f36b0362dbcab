"""
Low Dice - Dice Utilities

Multiset arithmetic over dice and table-driven dice rolling. Rolling
draws from an injected random.Random so games are reproducible.
"""

import random
from collections import Counter
from typing import Mapping, Sequence

from lowdice.engine.base import Die
from lowdice.engine.errors import InvalidArgumentError, InvalidStateError
from lowdice.engine.validators import validate_dice_count


def subtract_dice(
    left: Sequence[Die] | None,
    right: Sequence[Die] | None,
) -> list[Die]:
    """
    Remove the dice in right from left, one-for-one.

    Both sequences are treated as multisets; neither is mutated. The
    order of the surviving dice follows their first appearance in left.

    Args:
        left: Dice to subtract from
        right: Dice to remove

    Returns:
        A new list holding every die of left not matched by right

    Raises:
        InvalidArgumentError: If left is None, or left is empty while right is not
        InvalidStateError: If right holds a die (or a copy of one) left lacks
    """
    if left is None:
        raise InvalidArgumentError("Cannot subtract any dice from a missing list.")

    if not left:
        if not right:
            return []
        raise InvalidArgumentError("Cannot subtract a non-empty list of dice from an empty one.")

    if not right:
        return list(left)

    remaining = Counter(left)
    for die in right:
        if die not in remaining:
            raise InvalidStateError(
                f"Cannot subtract {die}: it is not available in the left list."
            )
        if remaining[die] <= 0:
            raise InvalidStateError(
                f"Cannot subtract {die}: the right list has excess copies of it."
            )
        remaining[die] -= 1

    return list(remaining.elements())


def min_max_faces(dice_values: Mapping[int, int] | None) -> tuple[int, int]:
    """
    Find the lowest and highest faces in a dice value table.

    Raises:
        InvalidStateError: If the table is missing or empty
    """
    if not dice_values:
        raise InvalidStateError("Cannot find face range of an empty dice value table.")
    return min(dice_values), max(dice_values)


def roll_dice(
    count: int,
    dice_values: Mapping[int, int] | None,
    rng: random.Random,
) -> list[Die]:
    """
    Roll dice whose faces span the keys of a dice value table.

    Each face is drawn uniformly from [min key, max key] inclusive and
    mapped through the table; faces missing from the table are worth
    their own number.

    Args:
        count: Number of dice to roll
        dice_values: Mapping of face to actual value
        rng: Random source

    Returns:
        Exactly count dice

    Raises:
        InvalidStateError: If the table is empty
        InvalidArgumentError: If count is negative
    """
    if not dice_values:
        raise InvalidStateError(
            "Cannot roll dice without a mapping of face values to actual values."
        )
    validate_dice_count(count)

    low, high = min_max_faces(dice_values)
    dice = []
    for _ in range(count):
        face = rng.randint(low, high)
        dice.append(Die(face_value=face, actual_value=dice_values.get(face, face)))
    return dice
