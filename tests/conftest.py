"""
Low Dice - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random

import pytest

from lowdice.engine import Die, Game, Player, Round, Turn, new_game


# =============================================================================
# DICE TEST DATA
# =============================================================================

@pytest.fixture
def dice_values() -> dict[int, int]:
    """Six-sided dice where fours are worth nothing."""
    return {1: 1, 2: 2, 3: 3, 4: 0, 5: 5, 6: 6}


@pytest.fixture
def sparse_dice_values() -> dict[int, int]:
    """Non-contiguous table: faces 2 and 3 are not listed."""
    return {1: 10, 4: 40}


def die(face: int, value: int | None = None) -> Die:
    """Shorthand for a die whose value defaults to its face."""
    return Die(face_value=face, actual_value=face if value is None else value)


def turn(player_id: int, turn_number: int, *kept: Die, extra: tuple[Die, ...] = ()) -> Turn:
    """A turn where the player kept `kept` out of `kept + extra`."""
    return Turn(
        player_id=player_id,
        turn_number=turn_number,
        available_dice=tuple(kept) + tuple(extra),
        kept_dice=tuple(kept),
    )


def full_round(round_number: int, starter: int, scores: dict[int, list[int]]) -> Round:
    """A round where each player keeps one die per turn with the given values."""
    turns = []
    for player_id, values in scores.items():
        for number, value in enumerate(values, start=1):
            turns.append(turn(player_id, number, die(value)))
    return Round(round_number=round_number, starting_player_id=starter, turns=turns)


# =============================================================================
# GAME STATE FIXTURES
# =============================================================================

@pytest.fixture
def players() -> list[Player]:
    """Three computer players registered out of id order."""
    return [
        Player(id=2, type="lowest_die"),
        Player(id=1, type="lowest_die"),
        Player(id=3, type="lowest_die"),
    ]


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def game(players, dice_values, rng) -> Game:
    """Fresh three-player game: 2 rounds of 2 dice."""
    return new_game(players, total_rounds=2, dice_per_round=2, dice_values=dice_values, rng=rng)
