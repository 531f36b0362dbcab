"""
Low Dice - Game State

The Game aggregate holds everything needed to save and resume a game at
any point: players, completed rounds, rules and the recorded winners.
Scoring, round-robin seating, win detection and dice rolling are all
derived from that recorded state.

Rules:
    - Each round every player rolls dice_per_round dice, keeping at least
      one die per roll and re-rolling the rest until all are kept
    - A kept die scores its actual value from the dice value table
    - After total_rounds complete rounds the lowest total score wins;
      ties produce several winners
"""

import random
from dataclasses import dataclass, field
from typing import Mapping, Sequence

from lowdice.engine.base import Die, Player
from lowdice.engine.dice import roll_dice, subtract_dice
from lowdice.engine.errors import DataIntegrityError, InvalidStateError
from lowdice.engine.round import Round
from lowdice.engine.validators import (
    validate_dice_count,
    validate_dice_values,
    validate_players,
)


@dataclass
class Game:
    """
    A game in progress.

    Attributes:
        id: Identifier of the game
        players: Players in registration order (not turn order)
        completed_rounds: Rounds recorded so far, in play order
        total_rounds: Number of rounds the game lasts
        dice_per_round: Dice each player rolls (and keeps) per round
        dice_values: Mapping of die face to the points it is worth
        winning_player_ids: Ids of the winners; None until the game is over
        rng: Random source for rolling; not part of the recorded state
    """
    id: int = 0
    players: list[Player] = field(default_factory=list)
    completed_rounds: list[Round] = field(default_factory=list)
    total_rounds: int = 0
    dice_per_round: int = 0
    dice_values: dict[int, int] = field(default_factory=dict)
    winning_player_ids: list[int] | None = None
    rng: random.Random = field(
        default_factory=random.Random, repr=False, compare=False
    )

    # === Lookups ===

    def get_player(self, player_id: int) -> Player:
        """Find a player by id, treating an unknown id as corruption."""
        for player in self.players:
            if player.id == player_id:
                return player
        raise DataIntegrityError(f"No player with id {player_id} exists in game {self.id}.")

    def current_round_number(self) -> int:
        """1-based number of the round now in play."""
        return 1 + sum(
            1 for game_round in self.completed_rounds
            if game_round.all_player_turns_completed(self.players, self.dice_per_round)
        )

    # === Recording ===

    def record_round(self, game_round: Round) -> None:
        """
        Append a finished round to the game.

        Raises:
            InvalidStateError: If the game already has winners
            DataIntegrityError: If the round's starter is not a player
        """
        if self.winning_player_ids is not None:
            raise InvalidStateError(f"Game {self.id} is over; no more rounds can be recorded.")
        self.get_player(game_round.starting_player_id)
        self.completed_rounds.append(game_round)

    # === Dice ===

    @staticmethod
    def subtract_dice(left: Sequence[Die] | None, right: Sequence[Die] | None) -> list[Die]:
        """Remove the dice in right from left, one-for-one."""
        return subtract_dice(left, right)

    def get_rolled_dice(self, count: int) -> list[Die]:
        """
        Roll count dice using this game's dice value table.

        Raises:
            InvalidStateError: If the dice value table is empty
            InvalidArgumentError: If count is negative
        """
        return roll_dice(count, self.dice_values, self.rng)

    # === Round completion and seating ===

    def all_rounds_complete(self) -> bool:
        """
        Check whether every round of the game has been fully played.

        Games without players or with no rounds configured are trivially
        complete. Each recorded round must have every player keep exactly
        dice_per_round dice.
        """
        if not self.completed_rounds:
            return self.total_rounds == 0
        if not self.players or self.total_rounds <= 0:
            return True
        if len(self.completed_rounds) < self.total_rounds:
            return False
        return all(
            game_round.all_player_turns_completed(self.players, self.dice_per_round)
            for game_round in self.completed_rounds
        )

    def get_next_starting_player(self) -> Player:
        """
        Pick who starts the next round, rotating through players by id.

        The first round goes to the lowest id; after that the player whose
        id follows the last round's starter goes first, wrapping around.

        Raises:
            InvalidStateError: If the game has no players
            DataIntegrityError: If a recorded starter is not a player
        """
        if not self.players:
            raise InvalidStateError(f"Game {self.id} has no players to start a round.")

        ordered = sorted(self.players, key=lambda player: player.id)
        if not self.completed_rounds:
            return ordered[0]

        ordered_ids = [player.id for player in ordered]
        for game_round in self.completed_rounds:
            if game_round.starting_player_id not in ordered_ids:
                raise DataIntegrityError(
                    f"Round {game_round.round_number} was started by player "
                    f"{game_round.starting_player_id}, who is not in game {self.id}."
                )

        last_index = ordered_ids.index(self.completed_rounds[-1].starting_player_id)
        return ordered[(last_index + 1) % len(ordered)]

    # === Scoring ===

    def get_player_to_score_mapping(self) -> dict[int, int]:
        """
        Total score of every player across all recorded rounds.

        Players who have not scored yet map to 0.

        Raises:
            DataIntegrityError: If rounds exist without players, or a score
                belongs to an id that is not a player
        """
        if not self.players:
            if self.completed_rounds:
                raise DataIntegrityError(
                    f"Game {self.id} has recorded rounds but no players."
                )
            return {}

        scores: dict[int, int] = {}
        for game_round in self.completed_rounds:
            for player_id, points in game_round.get_round_score().items():
                scores[player_id] = scores.get(player_id, 0) + points

        valid_ids = set()
        for player in self.players:
            valid_ids.add(player.id)
            scores.setdefault(player.id, 0)

        for player_id in scores:
            if player_id not in valid_ids:
                raise DataIntegrityError(
                    f"Game {self.id} has a score for player {player_id}, "
                    "but no such player exists."
                )
        return scores

    def get_lowest_scoring_players(self) -> list[Player] | None:
        """
        All players tied at the lowest total score, in registration order.

        Returns:
            The lowest scorers, or None if the game has no players

        Raises:
            DataIntegrityError: If the score table does not match the players
        """
        if not self.players:
            return None

        scores = self.get_player_to_score_mapping()
        if len(scores) != len(self.players):
            raise DataIntegrityError(
                f"Game {self.id} has {len(scores)} scores for {len(self.players)} players."
            )

        lowest = min(scores.values())
        return [player for player in self.players if scores[player.id] == lowest]

    # === Game over ===

    def determine_winners(self) -> list[int] | None:
        """
        Work out the winners without changing the game.

        Returns:
            Winner ids if the game is over, otherwise None

        Raises:
            DataIntegrityError: If a finished game has nobody to win it
        """
        if self.winning_player_ids is not None:
            return list(self.winning_player_ids)

        if not self.all_rounds_complete():
            return None

        lowest = self.get_lowest_scoring_players()
        if not lowest:
            raise DataIntegrityError(f"Game {self.id} is complete but has no winner.")
        return [player.id for player in lowest]

    def is_game_over(self) -> bool:
        """
        Check whether the game is over, recording the winners the first time.

        Once winning_player_ids is set it is never recomputed. Callers must
        persist the game afterwards to keep the recorded winners.
        """
        if self.winning_player_ids is not None:
            return True

        winners = self.determine_winners()
        if winners is None:
            return False

        self.winning_player_ids = winners
        return True


def new_game(
    players: Sequence[Player],
    total_rounds: int,
    dice_per_round: int,
    dice_values: Mapping[int, int],
    *,
    game_id: int = 0,
    rng: random.Random | None = None,
) -> Game:
    """
    Set up a new game with no rounds played.

    Args:
        players: Players in registration order
        total_rounds: Number of rounds to play
        dice_per_round: Dice each player rolls per round
        dice_values: Mapping of die face to the points it is worth
        game_id: Identifier of the game
        rng: Random source for rolling (default: a fresh random.Random)

    Returns:
        A Game ready for its first round

    Raises:
        InvalidArgumentError: If any input is invalid
    """
    return Game(
        id=game_id,
        players=validate_players(players),
        completed_rounds=[],
        total_rounds=validate_dice_count(total_rounds, "Total rounds"),
        dice_per_round=validate_dice_count(dice_per_round, "Dice per round"),
        dice_values=validate_dice_values(dice_values),
        winning_player_ids=None,
        rng=rng if rng is not None else random.Random(),
    )
