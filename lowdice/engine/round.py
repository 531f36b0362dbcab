"""
Low Dice - Round Ledger

A round holds every turn taken in it, in order, plus the id of the player
who started it. Turns are appended while the round is in play; once the
game records the round it is treated as sealed.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Sequence

from lowdice.engine.base import Player, Turn
from lowdice.engine.errors import DataIntegrityError


@dataclass
class Round:
    """
    Ordered turns for one round of a game.

    Attributes:
        round_number: 1-based position of the round in the game
        starting_player_id: Id of the player who went first
        turns: Turns in the order they were taken
    """
    round_number: int
    starting_player_id: int
    turns: list[Turn] = field(default_factory=list)

    def record_turn(self, turn: Turn) -> None:
        """Append a turn to this round."""
        self.turns.append(turn)

    def turns_for(self, player_id: int) -> list[Turn]:
        """Turns taken by one player, in order."""
        return [turn for turn in self.turns if turn.player_id == player_id]

    def kept_dice_counts(self) -> Counter[int]:
        """Number of dice each player has kept so far this round."""
        counts: Counter[int] = Counter()
        for turn in self.turns:
            counts[turn.player_id] += len(turn.kept_dice)
        return counts

    def all_player_turns_completed(
        self,
        players: Sequence[Player] | None,
        dice_per_round: int,
    ) -> bool:
        """
        Check whether every player has kept exactly dice_per_round dice.

        Overshooting the target counts as incomplete, as does a player
        with no turns at all once anyone has taken a turn.

        Args:
            players: Players expected to take part in this round
            dice_per_round: Number of dice each player must keep

        Returns:
            True if the round is complete for every player

        Raises:
            DataIntegrityError: If a turn belongs to a player not in players
        """
        if not players:
            if not self.turns:
                return True
            raise DataIntegrityError(
                f"Round {self.round_number} has turns recorded but no players were "
                "given to check them against."
            )

        if not self.turns:
            return dice_per_round == 0

        counts = self.kept_dice_counts()
        known_ids = {player.id for player in players}
        for player_id in counts:
            if player_id not in known_ids:
                raise DataIntegrityError(
                    f"Player {player_id} took a turn in round {self.round_number} "
                    "but is not one of the players being checked."
                )

        return all(
            player.id in counts and counts[player.id] == dice_per_round
            for player in players
        )

    def get_round_score(self) -> dict[int, int]:
        """
        Total the actual value of the dice each player kept this round.

        Players without turns are absent from the result.
        """
        scores: dict[int, int] = {}
        for turn in self.turns:
            scores[turn.player_id] = scores.get(turn.player_id, 0) + turn.kept_score
        return scores
