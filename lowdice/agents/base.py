from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

from lowdice.engine.base import Die, Player, Turn

if TYPE_CHECKING:
    from lowdice.engine.game import Game


class Agent(ABC):
    """
    Abstract base class for all Low Dice agents.
    Agents must implement choose_keep(), which picks the dice a player keeps from a roll.
    """

    def __init__(self, rng=None):
        """
        Args:
            rng: Optional random number generator for agents that make random choices.
        """
        self.rng = rng

    @abstractmethod
    def choose_keep(
        self,
        available_dice: Sequence[Die],
        player: Player,
        turns_so_far: Sequence[Turn],
        game: "Game",
    ) -> list[Die]:
        """
        Choose which of the rolled dice to keep.
        Args:
            available_dice: Dice rolled this turn.
            player: The player making the move.
            turns_so_far: The player's earlier turns in the current round.
            game: The game being played (read-only for agents).
        Returns:
            list[Die]: A non-empty subset of available_dice.
        """
        raise NotImplementedError

    def lowest_die(self, dice: Sequence[Die]) -> Die | None:
        """
        Find the die worth the fewest points (the first one on ties).
        Args:
            dice: Dice to search.
        Returns:
            Die | None: The lowest die, or None when dice is empty.
        """
        if not dice:
            return None
        return min(dice, key=lambda die: die.actual_value)
