import random
from typing import TYPE_CHECKING, Sequence

from lowdice.agents.base import Agent
from lowdice.agents.registry import register_agent
from lowdice.engine.base import Die, Player, Turn

if TYPE_CHECKING:
    from lowdice.engine.game import Game


@register_agent("random")
class RandomKeepAgent(Agent):
    """
    Keeps a uniformly random non-empty subset of the rolled dice.
    Useful as a noisy baseline when simulating games between agents.
    """

    def __init__(self, rng=None):
        """
        Args:
            rng: Optional random number generator.
        """
        super().__init__(rng or random.Random())

    def choose_keep(
        self,
        available_dice: Sequence[Die],
        player: Player,
        turns_so_far: Sequence[Turn],
        game: "Game",
    ) -> list[Die]:
        if not available_dice:
            return []
        count = self.rng.randint(1, len(available_dice))
        return self.rng.sample(list(available_dice), count)
