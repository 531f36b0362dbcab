from typing import TYPE_CHECKING, Sequence

from lowdice.agents.base import Agent
from lowdice.agents.registry import register_agent
from lowdice.engine.base import Die, Player, Turn

if TYPE_CHECKING:
    from lowdice.engine.game import Game


@register_agent("lowest_die", "ai_reflex")
class LowestDieAgent(Agent):
    """
    A reflex agent: keeps exactly one die per roll, the one worth the fewest points.
    Returns an empty selection when nothing is available, which the runner rejects.
    """

    def choose_keep(
        self,
        available_dice: Sequence[Die],
        player: Player,
        turns_so_far: Sequence[Turn],
        game: "Game",
    ) -> list[Die]:
        lowest = self.lowest_die(available_dice)
        if lowest is None:
            return []
        return [lowest]
