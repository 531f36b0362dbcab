"""
Low Dice - Game Runner

Drives the round loop on top of the engine: rolls dice, asks each
player's agent which dice to keep, records the turns and rounds, and
stops once the game reports it is over.
"""

from __future__ import annotations

import logging
import random
from typing import Mapping

from lowdice.agents import Agent, get_agent_for
from lowdice.engine import (
    Game,
    InvalidArgumentError,
    InvalidMoveError,
    InvalidStateError,
    Player,
    Round,
    Turn,
    subtract_dice,
)

logger = logging.getLogger(__name__)


class GameRunner:
    """Plays a game round by round with one agent per player.

    Agents are taken from the explicit mapping when given one, otherwise
    built from each player's type tag through the agent registry.
    """

    def __init__(self, game: Game, agents: Mapping[int, Agent] | None = None) -> None:
        self.game = game
        self._agents: dict[int, Agent] = dict(agents or {})

    def agent_for(self, player: Player) -> Agent:
        """Resolve (and cache) the agent that plays for a player.

        Registry-built agents draw their seed from the game's rng, so a
        seeded game replays the same way whichever agents play it.

        Raises:
            InvalidStateError: If no agent exists for the player's type.
        """
        agent = self._agents.get(player.id)
        if agent is None:
            agent = get_agent_for(player.type, rng=random.Random(self.game.rng.random()))
            if agent is None:
                raise InvalidStateError(
                    f"Could not find an agent of type {player.type!r} for player {player.id}"
                )
            self._agents[player.id] = agent
        return agent

    def take_turns_for_player(self, player: Player, game_round: Round) -> list[Turn]:
        """Let a player roll and keep dice until all their dice are kept.

        Each decision is appended to the round as a Turn numbered from 1.

        Raises:
            InvalidMoveError: If the agent keeps nothing, or dice it was not offered.
        """
        agent = self.agent_for(player)
        remaining = self.game.get_rolled_dice(self.game.dice_per_round)
        turns: list[Turn] = []
        turn_number = 1

        while remaining:
            kept = agent.choose_keep(list(remaining), player, tuple(turns), self.game)
            if not kept:
                raise InvalidMoveError(
                    f"Player {player.id} did not keep any dice on turn {turn_number}"
                )
            try:
                leftover = subtract_dice(remaining, kept)
            except (InvalidArgumentError, InvalidStateError) as exc:
                raise InvalidMoveError(
                    f"Player {player.id} kept dice that were not rolled: {exc}"
                ) from exc

            turn = Turn.from_sequences(player.id, turn_number, remaining, kept)
            game_round.record_turn(turn)
            turns.append(turn)
            logger.debug(
                "Round %d: player %d turn %d kept %d of %d dice",
                game_round.round_number, player.id, turn_number, len(kept), len(remaining),
            )

            remaining = self.game.get_rolled_dice(len(leftover))
            turn_number += 1

        return turns

    def play_next_round(self) -> Round:
        """Play one full round and record it on the game.

        The round's starting player goes first; everybody else follows in
        registration order.
        """
        round_number = len(self.game.completed_rounds) + 1
        starter = self.game.get_next_starting_player()
        game_round = Round(round_number=round_number, starting_player_id=starter.id)
        logger.info(
            "Starting round %d of %d; player %d goes first",
            self.game.current_round_number(), self.game.total_rounds, starter.id,
        )

        self.take_turns_for_player(starter, game_round)
        for player in self.game.players:
            if player.id == starter.id:
                continue
            self.take_turns_for_player(player, game_round)

        self.game.record_round(game_round)
        logger.info("Round %d complete: %s", round_number, game_round.get_round_score())
        return game_round

    def play(self) -> list[int]:
        """Play rounds until the game is over.

        Returns:
            Ids of the winning players.

        Raises:
            InvalidStateError: If every round has been played yet the game
                still is not over.
        """
        logger.info(
            "Playing game %d: %d players, %d rounds of %d dice",
            self.game.id, len(self.game.players),
            self.game.total_rounds, self.game.dice_per_round,
        )
        while not self.game.is_game_over():
            if len(self.game.completed_rounds) >= self.game.total_rounds:
                raise InvalidStateError(
                    f"Game {self.game.id} has played all {self.game.total_rounds} rounds "
                    "but its rounds are not complete"
                )
            try:
                self.play_next_round()
            except Exception:
                logger.exception("Round failed in game %d", self.game.id)
                raise

        winners = list(self.game.winning_player_ids or [])
        logger.info("Game %d over; winners: %s", self.game.id, winners)
        return winners
