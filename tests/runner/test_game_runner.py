"""Tests for lowdice/runner/game_runner.py: GameRunner round loop."""

import logging
import random
from collections import Counter
from unittest.mock import MagicMock

import pytest

from conftest import die
from lowdice.agents import LowestDieAgent, RandomKeepAgent
from lowdice.engine import (
    InvalidMoveError,
    InvalidStateError,
    Player,
    Round,
    new_game,
)
from lowdice.runner.game_runner import GameRunner


def make_game(player_types, total_rounds=3, dice_per_round=4, seed=21):
    players = [Player(i, t) for i, t in enumerate(player_types, start=1)]
    return new_game(
        players,
        total_rounds=total_rounds,
        dice_per_round=dice_per_round,
        dice_values={1: 1, 2: 2, 3: 3, 4: 0, 5: 5, 6: 6},
        rng=random.Random(seed),
    )


class TestAgentResolution:
    def test_resolves_from_player_type(self):
        runner = GameRunner(make_game(["lowest_die", "random"]))
        assert isinstance(runner.agent_for(Player(1, "lowest_die")), LowestDieAgent)
        assert isinstance(runner.agent_for(Player(2, "random")), RandomKeepAgent)

    def test_agent_is_cached_per_player(self):
        runner = GameRunner(make_game(["random"]))
        player = Player(1, "random")
        assert runner.agent_for(player) is runner.agent_for(player)

    def test_registry_agents_are_seeded_from_game_rng(self):
        runner = GameRunner(make_game(["random"], seed=8))
        other = GameRunner(make_game(["random"], seed=8))
        agent = runner.agent_for(Player(1, "random"))
        assert isinstance(agent.rng, random.Random)
        assert agent.rng.random() == other.agent_for(Player(1, "random")).rng.random()

    def test_explicit_agents_take_precedence(self):
        agent = RandomKeepAgent(rng=random.Random(1))
        runner = GameRunner(make_game(["lowest_die"]), agents={1: agent})
        assert runner.agent_for(Player(1, "lowest_die")) is agent

    def test_unknown_type_raises(self):
        runner = GameRunner(make_game(["mystery"]))
        with pytest.raises(InvalidStateError, match="mystery"):
            runner.agent_for(Player(1, "mystery"))


class TestTakeTurnsForPlayer:
    def test_lowest_die_agent_takes_one_turn_per_die(self):
        game = make_game(["lowest_die"], dice_per_round=4)
        runner = GameRunner(game)
        game_round = Round(1, 1)

        turns = runner.take_turns_for_player(Player(1, "lowest_die"), game_round)

        assert [t.turn_number for t in turns] == [1, 2, 3, 4]
        assert [len(t.available_dice) for t in turns] == [4, 3, 2, 1]
        assert all(len(t.kept_dice) == 1 for t in turns)
        assert game_round.turns == turns

    def test_turns_so_far_passed_to_agent(self):
        game = make_game(["lowest_die"], dice_per_round=2)
        agent = MagicMock()
        agent.choose_keep.side_effect = lambda dice, player, turns, g: [dice[0]]
        runner = GameRunner(game, agents={1: agent})

        runner.take_turns_for_player(Player(1, "lowest_die"), Round(1, 1))

        calls = agent.choose_keep.call_args_list
        assert len(calls) == 2
        assert calls[0].args[2] == ()
        assert len(calls[1].args[2]) == 1
        assert calls[1].args[3] is game

    def test_keeping_everything_ends_after_one_turn(self):
        game = make_game(["lowest_die"], dice_per_round=5)
        agent = MagicMock()
        agent.choose_keep.side_effect = lambda dice, player, turns, g: list(dice)
        runner = GameRunner(game, agents={1: agent})

        turns = runner.take_turns_for_player(Player(1, "lowest_die"), Round(1, 1))

        assert len(turns) == 1
        assert len(turns[0].kept_dice) == 5

    def test_zero_dice_takes_no_turns(self):
        game = make_game(["lowest_die"], dice_per_round=0)
        game_round = Round(1, 1)
        assert GameRunner(game).take_turns_for_player(Player(1, "lowest_die"), game_round) == []
        assert game_round.turns == []

    def test_empty_selection_raises(self):
        game = make_game(["lowest_die"])
        agent = MagicMock()
        agent.choose_keep.return_value = []
        runner = GameRunner(game, agents={1: agent})
        with pytest.raises(InvalidMoveError, match="did not keep any dice"):
            runner.take_turns_for_player(Player(1, "lowest_die"), Round(1, 1))

    def test_none_selection_raises(self):
        game = make_game(["lowest_die"])
        agent = MagicMock()
        agent.choose_keep.return_value = None
        runner = GameRunner(game, agents={1: agent})
        with pytest.raises(InvalidMoveError):
            runner.take_turns_for_player(Player(1, "lowest_die"), Round(1, 1))

    def test_unrolled_dice_raise(self):
        game = make_game(["lowest_die"], dice_per_round=2)
        game.rng = MagicMock()
        game.rng.randint.return_value = 6
        agent = MagicMock()
        agent.choose_keep.return_value = [die(1)]
        runner = GameRunner(game, agents={1: agent})
        game_round = Round(1, 1)
        with pytest.raises(InvalidMoveError, match="not rolled"):
            runner.take_turns_for_player(Player(1, "lowest_die"), game_round)
        assert game_round.turns == []


class TestPlayNextRound:
    def test_starter_goes_first_then_registration_order(self):
        game = make_game(["lowest_die"] * 3, dice_per_round=1)
        # Round 1 was started by player 1, so player 2 starts next
        game.completed_rounds.append(Round(1, 1))
        game_round = GameRunner(game).play_next_round()

        assert game_round.round_number == 2
        assert game_round.starting_player_id == 2
        assert [t.player_id for t in game_round.turns] == [2, 1, 3]
        assert game.completed_rounds[-1] is game_round

    def test_round_is_complete(self):
        game = make_game(["lowest_die", "random"], dice_per_round=4)
        game_round = GameRunner(game).play_next_round()
        assert game_round.all_player_turns_completed(game.players, 4)


class TestPlay:
    def test_plays_to_the_end(self):
        game = make_game(["lowest_die", "random", "random"], total_rounds=3, dice_per_round=5)

        winners = GameRunner(game).play()

        assert len(game.completed_rounds) == 3
        assert game.all_rounds_complete()
        assert winners == game.winning_player_ids
        assert winners
        for game_round in game.completed_rounds:
            assert game_round.kept_dice_counts() == Counter({1: 5, 2: 5, 3: 5})

    def test_starters_rotate(self):
        game = make_game(["lowest_die"] * 3, total_rounds=4, dice_per_round=1)
        GameRunner(game).play()
        assert [r.starting_player_id for r in game.completed_rounds] == [1, 2, 3, 1]

    def test_winners_have_lowest_score(self):
        game = make_game(["lowest_die", "random"], total_rounds=2, dice_per_round=3)
        winners = GameRunner(game).play()
        scores = game.get_player_to_score_mapping()
        assert {scores[w] for w in winners} == {min(scores.values())}

    def test_seeded_games_replay_identically(self):
        first = make_game(["lowest_die", "lowest_die"], seed=99)
        second = make_game(["lowest_die", "lowest_die"], seed=99)
        GameRunner(first).play()
        GameRunner(second).play()
        assert first == second

    def test_seeded_games_with_random_agents_replay_identically(self):
        first = make_game(["random", "random", "lowest_die"], seed=5)
        second = make_game(["random", "random", "lowest_die"], seed=5)
        GameRunner(first).play()
        GameRunner(second).play()
        assert first == second

    def test_zero_round_game_ends_immediately(self):
        game = make_game(["lowest_die", "lowest_die"], total_rounds=0)
        assert sorted(GameRunner(game).play()) == [1, 2]
        assert game.completed_rounds == []

    def test_finished_game_is_not_replayed(self):
        game = make_game(["lowest_die"], total_rounds=1)
        runner = GameRunner(game)
        runner.play()
        assert runner.play() == game.winning_player_ids
        assert len(game.completed_rounds) == 1

    def test_stuck_game_raises(self):
        game = make_game(["lowest_die", "lowest_die"], total_rounds=1, dice_per_round=2)
        game.completed_rounds.append(Round(1, 1))
        with pytest.raises(InvalidStateError, match="not complete"):
            GameRunner(game).play()

    def test_round_failure_is_logged_and_raised(self, caplog):
        game = make_game(["lowest_die", "mystery"], total_rounds=1)
        with caplog.at_level(logging.ERROR, logger="lowdice.runner.game_runner"):
            with pytest.raises(InvalidStateError):
                GameRunner(game).play()
        assert "Round failed" in caplog.text

    def test_logs_round_progress(self, caplog):
        game = make_game(["lowest_die"], total_rounds=1, dice_per_round=1)
        with caplog.at_level(logging.INFO, logger="lowdice.runner.game_runner"):
            GameRunner(game).play()
        assert "Starting round 1 of 1" in caplog.text
        assert "Game 0 over" in caplog.text

    def test_logs_round_number_out_of_total(self, caplog):
        game = make_game(["lowest_die", "lowest_die"], total_rounds=3, dice_per_round=1)
        with caplog.at_level(logging.INFO, logger="lowdice.runner.game_runner"):
            GameRunner(game).play()
        assert "Starting round 2 of 3; player 2 goes first" in caplog.text
        assert "Starting round 3 of 3; player 1 goes first" in caplog.text
