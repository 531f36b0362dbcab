"""
Low Dice - Command Line

Plays one game between computer agents and prints the results. Defaults
come from the environment (see lowdice.config); flags override them.

Usage: python -m lowdice.runner --rounds 4 --dice 5 --players lowest_die,random --seed 7
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from lowdice.agents import available_agent_types
from lowdice.config import Settings, configure_logging, get_settings
from lowdice.engine import DiceGameError
from lowdice.persistence import save_game
from lowdice.runner.game_runner import GameRunner
from lowdice.runner.report import dice_values_description, results_summary

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a game of Low Dice between agents")
    parser.add_argument("--rounds", type=int, default=None, help="Number of rounds to play")
    parser.add_argument("--dice", type=int, default=None, help="Dice each player rolls per round")
    parser.add_argument(
        "--players", type=str, default=None,
        help=f"Comma-separated agent types, one per player ({', '.join(available_agent_types())})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible games")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level, e.g. DEBUG")
    parser.add_argument("--save", type=str, default=None, help="Write the finished game snapshot to this path")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.rounds is not None:
        overrides["total_rounds"] = args.rounds
    if args.dice is not None:
        overrides["dice_per_round"] = args.dice
    if args.players:
        overrides["player_types"] = [tag.strip() for tag in args.players.split(",") if tag.strip()]
    if args.seed is not None:
        overrides["rng_seed"] = args.seed
    if args.log_level:
        overrides["log_level"] = args.log_level

    try:
        settings = Settings.model_validate({**get_settings().model_dump(), **overrides})
    except ValidationError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return 1

    configure_logging("DEBUG" if settings.debug else settings.log_level)

    try:
        game = settings.build_game()
        print(dice_values_description(game))
        GameRunner(game).play()
    except DiceGameError as exc:
        logger.debug("Game aborted", exc_info=True)
        print(f"Game aborted: {exc}", file=sys.stderr)
        return 1

    print(results_summary(game))
    if args.save:
        path = save_game(game, args.save)
        print(f"Saved game snapshot to {path}")
    return 0
