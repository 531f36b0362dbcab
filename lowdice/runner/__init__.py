"""
Low Dice Runner.

Round loop orchestration, text reports and the command-line entry point.
"""

from lowdice.runner.game_runner import GameRunner
from lowdice.runner.report import dice_values_description, results_summary, score_table

__all__ = [
    "GameRunner",
    "dice_values_description",
    "results_summary",
    "score_table",
]
