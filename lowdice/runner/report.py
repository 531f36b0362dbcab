"""
Low Dice - Text Reports

Plain-text renderings of scores, dice values and final results.
"""

from lowdice.engine import Game, Player


def score_table(game: Game, current_player: Player | None = None) -> str:
    """Current standings, one line per player in registration order.

    The current player is starred.
    """
    lines = ["Here are the current game scores/standings:"]
    scores = game.get_player_to_score_mapping()
    for player in game.players:
        marker = "* " if current_player is not None and player.id == current_player.id else ""
        lines.append(f"Player {player.id}{marker}: {scores[player.id]}")
    return "\n".join(lines) + "\n"


def dice_values_description(game: Game) -> str:
    """Describe what each face is worth in this game."""
    if not game.dice_values:
        return "Dice values unavailable\n"
    lines = ["Dice values for this game:"]
    for face, value in sorted(game.dice_values.items()):
        lines.append(f"All {face} die are worth {value} points")
    return "\n".join(lines) + "\n"


def results_summary(game: Game, current_player: Player | None = None) -> str:
    """Final scores followed by the winner, or the tied winners."""
    lines = ["Here are the final scores for the game:", score_table(game, current_player)]
    winners = game.winning_player_ids
    if not winners:
        lines.append("No winners have been recorded for this game.")
    elif len(winners) == 1:
        lines.append(f"Player {winners[0]} wins the game!")
    else:
        ids = ", ".join(str(player_id) for player_id in winners)
        lines.append(f"Players {ids} tie for the win!")
    return "\n".join(lines)
