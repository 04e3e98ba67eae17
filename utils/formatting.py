"""
Console formatting helpers for player reports.
"""

from domain.models.player import OutcomeRecord, Player

HISTORY_HEADER = "Opponent  | Result | Rating Change | Game Index"


def format_history_row(record: OutcomeRecord) -> str:
    """Return one table row, e.g. 'Opponent | Win    |            50 |          1'."""
    return (
        f"{record.opponent_name:<8} | {record.result.value:<6} | "
        f"{record.rating_change:>13} | {record.game_index:>10}"
    )


def format_history_table(player: Player) -> str:
    """Return the full game history table for a player."""
    lines = [f"Game history for {player.name}:", HISTORY_HEADER]
    lines.extend(format_history_row(record) for record in player.render_history())
    return "\n".join(lines)


def format_player_summary(player: Player) -> str:
    """Return a one-line summary (e.g., 'Alice: 1050 (W-L: 1-0, 1 games)')."""
    return (
        f"{player.name}: {player.rating} "
        f"(W-L: {player.wins}-{player.losses}, {player.games_played} games)"
    )
