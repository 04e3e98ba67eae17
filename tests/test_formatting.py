"""Tests for formatting utilities."""

from domain.models.player import Player
from rating_policy import StandardPolicy, TrainingPolicy
from utils.formatting import (
    HISTORY_HEADER,
    format_history_row,
    format_history_table,
    format_player_summary,
)


class TestHistoryTable:
    """Tests for the console history table."""

    def test_empty_history(self):
        table = format_history_table(Player("Alice"))
        assert table.splitlines() == ["Game history for Alice:", HISTORY_HEADER]

    def test_rows_are_aligned(self):
        player = Player("Alice")
        player.record_win(StandardPolicy())
        player.record_loss(TrainingPolicy())

        lines = format_history_table(player).splitlines()
        assert lines[2] == "Opponent | Win    |            50 |          1"
        assert lines[3] == "         | Lose   |             0 |          2"

    def test_row_matches_table(self):
        player = Player("Bob")
        record = player.record_loss(StandardPolicy())
        assert format_history_row(record) in format_history_table(player)


class TestPlayerSummary:
    """Tests for the one-line summary."""

    def test_summary(self):
        player = Player("Alice")
        player.record_win(StandardPolicy())
        assert format_player_summary(player) == "Alice: 1050 (W-L: 1-0, 1 games)"
