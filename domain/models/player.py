"""
Player domain model.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from config import DEFAULT_RATING, MIN_RATING
from rating_policy import RatingPolicy

logger = logging.getLogger("rating_ledger.player")


class GameResult(Enum):
    """Outcome of a single game from the player's point of view."""

    WIN = "Win"
    LOSE = "Lose"


@dataclass(frozen=True)
class OutcomeRecord:
    """One entry in a player's game history."""

    opponent_name: str  # Empty when the game had no opponent (e.g., training)
    result: GameResult
    rating_change: int  # Policy's nominal delta, before any floor clamping
    game_index: int  # 1-based; equals games_played when recorded


class Player:
    """
    A rated player with an append-only game history.

    This is a pure domain model with no infrastructure dependencies.
    Rating never drops below MIN_RATING.
    """

    def __init__(self, name: str, rating: int = DEFAULT_RATING):
        """
        Initialize a player.

        Args:
            name: Display name (read-only afterwards)
            rating: Starting rating (must be >= MIN_RATING)
        """
        if rating < MIN_RATING:
            raise ValueError(f"Starting rating cannot be below {MIN_RATING}.")
        self._name = name
        self.rating = rating
        self.games_played = 0
        self._history: list[OutcomeRecord] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def history(self) -> tuple[OutcomeRecord, ...]:
        """Snapshot of the game history, oldest first."""
        return tuple(self._history)

    @staticmethod
    def _require_policy(policy: RatingPolicy | None) -> RatingPolicy:
        if policy is None:
            raise ValueError("Policy cannot be None.")
        return policy

    def _append(self, policy: RatingPolicy, result: GameResult, delta: int) -> OutcomeRecord:
        self.games_played += 1
        record = OutcomeRecord(
            opponent_name=policy.resolve_opponent(self._name),
            result=result,
            rating_change=delta,
            game_index=self.games_played,
        )
        self._history.append(record)
        return record

    def record_win(self, policy: RatingPolicy) -> OutcomeRecord:
        """Apply a win under the given policy and return the new history entry."""
        policy = self._require_policy(policy)
        delta = policy.compute_delta(True)
        self.rating += delta
        logger.debug("%s won: +%d -> %d", self._name, delta, self.rating)
        return self._append(policy, GameResult.WIN, delta)

    def record_loss(self, policy: RatingPolicy) -> OutcomeRecord:
        """
        Apply a loss under the given policy and return the new history entry.

        The rating is clamped at MIN_RATING, but the history keeps the full
        delta the policy asked for.
        """
        policy = self._require_policy(policy)
        delta = policy.compute_delta(False)
        new_rating = self.rating - delta
        if new_rating < MIN_RATING:
            logger.info("%s rating clamped at %d (would have been %d)", self._name, MIN_RATING, new_rating)
            new_rating = MIN_RATING
        self.rating = new_rating
        logger.debug("%s lost: -%d -> %d", self._name, delta, self.rating)
        return self._append(policy, GameResult.LOSE, delta)

    def render_history(self) -> tuple[OutcomeRecord, ...]:
        """Return the full history for display. Never mutates the player."""
        return self.history

    @property
    def wins(self) -> int:
        return sum(1 for record in self._history if record.result is GameResult.WIN)

    @property
    def losses(self) -> int:
        return sum(1 for record in self._history if record.result is GameResult.LOSE)

    def get_win_loss_differential(self) -> int:
        """Get wins minus losses."""
        return self.wins - self.losses

    def get_win_rate(self) -> float | None:
        """Get win rate as a percentage, or None if no games played."""
        if self.games_played == 0:
            return None
        return (self.wins / self.games_played) * 100

    def __str__(self) -> str:
        return f"{self._name} (Rating: {self.rating}, W-L: {self.wins}-{self.losses})"

    def __repr__(self) -> str:
        return f"Player(name={self._name!r}, rating={self.rating}, games_played={self.games_played})"
