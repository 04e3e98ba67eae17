"""
Rating policies: how many points a game outcome is worth.

Each policy answers two questions for a finished game:
- How many rating points does a win (or loss) move the player?
- Who was the opponent? (placeholder only; there is no matchmaking)
"""

import logging
from abc import ABC, abstractmethod

from config import OPPONENT_PLACEHOLDER, STREAK_BONUS_THRESHOLD

logger = logging.getLogger("rating_ledger.policy")


class RatingPolicy(ABC):
    """
    Base class for rating policies.

    Subclasses must implement compute_delta(). The returned delta is always a
    non-negative magnitude; the player decides whether to add or subtract it.
    """

    @abstractmethod
    def compute_delta(self, is_win: bool) -> int:
        """Return the rating points this outcome is worth."""

    def resolve_opponent(self, player_name: str) -> str:
        """Best-effort opponent name for the history ledger."""
        return OPPONENT_PLACEHOLDER

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class FixedPointsPolicy(RatingPolicy):
    """Stateless policy with a fixed win and loss amount."""

    WIN_POINTS = 0
    LOSS_POINTS = 0

    def compute_delta(self, is_win: bool) -> int:
        delta = self.WIN_POINTS if is_win else self.LOSS_POINTS
        logger.debug("%s: %s -> %d", self.__class__.__name__, "win" if is_win else "loss", delta)
        return delta


class StandardPolicy(FixedPointsPolicy):
    """Ranked game: +50 for a win, -20 for a loss."""

    WIN_POINTS = 50
    LOSS_POINTS = 20


class TrainingPolicy(FixedPointsPolicy):
    """Training game: never affects the rating and has no opponent."""

    def resolve_opponent(self, player_name: str) -> str:
        return ""


class ReducedLossPolicy(FixedPointsPolicy):
    """Ranked game with softened losses: +50 for a win, -10 for a loss."""

    WIN_POINTS = 50
    LOSS_POINTS = 10


class StreakBonusPolicy(RatingPolicy):
    """
    Rewards win streaks.

    Every win extends the streak before it is scored: wins that bring the
    streak up to `threshold` earn SMALL_WIN_POINTS, longer streaks earn
    BIG_WIN_POINTS. Any loss costs LOSS_POINTS and resets the streak.

    The streak lives on this instance. Reusing one instance for several
    players means they all feed the same streak.
    """

    SMALL_WIN_POINTS = 30
    BIG_WIN_POINTS = 50
    LOSS_POINTS = 20

    def __init__(self, win_streak: int = 0, threshold: int = STREAK_BONUS_THRESHOLD):
        """
        Args:
            win_streak: Consecutive wins already banked (must be >= 0)
            threshold: Longest streak still scored with SMALL_WIN_POINTS
        """
        if win_streak < 0:
            raise ValueError("Win streak count cannot be negative.")
        self._win_streak = win_streak
        self.threshold = threshold

    @property
    def win_streak(self) -> int:
        """Current number of consecutive wins."""
        return self._win_streak

    def compute_delta(self, is_win: bool) -> int:
        if not is_win:
            logger.debug("StreakBonusPolicy: loss resets streak of %d", self._win_streak)
            self._win_streak = 0
            return self.LOSS_POINTS

        self._win_streak += 1
        delta = self.SMALL_WIN_POINTS if self._win_streak <= self.threshold else self.BIG_WIN_POINTS
        logger.debug("StreakBonusPolicy: win streak %d -> %d", self._win_streak, delta)
        return delta

    def __repr__(self) -> str:
        return f"StreakBonusPolicy(win_streak={self._win_streak}, threshold={self.threshold})"
