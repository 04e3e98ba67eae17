"""
Centralized configuration for the rating ledger.

Rating rules (floor, default rating, streak threshold) are fixed constants.
Only presentation and logging settings can be overridden from the environment.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def _parse_bool(env_var: str, default: bool) -> bool:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


# Rating rules
DEFAULT_RATING = 1000
MIN_RATING = 1  # Floor applied after every loss

# Streak bonus: wins up to and including this streak length earn the small bonus
STREAK_BONUS_THRESHOLD = 3

# Stub opponent name until real matchmaking exists
OPPONENT_PLACEHOLDER = os.getenv("OPPONENT_PLACEHOLDER", "Opponent")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
DEBUG_LOG = _parse_bool("DEBUG_LOG", False)
