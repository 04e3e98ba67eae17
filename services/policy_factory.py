"""
Named constructors for rating policies.
"""

import inspect

from rating_policy import (
    RatingPolicy,
    ReducedLossPolicy,
    StandardPolicy,
    StreakBonusPolicy,
    TrainingPolicy,
)


def create_standard_policy() -> RatingPolicy:
    return StandardPolicy()


def create_training_policy() -> RatingPolicy:
    return TrainingPolicy()


def create_reduced_loss_policy() -> RatingPolicy:
    return ReducedLossPolicy()


def create_streak_bonus_policy(win_streak: int = 0) -> RatingPolicy:
    """Create a streak policy; a negative starting streak raises ValueError."""
    return StreakBonusPolicy(win_streak)


POLICY_KINDS = {
    "standard": create_standard_policy,
    "training": create_training_policy,
    "reduced_loss": create_reduced_loss_policy,
    "streak_bonus": create_streak_bonus_policy,
}


def create_policy(kind: str, **kwargs) -> RatingPolicy:
    """
    Build a fresh policy by kind name (e.g., "standard", "streak_bonus").

    Extra keyword arguments are passed to the matching constructor.

    Raises:
        ValueError: If the kind is unknown or its arguments are invalid
    """
    factory = POLICY_KINDS.get(kind.strip().lower())
    if factory is None:
        known = ", ".join(sorted(POLICY_KINDS))
        raise ValueError(f"Unknown policy kind '{kind}'. Expected one of: {known}.")
    try:
        inspect.signature(factory).bind(**kwargs)
    except TypeError as e:
        raise ValueError(f"Invalid arguments for policy kind '{kind}': {e}") from e
    return factory(**kwargs)
