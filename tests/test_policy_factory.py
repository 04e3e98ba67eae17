"""Tests for the policy factory."""

import pytest

from rating_policy import ReducedLossPolicy, StandardPolicy, StreakBonusPolicy, TrainingPolicy
from services.policy_factory import (
    POLICY_KINDS,
    create_policy,
    create_streak_bonus_policy,
)


class TestNamedConstructors:
    """Tests for the create_*_policy helpers."""

    def test_streak_bonus_with_start(self):
        policy = create_streak_bonus_policy(2)
        assert isinstance(policy, StreakBonusPolicy)
        assert policy.win_streak == 2

    def test_streak_bonus_negative_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            create_streak_bonus_policy(-1)


class TestCreatePolicy:
    """Tests for lookup by kind name."""

    @pytest.mark.parametrize(
        "kind, expected",
        [
            ("standard", StandardPolicy),
            ("training", TrainingPolicy),
            ("reduced_loss", ReducedLossPolicy),
            ("streak_bonus", StreakBonusPolicy),
            ("  Standard ", StandardPolicy),
        ],
    )
    def test_known_kinds(self, kind, expected):
        assert isinstance(create_policy(kind), expected)

    def test_kwargs_forwarded(self):
        assert create_policy("streak_bonus", win_streak=3).win_streak == 3

    def test_each_call_is_a_fresh_instance(self):
        assert create_policy("streak_bonus") is not create_policy("streak_bonus")

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError, match="Unknown policy kind 'elo'"):
            create_policy("elo")

    def test_unexpected_kwargs_raise_value_error(self):
        with pytest.raises(ValueError, match="Invalid arguments for policy kind 'standard'"):
            create_policy("standard", win_streak=1)

    def test_negative_streak_kwarg_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            create_policy("streak_bonus", win_streak=-1)

    def test_registry_covers_every_variant(self):
        assert set(POLICY_KINDS) == {"standard", "training", "reduced_loss", "streak_bonus"}
