"""
Demo entry point: replays a fixed set of games and prints each history.
"""

import logging

from config import DEBUG_LOG, LOG_LEVEL

logging.basicConfig(
    level=logging.DEBUG if DEBUG_LOG else getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("rating_ledger")

from domain.models.player import Player
from services.policy_factory import (
    create_reduced_loss_policy,
    create_standard_policy,
    create_streak_bonus_policy,
    create_training_policy,
)
from utils.formatting import format_history_table, format_player_summary


def main() -> None:
    alice = Player("Alice")
    bob = Player("Bob")

    standard = create_standard_policy()
    training = create_training_policy()
    reduced_loss = create_reduced_loss_policy()
    streak_bonus = create_streak_bonus_policy(0)

    alice.record_win(standard)
    bob.record_loss(standard)

    alice.record_win(training)
    bob.record_loss(training)

    alice.record_win(reduced_loss)
    bob.record_loss(reduced_loss)

    # Both players share streak_bonus, so Bob's loss resets Alice's streak too
    for _ in range(4):
        alice.record_win(streak_bonus)
    bob.record_loss(streak_bonus)

    for player in (alice, bob):
        print(format_history_table(player))
        print()
    logger.info("Final: %s | %s", format_player_summary(alice), format_player_summary(bob))


if __name__ == "__main__":
    main()
