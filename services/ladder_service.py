"""
In-memory ladder: a roster of players and the games they record.
"""

import logging

from domain.models.player import OutcomeRecord, Player
from rating_policy import RatingPolicy
from services import error_codes
from services.policy_factory import create_policy
from services.result import Result

logger = logging.getLogger("rating_ledger.services.ladder")


class LadderService:
    """
    Registers players by name and records their games.

    Every method returns a Result; core ValueErrors are mapped to error codes.
    Nothing is persisted between runs.
    """

    def __init__(self):
        self._players: dict[str, Player] = {}

    @staticmethod
    def _normalize_name(name: str | None) -> str:
        return (name or "").strip()

    def register_player(self, name: str, rating: int | None = None) -> Result[Player]:
        """
        Add a new player to the ladder.

        Args:
            name: Unique display name
            rating: Starting rating (defaults to DEFAULT_RATING)
        """
        name = self._normalize_name(name)
        if not name:
            return Result.fail("Player name cannot be empty.", code=error_codes.VALIDATION_ERROR)
        if name in self._players:
            return Result.fail(f"Player '{name}' is already registered.", code=error_codes.PLAYER_ALREADY_EXISTS)

        try:
            player = Player(name) if rating is None else Player(name, rating)
        except ValueError as e:
            logger.warning("Rejected registration for %s: %s", name, e)
            return Result.fail(str(e), code=error_codes.VALIDATION_ERROR)

        self._players[name] = player
        logger.info("Registered %s at rating %d", name, player.rating)
        return Result.ok(player)

    def get_player(self, name: str) -> Result[Player]:
        name = self._normalize_name(name)
        player = self._players.get(name)
        if player is None:
            return Result.fail(f"Player '{name}' not found.", code=error_codes.PLAYER_NOT_FOUND)
        return Result.ok(player)

    def record_game(
        self,
        name: str,
        won: bool,
        policy: RatingPolicy | str | None,
    ) -> Result[OutcomeRecord]:
        """
        Record a win or loss for a registered player.

        `policy` may be a policy instance (its state is shared with every other
        caller holding it) or a kind name, which builds a fresh instance for
        this game only.
        """
        lookup = self.get_player(name)
        if not lookup:
            logger.warning("record_game: %s", lookup.error)
            return Result.fail(lookup.error, code=lookup.error_code)
        player = lookup.value

        if policy is None:
            return Result.fail("Policy cannot be None.", code=error_codes.MISSING_POLICY)
        if isinstance(policy, str):
            try:
                policy = create_policy(policy)
            except ValueError as e:
                logger.warning("record_game: %s", e)
                return Result.fail(str(e), code=error_codes.UNKNOWN_POLICY)

        record = player.record_win(policy) if won else player.record_loss(policy)
        logger.info(
            "%s %s game %d under %r (rating now %d)",
            player.name,
            "won" if won else "lost",
            record.game_index,
            policy,
            player.rating,
        )
        return Result.ok(record)

    def get_history(self, name: str) -> Result[tuple[OutcomeRecord, ...]]:
        return self.get_player(name).map(lambda player: Result.ok(player.render_history()))

    def standings(self) -> list[Player]:
        """Players ordered by rating (highest first), ties broken by name."""
        return sorted(self._players.values(), key=lambda p: (-p.rating, p.name))
