"""
Domain models - pure data structures representing business entities.
"""

from domain.models.player import GameResult, OutcomeRecord, Player

__all__ = ["Player", "OutcomeRecord", "GameResult"]
