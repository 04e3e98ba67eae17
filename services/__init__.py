"""
Application services layer.

Services orchestrate ladder operations on top of the domain models.
"""

from services.ladder_service import LadderService
from services.policy_factory import POLICY_KINDS, create_policy

# Result type for consistent error handling
from services.result import Result

__all__ = [
    "LadderService",
    "POLICY_KINDS",
    "create_policy",
    "Result",
]
