"""
Standard error codes for the service layer.

Usage:
    from services.error_codes import PLAYER_NOT_FOUND
    from services.result import Result

    if player is None:
        return Result.fail("Player not found", code=PLAYER_NOT_FOUND)
"""

# General errors
VALIDATION_ERROR = "validation_error"

# Player errors
PLAYER_NOT_FOUND = "player_not_found"
PLAYER_ALREADY_EXISTS = "player_already_exists"

# Policy errors
MISSING_POLICY = "missing_policy"
UNKNOWN_POLICY = "unknown_policy"
