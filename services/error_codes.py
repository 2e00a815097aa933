"""
Standard error codes for the service layer.

Command handlers use these to tell apart phase errors, validation errors and
permission errors without parsing message text.

Usage:
    from services.error_codes import WRONG_PHASE
    from services.result import Result

    if state.phase is not MatchPhase.QUEUE:
        return Result.fail("Cannot leave after start.", code=WRONG_PHASE)
"""

# Phase gate
WRONG_PHASE = "wrong_phase"

# Authorization
PERMISSION_DENIED = "permission_denied"

# Generic validation
VALIDATION_ERROR = "validation_error"

# Queue
ALREADY_QUEUED = "already_queued"
QUEUE_FULL = "queue_full"
NOT_QUEUED = "not_queued"
RIOT_ID_MISSING = "riot_id_missing"

# Captain draft
ALREADY_CAPTAIN = "already_captain"
NOT_IN_QUEUE = "not_in_queue"
NOT_A_CAPTAIN = "not_a_captain"
NOT_YOUR_TURN = "not_your_turn"
ALREADY_PICKED = "already_picked"
NOT_CAPTAIN_B = "not_captain_b"
NOTHING_TO_CANCEL = "nothing_to_cancel"

# Map pool / vote
EMPTY_MAP_POOL = "empty_map_pool"
MAP_POOL_FULL = "map_pool_full"
MAP_EXISTS = "map_exists"
MAP_NOT_FOUND = "map_not_found"

# Player profile
INVALID_RIOT_ID = "invalid_riot_id"
INVALID_TEAM_NAME = "invalid_team_name"

VALIDATION_CODES = frozenset(
    {
        VALIDATION_ERROR,
        ALREADY_QUEUED,
        QUEUE_FULL,
        NOT_QUEUED,
        RIOT_ID_MISSING,
        ALREADY_CAPTAIN,
        NOT_IN_QUEUE,
        NOT_A_CAPTAIN,
        NOT_YOUR_TURN,
        ALREADY_PICKED,
        NOT_CAPTAIN_B,
        NOTHING_TO_CANCEL,
        EMPTY_MAP_POOL,
        MAP_POOL_FULL,
        MAP_EXISTS,
        MAP_NOT_FOUND,
        INVALID_RIOT_ID,
        INVALID_TEAM_NAME,
    }
)


def is_validation_error(code: str | None) -> bool:
    return code in VALIDATION_CODES
