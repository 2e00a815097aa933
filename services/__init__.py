"""
Application services layer.

Services orchestrate the match setup flow using the shared state manager,
domain services and repositories.
"""

from services.autoclear_service import AutoclearService
from services.map_pool_service import MapPoolService
from services.map_vote_service import MapVoteService
from services.match_setup_service import MatchSetupService
from services.match_state_manager import MatchStateManager
from services.permissions import has_admin_permission, has_allowlisted_admin
from services.player_service import PlayerService
from services.queue_service import QueueService

# Result type for consistent error handling
from services.result import Result

# Chat collaborator interfaces (ABCs)
from services.interfaces import IVoteBallot, IVoteChannel

__all__ = [
    # Concrete services
    "AutoclearService",
    "MapPoolService",
    "MapVoteService",
    "MatchSetupService",
    "MatchStateManager",
    "PlayerService",
    "QueueService",
    # Permissions
    "has_admin_permission",
    "has_allowlisted_admin",
    # Result type
    "Result",
    # Interfaces
    "IVoteBallot",
    "IVoteChannel",
]
