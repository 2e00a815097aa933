"""
Domain services containing pure business logic.
"""

from domain.services.draft_service import DraftService
from domain.services.map_vote_service import MapVoteResolver

__all__ = ["DraftService", "MapVoteResolver"]
