"""
Repository for custom team names chosen by captains.
"""

from repositories.base_repository import PlayerMappingRepository
from repositories.interfaces import ITeamNameRepository


class TeamNameRepository(PlayerMappingRepository, ITeamNameRepository):
    """Team names keyed by the captain's Discord user id, persisted to teamnames.json."""
