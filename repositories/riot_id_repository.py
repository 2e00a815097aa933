"""
Repository for player -> Riot account id mappings.
"""

from repositories.base_repository import PlayerMappingRepository
from repositories.interfaces import IRiotIdRepository


class RiotIdRepository(PlayerMappingRepository, IRiotIdRepository):
    """Riot ids keyed by Discord user id, persisted to riot_ids.json."""
