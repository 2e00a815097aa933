"""
Repository layer for collaborator-owned data files.
"""

from repositories.base_repository import PersistenceError
from repositories.map_pool_repository import MapPoolRepository
from repositories.riot_id_repository import RiotIdRepository
from repositories.team_name_repository import TeamNameRepository

__all__ = [
    "PersistenceError",
    "MapPoolRepository",
    "RiotIdRepository",
    "TeamNameRepository",
]
