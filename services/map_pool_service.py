"""
Map pool management for the map vote.
"""

import logging

from repositories.interfaces import IMapPoolRepository
from services import error_codes
from services.result import Result

logger = logging.getLogger("scrim_bot.services.map_pool_service")


class MapPoolService:
    """Adds, removes and lists the maps offered in the vote."""

    def __init__(self, map_pool_repo: IMapPoolRepository, max_size: int = 26):
        self.map_pool_repo = map_pool_repo
        self.max_size = max_size

    def list_maps(self) -> list[str]:
        return self.map_pool_repo.get_all()

    def add_map(self, map_name: str | None) -> Result[str]:
        """
        Append a map to the pool.

        Raises:
            PersistenceError: If maps.json cannot be written
        """
        maps = self.map_pool_repo.get_all()
        if len(maps) >= self.max_size:
            return Result.fail("unable to add map, max amount reached.", code=error_codes.MAP_POOL_FULL)
        if not map_name:
            return Result.fail(
                "please provide a map name i.e. `.addmap mapname`", code=error_codes.VALIDATION_ERROR
            )
        if map_name in maps:
            return Result.fail("unable to add map, already exists.", code=error_codes.MAP_EXISTS)

        maps.append(map_name)
        self.map_pool_repo.save_all(maps)
        logger.info(f"Added map {map_name} ({len(maps)} in pool)")
        return Result.ok(map_name)

    def remove_map(self, map_name: str | None) -> Result[str]:
        """
        Remove a map from the pool.

        Raises:
            PersistenceError: If maps.json cannot be written
        """
        maps = self.map_pool_repo.get_all()
        if not map_name or map_name not in maps:
            return Result.fail("this map doesn't exist in the list.", code=error_codes.MAP_NOT_FOUND)

        maps.remove(map_name)
        self.map_pool_repo.save_all(maps)
        logger.info(f"Removed map {map_name} ({len(maps)} in pool)")
        return Result.ok(map_name)
