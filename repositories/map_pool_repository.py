"""
Repository for the map vote pool.
"""

from repositories.base_repository import JsonFileRepository
from repositories.interfaces import IMapPoolRepository


class MapPoolRepository(JsonFileRepository, IMapPoolRepository):
    """Ordered list of map names, persisted to maps.json."""

    def __init__(self, file_path: str):
        super().__init__(file_path)
        self._maps: list[str] = list(self._read([]))

    def get_all(self) -> list[str]:
        return list(self._maps)

    def save_all(self, maps: list[str]) -> None:
        self._write(list(maps))
        self._maps = list(maps)
