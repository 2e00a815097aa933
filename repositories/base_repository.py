"""
Base repository for collaborator-owned JSON files.
"""

import json
import logging
import os
from abc import ABC
from typing import Any

logger = logging.getLogger("scrim_bot.repositories")


class PersistenceError(RuntimeError):
    """Raised when a data file cannot be written. Treated as fatal for the command."""


class JsonFileRepository(ABC):
    """
    Base class for all repositories.

    The whole file is read once at construction and overwritten on every
    mutation. Subclasses only update their in-memory copy after `_write`
    succeeds.
    """

    def __init__(self, file_path: str):
        """
        Initialize repository with the JSON file path.

        Args:
            file_path: Path to the JSON file (missing file means empty data)
        """
        self.file_path = file_path

    def _read(self, default: Any) -> Any:
        if not os.path.exists(self.file_path):
            return default
        with open(self.file_path, encoding="utf-8") as fh:
            return json.load(fh)

    def _write(self, data: Any) -> None:
        try:
            with open(self.file_path, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False)
        except OSError as exc:
            logger.error(f"Error writing to {self.file_path}: {exc}", exc_info=True)
            raise PersistenceError(f"Error writing to {self.file_path}") from exc
        logger.info(f"Wrote {self.file_path}")


class PlayerMappingRepository(JsonFileRepository):
    """
    `{player_id: value}` mapping stored as a JSON object.

    JSON object keys are strings on disk, ints in memory.
    """

    def __init__(self, file_path: str):
        super().__init__(file_path)
        raw = self._read({})
        self._data: dict[int, str] = {int(k): v for k, v in raw.items()}

    def get(self, player_id: int) -> str | None:
        return self._data.get(player_id)

    def set(self, player_id: int, value: str) -> None:
        updated = dict(self._data)
        updated[player_id] = value
        self._write({str(k): v for k, v in updated.items()})
        self._data = updated

    def get_all(self) -> dict[int, str]:
        return dict(self._data)
