"""
Abstract repository interfaces for data access.

These interfaces define the contracts implemented by concrete repositories.
"""

from abc import ABC, abstractmethod


class IRiotIdRepository(ABC):
    @abstractmethod
    def get(self, player_id: int) -> str | None: ...

    @abstractmethod
    def set(self, player_id: int, value: str) -> None: ...

    @abstractmethod
    def get_all(self) -> dict[int, str]: ...


class ITeamNameRepository(ABC):
    @abstractmethod
    def get(self, player_id: int) -> str | None: ...

    @abstractmethod
    def set(self, player_id: int, value: str) -> None: ...

    @abstractmethod
    def get_all(self) -> dict[int, str]: ...


class IMapPoolRepository(ABC):
    @abstractmethod
    def get_all(self) -> list[str]: ...

    @abstractmethod
    def save_all(self, maps: list[str]) -> None: ...
