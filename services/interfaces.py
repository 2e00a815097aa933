"""
Service layer interfaces (ABCs) for the chat collaborators.

The core services never talk to Discord directly. Anything that posts
messages or reads reactions is reached through these contracts, which keeps
the services testable with simple fakes.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.models.map_vote import VoteSlot


class IVoteBallot(ABC):
    """A posted ballot whose reaction counts can be read back."""

    @abstractmethod
    async def read_counts(self) -> dict[str, int]:
        """Current reaction count per slot letter. Missing letters count as 0."""
        ...


class IVoteChannel(ABC):
    """Where the map vote is held."""

    @abstractmethod
    async def open_ballot(self, slots: list["VoteSlot"]) -> IVoteBallot:
        """Post the ballot and seed one reaction per slot."""
        ...

    @abstractmethod
    async def announce(self, text: str) -> None:
        """Post a plain message. Delivery failures are logged, never raised."""
        ...
