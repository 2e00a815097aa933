"""
Player identity domain model.
"""

from dataclasses import dataclass
from typing import NewType

# Discord user snowflake. Membership checks always compare ids, never display names.
PlayerId = NewType("PlayerId", int)


@dataclass(frozen=True)
class QueueEntry:
    """
    One row of the queue roster as seen by readers.

    Attributes:
        player_id: Queued player's id
        note: Optional free-text note given with `join "..."`
    """

    player_id: PlayerId
    note: str | None = None
