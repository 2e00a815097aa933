"""
Domain models - pure data structures for the match setup flow.
"""

from domain.models.draft import DraftState, MatchPhase, Side
from domain.models.map_vote import MapVoteResult, MapVoteTally, VoteSlot
from domain.models.player import PlayerId, QueueEntry

__all__ = [
    "DraftState",
    "MatchPhase",
    "Side",
    "MapVoteResult",
    "MapVoteTally",
    "VoteSlot",
    "PlayerId",
    "QueueEntry",
]
