"""
Map vote coordination.

Runs the timed vote that follows `start`: opens a ballot over the map pool,
waits out the voting window and the final warning, reads the reaction
counts and resolves the winner. The state lock is only held to start the vote
and to apply the resulting phase change, never across the sleeps.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable

from domain.models.draft import MatchPhase
from domain.models.map_vote import (
    MAX_VOTE_SLOTS,
    MapVoteResult,
    MapVoteTally,
    VoteSlot,
    build_vote_slots,
)
from domain.models.player import PlayerId
from domain.services.map_vote_service import MapVoteResolver
from services import error_codes
from services.interfaces import IVoteChannel
from services.map_pool_service import MapPoolService
from services.match_state_manager import MatchStateManager
from services.result import Result

logger = logging.getLogger("scrim_bot.services.map_vote_service")


@dataclass
class VoteSession:
    """A vote accepted by `begin_vote` and waiting to be run."""

    token: int
    slots: list[VoteSlot]
    roster: list[PlayerId] = field(default_factory=list)
    queue_full: bool = True


@dataclass
class VoteOutcome:
    """
    Attributes:
        result: The chosen map
        advanced: True if the flow moved on to captain pick. False when the vote
            was cancelled (or superseded) while the window was open.
    """

    result: MapVoteResult
    advanced: bool


class MapVoteService:
    """Coordinates the map vote between QUEUE and CAPTAIN_PICK."""

    def __init__(
        self,
        state: MatchStateManager,
        map_pool_service: MapPoolService,
        resolver: MapVoteResolver,
        vote_seconds: float = 50,
        warning_seconds: float = 10,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.state = state
        self.map_pool_service = map_pool_service
        self.resolver = resolver
        self.vote_seconds = vote_seconds
        self.warning_seconds = warning_seconds
        self._sleep = sleep

    async def begin_vote(self, player_id: PlayerId, is_admin: bool) -> Result[VoteSession]:
        """
        Validate `start` and move to MAP_VOTE.

        A queue that is not full does not block the start; the session carries
        `queue_full=False` so the caller can warn.

        Args:
            player_id: Player issuing `start`
            is_admin: Whether the caller passed the admin check

        Returns:
            Result with the VoteSession to pass to `run_vote`
        """
        async with self.state.lock:
            if self.state.phase is not MatchPhase.QUEUE:
                return Result.fail("`.start` command has already been entered", code=error_codes.WRONG_PHASE)
            if not is_admin and not self.state.queue.is_in_queue(player_id):
                return Result.fail(
                    "non-admin users that are not in the queue cannot start the match",
                    code=error_codes.PERMISSION_DENIED,
                )
            maps = self.map_pool_service.list_maps()
            if not maps:
                return Result.fail(
                    "the map pool is empty, add maps with `.addmap <name>` first.",
                    code=error_codes.EMPTY_MAP_POOL,
                )
            if len(maps) > MAX_VOTE_SLOTS:
                return Result.fail(
                    f"the map pool has {len(maps)} maps, remove some with `.removemap <name>` "
                    f"so at most {MAX_VOTE_SLOTS} remain.",
                    code=error_codes.MAP_POOL_FULL,
                )

            slots = build_vote_slots(maps)
            self.state.advance_phase(MatchPhase.MAP_VOTE)
            token = self.state.issue_vote_token()
            session = VoteSession(
                token=token,
                slots=slots,
                roster=self.state.queue.get_all(),
                queue_full=self.state.queue.is_full(),
            )

        logger.info(f"Map vote {token} started by {player_id} with {len(slots)} maps")
        return Result.ok(session)

    async def run_vote(self, session: VoteSession, channel: IVoteChannel) -> VoteOutcome:
        """
        Hold the vote window and resolve it.

        The window always runs to completion; `cancel` does not interrupt it.
        """
        ballot = await channel.open_ballot(session.slots)
        await self._sleep(self.vote_seconds)
        await channel.announce(f"Voting will end in {int(self.warning_seconds)} seconds")
        await self._sleep(self.warning_seconds)

        counts = await ballot.read_counts()
        result = self.resolver.resolve(MapVoteTally(slots=session.slots, counts=counts))
        logger.info(
            f"Map vote {session.token} resolved to {result.map_name} "
            f"(tied: {result.tied}, counts: {result.counts})"
        )

        advanced = await self._finish_vote(session)
        return VoteOutcome(result=result, advanced=advanced)

    async def _finish_vote(self, session: VoteSession) -> bool:
        async with self.state.lock:
            if (
                self.state.phase is not MatchPhase.MAP_VOTE
                or self.state.active_vote_token != session.token
            ):
                logger.info(f"Map vote {session.token} finished after cancel, phase left unchanged")
                return False
            self.state.draft.reset()
            self.state.active_vote_token = None
            self.state.advance_phase(MatchPhase.CAPTAIN_PICK)
        return True
