"""
Queue orchestration: join, leave, kick, clear, recover and list.

Every mutating call holds the match state lock for its whole
check-then-mutate sequence.
"""

import logging

from domain.models.draft import MatchPhase
from domain.models.player import PlayerId, QueueEntry
from services import error_codes
from services.match_state_manager import MatchStateManager
from services.result import Result

logger = logging.getLogger("scrim_bot.services.queue_service")


class QueueService:
    """Wraps the queue held by MatchStateManager with phase and identity checks."""

    def __init__(
        self,
        state: MatchStateManager,
        player_service=None,
        note_max_length: int = 50,
    ):
        self.state = state
        self.player_service = player_service
        self.note_max_length = note_max_length

    @property
    def capacity(self) -> int:
        return self.state.queue.capacity

    def _clip_note(self, note: str | None) -> str | None:
        if note is None:
            return None
        note = note.strip()[: self.note_max_length].strip()
        return note or None

    def _join_checks(self, player_id: PlayerId) -> Result | None:
        queue = self.state.queue
        if self.state.phase is not MatchPhase.QUEUE:
            return Result.fail(
                "cannot `.join` while a match is being set up.", code=error_codes.WRONG_PHASE
            )
        if self.player_service is not None and not self.player_service.has_riot_id(player_id):
            return Result.fail(
                "riotid not found for your discord user, please use `.riotid <your riotid>` "
                "to assign one. Example: `.riotid Martige#NA1`",
                code=error_codes.RIOT_ID_MISSING,
            )
        if queue.is_in_queue(player_id):
            return Result.fail("is already in the queue.", code=error_codes.ALREADY_QUEUED)
        if queue.is_full():
            return Result.fail("sorry but the queue is full.", code=error_codes.QUEUE_FULL)
        return None

    async def join(self, player_id: PlayerId, note: str | None = None) -> Result[int]:
        """
        Add a player to the queue.

        Args:
            player_id: Joining player
            note: Optional free-text note, clipped to the note limit

        Returns:
            Result with the new queue size
        """
        async with self.state.lock:
            failure = self._join_checks(player_id)
            if failure is not None:
                return failure
            self.state.queue.add_player(player_id, self._clip_note(note))
            size = self.state.queue.size()

        logger.info(f"Player {player_id} joined the queue ({size}/{self.capacity})")
        return Result.ok(size)

    async def leave(self, player_id: PlayerId) -> Result[int]:
        """Remove the caller from the queue. Only legal before `start`."""
        async with self.state.lock:
            if self.state.phase is not MatchPhase.QUEUE:
                return Result.fail(
                    "cannot `.leave` the queue after `.start`, use `.cancel` to start over if needed.",
                    code=error_codes.WRONG_PHASE,
                )
            if not self.state.queue.remove_player(player_id):
                return Result.fail(
                    "is not in the queue. type `.join` to join the queue.",
                    code=error_codes.NOT_QUEUED,
                )
            size = self.state.queue.size()

        logger.info(f"Player {player_id} left the queue ({size}/{self.capacity})")
        return Result.ok(size)

    async def kick(self, target_id: PlayerId) -> Result[int]:
        """Remove another player from the queue. Authorization is checked by the caller."""
        async with self.state.lock:
            if self.state.phase is not MatchPhase.QUEUE:
                return Result.fail(
                    "cannot `.kick` the queue after `.start`, use `.cancel` to start over if needed.",
                    code=error_codes.WRONG_PHASE,
                )
            if not self.state.queue.remove_player(target_id):
                return Result.fail("is not in the queue.", code=error_codes.NOT_QUEUED)
            size = self.state.queue.size()

        logger.info(f"Player {target_id} kicked from the queue ({size}/{self.capacity})")
        return Result.ok(size)

    async def clear(self) -> Result[None]:
        """Empty the queue and all notes, regardless of phase."""
        async with self.state.lock:
            self.state.queue.clear()
        logger.info("Queue cleared")
        return Result.ok()

    async def recover(self, player_ids: list[PlayerId]) -> Result[list[PlayerId]]:
        """
        Reseed the queue after a restart.

        Clears, then joins each id in order without the Riot id check.
        Duplicates and ids beyond capacity are skipped.

        Returns:
            Result with the ids that made it into the queue
        """
        added: list[PlayerId] = []
        async with self.state.lock:
            self.state.queue.clear()
            for player_id in player_ids:
                if self.state.queue.add_player(player_id):
                    added.append(player_id)

        logger.info(f"Queue recovered with {len(added)} players")
        return Result.ok(added)

    def list_entries(self) -> list[QueueEntry]:
        """Ordered (player, note) snapshot. A pure read, no lock needed on a single event loop."""
        return self.state.queue.entries()
