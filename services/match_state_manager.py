"""
Match setup state management.

Holds the single process-wide match setup state (queue, phase, draft) behind
one asyncio lock, separated from business logic.
"""

import asyncio
import logging

from domain.models.draft import DraftState, InvalidPhaseTransitionError, MatchPhase
from player_queue import PlayerQueue

logger = logging.getLogger("scrim_bot.services.match_state_manager")


class MatchStateManager:
    """
    Owns the live match setup state.

    Responsibilities:
    - Store the queue, the draft record and the current phase
    - Enforce legal phase transitions
    - Provide the lock every read-modify-write must hold

    Services must hold `lock` for their whole check-then-mutate sequence and
    must release it before any long suspension (the vote window).
    """

    def __init__(self, queue_capacity: int = 10):
        self.queue = PlayerQueue(capacity=queue_capacity)
        self.draft = DraftState()
        self._phase = MatchPhase.QUEUE
        self._lock = asyncio.Lock()
        # Identifies the vote window currently allowed to advance the phase
        self._vote_token = 0
        self.active_vote_token: int | None = None

    @property
    def lock(self) -> asyncio.Lock:
        """Exclusive lock for the whole match setup state."""
        return self._lock

    @property
    def phase(self) -> MatchPhase:
        return self._phase

    def advance_phase(self, new_phase: MatchPhase) -> None:
        """
        Move to a new phase.

        Raises:
            InvalidPhaseTransitionError: If the state machine does not allow the move
        """
        old_phase = self._phase
        if not old_phase.can_transition_to(new_phase):
            raise InvalidPhaseTransitionError(
                f"Cannot move from {old_phase.value} to {new_phase.value}"
            )
        self._phase = new_phase
        logger.info(f"Match phase advanced: {old_phase.value} -> {new_phase.value}")

    def issue_vote_token(self) -> int:
        """Mark a new vote window as the one allowed to finish MAP_VOTE."""
        self._vote_token += 1
        self.active_vote_token = self._vote_token
        return self._vote_token

    def reset_to_queue(self, clear_queue: bool) -> None:
        """
        Return to QUEUE with an empty draft.

        Args:
            clear_queue: Also empty the roster and notes (finalize). Cancel keeps them.
        """
        if self._phase is not MatchPhase.QUEUE:
            self.advance_phase(MatchPhase.QUEUE)
        self.draft.reset()
        self.active_vote_token = None
        if clear_queue:
            self.queue.clear()
        logger.info(f"Match state reset to queue (queue cleared: {clear_queue})")
