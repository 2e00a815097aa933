"""
Captain draft orchestration: captain sign-up, alternating picks, side pick,
finalize and cancel.

Uses the pure DraftService for the rules and MatchStateManager for the live
state. Every public call validates all guards before touching the draft.
"""

import logging
from dataclasses import dataclass, field

from domain.models.draft import DraftState, MatchPhase, Side
from domain.models.player import PlayerId
from domain.services.draft_service import CaptainOrder, DraftService
from services import error_codes
from services.match_state_manager import MatchStateManager
from services.result import Result

logger = logging.getLogger("scrim_bot.services.match_setup_service")


@dataclass
class CaptainAssignment:
    """Result of a successful `captain` call."""

    captain_id: PlayerId
    draft_started: bool = False
    order: CaptainOrder | None = None
    draft: DraftState | None = None
    remaining: list[PlayerId] = field(default_factory=list)
    side_pick_ready: bool = False


@dataclass
class PickOutcome:
    """Result of a successful `pick` call."""

    picked_id: PlayerId
    team: str
    draft: DraftState
    remaining: list[PlayerId]
    draft_complete: bool


@dataclass
class FinalizedMatch:
    """Final teams handed to the room-move and broadcast collaborators."""

    draft: DraftState
    team_b_start_side: Side


class MatchSetupService:
    """Drives the flow from CAPTAIN_PICK through finalize."""

    def __init__(self, state: MatchStateManager, draft_service: DraftService):
        self.state = state
        self.draft_service = draft_service

    @property
    def phase(self) -> MatchPhase:
        return self.state.phase

    async def assign_captain(self, player_id: PlayerId) -> Result[CaptainAssignment]:
        """
        Self-assign the caller to the first free captain slot.

        Once both slots are filled the pick order is decided by coinflip, each
        captain joins their own team and the flow moves to DRAFT.
        """
        async with self.state.lock:
            draft = self.state.draft
            if self.state.phase is not MatchPhase.CAPTAIN_PICK:
                return Result.fail(
                    "command ignored, not in the captain pick phase", code=error_codes.WRONG_PHASE
                )
            if not self.state.queue.is_in_queue(player_id):
                return Result.fail(
                    "only players in the queue can become captain.", code=error_codes.NOT_IN_QUEUE
                )
            if draft.is_captain(player_id):
                return Result.fail("you're already a captain!", code=error_codes.ALREADY_CAPTAIN)

            if draft.captain_a is None:
                draft.captain_a = player_id
            else:
                draft.captain_b = player_id
            logger.info(f"Player {player_id} set as captain")

            if not draft.has_both_captains:
                return Result.ok(CaptainAssignment(captain_id=player_id))

            order = self.draft_service.order_captains(draft.captain_a, draft.captain_b)
            self.draft_service.seat_captains(draft, order)
            self.state.advance_phase(MatchPhase.DRAFT)
            logger.info(
                f"Captain order decided: A={order.first_captain_id} B={order.second_captain_id} "
                f"(swapped: {order.swapped})"
            )

            roster = self.state.queue.get_all()
            side_pick_ready = self.draft_service.remaining_count(draft, roster) == 0
            if side_pick_ready:
                self.state.advance_phase(MatchPhase.SIDE_PICK)

            return Result.ok(
                CaptainAssignment(
                    captain_id=player_id,
                    draft_started=True,
                    order=order,
                    draft=draft.copy(),
                    remaining=draft.unpicked(roster),
                    side_pick_ready=side_pick_ready,
                )
            )

    async def pick(self, picker_id: PlayerId, target_id: PlayerId) -> Result[PickOutcome]:
        """
        Draft a queued player onto the picking captain's team.

        Guards, in order: phase, target queued, picker is a captain, picker's
        turn, target not already on a team. Nothing is changed unless all pass.
        """
        async with self.state.lock:
            draft = self.state.draft
            if self.state.phase is not MatchPhase.DRAFT:
                return Result.fail("it is not currently the draft phase", code=error_codes.WRONG_PHASE)
            if not self.state.queue.is_in_queue(target_id):
                return Result.fail("this user is not in the queue", code=error_codes.NOT_IN_QUEUE)
            if not draft.is_captain(picker_id):
                return Result.fail("you are not a captain", code=error_codes.NOT_A_CAPTAIN)
            if draft.current_picker != picker_id:
                return Result.fail("it is not your turn to pick", code=error_codes.NOT_YOUR_TURN)
            if draft.is_picked(target_id):
                return Result.fail("this player is already on a team", code=error_codes.ALREADY_PICKED)

            team = self.draft_service.apply_pick(draft, target_id)
            roster = self.state.queue.get_all()
            remaining = draft.unpicked(roster)
            draft_complete = not remaining
            if draft_complete:
                self.state.advance_phase(MatchPhase.SIDE_PICK)

            logger.info(
                f"Captain {picker_id} picked {target_id} for team {team.upper()} "
                f"({len(remaining)} remaining)"
            )
            return Result.ok(
                PickOutcome(
                    picked_id=target_id,
                    team=team,
                    draft=draft.copy(),
                    remaining=remaining,
                    draft_complete=draft_complete,
                )
            )

    async def select_side(self, captain_id: PlayerId, side: Side) -> Result[FinalizedMatch]:
        """
        Captain B picks the starting side, which finalizes the setup.

        Finalize is the single reset point of the cycle: queue, notes and draft
        are emptied and the phase returns to QUEUE. The returned snapshot is what
        the collaborators use for room moves and the final broadcast.
        """
        async with self.state.lock:
            draft = self.state.draft
            if self.state.phase is not MatchPhase.SIDE_PICK:
                return Result.fail(
                    "it is not currently the side pick phase", code=error_codes.WRONG_PHASE
                )
            if draft.captain_b != captain_id:
                return Result.fail("you are not Captain B", code=error_codes.NOT_CAPTAIN_B)

            draft.team_b_start_side = side
            self.state.advance_phase(MatchPhase.READY)
            finalized = FinalizedMatch(draft=draft.copy(), team_b_start_side=side)
            self.state.reset_to_queue(clear_queue=True)

        logger.info(f"Setup completed, team B starts on {side.value}")
        return Result.ok(finalized)

    async def cancel(self) -> Result[None]:
        """Abort the running setup, keeping the queue for a retry."""
        async with self.state.lock:
            if self.state.phase is MatchPhase.QUEUE:
                return Result.fail(
                    "command only valid during `.start` process", code=error_codes.NOTHING_TO_CANCEL
                )
            self.state.reset_to_queue(clear_queue=False)

        logger.info("Match setup cancelled")
        return Result.ok()
