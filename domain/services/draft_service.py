"""
Draft domain service for captain drafting.

Contains pure domain logic for captain assignment, pick order and the
alternating pick rule. No side effects or external dependencies; callers
apply the returned decisions to the live state under the state lock.
"""

import random
from dataclasses import dataclass

from domain.models.draft import DraftState
from domain.models.player import PlayerId


@dataclass
class CaptainOrder:
    """Result of the pick-order coinflip."""

    first_captain_id: PlayerId
    second_captain_id: PlayerId
    swapped: bool


class DraftService:
    """
    Pure domain logic for the captain draft.

    Handles:
    - Coinflip deciding which captain picks first
    - Turn alternation
    - Completion check
    """

    def __init__(self, rng: random.Random | None = None):
        """
        Initialize draft service.

        Args:
            rng: Random source. Inject a seeded instance for deterministic tests.
        """
        self.rng = rng or random.Random()

    def coinflip(self) -> bool:
        """Fair coin. True means heads."""
        return self.rng.randrange(2) != 0

    def order_captains(self, captain_a: PlayerId, captain_b: PlayerId) -> CaptainOrder:
        """
        Decide pick order between the two self-assigned captains.

        A heads result swaps them, so the second captain to sign up picks first.

        Returns:
            CaptainOrder with the first-pick captain (team A) and second captain (team B)
        """
        if self.coinflip():
            return CaptainOrder(first_captain_id=captain_b, second_captain_id=captain_a, swapped=True)
        return CaptainOrder(first_captain_id=captain_a, second_captain_id=captain_b, swapped=False)

    @staticmethod
    def seat_captains(draft: DraftState, order: CaptainOrder) -> None:
        """Place each captain on their own team and hand the first pick to captain A."""
        draft.captain_a = order.first_captain_id
        draft.captain_b = order.second_captain_id
        draft.team_a = [order.first_captain_id]
        draft.team_b = [order.second_captain_id]
        draft.current_picker = order.first_captain_id

    @staticmethod
    def next_picker(draft: DraftState) -> PlayerId | None:
        """The captain who picks after the current one. Strictly alternates."""
        if draft.current_picker == draft.captain_a:
            return draft.captain_b
        return draft.captain_a

    @staticmethod
    def apply_pick(draft: DraftState, picked_id: PlayerId) -> str:
        """
        Add a player to the current picker's team and pass the turn.

        Callers must have validated the pick already.

        Returns:
            "a" or "b", the team the player joined
        """
        if draft.current_picker == draft.captain_a:
            draft.team_a.append(picked_id)
            team = "a"
        else:
            draft.team_b.append(picked_id)
            team = "b"
        draft.current_picker = DraftService.next_picker(draft)
        return team

    @staticmethod
    def remaining_count(draft: DraftState, roster: list[PlayerId]) -> int:
        """Queued players not yet on a team. The draft is over when this is 0."""
        return len(draft.unpicked(roster))
