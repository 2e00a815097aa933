"""
Match setup domain model: phases, sides and the captain draft.
"""

from dataclasses import dataclass, field
from enum import Enum

from domain.models.player import PlayerId


class MatchPhase(Enum):
    """Phases of the match setup flow. Exactly one is live at a time."""

    QUEUE = "queue"
    MAP_VOTE = "map_vote"
    CAPTAIN_PICK = "captain_pick"
    DRAFT = "draft"
    SIDE_PICK = "side_pick"
    READY = "ready"

    @property
    def next_phases(self) -> list["MatchPhase"]:
        """Phases reachable from this one. Every phase but QUEUE may be cancelled back to QUEUE."""
        transitions = {
            MatchPhase.QUEUE: [MatchPhase.MAP_VOTE],
            MatchPhase.MAP_VOTE: [MatchPhase.CAPTAIN_PICK, MatchPhase.QUEUE],
            MatchPhase.CAPTAIN_PICK: [MatchPhase.DRAFT, MatchPhase.QUEUE],
            MatchPhase.DRAFT: [MatchPhase.SIDE_PICK, MatchPhase.QUEUE],
            MatchPhase.SIDE_PICK: [MatchPhase.READY, MatchPhase.QUEUE],
            MatchPhase.READY: [MatchPhase.QUEUE],
        }
        return transitions[self]

    def can_transition_to(self, target: "MatchPhase") -> bool:
        return target in self.next_phases


class Side(Enum):
    """Starting side chosen by captain B."""

    DEFENSE = "defense"
    ATTACK = "attack"


class InvalidPhaseTransitionError(RuntimeError):
    """Raised when code attempts a phase change the state machine does not allow."""


@dataclass
class DraftState:
    """
    Captain draft record.

    While the phase is DRAFT the two teams are disjoint and current_picker is
    always one of the captains. Reset to empty whenever the flow returns to QUEUE.
    """

    captain_a: PlayerId | None = None
    captain_b: PlayerId | None = None
    team_a: list[PlayerId] = field(default_factory=list)
    team_b: list[PlayerId] = field(default_factory=list)
    current_picker: PlayerId | None = None
    team_b_start_side: Side | None = None

    @property
    def captains(self) -> list[PlayerId]:
        return [c for c in (self.captain_a, self.captain_b) if c is not None]

    @property
    def has_both_captains(self) -> bool:
        return self.captain_a is not None and self.captain_b is not None

    @property
    def picked_ids(self) -> set[PlayerId]:
        return set(self.team_a) | set(self.team_b)

    def is_captain(self, player_id: PlayerId) -> bool:
        return player_id in self.captains

    def is_picked(self, player_id: PlayerId) -> bool:
        return player_id in self.team_a or player_id in self.team_b

    def unpicked(self, roster: list[PlayerId]) -> list[PlayerId]:
        """Roster members not yet on either team, in roster order."""
        picked = self.picked_ids
        return [pid for pid in roster if pid not in picked]

    def reset(self) -> None:
        self.captain_a = None
        self.captain_b = None
        self.team_a = []
        self.team_b = []
        self.current_picker = None
        self.team_b_start_side = None

    def copy(self) -> "DraftState":
        """Detached copy handed to collaborators so they never hold the live record."""
        return DraftState(
            captain_a=self.captain_a,
            captain_b=self.captain_b,
            team_a=list(self.team_a),
            team_b=list(self.team_b),
            current_picker=self.current_picker,
            team_b_start_side=self.team_b_start_side,
        )
