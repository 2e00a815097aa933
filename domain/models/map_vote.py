"""
Map vote domain model.

Each map in the pool gets a stable letter slot (a, b, c, ...) which the chat
layer renders as a regional indicator reaction.
"""

import string
from dataclasses import dataclass, field

VOTE_SLOT_LETTERS = string.ascii_lowercase
MAX_VOTE_SLOTS = len(VOTE_SLOT_LETTERS)

_REGIONAL_INDICATOR_A = 0x1F1E6


@dataclass(frozen=True)
class VoteSlot:
    """A single ballot option."""

    letter: str
    map_name: str

    @property
    def emoji(self) -> str:
        """Unicode regional indicator for this slot's letter."""
        return chr(_REGIONAL_INDICATOR_A + VOTE_SLOT_LETTERS.index(self.letter))

    @property
    def shortcode(self) -> str:
        return f":regional_indicator_{self.letter}:"


def build_vote_slots(map_pool: list[str]) -> list[VoteSlot]:
    """
    Assign letter slots to a map pool in order.

    Raises:
        ValueError: If the pool is empty or larger than the number of letters
    """
    if not map_pool:
        raise ValueError("Cannot build a ballot from an empty map pool.")
    if len(map_pool) > MAX_VOTE_SLOTS:
        raise ValueError(f"Map pool has {len(map_pool)} maps, max is {MAX_VOTE_SLOTS}.")
    return [VoteSlot(letter=VOTE_SLOT_LETTERS[i], map_name=name) for i, name in enumerate(map_pool)]


def slot_for_emoji(slots: list[VoteSlot], emoji: str) -> VoteSlot | None:
    for slot in slots:
        if slot.emoji == emoji:
            return slot
    return None


@dataclass
class MapVoteTally:
    """Reaction counts per slot letter, read once when the window closes."""

    slots: list[VoteSlot]
    counts: dict[str, int] = field(default_factory=dict)

    def count_for(self, slot: VoteSlot) -> int:
        return self.counts.get(slot.letter, 0)

    @property
    def max_count(self) -> int:
        return max(self.count_for(slot) for slot in self.slots)

    @property
    def leaders(self) -> list[VoteSlot]:
        """All slots sharing the highest count, in ballot order."""
        top = self.max_count
        return [slot for slot in self.slots if self.count_for(slot) == top]


@dataclass(frozen=True)
class MapVoteResult:
    """Outcome of a resolved vote."""

    map_name: str
    tied: bool
    candidates: tuple[str, ...]
    counts: dict[str, int] = field(default_factory=dict)
