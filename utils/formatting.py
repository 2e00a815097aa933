"""
Shared formatting helpers for match setup messages.
"""

from collections.abc import Callable, Iterable

from domain.models.draft import DraftState
from domain.models.map_vote import MapVoteResult, VoteSlot
from domain.models.player import QueueEntry

NameLookup = Callable[[int], str]


def mention(player_id: int) -> str:
    return f"<@{player_id}>"


def display_name(guild, player_id: int) -> str:
    """Guild display name, or the raw id when the member is not cached."""
    member = guild.get_member(player_id) if guild else None
    return member.display_name if member else str(player_id)


def format_player_lines(player_ids: Iterable[int], name_of: NameLookup) -> str:
    return "".join(f"- @{name_of(pid)}\n" for pid in player_ids)


def format_queue_list(entries: list[QueueEntry], capacity: int, name_of: NameLookup) -> str:
    """`list` output: size header, then one line per player with their note."""
    lines = [f"Current queue size: {len(entries)}/{capacity}"]
    for entry in entries:
        line = f"- @{name_of(entry.player_id)}"
        if entry.note:
            line += f": `{entry.note}`"
        lines.append(line)
    return "\n".join(lines)


def format_roster_mentions(player_ids: Iterable[int]) -> str:
    return "".join(f"- {mention(pid)}\n" for pid in player_ids)


def format_map_pool(maps: list[str]) -> str:
    return "Current map pool:\n" + "".join(f"- `{name}`\n" for name in maps)


def format_ballot(slots: list[VoteSlot]) -> str:
    return "**Map Vote:**\n" + "".join(f"{slot.shortcode} `{slot.map_name}`\n" for slot in slots)


def format_vote_result(result: MapVoteResult) -> str:
    if result.tied:
        return f"Maps were tied, `{result.map_name}` was selected at random"
    return f"Map vote has concluded. `{result.map_name}` will be played"


def format_standings(
    draft: DraftState,
    remaining: list[int],
    team_a_name: str,
    team_b_name: str,
    name_of: NameLookup,
) -> str:
    """Both teams so far plus the players still waiting to be picked."""
    return (
        f"**Team {team_a_name}:**\n"
        f"{format_player_lines(draft.team_a, name_of)}\n"
        f"**Team {team_b_name}:**\n"
        f"{format_player_lines(draft.team_b, name_of)}\n"
        f"**Remaining players: **\n"
        f"{format_player_lines(remaining, name_of)}"
    )


def format_final_teams(
    draft: DraftState,
    team_a_name: str,
    team_b_name: str,
    name_of: NameLookup,
    riot_id_of: Callable[[int], str | None],
) -> str:
    """Final line-up with each player's Riot id and team B's starting side."""

    def team_lines(player_ids: list[int]) -> str:
        return "".join(
            f"- @{name_of(pid)}: `{riot_id_of(pid) or 'no riot id'}`\n" for pid in player_ids
        )

    side = draft.team_b_start_side.value if draft.team_b_start_side else "unknown"
    return (
        f"**Team {team_a_name}:**\n"
        f"{team_lines(draft.team_a)}\n"
        f"**Team {team_b_name}:** (starts on {side})\n"
        f"{team_lines(draft.team_b)}"
    )
