"""Tests for formatting utilities."""

from types import SimpleNamespace

from domain.models.draft import DraftState, Side
from domain.models.map_vote import MapVoteResult, build_vote_slots
from domain.models.player import QueueEntry
from utils.formatting import (
    display_name,
    format_ballot,
    format_final_teams,
    format_map_pool,
    format_queue_list,
    format_standings,
    format_vote_result,
)


def name_of(pid):
    return f"user{pid}"


def test_queue_list_includes_notes():
    text = format_queue_list(
        [QueueEntry(1), QueueEntry(2, note="available at 9pm")], 10, name_of
    )

    assert text.splitlines() == [
        "Current queue size: 2/10",
        "- @user1",
        "- @user2: `available at 9pm`",
    ]


def test_ballot_lists_slots_in_order():
    text = format_ballot(build_vote_slots(["Ascent", "Bind"]))

    assert ":regional_indicator_a: `Ascent`" in text
    assert ":regional_indicator_b: `Bind`" in text
    assert text.index("Ascent") < text.index("Bind")


def test_vote_result_messages():
    clear = MapVoteResult(map_name="Bind", tied=False, candidates=("Bind",), counts={})
    tied = MapVoteResult(map_name="Haven", tied=True, candidates=("Bind", "Haven"), counts={})

    assert format_vote_result(clear) == "Map vote has concluded. `Bind` will be played"
    assert format_vote_result(tied) == "Maps were tied, `Haven` was selected at random"


def test_standings_show_both_teams_and_remaining():
    draft = DraftState(captain_a=1, captain_b=2, team_a=[1, 3], team_b=[2])

    text = format_standings(draft, [4, 5], "Owls", "Hawks", name_of)

    assert "**Team Owls:**\n- @user1\n- @user3\n" in text
    assert "**Team Hawks:**\n- @user2\n" in text
    assert text.endswith("- @user4\n- @user5\n")


def test_final_teams_include_riot_ids_and_side():
    draft = DraftState(
        captain_a=1, captain_b=2, team_a=[1], team_b=[2], team_b_start_side=Side.DEFENSE
    )
    riot_ids = {1: "One#NA1"}

    text = format_final_teams(draft, "Owls", "Hawks", name_of, riot_ids.get)

    assert "- @user1: `One#NA1`" in text
    assert "- @user2: `no riot id`" in text
    assert "(starts on defense)" in text


def test_map_pool():
    assert format_map_pool(["Ascent"]) == "Current map pool:\n- `Ascent`\n"


def test_display_name_falls_back_to_id():
    member = SimpleNamespace(display_name="Martige")
    guild = SimpleNamespace(get_member=lambda pid: member if pid == 1 else None)

    assert display_name(guild, 1) == "Martige"
    assert display_name(guild, 2) == "2"
    assert display_name(None, 3) == "3"
