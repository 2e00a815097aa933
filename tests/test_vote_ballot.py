"""
Tests for the Discord-backed ballot, using fake message objects.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import discord
import pytest

from domain.models.map_vote import build_vote_slots
from utils.vote_ballot import DiscordVoteBallot, DiscordVoteChannel


def make_message(reactions=None):
    message = SimpleNamespace(id=42, add_reaction=AsyncMock(), reactions=reactions or [])
    message.channel = SimpleNamespace(fetch_message=AsyncMock(return_value=message))
    return message


@pytest.mark.asyncio
async def test_open_ballot_posts_and_seeds_reactions():
    slots = build_vote_slots(["Ascent", "Bind"])
    message = make_message()
    channel = SimpleNamespace(send=AsyncMock(return_value=message))

    ballot = await DiscordVoteChannel(channel).open_ballot(slots)

    assert "`Ascent`" in channel.send.await_args.args[0]
    assert [c.args[0] for c in message.add_reaction.await_args_list] == [s.emoji for s in slots]
    assert ballot.message is message


@pytest.mark.asyncio
async def test_read_counts_ignores_unknown_reactions():
    slots = build_vote_slots(["Ascent", "Bind"])
    message = make_message(
        [
            SimpleNamespace(emoji=slots[1].emoji, count=4),
            SimpleNamespace(emoji="\U0001F44D", count=9),
        ]
    )

    counts = await DiscordVoteBallot(message, slots).read_counts()

    assert counts == {"b": 4}
    message.channel.fetch_message.assert_awaited_once_with(42)


@pytest.mark.asyncio
async def test_unsent_ballot_reads_no_counts():
    slots = build_vote_slots(["Ascent"])
    channel = SimpleNamespace(
        send=AsyncMock(side_effect=discord.HTTPException(SimpleNamespace(status=500, reason="x"), "x"))
    )

    ballot = await DiscordVoteChannel(channel).open_ballot(slots)

    assert await ballot.read_counts() == {}
