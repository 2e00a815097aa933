"""Discord implementation of the map vote ballot.

Posts the ballot, seeds one regional indicator reaction per slot and reads
the counts back by re-fetching the message when the window closes.
"""

import logging

import discord

from domain.models.map_vote import VoteSlot, slot_for_emoji
from services.interfaces import IVoteBallot, IVoteChannel
from utils.formatting import format_ballot
from utils.message_safety import safe_send

logger = logging.getLogger("scrim_bot.utils.vote_ballot")


class DiscordVoteBallot(IVoteBallot):
    def __init__(self, message: discord.Message | None, slots: list[VoteSlot]):
        self.message = message
        self.slots = slots

    async def read_counts(self) -> dict[str, int]:
        if self.message is None:
            return {}
        try:
            message = await self.message.channel.fetch_message(self.message.id)
        except discord.HTTPException as exc:
            logger.warning(f"Could not re-fetch vote message {self.message.id}: {exc}")
            return {}

        counts: dict[str, int] = {}
        for reaction in message.reactions:
            slot = slot_for_emoji(self.slots, str(reaction.emoji))
            if slot is not None:
                counts[slot.letter] = reaction.count
        return counts


class DiscordVoteChannel(IVoteChannel):
    """Runs the ballot in the text channel where `start` was issued."""

    def __init__(self, channel: discord.abc.Messageable):
        self.channel = channel

    async def open_ballot(self, slots: list[VoteSlot]) -> DiscordVoteBallot:
        message = await safe_send(self.channel, format_ballot(slots))
        if message is None:
            return DiscordVoteBallot(None, slots)
        for slot in slots:
            try:
                await message.add_reaction(slot.emoji)
            except discord.HTTPException as exc:
                logger.warning(f"Could not add vote reaction {slot.letter}: {exc}")
        return DiscordVoteBallot(message, slots)

    async def announce(self, text: str) -> None:
        await safe_send(self.channel, text)
