"""Message delivery utilities.

Outbound messages never roll back state. A failed send is logged and the
command carries on.
"""

import logging

import discord

logger = logging.getLogger("scrim_bot.utils.message_safety")


async def safe_send(
    channel: discord.abc.Messageable | None,
    content: str,
    **kwargs,
) -> discord.Message | None:
    """
    Send a message, logging instead of raising on delivery failure.

    Returns:
        The sent message, or None if it could not be delivered
    """
    if channel is None:
        return None
    try:
        return await channel.send(content, **kwargs)
    except discord.HTTPException as exc:
        logger.warning(f"Error sending message: {exc}")
        return None


async def safe_reply(ctx, text: str, mention=None) -> discord.Message | None:
    """
    Send `text` to the invoking channel, tagged with the author (or `mention`).

    `text` is appended directly after the mention, so it normally starts with a space.
    """
    target = mention if mention is not None else ctx.author
    return await safe_send(ctx.channel, f"{target.mention}{text}")


async def safe_dm(user: discord.abc.User, content: str) -> bool:
    """Send a direct message. Returns False if the user cannot be reached."""
    try:
        channel = await user.create_dm()
        await channel.send(content)
        return True
    except discord.HTTPException as exc:
        logger.warning(f"Error sending DM to {user.id}: {exc}")
        return False


async def safe_move_member(member: discord.Member, channel: discord.abc.Snowflake) -> bool:
    """Move a member to a voice channel. Members not connected to voice are skipped."""
    try:
        await member.move_to(channel)
        return True
    except discord.HTTPException as exc:
        logger.warning(f"Cannot move user {member.id}: {exc}")
        return False


async def safe_add_role(member: discord.Member, role: discord.abc.Snowflake) -> bool:
    try:
        await member.add_roles(role)
        return True
    except discord.HTTPException as exc:
        logger.warning(
            f"Cannot add role {role.id} to user {member.id}, check bot permissions: {exc}"
        )
        return False
