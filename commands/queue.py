"""
Queue commands: .join, .leave, .list, .kick, .clear, .recoverqueue
"""

import logging
import re

from discord.ext import commands

from config import ASSIGN_ROLE_ID
from services.permissions import has_admin_permission
from utils.formatting import display_name, format_queue_list
from utils.message_safety import safe_add_role, safe_reply, safe_send

logger = logging.getLogger("scrim_bot.commands.queue")

NOTE_PATTERN = re.compile(r"[\"”“](.*?)[\"”“]")


def parse_note(text: str | None) -> str | None:
    """Pull the first quoted string out of `.join` arguments."""
    if not text:
        return None
    match = NOTE_PATTERN.search(text)
    return match.group(1) if match else None


class QueueCommands(commands.Cog):
    """Commands for joining and managing the scrim queue."""

    def __init__(self, bot: commands.Bot, queue_service):
        self.bot = bot
        self.queue_service = queue_service

    @commands.command(name="join")
    async def join(self, ctx: commands.Context, *, args: str | None = None):
        """Join the queue, optionally with a quoted note."""
        result = await self.queue_service.join(ctx.author.id, parse_note(args))
        if not result.success:
            await safe_reply(ctx, f" {result.error}")
            return

        await safe_reply(
            ctx, f" has been added to the queue. Queue size: {result.value}/{self.queue_service.capacity}"
        )
        if ASSIGN_ROLE_ID is not None and ctx.guild is not None:
            role = ctx.guild.get_role(ASSIGN_ROLE_ID)
            if role is not None and role not in getattr(ctx.author, "roles", []):
                await safe_add_role(ctx.author, role)

    @commands.command(name="leave")
    async def leave(self, ctx: commands.Context):
        """Leave the queue."""
        result = await self.queue_service.leave(ctx.author.id)
        if not result.success:
            await safe_reply(ctx, f" {result.error}")
            return
        await safe_reply(
            ctx, f" has left the queue. Queue size: {result.value}/{self.queue_service.capacity}"
        )

    @commands.command(name="list")
    async def list_queue(self, ctx: commands.Context):
        """Show the queue and each player's note."""
        entries = self.queue_service.list_entries()
        await safe_send(
            ctx.channel,
            format_queue_list(
                entries,
                self.queue_service.capacity,
                lambda pid: display_name(ctx.guild, pid),
            ),
        )

    @commands.command(name="kick")
    async def kick(self, ctx: commands.Context, *, args: str | None = None):
        """Remove the first mentioned user from the queue (Admin only)."""
        if not has_admin_permission(ctx.author):
            await safe_reply(ctx, " this command is for admins only.")
            return
        if not ctx.message.mentions:
            await safe_reply(ctx, " please mention the user to kick, i.e. `.kick @user`")
            return

        target = ctx.message.mentions[0]
        result = await self.queue_service.kick(target.id)
        if not result.success:
            await safe_reply(ctx, f" {result.error}", mention=target)
            return

        logger.info(f"Admin {ctx.author.id} kicked {target.id} from the queue")
        await safe_reply(
            ctx,
            f" has been kicked. Queue size: {result.value}/{self.queue_service.capacity}",
            mention=target,
        )

    @commands.command(name="clear")
    async def clear(self, ctx: commands.Context):
        """Empty the queue (Admin only)."""
        if not has_admin_permission(ctx.author):
            await safe_reply(ctx, " this command is for admins only.")
            return
        await self.queue_service.clear()
        logger.info(f"Admin {ctx.author.id} cleared the queue")
        await safe_reply(ctx, " cleared queue")

    @commands.command(name="recoverqueue")
    async def recoverqueue(self, ctx: commands.Context, *, args: str | None = None):
        """Rebuild the queue from mentioned users after a restart (Admin only)."""
        if not has_admin_permission(ctx.author):
            await safe_reply(ctx, " this command is for admins only.")
            return
        if not ctx.message.mentions:
            await safe_reply(ctx, " please mention the users to restore, i.e. `.recoverqueue @a @b`")
            return

        result = await self.queue_service.recover([user.id for user in ctx.message.mentions])
        logger.info(f"Admin {ctx.author.id} recovered the queue with {len(result.value)} players")
        await safe_send(
            ctx.channel,
            "Queue recovered.\n"
            + format_queue_list(
                self.queue_service.list_entries(),
                self.queue_service.capacity,
                lambda pid: display_name(ctx.guild, pid),
            ),
        )


async def setup(bot: commands.Bot):
    queue_service = getattr(bot, "queue_service", None)
    await bot.add_cog(QueueCommands(bot, queue_service))
