"""
Map pool commands: .maps, .addmap, .removemap
"""

import logging

from discord.ext import commands

from services.permissions import has_admin_permission
from utils.formatting import format_map_pool
from utils.message_safety import safe_reply, safe_send

logger = logging.getLogger("scrim_bot.commands.maps")


class MapCommands(commands.Cog):
    def __init__(self, bot: commands.Bot, map_pool_service):
        self.bot = bot
        self.map_pool_service = map_pool_service

    @commands.command(name="maps")
    async def maps(self, ctx: commands.Context):
        """List the maps in the vote pool."""
        await safe_send(ctx.channel, format_map_pool(self.map_pool_service.list_maps()))

    @commands.command(name="addmap")
    async def addmap(self, ctx: commands.Context, *, map_name: str | None = None):
        """Add a map to the vote pool (Admin only)."""
        if not has_admin_permission(ctx.author):
            await safe_reply(ctx, " this command is for admins only.")
            return
        result = self.map_pool_service.add_map(map_name.strip() if map_name else None)
        if not result.success:
            await safe_reply(ctx, f" {result.error}")
            return
        await safe_reply(ctx, f" added map: `{result.value}`")

    @commands.command(name="removemap")
    async def removemap(self, ctx: commands.Context, *, map_name: str | None = None):
        """Remove a map from the vote pool (Admin only)."""
        if not has_admin_permission(ctx.author):
            await safe_reply(ctx, " this command is for admins only.")
            return
        result = self.map_pool_service.remove_map(map_name.strip() if map_name else None)
        if not result.success:
            await safe_reply(ctx, f" {result.error}")
            return
        await safe_reply(ctx, f" removed map: `{result.value}`")


async def setup(bot: commands.Bot):
    map_pool_service = getattr(bot, "map_pool_service", None)
    await bot.add_cog(MapCommands(bot, map_pool_service))
