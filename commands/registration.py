"""
Registration commands for the bot: .riotid, .teamname
"""

import logging

from discord.ext import commands

from utils.message_safety import safe_reply

logger = logging.getLogger("scrim_bot.commands.registration")


class RegistrationCommands(commands.Cog):
    """Commands for player profile management."""

    def __init__(self, bot: commands.Bot, player_service):
        self.bot = bot
        self.player_service = player_service

    @commands.command(name="riotid")
    async def riotid(self, ctx: commands.Context, *, riot_id: str | None = None):
        """Set your Riot id, i.e. `.riotid Martige#NA1`."""
        logger.info(f"Riotid command: User {ctx.author.id} ({ctx.author})")
        result = self.player_service.set_riot_id(ctx.author.id, riot_id.strip() if riot_id else None)
        if not result.success:
            await safe_reply(ctx, f" {result.error}")
            return
        await safe_reply(ctx, f" your riotid has been set to `{result.value}`")

    @commands.command(name="teamname")
    async def teamname(self, ctx: commands.Context, *, name: str | None = None):
        """Set the team name used when you captain."""
        result = self.player_service.set_team_name(ctx.author.id, name)
        if not result.success:
            await safe_reply(ctx, f" {result.error}")
            return
        await safe_reply(ctx, f" custom team name successfully set to `{result.value}`")


async def setup(bot: commands.Bot):
    player_service = getattr(bot, "player_service", None)
    await bot.add_cog(RegistrationCommands(bot, player_service))
