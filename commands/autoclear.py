"""
Daily queue autoclear background task.
"""

import logging

from discord.ext import commands, tasks

logger = logging.getLogger("scrim_bot.commands.autoclear")


class AutoclearCog(commands.Cog):
    """Runs the autoclear service for as long as the bot is up."""

    def __init__(self, bot: commands.Bot, autoclear_service):
        self.bot = bot
        self.autoclear_service = autoclear_service
        if autoclear_service is not None:
            self.autoclear_loop.start()

    def cog_unload(self):
        """Clean up when cog is unloaded."""
        self.autoclear_loop.cancel()

    @tasks.loop()
    async def autoclear_loop(self):
        """Each iteration sleeps until the next autoclear hour, then clears."""
        await self.autoclear_service.run_once()

    @autoclear_loop.before_loop
    async def before_autoclear(self):
        """Wait until bot is ready before starting task."""
        await self.bot.wait_until_ready()
        logger.info(f"Autoclear enabled at {self.autoclear_service.hour:02d}:00 local time")


async def setup(bot: commands.Bot):
    autoclear_service = getattr(bot, "autoclear_service", None)
    if autoclear_service is None:
        logger.info("AUTOCLEAR_HOUR not set, autoclear disabled")
    await bot.add_cog(AutoclearCog(bot, autoclear_service))
