"""
Information commands for the bot: .help
"""

import logging

from discord.ext import commands

from services.permissions import has_admin_permission
from utils.message_safety import safe_dm, safe_reply

logger = logging.getLogger("scrim_bot.commands.info")

PLAYER_HELP = """
`.join` - Join the queue, add a message in quotes (max 50 char) i.e. `.join "available at 9pm"`
`.leave` - Leave the queue
`.list` - List all users in the queue
`.riotid` - Set your riotid i.e. `.riotid Martige#NA1`
`.maps` - Lists all maps available for map vote
`.teamname` - Sets a custom team name when you are a captain i.e. `.teamname Your Team Name`
`.start` - Start the match setup process (players in the queue)
_These are commands used during the `.start` process:_
`.captain` - Add yourself as a captain.
`.pick` - If you are a captain, this is used to pick a player by tagging them i.e. `.pick @Martige`
`.defense` / `.attack` - Captain B picks the starting side
"""

ADMIN_HELP = """
_These are privileged admin commands:_
`.start` - Start the match setup process
`.kick` - Kick a player by mentioning them i.e. `.kick @user`
`.addmap` - Add a map to the map vote i.e. `.addmap mapname`
`.removemap` - Remove a map from the map vote i.e. `.removemap mapname`
`.recoverqueue` - Manually set a queue, tag all users to add after the command
`.clear` - Clear the queue
`.cancel` - Cancels `.start` process & retains current queue
"""


def build_help_text(is_admin: bool) -> str:
    return PLAYER_HELP + ADMIN_HELP if is_admin else PLAYER_HELP


class InfoCommands(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @commands.command(name="help")
    async def help(self, ctx: commands.Context):
        """DM the command list. Admins also get the admin section."""
        delivered = await safe_dm(ctx.author, build_help_text(has_admin_permission(ctx.author)))
        if not delivered:
            await safe_reply(ctx, " I could not DM you the command list, check your privacy settings.")


async def setup(bot: commands.Bot):
    """Setup function called when loading the cog."""
    await bot.add_cog(InfoCommands(bot))
