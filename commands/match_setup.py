"""
Match setup commands: .start, .captain, .pick, .defense, .attack, .cancel
"""

import logging

import discord
from discord.ext import commands

from config import POST_SETUP_MSG, TEAM_A_CHANNEL_ID, TEAM_B_CHANNEL_ID
from domain.models.draft import DraftState, Side
from services.permissions import has_admin_permission
from utils.formatting import (
    display_name,
    format_final_teams,
    format_roster_mentions,
    format_standings,
    format_vote_result,
    mention,
)
from utils.message_safety import safe_move_member, safe_reply, safe_send
from utils.vote_ballot import DiscordVoteChannel

logger = logging.getLogger("scrim_bot.commands.match_setup")


class MatchSetupCommands(commands.Cog):
    """Commands driving a scrim from `.start` to the final teams."""

    def __init__(
        self,
        bot: commands.Bot,
        map_vote_service,
        match_setup_service,
        player_service,
    ):
        self.bot = bot
        self.map_vote_service = map_vote_service
        self.match_setup_service = match_setup_service
        self.player_service = player_service

    def _team_names(self, guild, draft: DraftState) -> tuple[str, str]:
        def name_for(captain_id, fallback: str) -> str:
            default = display_name(guild, captain_id) if captain_id is not None else fallback
            return self.player_service.get_team_name(captain_id, default)

        return name_for(draft.captain_a, "A"), name_for(draft.captain_b, "B")

    async def _send_standings(self, ctx: commands.Context, draft: DraftState, remaining: list[int]):
        team_a_name, team_b_name = self._team_names(ctx.guild, draft)
        await safe_send(
            ctx.channel,
            format_standings(
                draft,
                remaining,
                team_a_name,
                team_b_name,
                lambda pid: display_name(ctx.guild, pid),
            ),
        )

    async def _prompt_side_pick(self, ctx: commands.Context, draft: DraftState):
        await safe_send(
            ctx.channel,
            f"{mention(draft.captain_b)} type `.defense` or `.attack` to pick a starting side.",
        )

    @commands.command(name="start")
    async def start(self, ctx: commands.Context):
        """Start the match setup with a map vote."""
        result = await self.map_vote_service.begin_vote(
            ctx.author.id, has_admin_permission(ctx.author)
        )
        if not result.success:
            await safe_reply(ctx, f" {result.error}")
            return

        session = result.value
        if not session.queue_full:
            await safe_reply(ctx, " the queue is not full yet")
        await safe_send(
            ctx.channel, format_roster_mentions(session.roster) + "**Scrim setup is starting...**"
        )

        outcome = await self.map_vote_service.run_vote(session, DiscordVoteChannel(ctx.channel))
        await safe_send(ctx.channel, format_vote_result(outcome.result))
        if not outcome.advanced:
            return
        await safe_send(
            ctx.channel,
            "Starting captain pick phase. Two users type `.captain` to start picking teams.",
        )

    @commands.command(name="captain")
    async def captain(self, ctx: commands.Context):
        """Add yourself as a captain."""
        result = await self.match_setup_service.assign_captain(ctx.author.id)
        if not result.success:
            await safe_reply(ctx, f" {result.error}")
            return

        assignment = result.value
        await safe_reply(ctx, " is now a captain.")
        if not assignment.draft_started:
            return

        draft = assignment.draft
        if assignment.order.swapped:
            await safe_send(ctx.channel, "Heads! Captain order was swapped by coinflip.")
        else:
            await safe_send(ctx.channel, "Tails! Captain order stays as signed up.")
        await safe_send(
            ctx.channel,
            "Captain pick has concluded. Starting draft phase. "
            f"{mention(draft.current_picker)} gets first `.pick @<user>`",
        )
        await self._send_standings(ctx, draft, assignment.remaining)
        if assignment.side_pick_ready:
            await self._prompt_side_pick(ctx, draft)

    @commands.command(name="pick")
    async def pick(self, ctx: commands.Context, *, args: str | None = None):
        """Pick a mentioned player for your team."""
        if not ctx.message.mentions:
            await safe_reply(ctx, " please mention the player to pick, i.e. `.pick @user`")
            return

        result = await self.match_setup_service.pick(ctx.author.id, ctx.message.mentions[0].id)
        if not result.success:
            await safe_reply(ctx, f" {result.error}")
            return

        outcome = result.value
        await self._send_standings(ctx, outcome.draft, outcome.remaining)
        if outcome.draft_complete:
            await self._prompt_side_pick(ctx, outcome.draft)
        else:
            await safe_send(ctx.channel, f"{mention(outcome.draft.current_picker)} it is your pick.")

    @commands.command(name="defense")
    async def defense(self, ctx: commands.Context):
        """Captain B starts on defense."""
        await self._finish_setup(ctx, Side.DEFENSE)

    @commands.command(name="attack")
    async def attack(self, ctx: commands.Context):
        """Captain B starts on attack."""
        await self._finish_setup(ctx, Side.ATTACK)

    async def _finish_setup(self, ctx: commands.Context, side: Side):
        result = await self.match_setup_service.select_side(ctx.author.id, side)
        if not result.success:
            await safe_reply(ctx, f" {result.error}")
            return

        draft = result.value.draft
        team_a_name, team_b_name = self._team_names(ctx.guild, draft)
        await safe_send(ctx.channel, "Setup is completed.")
        await safe_send(
            ctx.channel,
            format_final_teams(
                draft,
                team_a_name,
                team_b_name,
                lambda pid: display_name(ctx.guild, pid),
                self.player_service.get_riot_id,
            ),
        )
        await self._move_teams(ctx.guild, draft)
        if POST_SETUP_MSG:
            await safe_send(ctx.channel, POST_SETUP_MSG)

    async def _move_teams(self, guild: discord.Guild | None, draft: DraftState):
        """Move each team into its voice channel. Failures are logged and skipped."""
        if guild is None:
            return
        for channel_id, team in ((TEAM_A_CHANNEL_ID, draft.team_a), (TEAM_B_CHANNEL_ID, draft.team_b)):
            if channel_id is None:
                continue
            channel = guild.get_channel(channel_id)
            if channel is None:
                logger.warning(f"Team voice channel {channel_id} not found")
                continue
            for player_id in team:
                member = guild.get_member(player_id)
                if member is not None:
                    await safe_move_member(member, channel)

    @commands.command(name="cancel")
    async def cancel(self, ctx: commands.Context):
        """Cancel the setup and keep the queue (Admin only)."""
        if not has_admin_permission(ctx.author):
            await safe_reply(ctx, " this command is for admins only.")
            return

        result = await self.match_setup_service.cancel()
        if not result.success:
            await safe_reply(ctx, f" {result.error}")
            return
        logger.info(f"Admin {ctx.author.id} cancelled the match setup")
        await safe_send(ctx.channel, "`.start` process cancelled.")


async def setup(bot: commands.Bot):
    map_vote_service = getattr(bot, "map_vote_service", None)
    match_setup_service = getattr(bot, "match_setup_service", None)
    player_service = getattr(bot, "player_service", None)
    await bot.add_cog(
        MatchSetupCommands(bot, map_vote_service, match_setup_service, player_service)
    )
