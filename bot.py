"""
Main Discord bot entry for the scrim setup bot.
"""

import logging

# Configure logging BEFORE importing discord to prevent duplicate handlers
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    force=True,  # Override any existing handlers (e.g., from discord.py)
)
logger = logging.getLogger("scrim_bot")


# Suppress PyNaCl warning, the bot moves members but never joins voice itself
class _PyNaClFilter(logging.Filter):
    """Filter out the PyNaCl warning from discord.py."""

    def filter(self, record):
        return "PyNaCl is not installed" not in record.getMessage()


logging.getLogger("discord.client").addFilter(_PyNaClFilter())

# Now import discord after logging is configured
import discord
from discord.ext import commands

# Remove the handler discord.py adds to the 'discord' logger on import
_discord_logger = logging.getLogger("discord")
_discord_logger.handlers.clear()
_discord_logger.setLevel(logging.INFO)

from config import (
    AUTOCLEAR_HOUR,
    COMMAND_PREFIX,
    DISCORD_BOT_TOKEN,
    MAP_POOL_MAX_SIZE,
    MAP_VOTE_SECONDS,
    MAP_VOTE_WARNING_SECONDS,
    MAPS_PATH,
    QUEUE_CAPACITY,
    QUEUE_NOTE_MAX_LENGTH,
    RIOT_IDS_PATH,
    TEAM_NAME_MAX_LENGTH,
    TEAM_NAMES_PATH,
)
from infrastructure.service_container import ServiceConfig, ServiceContainer
from repositories.base_repository import PersistenceError
from utils.message_safety import safe_reply

# Bot setup

intents = discord.Intents.default()
intents.message_content = True
intents.members = True

bot = commands.Bot(
    command_prefix=COMMAND_PREFIX,
    case_insensitive=True,
    help_command=None,
    intents=intents,
)

# Lazy-initialized service container
_container: ServiceContainer | None = None


def _build_config() -> ServiceConfig:
    return ServiceConfig(
        riot_ids_path=RIOT_IDS_PATH,
        team_names_path=TEAM_NAMES_PATH,
        maps_path=MAPS_PATH,
        queue_capacity=QUEUE_CAPACITY,
        queue_note_max_length=QUEUE_NOTE_MAX_LENGTH,
        team_name_max_length=TEAM_NAME_MAX_LENGTH,
        map_pool_max_size=MAP_POOL_MAX_SIZE,
        map_vote_seconds=MAP_VOTE_SECONDS,
        map_vote_warning_seconds=MAP_VOTE_WARNING_SECONDS,
        autoclear_hour=AUTOCLEAR_HOUR,
    )


async def _init_services():
    """Initialize all services via ServiceContainer (lazy, idempotent)."""
    global _container
    if _container is not None:
        return

    _container = ServiceContainer(_build_config())
    await _container.initialize()
    _container.expose_to_bot(bot)


EXTENSIONS = [
    "commands.queue",
    "commands.match_setup",
    "commands.maps",
    "commands.registration",
    "commands.info",
    "commands.autoclear",
]


async def _load_extensions():
    """Load command extensions if not already loaded."""
    await _init_services()

    loaded_extensions = []
    failed_extensions = []

    for ext in EXTENSIONS:
        if ext in bot.extensions:
            logger.debug(f"Extension {ext} already loaded, skipping")
            continue
        try:
            await bot.load_extension(ext)
            loaded_extensions.append(ext)
            logger.info(f"Loaded extension: {ext}")
        except Exception as exc:
            failed_extensions.append(ext)
            logger.error(f"Failed to load extension {ext}: {exc}", exc_info=True)

    logger.info(
        f"Extension loading complete: {len(loaded_extensions)} loaded, "
        f"{len(failed_extensions)} failed. Commands: {sorted(c.name for c in bot.commands)}"
    )


@bot.event
async def setup_hook():
    """Load command cogs."""
    await _load_extensions()


@bot.event
async def on_ready():
    """Called when bot is ready."""
    logger.info(f"{bot.user} connected. Guilds: {len(bot.guilds)}")


@bot.event
async def on_command_error(ctx: commands.Context, error: commands.CommandError):
    """Global error handler for prefix commands."""
    if isinstance(error, commands.CommandNotFound):
        await safe_reply(ctx, " Unknown command, type `.help` for list of commands.")
        return

    original = getattr(error, "original", error)
    if isinstance(original, PersistenceError):
        logger.error(
            f"Persistence failure in '{ctx.command.name if ctx.command else 'unknown'}': {original}",
            exc_info=original,
        )
        await safe_reply(
            ctx, f" **ERROR** could not save your change, the data file is not writable: {original}"
        )
        return

    logger.error(
        f"Command error in '{ctx.command.name if ctx.command else 'unknown'}': {error}",
        exc_info=error,
    )
    await safe_reply(ctx, " An error occurred while processing your command. Please try again.")


def main():
    """Run the bot."""
    if not DISCORD_BOT_TOKEN:
        print("ERROR: DISCORD_BOT_TOKEN not found!")
        return

    try:
        # Pass log_handler=None to prevent discord.py from adding its own handler
        bot.run(DISCORD_BOT_TOKEN, log_handler=None)
    except KeyboardInterrupt:
        logger.info("Bot stopped by user (Ctrl+C)")
    except Exception as exc:
        logger.error(f"Bot crashed: {exc}", exc_info=True)


if __name__ == "__main__":
    main()
