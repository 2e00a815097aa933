"""
Centralized configuration for the scrim setup bot.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_int_optional(env_var: str) -> int | None:
    raw = os.getenv(env_var)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _parse_int_list(env_var: str, default: list[int]) -> list[int]:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return [int(x.strip()) for x in raw.split(",") if x.strip()]
    except ValueError:
        return default


def _parse_hour(env_var: str) -> int | None:
    hour = _parse_int_optional(env_var)
    if hour is None or not 0 <= hour <= 23:
        return None
    return hour


DISCORD_BOT_TOKEN = os.getenv("DISCORD_BOT_TOKEN")
COMMAND_PREFIX = os.getenv("COMMAND_PREFIX", ".")

# Members holding this role (or listed in ADMIN_USER_IDS) may run admin commands.
# When neither is configured every member is treated as an admin.
ADMIN_ROLE_ID = _parse_int_optional("ADMIN_ROLE_ID")
ADMIN_USER_IDS: list[int] = _parse_int_list("ADMIN_USER_IDS", [])

# Voice channels teams are moved into once setup completes
TEAM_A_CHANNEL_ID = _parse_int_optional("TEAM_A_CHANNEL_ID")
TEAM_B_CHANNEL_ID = _parse_int_optional("TEAM_B_CHANNEL_ID")

# Role granted to players the first time they join the queue
ASSIGN_ROLE_ID = _parse_int_optional("ASSIGN_ROLE_ID")

# Local hour of day (0-23) at which the queue is emptied
AUTOCLEAR_HOUR = _parse_hour("AUTOCLEAR_HOUR")

# Broadcast once teams have been moved
POST_SETUP_MSG = os.getenv("POST_SETUP_MSG") or None

# Collaborator-owned JSON files
RIOT_IDS_PATH = os.getenv("RIOT_IDS_PATH", "riot_ids.json")
TEAM_NAMES_PATH = os.getenv("TEAM_NAMES_PATH", "teamnames.json")
MAPS_PATH = os.getenv("MAPS_PATH", "maps.json")

QUEUE_CAPACITY = 10
QUEUE_NOTE_MAX_LENGTH = 50
TEAM_NAME_MAX_LENGTH = 25
MAP_POOL_MAX_SIZE = 26

MAP_VOTE_SECONDS = _parse_int("MAP_VOTE_SECONDS", 50)
MAP_VOTE_WARNING_SECONDS = _parse_int("MAP_VOTE_WARNING_SECONDS", 10)
