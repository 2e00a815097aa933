"""
Permission checking utilities for the bot.
"""

import discord

from config import ADMIN_ROLE_ID, ADMIN_USER_IDS


def has_allowlisted_admin(user: discord.abc.User) -> bool:
    """
    Check if the user is explicitly allowlisted via ADMIN_USER_IDS.
    If ADMIN_USER_IDS is empty/unset, nobody is considered admin by this check.
    """
    return user.id in ADMIN_USER_IDS


def has_admin_permission(user: discord.abc.User) -> bool:
    """
    Check if a message author may run admin commands.

    Allowlisted ids always pass. Otherwise the author needs ADMIN_ROLE_ID.
    With no admin role configured every member passes.

    Args:
        user: Message author (a Member inside guilds)

    Returns:
        True if user has admin permissions, False otherwise
    """
    if ADMIN_USER_IDS and user.id in ADMIN_USER_IDS:
        return True

    if ADMIN_ROLE_ID is None:
        return True

    # Plain Users (DMs, partial objects) carry no roles
    roles = getattr(user, "roles", None) or []
    return any(getattr(role, "id", None) == ADMIN_ROLE_ID for role in roles)
