"""
Player profile service: Riot ids and captain team names.
"""

import logging
import re

from repositories.interfaces import IRiotIdRepository, ITeamNameRepository
from services import error_codes
from services.result import Result

logger = logging.getLogger("scrim_bot.services.player_service")

RIOT_ID_PATTERN = re.compile(r"\w+#\w+")


class PlayerService:
    """Reads and updates the per-player mappings owned by the repositories."""

    def __init__(
        self,
        riot_id_repo: IRiotIdRepository,
        team_name_repo: ITeamNameRepository,
        team_name_max_length: int = 25,
    ):
        self.riot_id_repo = riot_id_repo
        self.team_name_repo = team_name_repo
        self.team_name_max_length = team_name_max_length

    def get_riot_id(self, player_id: int) -> str | None:
        return self.riot_id_repo.get(player_id)

    def has_riot_id(self, player_id: int) -> bool:
        return self.riot_id_repo.get(player_id) is not None

    def set_riot_id(self, player_id: int, riot_id: str | None) -> Result[str]:
        """
        Register a player's Riot id.

        Args:
            player_id: Discord user id
            riot_id: Raw argument, e.g. "Martige#NA1"

        Returns:
            Result with the stored id

        Raises:
            PersistenceError: If riot_ids.json cannot be written
        """
        if not riot_id:
            return Result.fail(
                "please check the command formatting. There must be a space in between "
                "`.riotid` and your Riot id. Example: `.riotid Martige#NA1`",
                code=error_codes.VALIDATION_ERROR,
            )
        if not RIOT_ID_PATTERN.search(riot_id):
            return Result.fail(
                "invalid Riot id formatting. Please follow this example: `.riotid Martige#NA1`",
                code=error_codes.INVALID_RIOT_ID,
            )

        self.riot_id_repo.set(player_id, riot_id)
        logger.info(f"Riot id updated for {player_id}")
        return Result.ok(riot_id)

    def get_team_name(self, captain_id: int | None, default: str) -> str:
        """Custom team name for a captain, or `default` when none is set."""
        if captain_id is None:
            return default
        return self.team_name_repo.get(captain_id) or default

    def set_team_name(self, player_id: int, team_name: str | None) -> Result[str]:
        """
        Set the team name shown when this player captains.

        Raises:
            PersistenceError: If teamnames.json cannot be written
        """
        name = (team_name or "").strip()
        if not name:
            return Result.fail(
                "invalid message formatting. Example: `.teamname TeamName`",
                code=error_codes.VALIDATION_ERROR,
            )
        if len(name) > self.team_name_max_length:
            over = len(name) - self.team_name_max_length
            return Result.fail(
                f"team name is over the character limit by {over}.",
                code=error_codes.INVALID_TEAM_NAME,
            )

        self.team_name_repo.set(player_id, name)
        logger.info(f"Team name updated for {player_id}")
        return Result.ok(name)
