"""
Service container for dependency injection and initialization.

This module centralizes service creation and wiring so that bot.py and the
tests build the match setup stack the same way.

Usage:
    container = ServiceContainer(ServiceConfig(riot_ids_path="riot_ids.json"))
    await container.initialize()

    queue_service = container.queue_service
"""

import logging
import random
from dataclasses import dataclass
from typing import Any

from domain.services.draft_service import DraftService
from domain.services.map_vote_service import MapVoteResolver
from repositories.map_pool_repository import MapPoolRepository
from repositories.riot_id_repository import RiotIdRepository
from repositories.team_name_repository import TeamNameRepository
from services.autoclear_service import AutoclearService
from services.map_pool_service import MapPoolService
from services.map_vote_service import MapVoteService
from services.match_setup_service import MatchSetupService
from services.match_state_manager import MatchStateManager
from services.player_service import PlayerService
from services.queue_service import QueueService

logger = logging.getLogger("scrim_bot.infrastructure.container")


@dataclass
class RepositoryContainer:
    """Container for all repositories."""

    riot_id: RiotIdRepository | None = None
    team_name: TeamNameRepository | None = None
    map_pool: MapPoolRepository | None = None


@dataclass(frozen=True)
class ServiceConfig:
    """Immutable configuration snapshot handed to every component."""

    # Data files
    riot_ids_path: str = "riot_ids.json"
    team_names_path: str = "teamnames.json"
    maps_path: str = "maps.json"

    # Queue / draft
    queue_capacity: int = 10
    queue_note_max_length: int = 50
    team_name_max_length: int = 25
    map_pool_max_size: int = 26

    # Map vote timing (seconds)
    map_vote_seconds: float = 50
    map_vote_warning_seconds: float = 10

    # Optional features
    autoclear_hour: int | None = None
    random_seed: int | None = None


class ServiceContainer:
    """
    Central container for all application services.

    Handles proper initialization order and dependency injection. There is
    exactly one MatchStateManager per container, shared by every service.
    """

    def __init__(self, config: ServiceConfig | None = None):
        self.config = config or ServiceConfig()
        self._initialized = False
        self._repos = RepositoryContainer()
        self._services: dict[str, Any] = {}

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """
        Initialize all services in correct order.
        This method is idempotent - calling it multiple times has no effect.
        """
        if self._initialized:
            logger.debug("ServiceContainer already initialized, skipping")
            return

        logger.info("Initializing ServiceContainer...")
        self._init_repositories()
        self._init_core_services()
        self._init_match_services()
        self._initialized = True
        logger.info("ServiceContainer initialization complete")

    def _init_repositories(self) -> None:
        logger.debug("Initializing repositories")
        self._repos.riot_id = RiotIdRepository(self.config.riot_ids_path)
        self._repos.team_name = TeamNameRepository(self.config.team_names_path)
        self._repos.map_pool = MapPoolRepository(self.config.maps_path)

    def _init_core_services(self) -> None:
        logger.debug("Initializing core services")
        self._services["player"] = PlayerService(
            riot_id_repo=self._repos.riot_id,
            team_name_repo=self._repos.team_name,
            team_name_max_length=self.config.team_name_max_length,
        )
        self._services["map_pool"] = MapPoolService(
            self._repos.map_pool, max_size=self.config.map_pool_max_size
        )

    def _init_match_services(self) -> None:
        logger.debug("Initializing match services")
        rng = random.Random(self.config.random_seed)
        state = MatchStateManager(queue_capacity=self.config.queue_capacity)
        self._services["match_state"] = state

        self._services["queue"] = QueueService(
            state,
            player_service=self._services["player"],
            note_max_length=self.config.queue_note_max_length,
        )
        self._services["map_vote"] = MapVoteService(
            state,
            map_pool_service=self._services["map_pool"],
            resolver=MapVoteResolver(rng),
            vote_seconds=self.config.map_vote_seconds,
            warning_seconds=self.config.map_vote_warning_seconds,
        )
        self._services["match_setup"] = MatchSetupService(state, DraftService(rng))

        if self.config.autoclear_hour is not None:
            self._services["autoclear"] = AutoclearService(state, self.config.autoclear_hour)

    def _require(self, name: str) -> Any:
        if not self._initialized:
            raise RuntimeError("ServiceContainer not initialized. Call initialize() first.")
        return self._services.get(name)

    @property
    def match_state(self) -> MatchStateManager:
        return self._require("match_state")

    @property
    def player_service(self) -> PlayerService:
        return self._require("player")

    @property
    def map_pool_service(self) -> MapPoolService:
        return self._require("map_pool")

    @property
    def queue_service(self) -> QueueService:
        return self._require("queue")

    @property
    def map_vote_service(self) -> MapVoteService:
        return self._require("map_vote")

    @property
    def match_setup_service(self) -> MatchSetupService:
        return self._require("match_setup")

    @property
    def autoclear_service(self) -> AutoclearService | None:
        return self._require("autoclear")

    def expose_to_bot(self, bot) -> None:
        """Attach services to the bot so cogs can pick them up in `setup`."""
        bot.player_service = self.player_service
        bot.map_pool_service = self.map_pool_service
        bot.queue_service = self.queue_service
        bot.map_vote_service = self.map_vote_service
        bot.match_setup_service = self.match_setup_service
        bot.autoclear_service = self.autoclear_service
