"""
Pytest fixtures for tests.

Every fixture builds fresh state: one MatchStateManager per test, JSON
repositories under tmp_path, a seeded random source and a no-op sleep so map
votes resolve instantly.
"""

import random

import pytest
import pytest_asyncio

from domain.services.draft_service import DraftService
from domain.services.map_vote_service import MapVoteResolver
from repositories.map_pool_repository import MapPoolRepository
from repositories.riot_id_repository import RiotIdRepository
from repositories.team_name_repository import TeamNameRepository
from services.interfaces import IVoteBallot, IVoteChannel
from services.map_pool_service import MapPoolService
from services.map_vote_service import MapVoteService
from services.match_setup_service import MatchSetupService
from services.match_state_manager import MatchStateManager
from services.player_service import PlayerService
from services.queue_service import QueueService

# =============================================================================
# CENTRALIZED CONSTANTS
# =============================================================================

FULL_ROSTER = list(range(101, 111))
"""Ten player ids that fill the queue."""

DEFAULT_MAPS = ["Ascent", "Bind", "Haven"]


async def no_sleep(_seconds):
    return None


class FakeBallot(IVoteBallot):
    def __init__(self, counts: dict[str, int]):
        self.counts = counts

    async def read_counts(self) -> dict[str, int]:
        return dict(self.counts)


class FakeVoteChannel(IVoteChannel):
    """Records the ballot and announcements. `on_open` runs while the window is open."""

    def __init__(self, counts: dict[str, int] | None = None, on_open=None):
        self.counts = counts or {}
        self.on_open = on_open
        self.opened_slots = None
        self.announcements: list[str] = []

    async def open_ballot(self, slots):
        self.opened_slots = slots
        if self.on_open is not None:
            await self.on_open()
        return FakeBallot(self.counts)

    async def announce(self, text: str) -> None:
        self.announcements.append(text)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def state():
    return MatchStateManager(queue_capacity=10)


@pytest.fixture
def riot_id_repo(tmp_path):
    return RiotIdRepository(str(tmp_path / "riot_ids.json"))


@pytest.fixture
def team_name_repo(tmp_path):
    return TeamNameRepository(str(tmp_path / "teamnames.json"))


@pytest.fixture
def map_pool_repo(tmp_path):
    return MapPoolRepository(str(tmp_path / "maps.json"))


@pytest.fixture
def player_service(riot_id_repo, team_name_repo):
    return PlayerService(riot_id_repo, team_name_repo)


@pytest.fixture
def registered_player_service(player_service):
    """PlayerService where every FULL_ROSTER id has a Riot id."""
    for pid in FULL_ROSTER:
        player_service.set_riot_id(pid, f"Player{pid}#NA1")
    return player_service


@pytest.fixture
def map_pool_service(map_pool_repo):
    service = MapPoolService(map_pool_repo)
    for name in DEFAULT_MAPS:
        service.add_map(name)
    return service


@pytest.fixture
def queue_service(state, registered_player_service):
    return QueueService(state, player_service=registered_player_service)


@pytest.fixture
def map_vote_service(state, map_pool_service, rng):
    return MapVoteService(
        state,
        map_pool_service=map_pool_service,
        resolver=MapVoteResolver(rng),
        sleep=no_sleep,
    )


@pytest.fixture
def match_setup_service(state, rng):
    return MatchSetupService(state, DraftService(rng))


@pytest.fixture
def full_queue(state):
    """Fill the queue directly, bypassing the Riot id check."""
    for pid in FULL_ROSTER:
        state.queue.add_player(pid)
    return state


@pytest_asyncio.fixture
async def captain_pick_state(full_queue, map_vote_service):
    """State that has completed a map vote and sits in CAPTAIN_PICK."""
    session = (await map_vote_service.begin_vote(FULL_ROSTER[0], is_admin=False)).unwrap()
    await map_vote_service.run_vote(session, FakeVoteChannel({"a": 3}))
    return full_queue


@pytest_asyncio.fixture
async def drafting_state(captain_pick_state, match_setup_service):
    """State in DRAFT with the first two roster players as captains."""
    await match_setup_service.assign_captain(FULL_ROSTER[0])
    await match_setup_service.assign_captain(FULL_ROSTER[1])
    return captain_pick_state
