"""
Tests for QueueService.
"""

import asyncio

import pytest

from conftest import FULL_ROSTER
from domain.models.draft import MatchPhase
from domain.models.player import QueueEntry
from services import error_codes


@pytest.mark.asyncio
async def test_join_reports_size(queue_service):
    result = await queue_service.join(FULL_ROSTER[0])

    assert result.success
    assert result.value == 1
    assert queue_service.state.queue.get_all() == [FULL_ROSTER[0]]


@pytest.mark.asyncio
async def test_join_requires_riot_id(queue_service):
    result = await queue_service.join(999)

    assert result.error_code == error_codes.RIOT_ID_MISSING
    assert queue_service.state.queue.get_all() == []


@pytest.mark.asyncio
async def test_join_twice_rejected(queue_service):
    await queue_service.join(FULL_ROSTER[0])

    result = await queue_service.join(FULL_ROSTER[0])

    assert result.error_code == error_codes.ALREADY_QUEUED
    assert queue_service.state.queue.get_all() == [FULL_ROSTER[0]]


@pytest.mark.asyncio
async def test_eleventh_join_rejected(queue_service, registered_player_service):
    for pid in FULL_ROSTER:
        assert (await queue_service.join(pid)).success
    registered_player_service.set_riot_id(111, "Late#NA1")

    result = await queue_service.join(111)

    assert result.error_code == error_codes.QUEUE_FULL
    assert len(queue_service.state.queue.get_all()) == 10


@pytest.mark.asyncio
async def test_concurrent_joins_never_exceed_capacity(queue_service, registered_player_service):
    extra = list(range(201, 211))
    for pid in extra:
        registered_player_service.set_riot_id(pid, f"Extra{pid}#NA1")

    results = await asyncio.gather(*(queue_service.join(pid) for pid in FULL_ROSTER + extra))

    assert sum(1 for r in results if r.success) == 10
    assert len(queue_service.state.queue.get_all()) == 10
    assert len(set(queue_service.state.queue.get_all())) == 10


@pytest.mark.asyncio
async def test_note_is_clipped_and_listed(queue_service):
    await queue_service.join(FULL_ROSTER[0], note="x" * 80)
    await queue_service.join(FULL_ROSTER[1], note="available at 9pm")

    entries = queue_service.list_entries()

    assert entries[0] == QueueEntry(player_id=FULL_ROSTER[0], note="x" * 50)
    assert entries[1] == QueueEntry(player_id=FULL_ROSTER[1], note="available at 9pm")


@pytest.mark.asyncio
async def test_leave(queue_service):
    await queue_service.join(FULL_ROSTER[0], note="bye soon")

    result = await queue_service.leave(FULL_ROSTER[0])

    assert result.success
    assert result.value == 0
    assert queue_service.list_entries() == []


@pytest.mark.asyncio
async def test_leave_when_not_queued(queue_service):
    result = await queue_service.leave(FULL_ROSTER[0])

    assert result.error_code == error_codes.NOT_QUEUED


@pytest.mark.asyncio
async def test_queue_is_frozen_after_start(queue_service, state, map_vote_service):
    for pid in FULL_ROSTER[:4]:
        await queue_service.join(pid)
    await map_vote_service.begin_vote(FULL_ROSTER[0], is_admin=False)
    assert state.phase is MatchPhase.MAP_VOTE

    assert (await queue_service.join(FULL_ROSTER[5])).error_code == error_codes.WRONG_PHASE
    assert (await queue_service.leave(FULL_ROSTER[0])).error_code == error_codes.WRONG_PHASE
    assert (await queue_service.kick(FULL_ROSTER[1])).error_code == error_codes.WRONG_PHASE
    assert queue_service.state.queue.get_all() == FULL_ROSTER[:4]


@pytest.mark.asyncio
async def test_phase_is_checked_before_riot_id(queue_service, state, map_vote_service):
    await queue_service.join(FULL_ROSTER[0])
    await map_vote_service.begin_vote(FULL_ROSTER[0], is_admin=False)

    result = await queue_service.join(999)

    assert result.error_code == error_codes.WRONG_PHASE
    assert queue_service.state.queue.get_all() == [FULL_ROSTER[0]]


@pytest.mark.asyncio
async def test_join_during_draft_leaves_roster_alone(
    queue_service, drafting_state, registered_player_service
):
    registered_player_service.set_riot_id(111, "Late#NA1")
    roster = drafting_state.queue.get_all()

    result = await queue_service.join(111)

    assert not result.success
    assert result.error_code == error_codes.WRONG_PHASE
    assert drafting_state.queue.get_all() == roster


@pytest.mark.asyncio
async def test_kick_drops_player_and_note(queue_service):
    await queue_service.join(FULL_ROSTER[0], note="note")
    await queue_service.join(FULL_ROSTER[1])

    result = await queue_service.kick(FULL_ROSTER[0])

    assert result.success
    assert queue_service.state.queue.get_all() == [FULL_ROSTER[1]]
    assert queue_service.state.queue.get_note(FULL_ROSTER[0]) is None


@pytest.mark.asyncio
async def test_clear_works_in_any_phase(queue_service, state, map_vote_service):
    for pid in FULL_ROSTER[:3]:
        await queue_service.join(pid, note="n")
    await map_vote_service.begin_vote(FULL_ROSTER[0], is_admin=False)

    assert (await queue_service.clear()).success
    assert queue_service.state.queue.get_all() == []
    assert state.queue.notes == {}


@pytest.mark.asyncio
async def test_recover_skips_riot_check_and_duplicates(queue_service):
    await queue_service.join(FULL_ROSTER[0])

    result = await queue_service.recover([900, 901, 900] + list(range(1000, 1010)))

    assert result.value == [900, 901] + list(range(1000, 1008))
    assert queue_service.state.queue.get_all() == result.value
