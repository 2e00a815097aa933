"""
Tests for MatchStateManager phase handling and resets.
"""

import asyncio

import pytest

from domain.models.draft import InvalidPhaseTransitionError, MatchPhase


def test_starts_in_queue_with_empty_draft(state):
    assert state.phase is MatchPhase.QUEUE
    assert state.draft.captains == []
    assert state.active_vote_token is None


def test_illegal_transition_raises(state):
    with pytest.raises(InvalidPhaseTransitionError):
        state.advance_phase(MatchPhase.DRAFT)
    assert state.phase is MatchPhase.QUEUE


def test_vote_tokens_are_unique(state):
    first = state.issue_vote_token()
    second = state.issue_vote_token()

    assert first != second
    assert state.active_vote_token == second


def test_reset_keeps_queue_on_cancel(state):
    state.queue.add_player(1, note="hi")
    state.advance_phase(MatchPhase.MAP_VOTE)
    state.issue_vote_token()

    state.reset_to_queue(clear_queue=False)

    assert state.phase is MatchPhase.QUEUE
    assert state.queue.get_all() == [1]
    assert state.queue.get_note(1) == "hi"
    assert state.active_vote_token is None


def test_reset_clears_queue_on_finalize(state):
    state.queue.add_player(1, note="hi")
    state.advance_phase(MatchPhase.MAP_VOTE)

    state.reset_to_queue(clear_queue=True)

    assert state.queue.get_all() == []
    assert state.queue.notes == {}


@pytest.mark.asyncio
async def test_lock_serializes_check_then_mutate(state):
    """Two coroutines racing to move out of QUEUE: exactly one wins."""
    winners = []

    async def try_start(name):
        async with state.lock:
            if state.phase is not MatchPhase.QUEUE:
                return
            await asyncio.sleep(0.01)
            state.advance_phase(MatchPhase.MAP_VOTE)
            winners.append(name)

    await asyncio.gather(try_start("a"), try_start("b"))

    assert len(winners) == 1
    assert state.phase is MatchPhase.MAP_VOTE
