"""
Tests for PlayerQueue.
"""

from domain.models.player import QueueEntry
from player_queue import PlayerQueue


def test_add_and_prevent_duplicates():
    queue = PlayerQueue()

    assert queue.add_player(101) is True
    assert queue.add_player(101) is False

    assert queue.size() == 1
    assert queue.is_in_queue(101) is True


def test_remove_updates_queue_and_notes():
    queue = PlayerQueue()
    queue.add_player(1)
    queue.add_player(2, note="late")
    queue.add_player(3)

    assert queue.remove_player(2) is True
    assert queue.remove_player(999) is False

    assert queue.get_all() == [1, 3]
    assert queue.is_in_queue(2) is False
    assert queue.get_note(2) is None


def test_capacity_is_never_exceeded():
    queue = PlayerQueue(capacity=10)
    for pid in range(10):
        assert queue.add_player(pid) is True

    assert queue.is_full() is True
    assert queue.add_player(99) is False
    assert queue.size() == 10


def test_entries_keep_join_order_and_notes():
    queue = PlayerQueue()
    queue.add_player(30)
    queue.add_player(10, note="available at 9pm")
    queue.add_player(20)

    assert queue.entries() == [
        QueueEntry(player_id=30),
        QueueEntry(player_id=10, note="available at 9pm"),
        QueueEntry(player_id=20),
    ]


def test_empty_note_is_not_stored():
    queue = PlayerQueue()
    queue.add_player(1, note="")

    assert queue.get_note(1) is None
    assert queue.notes == {}


def test_clear_drops_players_and_notes():
    queue = PlayerQueue()
    queue.add_player(1, note="a")
    queue.add_player(2, note="b")

    queue.clear()

    assert queue.size() == 0
    assert queue.notes == {}


def test_get_all_returns_a_copy():
    queue = PlayerQueue()
    queue.add_player(1)

    snapshot = queue.get_all()
    snapshot.append(2)

    assert queue.get_all() == [1]
