"""
Queue of players waiting for the next scrim.
"""

from domain.models.player import PlayerId, QueueEntry


class PlayerQueue:
    """Ordered, deduplicated roster with optional per-player notes."""

    def __init__(self, capacity: int = 10):
        """Initialize empty queue."""
        self.capacity = capacity
        self.queue: list[PlayerId] = []
        self.notes: dict[PlayerId, str] = {}

    def add_player(self, player_id: PlayerId, note: str | None = None) -> bool:
        """
        Add a player to the end of the queue.

        Args:
            player_id: Discord user ID
            note: Optional free-text note stored alongside the player

        Returns:
            True if added, False if already queued or the queue is full
        """
        if player_id in self.queue or self.is_full():
            return False

        self.queue.append(player_id)
        if note:
            self.notes[player_id] = note
        return True

    def remove_player(self, player_id: PlayerId) -> bool:
        """
        Remove a player and their note.

        Returns:
            True if removed, False if not in queue
        """
        if player_id not in self.queue:
            return False

        self.queue.remove(player_id)
        self.notes.pop(player_id, None)
        return True

    def clear(self):
        """Clear the entire queue and all notes."""
        self.queue.clear()
        self.notes.clear()

    def size(self) -> int:
        """Get queue size."""
        return len(self.queue)

    def is_full(self) -> bool:
        return len(self.queue) >= self.capacity

    def is_in_queue(self, player_id: PlayerId) -> bool:
        """Check if player is in queue."""
        return player_id in self.queue

    def get_note(self, player_id: PlayerId) -> str | None:
        return self.notes.get(player_id)

    def get_all(self) -> list[PlayerId]:
        """Get all players in join order without removing them."""
        return list(self.queue)

    def entries(self) -> list[QueueEntry]:
        """Snapshot of (player, note) rows in join order."""
        return [QueueEntry(player_id=pid, note=self.notes.get(pid)) for pid in self.queue]
