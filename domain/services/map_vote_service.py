"""
Map vote resolution.

Pure tally logic: highest reaction count wins, ties are broken uniformly at
random among the leaders.
"""

import random

from domain.models.map_vote import MapVoteResult, MapVoteTally


class MapVoteResolver:
    """Resolves a closed ballot into a single map."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def resolve(self, tally: MapVoteTally) -> MapVoteResult:
        """
        Pick the winning map from final counts.

        Args:
            tally: Counts read when the vote window closed

        Returns:
            MapVoteResult, with tied=True when the winner was drawn from several leaders

        Raises:
            ValueError: If the tally has no slots
        """
        if not tally.slots:
            raise ValueError("Cannot resolve a vote with no options.")

        leaders = tally.leaders
        if len(leaders) == 1:
            winner = leaders[0]
        else:
            winner = self.rng.choice(leaders)

        return MapVoteResult(
            map_name=winner.map_name,
            tied=len(leaders) > 1,
            candidates=tuple(slot.map_name for slot in leaders),
            counts={slot.map_name: tally.count_for(slot) for slot in tally.slots},
        )
