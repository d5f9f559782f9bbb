"""
Rank Service

Exposes the rank ladder and resolves the tier a user currently holds.
"""

from typing import Any, Dict, List, Optional

from ..models.reward import Rank
from ..storage.record_store import RANKS, RecordStore
from ..utils.errors import StorageError


def load_ladder(store: RecordStore) -> List[Rank]:
    """Load the ranks collection ordered by minPoints (floor tier first)."""
    ranks = [Rank.from_record(record) for record in store.load(RANKS)]
    return sorted(ranks, key=lambda rank: rank.min_points)


class RankService:
    """
    Read-only view over the rank ladder.

    A user's tier is the one named by their stored `rank` label. Points are
    not consulted here; promotion is left to whoever updates that label.
    """

    def __init__(self, store: RecordStore, user_service):
        self.store = store
        self.user_service = user_service

    def list_ranks(self) -> List[Dict[str, Any]]:
        return [rank.to_record() for rank in load_ladder(self.store)]

    def floor_rank(self) -> Dict[str, Any]:
        """
        The lowest tier of the ladder.

        Raises:
            StorageError: If no ranks are configured
        """
        ladder = load_ladder(self.store)
        if not ladder:
            raise StorageError("Rank ladder is not configured")
        return ladder[0].to_record()

    def resolve_rank(self, user_id: int) -> Dict[str, Any]:
        """
        Resolve the rank a user holds.

        Falls back to the floor tier when the stored label matches no rank.

        Raises:
            NotFoundError: If the user does not exist
            StorageError: If no ranks are configured
        """
        user = self.user_service.get_record(user_id)
        ladder = load_ladder(self.store)
        if not ladder:
            raise StorageError("Rank ladder is not configured")

        for rank in ladder:
            if rank.name == user.rank:
                return rank.to_record()
        return ladder[0].to_record()


# Global service instance
_rank_service = None


def get_rank_service() -> Optional[RankService]:
    """Get the global rank service instance."""
    return _rank_service


def initialize_rank_service(store: RecordStore, user_service) -> RankService:
    """Initialize the global rank service instance."""
    global _rank_service
    _rank_service = RankService(store, user_service)
    return _rank_service
