"""
Roulette Service

Weighted reward draw over the configured prize table. Each spin picks one
prize and credits its value to the spinning user.
"""

import random
from typing import Any, Dict, List, Optional

from ..models.reward import Prize
from ..storage.record_store import RecordStore, ROULETTE
from ..utils.activity_logger import activity_logger
from ..utils.errors import StorageError
from ..utils.helpers import weighted_choice


class RouletteService:
    """
    Roulette backed by the roulette collection.

    Prize probabilities are relative weights and are never normalized,
    so a table whose weights sum to 37 works as well as one summing to 100.
    """

    def __init__(self, store: RecordStore, user_service, rng: Optional[random.Random] = None):
        self.store = store
        self.user_service = user_service
        self.rng = rng or random.SystemRandom()

    def get_config(self) -> Dict[str, Any]:
        """Return the roulette configuration as stored."""
        config = self.store.load(ROULETTE)
        return {'prizes': config.get('prizes', [])}

    def _prizes(self) -> List[Prize]:
        return [Prize.from_record(record) for record in self.get_config()['prizes']]

    def spin(self, user_id: int) -> Dict[str, Any]:
        """
        Spin the roulette for a user.

        Args:
            user_id: User receiving the prize value

        Returns:
            Dict with the selected 'prize' and the user's 'newPoints'

        Raises:
            NotFoundError: If the user does not exist
            StorageError: If no prize can be drawn from the table
        """
        prizes = self._prizes()
        try:
            prize = weighted_choice(prizes, lambda p: p.probability, self.rng)
        except ValueError as e:
            raise StorageError(f"Roulette is not configured: {e}") from e

        # A zero-value prize is still a completed spin
        new_points = self.user_service.credit_points(user_id, prize.value)

        activity_logger.log_event('roulette_spin', user_id, prize=prize.name,
                                  value=prize.value, new_points=new_points)
        return {'prize': prize.to_record(), 'newPoints': new_points}


# Global service instance
_roulette_service = None


def get_roulette_service() -> Optional[RouletteService]:
    """Get the global roulette service instance."""
    return _roulette_service


def initialize_roulette_service(store: RecordStore, user_service, **kwargs) -> RouletteService:
    """Initialize the global roulette service instance."""
    global _roulette_service
    _roulette_service = RouletteService(store, user_service, **kwargs)
    return _roulette_service
