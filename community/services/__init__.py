"""
Services Package

Contains all business logic and service classes.
"""

from ..config.community_settings import validate_prize_table, validate_rank_ladder
from ..storage.record_store import (
    FileBackend, MemoryBackend, RANKS, ROULETTE, create_record_store
)
from ..utils.activity_logger import activity_logger
from .message_service import MessageService, get_message_service, initialize_message_service
from .rank_service import RankService, get_rank_service, initialize_rank_service
from .roulette_service import RouletteService, get_roulette_service, initialize_roulette_service
from .stats_service import StatsService, get_stats_service, initialize_stats_service
from .user_service import UserService, get_user_service, initialize_user_service


def initialize_services(config_class, backend=None, clock=None, rng=None):
    """
    Build the record store and every global service instance.

    Args:
        config_class: Configuration class providing storage and paging settings
        backend: Storage backend override (otherwise chosen from STORAGE_BACKEND)
        clock: Optional callable returning the current datetime
        rng: Optional random.Random used by the roulette

    Returns:
        The initialized RecordStore
    """
    if backend is None:
        if config_class.STORAGE_BACKEND == 'memory':
            backend = MemoryBackend()
        else:
            backend = FileBackend(config_class.DATA_DIR)

    store = create_record_store(backend)
    seeded = store.initialize()
    if seeded:
        activity_logger.logger.info(f"Seeded collections: {', '.join(seeded)}")

    checks = (
        (RANKS, validate_rank_ladder, lambda data: data),
        (ROULETTE, validate_prize_table, lambda data: data.get('prizes', [])),
    )
    for name, validate, extract in checks:
        try:
            validate(extract(store.load(name)))
        except ValueError as e:
            activity_logger.logger.warning(f"Stored '{name}' configuration is invalid: {e}")

    user_service = initialize_user_service(store, clock=clock)
    message_service = initialize_message_service(
        store, user_service, clock=clock, page_size=config_class.MESSAGE_PAGE_SIZE
    )
    initialize_rank_service(store, user_service)
    initialize_roulette_service(store, user_service, rng=rng)
    initialize_stats_service(user_service, message_service, top_limit=config_class.TOP_USERS_LIMIT)

    return store


__all__ = [
    'initialize_services',
    'UserService', 'get_user_service',
    'MessageService', 'get_message_service',
    'RankService', 'get_rank_service',
    'RouletteService', 'get_roulette_service',
    'StatsService', 'get_stats_service'
]
