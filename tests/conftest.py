"""Shared test fixtures."""

import os
import random
import tempfile
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

# Keep test logs out of the working tree; must be set before the package is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='community_test_logs_'))

import pytest

from community import create_app
from community.config import TestingConfig
from community.services import (
    initialize_services, get_message_service, get_rank_service,
    get_roulette_service, get_stats_service, get_user_service
)
from community.services.message_service import MessageService
from community.services.rank_service import RankService
from community.services.roulette_service import RouletteService
from community.services.stats_service import StatsService
from community.services.user_service import UserService
from community.storage import MemoryBackend, create_record_store


class FakeClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def backend():
    return MemoryBackend()


@pytest.fixture
def store(backend):
    store = create_record_store(backend)
    store.initialize()
    return store


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def user_service(store, clock):
    return UserService(store, clock=clock)


@pytest.fixture
def message_service(store, user_service, clock):
    return MessageService(store, user_service, clock=clock)


@pytest.fixture
def rank_service(store, user_service):
    return RankService(store, user_service)


@pytest.fixture
def roulette_service(store, user_service):
    return RouletteService(store, user_service, rng=random.Random(1234))


@pytest.fixture
def stats_service(user_service, message_service):
    return StatsService(user_service, message_service)


@pytest.fixture
def alice(user_service):
    return user_service.register('alice', 'alice@example.com', 'secret1')


@pytest.fixture
def services(backend, clock):
    """Initialize the global services the HTTP layer uses."""
    store = initialize_services(TestingConfig, backend=backend, clock=clock, rng=random.Random(1234))
    return SimpleNamespace(
        store=store,
        users=get_user_service(),
        messages=get_message_service(),
        ranks=get_rank_service(),
        roulette=get_roulette_service(),
        stats=get_stats_service()
    )


@pytest.fixture
def client(services):
    app = create_app(TestingConfig)
    return app.test_client()
