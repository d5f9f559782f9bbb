"""Tests for the record store and its backends."""

import os
import threading

import pytest

from community.config import DEFAULT_PRIZES, DEFAULT_RANKS
from community.storage import (
    FileBackend, IdAllocator, MemoryBackend, MESSAGES, RANKS, ROULETTE, USERS,
    RecordStore, create_record_store
)
from community.utils.errors import StorageError


class FailingBackend(MemoryBackend):
    def write(self, name, data):
        raise StorageError(f"Error writing {name}: disk full")


class TestSeeding:
    def test_initialize_seeds_all_collections(self, backend):
        store = create_record_store(backend)
        seeded = store.initialize()
        assert sorted(seeded) == sorted([USERS, MESSAGES, RANKS, ROULETTE])
        assert store.load(USERS) == []
        assert store.load(MESSAGES) == []
        assert store.load(RANKS) == DEFAULT_RANKS
        assert store.load(ROULETTE) == {'prizes': DEFAULT_PRIZES}

    def test_initialize_leaves_existing_collections(self, store):
        store.save(USERS, [{'id': 1, 'username': 'kept'}])
        assert store.initialize() == []
        assert store.load(USERS) == [{'id': 1, 'username': 'kept'}]

    def test_first_load_writes_default(self, backend):
        store = create_record_store(backend)
        assert not backend.exists(RANKS)
        assert store.load(RANKS) == DEFAULT_RANKS
        assert backend.exists(RANKS)


class TestLoad:
    def test_corrupt_collection_loads_empty(self, store, backend):
        backend.documents[USERS] = '{not json'
        assert store.load(USERS) == []

    def test_read_reports_recoverable_error(self, store, backend):
        backend.documents[USERS] = '{not json'
        data, error = store.read(USERS)
        assert data == []
        assert isinstance(error, StorageError)

    def test_wrong_document_type_loads_empty(self, store, backend):
        backend.documents[USERS] = '{"id": 1}'
        assert store.load(USERS) == []

    def test_corrupt_roulette_loads_empty_prize_table(self, store, backend):
        backend.documents[ROULETTE] = 'garbage'
        assert store.load(ROULETTE) == {'prizes': []}

    def test_load_returns_private_copy(self, store):
        ranks = store.load(RANKS)
        ranks.clear()
        assert store.load(RANKS) == DEFAULT_RANKS

    def test_unknown_collection(self, store):
        with pytest.raises(StorageError):
            store.load('sessions')


class TestSave:
    def test_save_replaces_whole_collection(self, store):
        store.save(USERS, [{'id': 1}, {'id': 2}])
        store.save(USERS, [{'id': 3}])
        assert store.load(USERS) == [{'id': 3}]

    def test_save_failure_raises(self):
        store = create_record_store(FailingBackend())
        with pytest.raises(StorageError):
            store.save(USERS, [])


class TestTransaction:
    def test_changes_saved_on_exit(self, store):
        with store.transaction(USERS) as users:
            users.append({'id': 1})
        assert store.load(USERS) == [{'id': 1}]

    def test_nothing_saved_when_block_raises(self, store):
        with pytest.raises(RuntimeError):
            with store.transaction(USERS) as users:
                users.append({'id': 1})
                raise RuntimeError("abort")
        assert store.load(USERS) == []

    def test_concurrent_transactions_do_not_lose_updates(self, backend):
        store = RecordStore(backend)
        store.register('counters', {'value': 0})

        def bump():
            for _ in range(50):
                with store.transaction('counters') as counters:
                    counters['value'] += 1

        threads = [threading.Thread(target=bump) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.load('counters') == {'value': 400}


class TestFileBackend:
    def test_round_trip_on_disk(self, tmp_path):
        store = create_record_store(FileBackend(str(tmp_path)))
        store.initialize()
        store.save(USERS, [{'id': 7, 'username': 'zoe'}])

        reopened = create_record_store(FileBackend(str(tmp_path)))
        assert reopened.load(USERS) == [{'id': 7, 'username': 'zoe'}]
        assert sorted(os.listdir(tmp_path)) == ['messages.json', 'ranks.json', 'roulette.json', 'users.json']

    def test_corrupt_file_loads_empty(self, tmp_path):
        store = create_record_store(FileBackend(str(tmp_path)))
        store.initialize()
        (tmp_path / 'messages.json').write_text('[{"id": 1,', encoding='utf-8')
        assert store.load(MESSAGES) == []


class TestIdAllocator:
    def test_same_instant_gives_distinct_increasing_ids(self):
        allocator = IdAllocator(clock=lambda: 1700000000.0)
        ids = [allocator.next_id() for _ in range(5)]
        assert ids == sorted(set(ids))
        assert ids[0] == 1700000000000

    def test_skips_taken_ids(self):
        allocator = IdAllocator(clock=lambda: 1.0)
        assert allocator.next_id(taken=[1000, 1001]) == 1002
