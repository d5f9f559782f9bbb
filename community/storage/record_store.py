"""
Record Store

Loads and saves named collections as whole documents. Every mutation is a
load-modify-save of the entire collection, serialized per collection by a
lock so concurrent request threads cannot lose each other's updates.
"""

import copy
import json
import os
import tempfile
import threading
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from ..config.community_settings import DEFAULT_PRIZES, DEFAULT_RANKS
from ..utils.activity_logger import activity_logger
from ..utils.errors import StorageError

# Collection names
USERS = 'users'
MESSAGES = 'messages'
RANKS = 'ranks'
ROULETTE = 'roulette'


class MemoryBackend:
    """
    In-process backend used by tests. Documents are kept serialized so every
    read hands out an independent copy, just like reading a file would.
    """

    def __init__(self):
        self.documents: Dict[str, str] = {}

    def exists(self, name: str) -> bool:
        return name in self.documents

    def read(self, name: str) -> Any:
        try:
            return json.loads(self.documents[name])
        except (KeyError, ValueError) as e:
            raise StorageError(f"Error reading {name}: {e}") from e

    def write(self, name: str, data: Any) -> None:
        try:
            self.documents[name] = json.dumps(data)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Error writing {name}: {e}") from e


class FileBackend:
    """One pretty-printed JSON document per collection under `data_dir`."""

    def __init__(self, data_dir: str):
        self.data_dir = data_dir
        os.makedirs(data_dir, exist_ok=True)

    def path_for(self, name: str) -> str:
        return os.path.join(self.data_dir, f"{name}.json")

    def exists(self, name: str) -> bool:
        return os.path.exists(self.path_for(name))

    def read(self, name: str) -> Any:
        path = self.path_for(name)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Error reading {path}: {e}") from e

    def write(self, name: str, data: Any) -> None:
        path = self.path_for(name)
        tmp_path = None
        try:
            # Write beside the target and rename so readers never see a partial file
            with tempfile.NamedTemporaryFile('w', encoding='utf-8', dir=self.data_dir,
                                             prefix=f".{name}.", suffix='.tmp', delete=False) as f:
                tmp_path = f.name
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Error writing {path}: {e}") from e


class RecordStore:
    """
    Collection store with whole-document replace semantics.

    Each collection is registered with a default (written the first time the
    collection is touched) and an empty value (handed out when the stored
    document cannot be read).
    """

    def __init__(self, backend):
        self.backend = backend
        self._defaults: Dict[str, Any] = {}
        self._empties: Dict[str, Any] = {}
        self._locks: Dict[str, threading.RLock] = {}

    def register(self, name: str, default: Any, empty: Any = None) -> None:
        """
        Declare a collection.

        Args:
            name: Collection name
            default: Value the collection is seeded with
            empty: Value substituted on read failure (an empty value of the
                default's type when omitted)
        """
        self._defaults[name] = copy.deepcopy(default)
        self._empties[name] = copy.deepcopy(empty if empty is not None else type(default)())
        self._locks[name] = threading.RLock()

    @property
    def collections(self) -> List[str]:
        return list(self._defaults)

    def _check_registered(self, name: str) -> None:
        if name not in self._defaults:
            raise StorageError(f"Unknown collection '{name}'")

    def initialize(self) -> List[str]:
        """
        Seed every registered collection that does not exist yet.

        Returns:
            Names of the collections that were seeded
        """
        seeded = []
        for name in self._defaults:
            with self._locks[name]:
                if not self.backend.exists(name):
                    self.backend.write(name, self._defaults[name])
                    seeded.append(name)
        return seeded

    def read(self, name: str) -> Tuple[Any, Optional[StorageError]]:
        """
        Load a collection, reporting a read failure instead of raising.

        Returns:
            Tuple of (data, error). On failure `data` is the collection's
            empty value and `error` describes what went wrong.
        """
        self._check_registered(name)
        with self._locks[name]:
            if not self.backend.exists(name):
                default = copy.deepcopy(self._defaults[name])
                try:
                    self.backend.write(name, default)
                except StorageError as e:
                    return default, e
                return default, None

            try:
                data = self.backend.read(name)
            except StorageError as e:
                return copy.deepcopy(self._empties[name]), e

            if not isinstance(data, type(self._empties[name])):
                error = StorageError(f"Collection '{name}' holds {type(data).__name__}, "
                                     f"expected {type(self._empties[name]).__name__}")
                return copy.deepcopy(self._empties[name]), error

            return data, None

    def load(self, name: str) -> Any:
        """
        Load a private snapshot of a collection.

        An unreadable collection comes back empty; the failure is logged
        and callers carry on as if no data had been stored yet.
        """
        data, error = self.read(name)
        if error is not None:
            activity_logger.logger.warning(f"Substituting empty '{name}' collection: {error.message}")
        return data

    def save(self, name: str, data: Any) -> None:
        """
        Replace a collection with `data`.

        Raises:
            StorageError: If the collection could not be written
        """
        self._check_registered(name)
        with self._locks[name]:
            try:
                self.backend.write(name, data)
            except StorageError as e:
                activity_logger.logger.error(f"Failed to save '{name}': {e.message}")
                raise

    @contextmanager
    def transaction(self, name: str) -> Iterator[Any]:
        """
        Atomic load-modify-save of one collection.

        The collection lock is held for the whole block. The yielded snapshot
        is saved when the block finishes; if the block raises, nothing is
        written.
        """
        self._check_registered(name)
        with self._locks[name]:
            data = self.load(name)
            yield data
            self.save(name, data)


class IdAllocator:
    """
    Hands out integer ids derived from the current time in milliseconds.

    Ids strictly increase within the process and skip values already taken,
    so two records created in the same millisecond never share an id.
    """

    def __init__(self, clock=None):
        self._clock = clock or time.time
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self, taken: Iterable[int] = ()) -> int:
        taken = set(taken)
        with self._lock:
            candidate = max(int(self._clock() * 1000), self._last + 1)
            while candidate in taken:
                candidate += 1
            self._last = candidate
            return candidate


def create_record_store(backend) -> RecordStore:
    """Build a store with the four community collections registered."""
    store = RecordStore(backend)
    store.register(USERS, [])
    store.register(MESSAGES, [])
    store.register(RANKS, DEFAULT_RANKS)
    store.register(ROULETTE, {'prizes': DEFAULT_PRIZES}, empty={'prizes': []})
    return store
