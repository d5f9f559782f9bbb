"""
Storage Package

Whole-collection record persistence with pluggable backends.
"""

from .record_store import (
    USERS, MESSAGES, RANKS, ROULETTE,
    FileBackend, IdAllocator, MemoryBackend, RecordStore, create_record_store
)

__all__ = [
    'USERS', 'MESSAGES', 'RANKS', 'ROULETTE',
    'FileBackend', 'IdAllocator', 'MemoryBackend', 'RecordStore', 'create_record_store'
]
