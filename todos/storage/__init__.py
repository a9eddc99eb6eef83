"""Storage backends for the todos service."""

from .base import Record, StorageBackend
from .memory import InMemoryStorage
from .rwlock import ReadWriteLock

__all__ = [
    "Record",
    "StorageBackend",
    "InMemoryStorage",
    "ReadWriteLock",
]
