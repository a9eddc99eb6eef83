from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

from ..core.context import Context

V = TypeVar("V")


@dataclass(frozen=True)
class Record(Generic[V]):
    """An identifier paired with its stored value."""

    id: int
    value: V


class StorageBackend(ABC, Generic[V]):
    """Capability interface for task storage.

    The task service depends only on this interface, so the in-memory engine
    can be swapped for a persistent one without touching the service.
    Every method accepts an optional ``Context``; ``None`` means no deadline.
    """

    @abstractmethod
    def save(self, value: V, id: int = 0, ctx: Optional[Context] = None) -> int:
        """Insert ``value`` under a new id when ``id`` is 0, else upsert at ``id``.

        Returns the identifier the value is stored under.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, id: int, ctx: Optional[Context] = None) -> V:
        """Return the value stored under ``id`` or raise ``NotFoundError``."""
        raise NotImplementedError

    @abstractmethod
    def get_all(self, ctx: Optional[Context] = None) -> List[Record[V]]:
        """Return a point-in-time snapshot of every record, in no particular order."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, id: int, ctx: Optional[Context] = None) -> None:
        """Remove the value stored under ``id`` or raise ``NotFoundError``."""
        raise NotImplementedError
