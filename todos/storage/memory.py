"""Process-local, thread-safe storage engine."""

from typing import Dict, List, Optional

from loguru import logger

from ..core.context import Context
from ..core.exceptions import InvalidIdentifierError, NotFoundError, StorageError
from ..core.types import MAX_ID
from .base import Record, StorageBackend, V
from .rwlock import ReadWriteLock


def _check_id(id: int) -> None:
    if isinstance(id, bool) or not isinstance(id, int):
        raise InvalidIdentifierError(f"identifier must be an integer, got {id!r}")
    if id < 0 or id > MAX_ID:
        raise InvalidIdentifierError(f"identifier {id} is outside the uint64 range")


def _check_ctx(ctx: Optional[Context]) -> None:
    if ctx is not None:
        ctx.raise_if_done()


class InMemoryStorage(StorageBackend[V]):
    """Concurrent map from auto-incrementing uint64 identifiers to values.

    Reads (``get_by_id``, ``get_all``, ``len()``) share a read lock; writes
    (``save``, ``delete``) take the write lock. The caller's context is checked
    before the lock is requested and again once it is held, so a call whose
    signal fired while it waited returns without touching the map.

    Explicit identifiers passed to ``save`` are stored verbatim and do not
    advance the sequence: a later auto-assigned identifier may land on (and
    overwrite) a record that was saved under an explicit identifier.

    Values are stored by reference. Store immutable values (such as
    ``TaskSchema``) so a caller cannot change a record without ``save``.
    """

    def __init__(self):
        self._lock = ReadWriteLock()
        self._next_id = 1
        self._data: Dict[int, V] = {}

    def save(self, value: V, id: int = 0, ctx: Optional[Context] = None) -> int:
        _check_id(id)
        _check_ctx(ctx)

        with self._lock.write_locked():
            _check_ctx(ctx)

            if id == 0:
                if self._next_id > MAX_ID:
                    raise StorageError("identifier sequence exhausted")
                id = self._next_id
                self._next_id += 1
            self._data[id] = value

        logger.debug("Saved record {}", id)
        return id

    def get_by_id(self, id: int, ctx: Optional[Context] = None) -> V:
        _check_id(id)
        _check_ctx(ctx)

        with self._lock.read_locked():
            _check_ctx(ctx)

            try:
                return self._data[id]
            except KeyError:
                raise NotFoundError() from None

    def get_all(self, ctx: Optional[Context] = None) -> List[Record[V]]:
        _check_ctx(ctx)

        with self._lock.read_locked():
            _check_ctx(ctx)

            return [Record(id=id, value=value) for id, value in self._data.items()]

    def delete(self, id: int, ctx: Optional[Context] = None) -> None:
        _check_id(id)
        _check_ctx(ctx)

        with self._lock.write_locked():
            _check_ctx(ctx)

            if id not in self._data:
                raise NotFoundError()
            del self._data[id]

        logger.debug("Deleted record {}", id)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._data)
