"""Cooperative cancellation and deadline signal passed down to storage calls.

A ``Context`` is created per request by the API layer and handed through the
service to the storage engine, which checks it before and after taking its
lock. Contexts form a tree: a child fires when its parent fires.
"""

import threading
import time
from typing import Optional

from .exceptions import CancelledError, ContextError, DeadlineExceededError


class Context:
    """Cancellation/deadline signal.

    Use the constructors rather than ``Context()`` directly::

        with Context.with_timeout(5.0) as ctx:
            service.get_all(ctx=ctx)
    """

    def __init__(
        self,
        parent: Optional["Context"] = None,
        deadline: Optional[float] = None,
    ):
        self._parent = parent
        self._cancelled = threading.Event()
        # Absolute time.monotonic() value, never later than the parent's
        if parent is not None and parent.deadline is not None:
            if deadline is None or parent.deadline < deadline:
                deadline = parent.deadline
        self._deadline = deadline

    @classmethod
    def background(cls) -> "Context":
        """Return a context that never fires on its own."""
        return cls()

    @classmethod
    def with_cancel(cls, parent: Optional["Context"] = None) -> "Context":
        """Return a context fired by ``cancel()`` or by its parent."""
        return cls(parent=parent)

    @classmethod
    def with_deadline(
        cls, deadline: float, parent: Optional["Context"] = None
    ) -> "Context":
        """Return a context that expires at the given ``time.monotonic()`` value."""
        return cls(parent=parent, deadline=deadline)

    @classmethod
    def with_timeout(
        cls, timeout: float, parent: Optional["Context"] = None
    ) -> "Context":
        """Return a context that expires ``timeout`` seconds from now."""
        return cls(parent=parent, deadline=time.monotonic() + timeout)

    @property
    def deadline(self) -> Optional[float]:
        return self._deadline

    def cancel(self) -> None:
        """Fire the signal. Idempotent."""
        self._cancelled.set()

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None when there is no deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def err(self) -> Optional[ContextError]:
        """Return the error describing why the context fired, or None."""
        if self._cancelled.is_set():
            return CancelledError()
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DeadlineExceededError()
        if self._parent is not None:
            return self._parent.err()
        return None

    def done(self) -> bool:
        return self.err() is not None

    def raise_if_done(self) -> None:
        """Raise ``CancelledError`` or ``DeadlineExceededError`` if fired."""
        error = self.err()
        if error is not None:
            raise error

    def __enter__(self) -> "Context":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()

    def __repr__(self) -> str:
        state = "done" if self.done() else "active"
        return f"Context(state={state}, remaining={self.remaining()})"
