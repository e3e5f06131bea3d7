"""
Caller-supplied request context: an optional deadline plus a cancellation flag.
Client operations combine it with the configured timeout; whichever fires first wins.
"""

import threading
import time

CANCELLED = "context canceled"
DEADLINE_EXCEEDED = "context deadline exceeded"


class RequestContext:
    """
    Deadline / cancellation signal for a single operation (or a group of them).
    A context with no timeout and no cancel_event never expires; see background().
    Safe to share between threads: the only mutable part is a threading.Event.
    """

    def __init__(
        self,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        self._deadline = time.monotonic() + timeout if timeout is not None else None
        self._cancel_event = cancel_event or threading.Event()

    @classmethod
    def background(cls) -> "RequestContext":
        """Non-cancelling context without a deadline."""
        return cls()

    @property
    def deadline(self) -> float | None:
        """Monotonic deadline (time.monotonic() scale), or None."""
        return self._deadline

    def remaining(self) -> float | None:
        """Seconds left before the deadline (never negative), or None without a deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def cancel(self) -> None:
        self._cancel_event.set()

    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def err(self) -> str | None:
        """Why the context is done, or None while it is still live."""
        if self._cancel_event.is_set():
            return CANCELLED
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DEADLINE_EXCEEDED
        return None


def effective_timeout(ctx: RequestContext, configured: float) -> float:
    """Earlier of the configured timeout and what remains of the caller's deadline."""
    remaining = ctx.remaining()
    if remaining is None:
        return configured
    return min(configured, remaining)
