"""Cancellable deadline passed through a detection call."""

from __future__ import annotations

import threading
import time

CANCELLED = "cancelled"
DEADLINE_EXCEEDED = "deadline exceeded"


class DetectContext:
    """Cancellation signal plus optional deadline for one detection call.

    ``cancel()`` may be called from any thread. The deadline is measured on
    the monotonic clock.

    Usage:
        with DetectContext.with_timeout(5.0) as ctx:
            dist = detector.detect(ctx)
    """

    def __init__(self, deadline: float | None = None) -> None:
        self._deadline = deadline
        self._cancelled = threading.Event()

    @classmethod
    def background(cls) -> DetectContext:
        """Context that is never cancelled and has no deadline."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> DetectContext:
        """Context that expires ``seconds`` from now."""
        return cls(deadline=time.monotonic() + seconds)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def done(self) -> bool:
        return self.cancelled or self.expired

    def reason(self) -> str | None:
        """Why the context is done, or None while it is still live."""
        if self.cancelled:
            return CANCELLED
        if self.expired:
            return DEADLINE_EXCEEDED
        return None

    def remaining(self) -> float | None:
        """Seconds left before the deadline (never negative), or None."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def __enter__(self) -> DetectContext:
        return self

    def __exit__(self, *exc_info) -> None:
        self.cancel()
