"""Exception types raised by distribution detection."""

from __future__ import annotations


class DetectionError(Exception):
    """Base error for distribution detection.

    Raised directly when a source was read but produced nothing usable
    (e.g. ``lsb_release`` printed no distributor ID).

    Args:
        message: Human-readable description
        op: Operation that failed (e.g. "distroprobe.detect")
        cause: Underlying exception, if any
    """

    def __init__(self, message: str, op: str = "", cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.op = op
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        parts = [p for p in (self.op, self.message) if p]
        if self.cause is not None:
            parts.append(str(self.cause))
        return ": ".join(parts)


class SourceNotFoundError(DetectionError):
    """A candidate source (file or command) is absent. Non-fatal."""


class DetectionTimeoutError(DetectionError):
    """The caller's context was cancelled or its deadline passed."""


class DistributionNotFoundError(DetectionError):
    """Every source was tried and none produced a distribution."""
