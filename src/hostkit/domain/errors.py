from __future__ import annotations


class HostkitError(Exception):
    """Base class for errors raised by hostkit."""


class ValidationError(HostkitError, ValueError):
    """Input or configuration failed validation."""


class DeadlineExceeded(HostkitError, TimeoutError):
    """A raced operation did not settle before its deadline."""

    def __init__(self, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(f"Operation timed out after {timeout_seconds}s")


class OperationCancelled(HostkitError):
    """A raced operation was cancelled by someone other than the race."""
