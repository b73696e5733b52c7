"""
Domain errors raised while building a year-in-review summary.

The fatal errors abort the aggregation and are surfaced to the caller.
PartialFetchFailure is not raised: it records a secondary call that failed
and whose data was left out of the summary.
"""

from dataclasses import dataclass


class WrappedError(Exception):
    """Base exception for aggregation failures."""

    message = "Failed to fetch GitHub data"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class MissingUsername(WrappedError):
    message = "Username is required"


class InvalidYear(WrappedError):
    message = "Invalid year"


class Unauthenticated(WrappedError):
    message = "GitHub token not configured"


class ActorNotFound(WrappedError):
    message = "User not found"

    def __init__(self, username: str):
        super().__init__()
        self.username = username


class ProviderError(WrappedError):
    """A load-bearing provider call failed (or the request deadline passed)."""

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class PartialFetchFailure:
    """A non-fatal provider failure: ``source`` names what was skipped."""

    source: str
    reason: str
    status_code: int | None = None
