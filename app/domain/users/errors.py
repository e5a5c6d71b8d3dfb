"""
Domain-specific errors for the users bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from dataclasses import dataclass
from typing import Optional, Union


class UserSearchDomainError(Exception):
    """Base error for all users domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ConflictingCursorsError(UserSearchDomainError):
    """Raised when both ``before`` and ``after`` cursors are supplied."""

    def __init__(self) -> None:
        super().__init__("Only one of 'before' and 'after' may be specified")


@dataclass(frozen=True)
class UpstreamErrorEntry:
    """A single machine-readable error reported by the upstream API."""

    type: Optional[str] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class StructuredClientError:
    """Upstream answered, but reported errors and/or a failing status."""

    errors: tuple[UpstreamErrorEntry, ...] = ()
    status: Optional[int] = None


@dataclass(frozen=True)
class UnknownUpstreamError:
    """Upstream could not be reached or answered with something unreadable."""

    reason: str = "unknown"


UpstreamFailure = Union[StructuredClientError, UnknownUpstreamError]


class UpstreamSearchError(UserSearchDomainError):
    """Raised by search ports when the upstream call does not succeed."""

    def __init__(self, failure: UpstreamFailure) -> None:
        super().__init__(f"Upstream search failed: {failure!r}")
        self.failure = failure
