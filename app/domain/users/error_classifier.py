"""
Classification of upstream search failures into HTTP outcomes.

Decision table, first match wins:

    StructuredClientError with an INVALID_CURSOR_ARGUMENTS entry -> 400
    any other StructuredClientError                              -> 503
    UnknownUpstreamError                                         -> 500

No retries happen here. Messages never carry upstream internals.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.domain.users.errors import (
    StructuredClientError,
    UpstreamFailure,
)

INVALID_CURSOR_ERROR_TYPE = "INVALID_CURSOR_ARGUMENTS"
INVALID_CURSOR_MESSAGE = "Invalid pagination cursor"

HTTP_400 = 400
HTTP_500 = 500
HTTP_503 = 503


class FailureKind(Enum):
    """Who is to blame for a failed upstream search."""

    UPSTREAM_CURSOR = "upstream_cursor"
    UPSTREAM_CLIENT = "upstream_client"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ErrorClassification:
    """HTTP outcome for a failed upstream search."""

    kind: FailureKind
    status_code: int
    message: Optional[str] = None


def has_invalid_cursor(failure: StructuredClientError) -> bool:
    """Return True if upstream rejected the pagination cursor."""
    return any(entry.type == INVALID_CURSOR_ERROR_TYPE for entry in failure.errors)


def classify_upstream_failure(failure: UpstreamFailure) -> ErrorClassification:
    """Map an upstream failure to a status code and optional message.

    Args:
        failure: The tagged failure raised by the search port.

    Returns:
        The ErrorClassification to answer the caller with.
    """
    if isinstance(failure, StructuredClientError):
        if has_invalid_cursor(failure):
            return ErrorClassification(
                kind=FailureKind.UPSTREAM_CURSOR,
                status_code=HTTP_400,
                message=INVALID_CURSOR_MESSAGE,
            )
        return ErrorClassification(
            kind=FailureKind.UPSTREAM_CLIENT, status_code=HTTP_503
        )
    return ErrorClassification(kind=FailureKind.UNKNOWN, status_code=HTTP_500)
