"""
Pydantic schemas for users API request/response validation.

These schemas enforce input validation and define the API contract.
Responses are serialized with camelCase keys.
No business logic belongs here.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.config import settings

CURSOR_DESCRIPTION = "Opaque pagination cursor returned in a previous page"


class SearchUsersRequest(BaseModel):
    """Query parameters for the user search endpoint.

    Attributes:
        langs: Comma-delimited language names, e.g. ``java,c++``.
        limit: Page size (positive integer).
        before: Cursor of the page after the one requested.
        after: Cursor of the page before the one requested.
    """

    langs: str = Field(
        ..., min_length=1, description="Comma-delimited programming languages"
    )
    limit: int = Field(
        default=settings.default_page_limit, ge=1, description="Page size"
    )
    before: str | None = Field(
        default=None, min_length=1, description=CURSOR_DESCRIPTION
    )
    after: str | None = Field(
        default=None, min_length=1, description=CURSOR_DESCRIPTION
    )


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserItem(_CamelModel):
    """A single user in the response. Every key is always present."""

    username: str | None
    name: str | None
    avatar_url: str | None
    followers_count: int


class SearchUsersResponse(_CamelModel):
    """Response schema for the user search endpoint.

    ``total_count`` and ``page_info`` are forwarded as reported upstream.
    """

    users: list[UserItem]
    total_count: Any = None
    page_info: dict[str, Any] = Field(default_factory=dict)
    links: dict[str, str] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    message: str | None = None
