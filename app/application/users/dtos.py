"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchUsersQuery:
    """Input DTO for one page of a language-filtered user search.

    Attributes:
        langs: Comma-delimited language names.
        limit: Page size.
        before: Optional cursor for the previous page.
        after: Optional cursor for the next page.
        base_url: URL the pagination links are built on.
    """

    langs: str
    limit: int
    before: str | None = None
    after: str | None = None
    base_url: str = ""


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a single user.

    Attributes:
        username: Login name, or None if upstream omitted it.
        name: Display name, or None.
        avatar_url: Avatar URL, or None.
        followers_count: Number of followers, 0 if upstream omitted it.
    """

    username: str | None
    name: str | None
    avatar_url: str | None
    followers_count: int


@dataclass(frozen=True)
class SearchUsersResult:
    """Output DTO for one page of users.

    Attributes:
        users: Users in upstream order.
        total_count: Total number of matches as reported upstream.
        page_info: Raw upstream pagination metadata.
        links: ``prev`` / ``next`` links, each present only if that page exists.
    """

    users: list[UserResult]
    total_count: int | None
    page_info: dict
    links: dict[str, str]
