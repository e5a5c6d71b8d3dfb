"""
Domain entities for the users bounded context.

Value objects describing a language-filtered user search: the
validated search parameters, the upstream request and result shapes,
and the normalized response handed back to the interface layer.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class SearchParams:
    """Validated search parameters for one page of users.

    Attributes:
        langs: Comma-delimited language names, passed upstream verbatim.
        limit: Page size.
        before: Cursor for backward pagination.
        after: Cursor for forward pagination.
    """

    langs: str
    limit: int
    before: Optional[str] = None
    after: Optional[str] = None


@dataclass(frozen=True)
class UpstreamSearchRequest:
    """GraphQL search arguments.

    Exactly one pagination mode is populated: ``last`` + ``before``
    for backward paging, or ``first`` (+ ``after``) for forward paging.
    """

    query: str
    first: Optional[int] = None
    after: Optional[str] = None
    last: Optional[int] = None
    before: Optional[str] = None

    def to_variables(self) -> dict[str, Any]:
        """Return the GraphQL variables, skipping unset arguments."""
        variables: dict[str, Any] = {"query": self.query}
        for key in ("first", "after", "last", "before"):
            value = getattr(self, key)
            if value is not None:
                variables[key] = value
        return variables


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


@dataclass(frozen=True)
class UpstreamSearchResult:
    """Search result as reported upstream.

    Nothing here is trusted: edges hold raw node mappings with any
    subset of fields, and ``page_info`` is the raw pagination object.
    """

    total_count: Any = None
    edges: tuple[Mapping[str, Any], ...] = ()
    page_info: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: Any) -> "UpstreamSearchResult":
        """Build a result from the GraphQL ``data`` object.

        Missing or malformed levels collapse to empty values instead
        of raising.
        """
        search = _as_mapping(_as_mapping(data).get("search"))
        edges = search.get("edges")
        if not isinstance(edges, (list, tuple)):
            edges = ()
        return cls(
            total_count=search.get("totalCount"),
            edges=tuple(_as_mapping(edge) for edge in edges),
            page_info=_as_mapping(search.get("pageInfo")),
        )


@dataclass(frozen=True)
class NormalizedUser:
    """A user with every public field guaranteed to be present.

    String fields default to None, ``followers_count`` defaults to 0.
    """

    username: Optional[str] = None
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    followers_count: int = 0


@dataclass(frozen=True)
class NormalizedResponse:
    """One page of users in the stable, user-facing shape."""

    users: tuple[NormalizedUser, ...]
    total_count: Any
    page_info: Mapping[str, Any]
    links: Mapping[str, str] = field(default_factory=dict)
