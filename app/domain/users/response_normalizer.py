"""
Normalization of upstream search results into the public response shape.

Upstream nodes may miss any field or carry one of the wrong type. Every
read goes through an explicit presence and type check with a per-field
default:

    username, name, avatarUrl  -> None
    followers.count            -> 0

Normalization never raises on missing or malformed data; ``totalCount`` and
``pageInfo`` are forwarded exactly as upstream reported them.
"""

from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from app.domain.users.entities import (
    NormalizedResponse,
    NormalizedUser,
    SearchParams,
    UpstreamSearchResult,
)

DEFAULT_FOLLOWERS_COUNT = 0


def _get(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return None


def _get_str(record: Any, key: str) -> Optional[str]:
    value = _get(record, key)
    return value if isinstance(value, str) else None


def _get_count(record: Any, key: str) -> int:
    value = _get(record, key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return DEFAULT_FOLLOWERS_COUNT


def normalize_user(node: Any) -> NormalizedUser:
    """Map one upstream user node to a NormalizedUser.

    Values of the wrong type are treated as absent.
    """
    return NormalizedUser(
        username=_get_str(node, "username"),
        name=_get_str(node, "name"),
        avatar_url=_get_str(node, "avatarUrl"),
        followers_count=_get_count(_get(node, "followers"), "count"),
    )


def build_page_link(
    base_url: str,
    params: SearchParams,
    *,
    before: Optional[str] = None,
    after: Optional[str] = None,
) -> str:
    """Return a link to the same search positioned at another cursor."""
    query: dict[str, Any] = {"langs": params.langs, "limit": params.limit}
    if before is not None:
        query["before"] = before
    if after is not None:
        query["after"] = after
    return f"{base_url}?{urlencode(query)}"


def build_page_links(
    page_info: Mapping[str, Any], params: SearchParams, base_url: str
) -> dict[str, str]:
    """Build ``prev``/``next`` links from the upstream page info.

    A key is present only when its ``hasPreviousPage`` / ``hasNextPage``
    flag is truthy.
    """
    links: dict[str, str] = {}
    if page_info.get("hasPreviousPage"):
        links["prev"] = build_page_link(
            base_url, params, before=page_info.get("startCursor")
        )
    if page_info.get("hasNextPage"):
        links["next"] = build_page_link(
            base_url, params, after=page_info.get("endCursor")
        )
    return links


def prepare_response(
    result: UpstreamSearchResult, params: SearchParams, base_url: str = ""
) -> NormalizedResponse:
    """Normalize an upstream search result.

    Args:
        result: The upstream result, with arbitrarily missing fields.
        params: The parameters of the request being answered.
        base_url: URL the pagination links are built on (e.g. ``/users``).

    Returns:
        The NormalizedResponse for this page. User order follows edge order.
    """
    users = tuple(normalize_user(_get(edge, "node")) for edge in result.edges)
    return NormalizedResponse(
        users=users,
        total_count=result.total_count,
        page_info=result.page_info,
        links=build_page_links(result.page_info, params, base_url),
    )
