"""
Adapter: GitHub GraphQL user search.

Implements UserSearchPort.
Sends one POST per search to the GraphQL endpoint and turns every
outcome into either an UpstreamSearchResult or an UpstreamSearchError
carrying a tagged failure:

- the request never completes (timeout, connection error): unknown
- non-2xx status, or a GraphQL ``errors`` list: structured client error
- 2xx with an unreadable body or no ``data``: unknown
"""

import logging
from typing import Any, Optional

import httpx

from app.domain.users.entities import UpstreamSearchRequest, UpstreamSearchResult
from app.domain.users.errors import (
    StructuredClientError,
    UnknownUpstreamError,
    UpstreamErrorEntry,
    UpstreamSearchError,
)
from app.domain.users.ports import UserSearchPort
from app.infrastructure.users.queries import SEARCH_USERS_QUERY

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def _parse_error_entries(errors: Any) -> tuple[UpstreamErrorEntry, ...]:
    """Convert the GraphQL ``errors`` list into UpstreamErrorEntry values."""
    if not isinstance(errors, list):
        return ()
    entries = []
    for error in errors:
        if isinstance(error, dict):
            entries.append(
                UpstreamErrorEntry(type=error.get("type"), message=error.get("message"))
            )
        else:
            entries.append(UpstreamErrorEntry())
    return tuple(entries)


class GitHubUserSearchAdapter(UserSearchPort):
    """Concrete adapter for the GitHub GraphQL ``search`` query.

    Args:
        graphql_url: GraphQL endpoint URL.
        token: Optional API token, sent as a bearer token.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport, used by tests.
    """

    def __init__(
        self,
        graphql_url: str,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._graphql_url = graphql_url
        self._token = token
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def search(self, request: UpstreamSearchRequest) -> UpstreamSearchResult:
        """Run one user search against the GitHub GraphQL API.

        Args:
            request: Query string plus exactly one pagination mode.

        Returns:
            The upstream result, missing fields left missing.

        Raises:
            UpstreamSearchError: On any failed or unreadable response.
        """
        payload = {"query": SEARCH_USERS_QUERY, "variables": request.to_variables()}

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.post(
                    self._graphql_url, json=payload, headers=self._headers()
                )
        except httpx.HTTPError as exc:
            logger.error("GitHub search request failed: %s", type(exc).__name__)
            raise UpstreamSearchError(
                UnknownUpstreamError(reason=type(exc).__name__)
            ) from exc

        try:
            body = resp.json()
        except ValueError:
            body = None

        if not resp.is_success:
            errors = body.get("errors") if isinstance(body, dict) else None
            logger.warning("GitHub search returned HTTP %d", resp.status_code)
            raise UpstreamSearchError(
                StructuredClientError(
                    errors=_parse_error_entries(errors), status=resp.status_code
                )
            )

        if not isinstance(body, dict):
            logger.error("GitHub search returned an unreadable body")
            raise UpstreamSearchError(UnknownUpstreamError(reason="invalid body"))

        if body.get("errors"):
            entries = _parse_error_entries(body["errors"])
            logger.warning(
                "GitHub search reported errors: %s",
                [entry.type for entry in entries],
            )
            raise UpstreamSearchError(
                StructuredClientError(errors=entries, status=resp.status_code)
            )

        if body.get("data") is None:
            logger.error("GitHub search returned no data")
            raise UpstreamSearchError(UnknownUpstreamError(reason="missing data"))

        return UpstreamSearchResult.from_payload(body["data"])
