"""
Tests for the GitHub GraphQL search adapter.

Uses httpx.MockTransport; no network calls are made.
"""

import json

import httpx
import pytest

from app.domain.users.entities import UpstreamSearchRequest
from app.domain.users.errors import (
    StructuredClientError,
    UnknownUpstreamError,
    UpstreamErrorEntry,
    UpstreamSearchError,
)
from app.infrastructure.users.github_search_adapter import GitHubUserSearchAdapter
from app.infrastructure.users.queries import SEARCH_USERS_QUERY

GRAPHQL_URL = "https://api.github.test/graphql"
REQUEST = UpstreamSearchRequest(query="language:c", first=2)


def _adapter(handler, token: str | None = "secret") -> GitHubUserSearchAdapter:
    return GitHubUserSearchAdapter(
        graphql_url=GRAPHQL_URL,
        token=token,
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


class TestGitHubUserSearchAdapter:
    """Outcome mapping of the GitHub adapter."""

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        seen: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers.get("Authorization")
            seen["body"] = json.loads(request.content)
            return httpx.Response(
                200,
                json={
                    "data": {
                        "search": {
                            "totalCount": 42,
                            "edges": [{"node": {"username": "john"}}],
                            "pageInfo": {"hasNextPage": True, "endCursor": "c1"},
                        }
                    }
                },
            )

        result = await _adapter(handler).search(REQUEST)

        assert seen["url"] == GRAPHQL_URL
        assert seen["auth"] == "Bearer secret"
        assert seen["body"] == {
            "query": SEARCH_USERS_QUERY,
            "variables": {"query": "language:c", "first": 2},
        }
        assert result.total_count == 42
        assert result.edges == ({"node": {"username": "john"}},)
        assert result.page_info == {"hasNextPage": True, "endCursor": "c1"}

    @pytest.mark.asyncio
    async def test_no_token_no_authorization_header(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert "Authorization" not in request.headers
            return httpx.Response(200, json={"data": {"search": {}}})

        result = await _adapter(handler, token=None).search(REQUEST)

        assert result.edges == ()

    @pytest.mark.asyncio
    async def test_graphql_errors_are_structured(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "data": None,
                    "errors": [
                        {"type": "INVALID_CURSOR_ARGUMENTS", "message": "bad cursor"}
                    ],
                },
            )

        with pytest.raises(UpstreamSearchError) as exc_info:
            await _adapter(handler).search(REQUEST)

        assert exc_info.value.failure == StructuredClientError(
            errors=(
                UpstreamErrorEntry(type="INVALID_CURSOR_ARGUMENTS", message="bad cursor"),
            ),
            status=200,
        )

    @pytest.mark.asyncio
    async def test_http_error_status_is_structured(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad gateway")

        with pytest.raises(UpstreamSearchError) as exc_info:
            await _adapter(handler).search(REQUEST)

        assert exc_info.value.failure == StructuredClientError(errors=(), status=502)

    @pytest.mark.asyncio
    async def test_transport_error_is_unknown(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamSearchError) as exc_info:
            await _adapter(handler).search(REQUEST)

        assert exc_info.value.failure == UnknownUpstreamError(reason="ConnectError")

    @pytest.mark.asyncio
    async def test_unreadable_body_is_unknown(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>oops</html>")

        with pytest.raises(UpstreamSearchError) as exc_info:
            await _adapter(handler).search(REQUEST)

        assert isinstance(exc_info.value.failure, UnknownUpstreamError)

    @pytest.mark.asyncio
    async def test_missing_data_is_unknown(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={})

        with pytest.raises(UpstreamSearchError) as exc_info:
            await _adapter(handler).search(REQUEST)

        assert exc_info.value.failure == UnknownUpstreamError(reason="missing data")
