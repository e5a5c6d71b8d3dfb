"""
Shared fixtures for the users API tests.

The upstream search port is replaced by an AsyncMock through
FastAPI dependency overrides; no network calls are made.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.domain.users.entities import UpstreamSearchResult
from app.domain.users.ports import UserSearchPort
from app.interfaces.users.dependencies import get_user_search_port
from app.main import app
from app.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with an empty rate limit window."""
    limiter.reset()
    yield


@pytest.fixture
def search_port():
    """Fake search port; tests configure ``search`` per case."""
    port = AsyncMock(spec=UserSearchPort)
    port.search.side_effect = NotImplementedError("fake behavior is not implemented")
    app.dependency_overrides[get_user_search_port] = lambda: port
    yield port
    app.dependency_overrides.pop(get_user_search_port, None)


@pytest.fixture
def client(search_port) -> TestClient:
    return TestClient(app)


@pytest.fixture
def search_result():
    """Factory building an upstream result the way the adapter would."""

    def build(page_info=None, edges=(), total_count=1234) -> UpstreamSearchResult:
        return UpstreamSearchResult.from_payload(
            {
                "search": {
                    "totalCount": total_count,
                    "edges": list(edges),
                    "pageInfo": page_info or {},
                }
            }
        )

    return build
