"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
Tests replace ``get_user_search_port`` through ``app.dependency_overrides``.
"""

from fastapi import Depends

from app.application.users.search_users import SearchUsersUseCase
from app.core.config import settings
from app.domain.users.ports import UserSearchPort
from app.infrastructure.users.github_search_adapter import GitHubUserSearchAdapter


def get_user_search_port() -> UserSearchPort:
    """Build the GitHub search adapter from application settings."""
    return GitHubUserSearchAdapter(
        graphql_url=settings.github_graphql_url,
        token=settings.github_token,
        timeout=settings.github_timeout_seconds,
    )


def get_search_users_use_case(
    search_port: UserSearchPort = Depends(get_user_search_port),
) -> SearchUsersUseCase:
    """Build SearchUsersUseCase with its infrastructure dependencies."""
    return SearchUsersUseCase(search_port=search_port)
