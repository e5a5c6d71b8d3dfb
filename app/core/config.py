"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here: upstream endpoint, credentials,
paging defaults and rate limits.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Rate limit applied to the search endpoint.
        rate_limit_enabled: Turn rate limiting on or off.
        github_graphql_url: GitHub GraphQL endpoint.
        github_token: Token used to authenticate against GitHub.
        github_timeout_seconds: Timeout for a single upstream call.
        default_page_limit: Page size used when ``limit`` is omitted.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "DevFinder"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_enabled: bool = True

    github_graphql_url: str = "https://api.github.com/graphql"
    github_token: Optional[str] = None
    github_timeout_seconds: float = Field(default=10.0, gt=0)

    default_page_limit: int = Field(default=20, ge=1)


settings = Settings()
