"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.users.entities import UpstreamSearchRequest, UpstreamSearchResult


class UserSearchPort(ABC):
    """Port for running one user search against the upstream API."""

    @abstractmethod
    async def search(self, request: UpstreamSearchRequest) -> UpstreamSearchResult:
        """Run a single search call.

        Args:
            request: Query string plus exactly one pagination mode.

        Returns:
            The raw upstream result, possibly with missing fields.

        Raises:
            UpstreamSearchError: If the call fails in any way.
        """
        raise NotImplementedError
