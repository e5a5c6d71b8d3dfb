"""
Use case: Search users by programming language, one page at a time.

Input: SearchUsersQuery (langs, limit, before, after, base_url)
Output: SearchUsersResult
Side effects: One call to the upstream search port.
Failure cases: ConflictingCursorsError, UpstreamSearchError.
"""

import logging

from app.application.users.dtos import SearchUsersQuery, SearchUsersResult, UserResult
from app.domain.users.entities import SearchParams
from app.domain.users.errors import ConflictingCursorsError
from app.domain.users.ports import UserSearchPort
from app.domain.users.response_normalizer import prepare_response
from app.domain.users.search_translator import prepare_search_options

logger = logging.getLogger(__name__)


class SearchUsersUseCase:
    """Orchestrates a paginated user search.

    Rejects conflicting cursors, translates the query into upstream
    arguments, calls the UserSearchPort once and normalizes the result.
    Upstream failures propagate as UpstreamSearchError and are
    classified by the interface layer.
    """

    def __init__(self, search_port: UserSearchPort) -> None:
        self._search_port = search_port

    async def execute(self, query: SearchUsersQuery) -> SearchUsersResult:
        """Run the search users use case.

        Args:
            query: Validated search parameters for one page.

        Returns:
            The normalized page of users with pagination links.

        Raises:
            ConflictingCursorsError: If both cursors are set.
            UpstreamSearchError: If the upstream search fails.
        """
        if query.before and query.after:
            raise ConflictingCursorsError()

        params = SearchParams(
            langs=query.langs,
            limit=query.limit,
            before=query.before,
            after=query.after,
        )
        request = prepare_search_options(params)

        logger.info(
            "Searching users query=%s, limit=%d, direction=%s",
            request.query,
            query.limit,
            "backward" if request.last is not None else "forward",
        )

        result = await self._search_port.search(request)
        response = prepare_response(result, params, query.base_url)

        logger.debug(
            "Search returned %d users, links=%s",
            len(response.users),
            sorted(response.links),
        )

        return SearchUsersResult(
            users=[
                UserResult(
                    username=u.username,
                    name=u.name,
                    avatar_url=u.avatar_url,
                    followers_count=u.followers_count,
                )
                for u in response.users
            ],
            total_count=response.total_count,
            page_info=dict(response.page_info),
            links=dict(response.links),
        )
