"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.application.users.dtos import SearchUsersQuery
from app.application.users.search_users import SearchUsersUseCase
from app.core.config import settings
from app.interfaces.users.dependencies import get_search_users_use_case
from app.interfaces.users.schemas import (
    ErrorResponse,
    SearchUsersRequest,
    SearchUsersResponse,
    UserItem,
)
from app.shared.security.rate_limiting import limiter

router = APIRouter(tags=["users"])


@router.get(
    "/users",
    response_model=SearchUsersResponse,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
    summary="Search users by programming language",
    description=(
        "Return one page of users matching the given languages. "
        "Use the 'before' or 'after' cursor (never both) to move between pages."
    ),
)
@limiter.limit(settings.rate_limit_default)
async def search_users(
    request: Request,
    params: Annotated[SearchUsersRequest, Query()],
    use_case: SearchUsersUseCase = Depends(get_search_users_use_case),
) -> SearchUsersResponse:
    """Search users by language, one cursor-delimited page at a time."""
    query = SearchUsersQuery(
        langs=params.langs,
        limit=params.limit,
        before=params.before,
        after=params.after,
        base_url=request.url.path,
    )
    result = await use_case.execute(query)
    return SearchUsersResponse(
        users=[
            UserItem(
                username=u.username,
                name=u.name,
                avatar_url=u.avatar_url,
                followers_count=u.followers_count,
            )
            for u in result.users
        ],
        total_count=result.total_count,
        page_info=result.page_info,
        links=result.links,
    )
