"""
Translation of validated search parameters into upstream arguments.

Pure functions, no IO.
"""

from app.domain.users.entities import SearchParams, UpstreamSearchRequest

LANGUAGE_QUALIFIER = "language:"


def build_search_query(langs: str) -> str:
    """Return the upstream query string for a comma-delimited language list."""
    return LANGUAGE_QUALIFIER + langs


def prepare_search_options(params: SearchParams) -> UpstreamSearchRequest:
    """Build the upstream search request for one page.

    A ``before`` cursor selects backward paging (``last``); otherwise
    paging goes forward (``first``), continuing from ``after`` if given.
    Callers must have rejected requests carrying both cursors.

    Args:
        params: Validated search parameters.

    Returns:
        An UpstreamSearchRequest with exactly one pagination mode set.
    """
    query = build_search_query(params.langs)

    if params.before:
        return UpstreamSearchRequest(
            query=query, last=params.limit, before=params.before
        )
    if params.after:
        return UpstreamSearchRequest(
            query=query, first=params.limit, after=params.after
        )
    return UpstreamSearchRequest(query=query, first=params.limit)
