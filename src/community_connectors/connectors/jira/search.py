"""Offset pagination over the Jira search endpoint."""

from typing import Awaitable, Callable

import structlog

from community_connectors.errors import UpstreamError
from community_connectors.observability import PAGES_FETCHED

logger = structlog.get_logger()

DEFAULT_MAX_RESULTS = 100


async def search_issues(
    send_page: Callable[[dict], Awaitable[dict]],
    jql: str,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> list[dict]:
    """
    Collect every issue matching ``jql``.

    Pages are requested while ``startAt <= total``, advancing ``startAt`` by
    the page size the server reports.

    Args:
        send_page: Sends one search request with the given query params
        jql: Search query
        max_results: Page size asked of the server
    """
    issues: list[dict] = []
    start_at = 0
    pages = 0

    while True:
        page = await send_page({"jql": jql, "maxResults": max_results, "startAt": start_at})
        pages += 1
        try:
            issues.extend(page["issues"])
            total = page["total"]
            page_size = page["maxResults"]
        except (KeyError, TypeError) as e:
            raise UpstreamError(f"Jira search response is malformed: {e!r}") from e

        start_at += page_size
        if start_at > total:
            break
        if page_size <= 0:
            raise UpstreamError(f"Jira search returned maxResults={page_size} with {total} results")

    PAGES_FETCHED.labels(connector="jira").observe(pages)
    logger.debug("jira_search_complete", pages=pages, issues=len(issues), total=total)
    return issues
