"""Cursor pagination over the resources of the GitHub GraphQL query."""

from dataclasses import dataclass
from typing import Awaitable, Callable

import structlog

from community_connectors.connectors.github.query import (
    QueryVariables,
    page_repository,
    resource_page,
)

logger = structlog.get_logger()

DEFAULT_MAX_PAGES = 10


@dataclass(frozen=True)
class ResourceTrack:
    """One paginated collection of the repository."""

    key: str
    toggle: str
    cursor: str
    # Cursors that switch the toggle off once they come back null
    stop_cursors: tuple[str, ...]
    marker: str | None = None


# Issues and pull requests share the "issues" toggle. The pull request track
# also stops on a null issues cursor, so whichever collection ends first ends
# both; the longer one is truncated.
TRACKS = (
    ResourceTrack(
        key="stargazers",
        toggle="stargazers",
        cursor="star_gazer_pointer",
        stop_cursors=("star_gazer_pointer",),
    ),
    ResourceTrack(
        key="issues",
        toggle="issues",
        cursor="issues_pointer",
        stop_cursors=("issues_pointer",),
    ),
    ResourceTrack(
        key="pullRequests",
        toggle="issues",
        cursor="pull_requests_pointer",
        stop_cursors=("pull_requests_pointer", "issues_pointer"),
        marker="is_pull_request",
    ),
)


async def fetch_pages(
    send_page: Callable[[dict], Awaitable[dict]],
    variables: QueryVariables,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> list[dict]:
    """
    Request pages until every active resource is exhausted or the cap is hit.

    Resources beyond ``max_pages`` pages are silently truncated.

    Args:
        send_page: Sends one GraphQL request and returns the decoded response
        variables: Query variables; cursors and toggles are updated in place
        max_pages: Maximum number of requests

    Returns:
        Raw responses in request order
    """
    pages: list[dict] = []
    has_next_page = True

    while has_next_page and len(pages) < max_pages:
        page = await send_page(variables.to_graphql())
        repository = page_repository(page)

        continuing = []
        for track in TRACKS:
            resource = repository.get(track.key)
            if resource is None:
                continue

            nodes, page_info = resource_page(track.key, resource)
            if track.marker:
                for node in nodes:
                    node[track.marker] = True

            variables.cursors[track.cursor] = page_info.get("endCursor")
            if any(variables.cursors.get(name) is None for name in track.stop_cursors):
                variables.disable(track.toggle)
            continuing.append((track, page_info["hasNextPage"]))

        has_next_page = any(
            next_page and variables.is_enabled(track.toggle)
            for track, next_page in continuing
        )
        pages.append(page)

        logger.debug(
            "github_page_fetched",
            page=len(pages),
            resources=[track.key for track, _ in continuing],
            has_next_page=has_next_page,
        )

    if has_next_page:
        logger.info("github_page_cap_reached", max_pages=max_pages)

    return pages
