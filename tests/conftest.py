from __future__ import annotations

import copy
from typing import Callable

import httpx
import pytest

from community_connectors.config import Settings


def resource(nodes: list[dict], end_cursor: str | None, has_next_page: bool) -> dict:
    return {
        "totalCount": len(nodes),
        "pageInfo": {"endCursor": end_cursor, "hasNextPage": has_next_page},
        "nodes": nodes,
    }


def graphql_page(**resources: dict) -> dict:
    return {"data": {"repositoryOwner": {"repository": resources}}}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        github_token="gh-token",
        jira_username="me@example.com",
        jira_token="jira-token",
    )


@pytest.fixture
def make_resource() -> Callable[..., dict]:
    return resource


@pytest.fixture
def make_page() -> Callable[..., dict]:
    return graphql_page


@pytest.fixture
def fake_sender():
    """Build a send_page coroutine replaying pages and recording variables."""

    def build(pages: list[dict] | Callable[[int], dict]):
        sent: list[dict] = []

        async def send_page(variables: dict) -> dict:
            sent.append(copy.deepcopy(variables))
            index = len(sent) - 1
            page = pages(index) if callable(pages) else pages[index]
            return copy.deepcopy(page)

        return send_page, sent

    return build


@pytest.fixture
def graphql_transport():
    """MockTransport answering GraphQL POSTs with the given pages."""

    def build(pages: list[dict], requests: list[httpx.Request]) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=pages[len(requests) - 1])

        return httpx.MockTransport(handler)

    return build
