from __future__ import annotations

import pytest

from community_connectors.connectors.github.pager import DEFAULT_MAX_PAGES, fetch_pages
from community_connectors.connectors.github.query import QueryVariables
from community_connectors.errors import UpstreamError


def variables(**toggles: bool) -> QueryVariables:
    return QueryVariables(organization="octo-org", repository="octo-repo", toggles=dict(toggles))


async def test_stops_when_last_page_reports_no_next_page(fake_sender, make_page, make_resource) -> None:
    pages = [
        make_page(stargazers=make_resource([{"starredAt": "2021-01-01T00:00:00Z"}], "c1", True)),
        make_page(stargazers=make_resource([{"starredAt": "2021-01-02T00:00:00Z"}], "c2", True)),
        make_page(stargazers=make_resource([{"starredAt": "2021-01-03T00:00:00Z"}], "c3", False)),
    ]
    send_page, sent = fake_sender(pages)

    result = await fetch_pages(send_page, variables(stargazers=True, stars=True))

    assert len(result) == 3
    assert "star_gazer_pointer" not in sent[0]
    assert sent[1]["star_gazer_pointer"] == "c1"
    assert sent[2]["star_gazer_pointer"] == "c2"


async def test_page_cap_truncates_long_collections(fake_sender, make_page, make_resource) -> None:
    send_page, sent = fake_sender(
        lambda index: make_page(
            stargazers=make_resource([{"starredAt": "2021-01-01T00:00:00Z"}], f"c{index}", True)
        )
    )

    result = await fetch_pages(send_page, variables(stargazers=True))

    assert len(result) == DEFAULT_MAX_PAGES == 10
    assert len(sent) == 10


async def test_page_cap_is_configurable(fake_sender, make_page, make_resource) -> None:
    send_page, sent = fake_sender(
        lambda index: make_page(stargazers=make_resource([], f"c{index}", True))
    )

    result = await fetch_pages(send_page, variables(stargazers=True), max_pages=3)

    assert len(result) == 3


async def test_null_cursor_switches_toggle_off(fake_sender, make_page, make_resource) -> None:
    pages = [
        make_page(
            issues=make_resource([{"number": 1}], "i1", True),
            pullRequests=make_resource([{"number": 2}], "p1", True),
        ),
        make_page(
            issues=make_resource([], None, False),
            pullRequests=make_resource([{"number": 3}], "p2", True),
        ),
    ]
    send_page, sent = fake_sender(pages)
    query_variables = variables(issues=True, number=True)

    result = await fetch_pages(send_page, query_variables)

    # Issues ran out first; pull requests share the toggle and stop with them.
    assert len(result) == 2
    assert query_variables.toggles["issues"] is False
    assert query_variables.cursors == {"issues_pointer": None, "pull_requests_pointer": "p2"}
    assert sent[1]["issues_pointer"] == "i1"
    assert sent[1]["pull_requests_pointer"] == "p1"


async def test_null_pull_request_cursor_also_stops_issues(fake_sender, make_page, make_resource) -> None:
    pages = [
        make_page(
            issues=make_resource([{"number": 1}], "i1", True),
            pullRequests=make_resource([], None, False),
        ),
    ]
    send_page, sent = fake_sender(pages)
    query_variables = variables(issues=True, number=True)

    result = await fetch_pages(send_page, query_variables)

    assert len(result) == 1
    assert query_variables.toggles["issues"] is False


async def test_no_request_enables_a_resource_after_its_cursor_is_null(
    fake_sender, make_page, make_resource
) -> None:
    def page(index: int) -> dict:
        if index == 0:
            return make_page(
                stargazers=make_resource([], None, True),
                issues=make_resource([{"number": 1}], "i1", True),
                pullRequests=make_resource([{"number": 2}], "p1", True),
            )
        return make_page(
            issues=make_resource([{"number": index}], f"i{index + 1}", True),
            pullRequests=make_resource([{"number": index}], f"p{index + 1}", True),
        )

    send_page, sent = fake_sender(page)

    result = await fetch_pages(send_page, variables(stargazers=True, issues=True), max_pages=4)

    assert len(result) == 4
    assert sent[0]["stargazers"] is True
    assert all(request["stargazers"] is False for request in sent[1:])
    assert all(request["issues"] is True for request in sent)


async def test_pull_request_nodes_are_marked(fake_sender, make_page, make_resource) -> None:
    pages = [
        make_page(
            issues=make_resource([{"number": 1}], "i1", False),
            pullRequests=make_resource([{"number": 2}], "p1", False),
        ),
    ]
    send_page, _ = fake_sender(pages)

    result = await fetch_pages(send_page, variables(issues=True, number=True))

    repository = result[0]["data"]["repositoryOwner"]["repository"]
    assert repository["pullRequests"]["nodes"] == [{"number": 2, "is_pull_request": True}]
    assert repository["issues"]["nodes"] == [{"number": 1}]


async def test_response_without_resources_stops(fake_sender, make_page) -> None:
    send_page, sent = fake_sender([make_page()])

    result = await fetch_pages(send_page, variables(issues=True))

    assert len(result) == 1
    assert len(sent) == 1


async def test_graphql_errors_abort_the_fetch(fake_sender, make_page, make_resource) -> None:
    pages = [
        make_page(stargazers=make_resource([], "c1", True)),
        {"errors": [{"message": "API rate limit exceeded"}]},
    ]
    send_page, _ = fake_sender(pages)

    with pytest.raises(UpstreamError, match="rate limit"):
        await fetch_pages(send_page, variables(stargazers=True))


@pytest.mark.parametrize(
    "resource",
    [
        {"totalCount": 1, "nodes": None},
        {"totalCount": 1, "nodes": []},
        {"pageInfo": {"endCursor": None, "hasNextPage": False}},
        {"pageInfo": {"endCursor": None, "hasNextPage": False}, "nodes": [None]},
        {"pageInfo": {"endCursor": "c1"}, "nodes": []},
        "not-an-object",
    ],
)
async def test_malformed_resource_is_an_upstream_error(fake_sender, make_page, resource) -> None:
    send_page, _ = fake_sender([make_page(stargazers=resource)])

    with pytest.raises(UpstreamError, match='"stargazers"'):
        await fetch_pages(send_page, variables(stargazers=True))
