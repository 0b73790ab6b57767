from __future__ import annotations

import re

import pytest

from community_connectors.connectors.github.fields import build_catalog
from community_connectors.connectors.github.query import (
    DECLARED_TOGGLES,
    QUERY,
    build_variables,
    page_repository,
    resolve_group,
)
from community_connectors.errors import ConfigurationError, UpstreamError

CONFIG = {"organization": "octo-org", "repository": "octo-repo"}


@pytest.mark.parametrize(
    "field_ids, group",
    [
        (["number"], "issues"),
        (["number", "title", "open", "label"], "issues"),
        (["is_pull_request", "closed_at"], "issues"),
        (["stars"], "stargazers"),
        (["starred_at", "stars"], "stargazers"),
    ],
)
def test_toggles_are_group_plus_requested_fields(field_ids, group) -> None:
    fields = build_catalog().for_ids(field_ids)

    resolved = resolve_group(fields)
    variables = build_variables(resolved, CONFIG, fields)

    assert resolved == group
    assert variables.toggles == {group: True, **{field_id: True for field_id in field_ids}}
    assert variables.cursors == {}


def test_mixed_groups_name_both_groups() -> None:
    fields = build_catalog().for_ids(["number", "stars"])

    with pytest.raises(ConfigurationError) as exc_info:
        resolve_group(fields)

    assert '"issues"' in exc_info.value.text
    assert '"stargazers"' in exc_info.value.text


def test_no_fields_is_not_a_supported_group() -> None:
    with pytest.raises(ConfigurationError, match="not supported"):
        resolve_group([])


def test_graphql_variables_only_send_declared_toggles() -> None:
    fields = build_catalog().for_ids(["stars", "starred_at"])
    variables = build_variables("stargazers", CONFIG, fields, page_size=50)
    variables.cursors["star_gazer_pointer"] = "abc"

    sent = variables.to_graphql()

    assert sent == {
        "organization": "octo-org",
        "repository": "octo-repo",
        "page_size": 50,
        "stargazers": True,
        "star_gazer_pointer": "abc",
    }


def test_declared_toggles_match_query_variables() -> None:
    declared = set(re.findall(r"\$(\w+): Boolean", QUERY))

    assert declared == DECLARED_TOGGLES


def test_every_issue_field_has_a_query_toggle() -> None:
    catalog = build_catalog()
    synthetic = {"is_pull_request", "stars", "starred_at"}

    for field in catalog:
        if field.id not in synthetic:
            assert field.id in DECLARED_TOGGLES


def test_page_repository_raises_on_graphql_errors() -> None:
    page = {"errors": [{"message": "Could not resolve to a Repository"}], "data": None}

    with pytest.raises(UpstreamError, match="Could not resolve"):
        page_repository(page)


def test_page_repository_raises_without_repository() -> None:
    with pytest.raises(UpstreamError):
        page_repository({"data": {"repositoryOwner": None}})
