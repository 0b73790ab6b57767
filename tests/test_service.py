from __future__ import annotations

import httpx
import pytest
from prometheus_client import REGISTRY

from community_connectors.api.service import ConnectorService
from community_connectors.connectors import GitHubConnector, JiraConnector, get_connector
from community_connectors.errors import ConfigurationError, UnknownConnectorError, UpstreamError
from community_connectors.models.requests import DataRequest, RequestedField


def sample(name: str, **labels: str) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_registry_builds_fresh_connectors(settings) -> None:
    first = get_connector("github", settings=settings)
    second = get_connector("github", settings=settings)

    assert isinstance(first, GitHubConnector)
    assert isinstance(get_connector("jira", settings=settings), JiraConnector)
    assert first is not second


def test_registry_rejects_unknown_name(settings) -> None:
    with pytest.raises(UnknownConnectorError, match="gitlab"):
        get_connector("gitlab", settings=settings)


async def test_data_metrics_count_outcomes(settings, make_page, make_resource) -> None:
    page = make_page(stargazers=make_resource([{"starredAt": "2021-01-01T00:00:00Z"}], None, False))
    service = ConnectorService(
        settings=settings,
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json=page)),
    )
    request = DataRequest(
        config_params={"organization": "octo-org", "repository": "octo-repo"},
        fields=[RequestedField(name="stars")],
    )
    before_success = sample("connector_data_requests_total", connector="github", status="success")
    before_rows = sample("connector_rows_returned_total", connector="github")

    response = await service.get_data("github", request)

    assert len(response.rows) == 1
    assert sample("connector_data_requests_total", connector="github", status="success") == before_success + 1
    assert sample("connector_rows_returned_total", connector="github") == before_rows + 1


async def test_data_metrics_count_user_errors(settings) -> None:
    service = ConnectorService(settings=settings)
    request = DataRequest(config_params={}, fields=[RequestedField(name="stars")])
    before = sample("connector_data_requests_total", connector="github", status="user_error")

    with pytest.raises(ConfigurationError):
        await service.get_data("github", request)

    assert sample("connector_data_requests_total", connector="github", status="user_error") == before + 1


async def test_data_metrics_count_upstream_errors(settings) -> None:
    service = ConnectorService(
        settings=settings,
        transport=httpx.MockTransport(lambda request: httpx.Response(503)),
    )
    request = DataRequest(
        config_params={"organization": "octo-org", "repository": "octo-repo"},
        fields=[RequestedField(name="stars")],
    )
    before = sample("connector_data_requests_total", connector="github", status="upstream_error")

    with pytest.raises(UpstreamError):
        await service.get_data("github", request)

    assert sample("connector_data_requests_total", connector="github", status="upstream_error") == before + 1
