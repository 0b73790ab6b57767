"""Lookup of connector classes by name."""

import httpx

from community_connectors.config import Settings
from community_connectors.connectors.base import BaseConnector
from community_connectors.connectors.github import GitHubConnector
from community_connectors.connectors.jira import JiraConnector
from community_connectors.errors import UnknownConnectorError
from community_connectors.models.requests import Credentials

CONNECTORS: dict[str, type[BaseConnector]] = {
    "github": GitHubConnector,
    "jira": JiraConnector,
}


def connector_names() -> list[str]:
    return sorted(CONNECTORS)


def get_connector(
    name: str,
    settings: Settings | None = None,
    credentials: Credentials | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> BaseConnector:
    """Build a fresh connector for one host invocation."""
    connector_cls = CONNECTORS.get(name)
    if connector_cls is None:
        raise UnknownConnectorError(name)
    return connector_cls(settings=settings, credentials=credentials, transport=transport)
