"""Connectors package."""

from community_connectors.connectors.base import BaseConnector
from community_connectors.connectors.github import GitHubConnector
from community_connectors.connectors.jira import JiraConnector
from community_connectors.connectors.registry import connector_names, get_connector

__all__ = [
    "BaseConnector",
    "GitHubConnector",
    "JiraConnector",
    "connector_names",
    "get_connector",
]
