"""Jira connector package."""

from community_connectors.connectors.jira.connector import JiraConnector
from community_connectors.connectors.jira.fields import build_catalog
from community_connectors.connectors.jira.jql import build_jql
from community_connectors.connectors.jira.rows import format_datetime, to_rows
from community_connectors.connectors.jira.search import search_issues

__all__ = [
    "JiraConnector",
    "build_catalog",
    "build_jql",
    "format_datetime",
    "search_issues",
    "to_rows",
]
