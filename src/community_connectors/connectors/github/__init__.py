"""GitHub connector package."""

from community_connectors.connectors.github.connector import GitHubConnector
from community_connectors.connectors.github.fields import ISSUES, STARGAZERS, build_catalog
from community_connectors.connectors.github.pager import TRACKS, fetch_pages
from community_connectors.connectors.github.query import (
    QUERY,
    QueryVariables,
    build_variables,
    resolve_group,
)
from community_connectors.connectors.github.rows import format_date, to_rows

__all__ = [
    "GitHubConnector",
    "ISSUES",
    "QUERY",
    "QueryVariables",
    "STARGAZERS",
    "TRACKS",
    "build_catalog",
    "build_variables",
    "fetch_pages",
    "format_date",
    "resolve_group",
    "to_rows",
]
