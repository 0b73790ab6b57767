"""GitHub connector: issues, pull requests and stargazers of one repository."""

from functools import partial

import httpx
import structlog

from community_connectors.connectors.base import BaseConnector
from community_connectors.connectors.github.fields import build_catalog
from community_connectors.connectors.github.pager import fetch_pages
from community_connectors.connectors.github.query import (
    QUERY,
    build_variables,
    resolve_group,
)
from community_connectors.connectors.github.rows import (
    RULES_BY_GROUP,
    check_catalog_rules,
    check_rules,
    to_rows,
)
from community_connectors.errors import UserError
from community_connectors.models.requests import (
    AuthType,
    AuthTypeResponse,
    ConfigEntry,
    ConnectorConfig,
    DataRequest,
    DataResponse,
    SchemaRequest,
    SchemaResponse,
)
from community_connectors.observability import PAGES_FETCHED

logger = structlog.get_logger()

REQUIRED_PARAMS = {
    "organization": "Organization",
    "repository": "Repository",
}


class GitHubConnector(BaseConnector):
    """
    Connector for a GitHub repository.

    Every data request reads a single field group: either issues (issues and
    pull requests together) or stargazers. Pages are fetched through the
    GraphQL API with include toggles derived from the requested fields.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.catalog = build_catalog()
        if self.settings.strict_fields:
            check_catalog_rules(self.catalog)

    @property
    def source_type(self) -> str:
        return "github"

    @property
    def source_name(self) -> str:
        return "GitHub"

    def get_auth_type(self) -> AuthTypeResponse:
        return AuthTypeResponse(type=AuthType.OAUTH2)

    def get_config(self) -> ConnectorConfig:
        return ConnectorConfig(
            config_params=[
                ConfigEntry(
                    name="organization",
                    display_name="Organization",
                    help_text="The name of the organization (or user) that owns the repository.",
                    placeholder="googledatastudio",
                    allow_override=True,
                ),
                ConfigEntry(
                    name="repository",
                    display_name="Repository",
                    help_text="The name of the repository.",
                    placeholder="community-connectors",
                    allow_override=True,
                ),
            ]
        )

    def validate_config(self, config_params: dict[str, str]):
        self.require_params(config_params, REQUIRED_PARAMS)

    async def get_schema(self, request: SchemaRequest) -> SchemaResponse:
        self.validate_config(request.config_params)
        return SchemaResponse(
            fields_schema=self.catalog.build(),
            default_dimension=self.catalog.default_dimension,
            default_metric=self.catalog.default_metric,
        )

    async def get_data(self, request: DataRequest) -> DataResponse:
        self.validate_config(request.config_params)

        requested = self.catalog.for_ids(request.field_ids)
        group = resolve_group(requested)
        if self.settings.strict_fields:
            check_rules(requested, RULES_BY_GROUP[group])

        variables = build_variables(
            group,
            request.config_params,
            requested,
            page_size=self.settings.github_page_size,
        )

        async with self._client(headers=self._get_headers()) as client:
            pages = await fetch_pages(
                partial(self._send_page, client),
                variables,
                max_pages=self.settings.github_max_pages,
            )

        PAGES_FETCHED.labels(connector=self.source_type).observe(len(pages))
        rows = to_rows(pages, requested)
        logger.info(
            "github_data_fetched",
            organization=variables.organization,
            repository=variables.repository,
            group=group,
            pages=len(pages),
            rows=len(rows),
        )
        return DataResponse(fields_schema=requested.build(), rows=rows)

    def _get_headers(self) -> dict:
        """Get HTTP headers for the GitHub GraphQL API."""
        token = self.credentials.token or self.settings.github_token
        if not token:
            raise UserError("GitHub is not authorized. Reconnect your GitHub account.")
        return {
            "Accept": "application/json",
            "Authorization": f"token {token}",
            "User-Agent": "community-connectors/0.1.0",
        }

    async def _send_page(self, client: httpx.AsyncClient, variables: dict) -> dict:
        return await self._request_json(
            client,
            "POST",
            self.settings.github_graphql_url,
            json={"query": QUERY, "variables": variables},
        )
