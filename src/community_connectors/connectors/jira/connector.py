"""Jira connector: issues matching a JQL search, with the site's own fields."""

from functools import partial

import httpx
import structlog

from community_connectors.connectors.base import BaseConnector
from community_connectors.connectors.jira.fields import build_catalog
from community_connectors.connectors.jira.jql import NO_DATE_FILTER, build_jql
from community_connectors.connectors.jira.rows import to_rows
from community_connectors.connectors.jira.search import search_issues
from community_connectors.errors import ConfigurationError, UpstreamError, UserError
from community_connectors.models.requests import (
    AuthType,
    AuthTypeResponse,
    ConfigEntry,
    ConfigOption,
    ConnectorConfig,
    DataRequest,
    DataResponse,
    SchemaRequest,
    SchemaResponse,
)

logger = structlog.get_logger()

REQUIRED_PARAMS = {
    "host": "Host",
    "projects": "Projects",
}

DATE_FILTERS = {
    NO_DATE_FILTER: "No date filter",
    "created": "Created",
    "updated": "Updated",
    "resolved": "Resolved",
}


class JiraConnector(BaseConnector):
    """
    Connector for Jira Cloud issues.

    The field catalog is read from the site on every schema and data request,
    so custom fields show up without redeploying. Authentication uses the
    user's e-mail and API token.
    """

    @property
    def source_type(self) -> str:
        return "jira"

    @property
    def source_name(self) -> str:
        return "Jira"

    def get_auth_type(self) -> AuthTypeResponse:
        return AuthTypeResponse(type=AuthType.USER_TOKEN)

    def get_config(self) -> ConnectorConfig:
        return ConnectorConfig(
            config_params=[
                ConfigEntry(
                    name="host",
                    display_name="Host",
                    help_text="The Jira Cloud site, e.g. example.atlassian.net.",
                    placeholder="example.atlassian.net",
                ),
                ConfigEntry(
                    name="projects",
                    display_name="Projects",
                    help_text="Comma separated project keys.",
                    placeholder="ABC,DEF",
                    allow_override=True,
                ),
                ConfigEntry(
                    name="additionalQuery",
                    display_name="Additional JQL",
                    help_text="Extra JQL appended to the search with AND.",
                    placeholder="status = Done",
                    allow_override=True,
                ),
                ConfigEntry(
                    type="SELECT_SINGLE",
                    name="dateForQuery",
                    display_name="Date filter",
                    help_text="Issue date the report date range applies to.",
                    allow_override=True,
                    options=[
                        ConfigOption(label=label, value=value)
                        for value, label in DATE_FILTERS.items()
                    ],
                ),
            ],
            date_range_required=True,
        )

    def validate_config(self, config_params: dict[str, str]):
        self.require_params(config_params, REQUIRED_PARAMS)
        date_field = config_params.get("dateForQuery") or NO_DATE_FILTER
        if date_field not in DATE_FILTERS:
            raise ConfigurationError(f"Date filter {date_field} is not supported.")

    async def get_schema(self, request: SchemaRequest) -> SchemaResponse:
        self.validate_config(request.config_params)
        host_url = self._host_url(request.config_params["host"])

        async with self._client(auth=self._get_auth()) as client:
            catalog = build_catalog(await self._fetch_fields(client, host_url))

        return SchemaResponse(fields_schema=catalog.build())

    async def get_data(self, request: DataRequest) -> DataResponse:
        config = request.config_params
        self.validate_config(config)
        host_url = self._host_url(config["host"])

        date_field = config.get("dateForQuery") or NO_DATE_FILTER
        if date_field != NO_DATE_FILTER and request.date_range is None:
            raise ConfigurationError("A date range is required to filter by date.")

        jql = build_jql(
            date_field,
            request.date_range.start_date if request.date_range else None,
            request.date_range.end_date if request.date_range else None,
            config.get("projects"),
            config.get("additionalQuery"),
        )

        async with self._client(auth=self._get_auth()) as client:
            catalog = build_catalog(await self._fetch_fields(client, host_url))
            requested = catalog.for_ids(request.field_ids)
            issues = await search_issues(
                partial(self._send_search, client, host_url),
                jql,
                max_results=self.settings.jira_max_results,
            )

        rows = to_rows(issues, requested, host_url)
        logger.info("jira_data_fetched", host=host_url, jql=jql, rows=len(rows))
        return DataResponse(fields_schema=requested.build(), rows=rows)

    @staticmethod
    def _host_url(host: str) -> str:
        host = host.strip().rstrip("/")
        if host.startswith(("http://", "https://")):
            return host
        return f"https://{host}"

    def _get_auth(self) -> httpx.BasicAuth:
        """Basic auth from the stored username and API token."""
        username = self.credentials.username or self.settings.jira_username
        token = self.credentials.token or self.settings.jira_token
        if not (username and token):
            raise UserError("Jira credentials are missing. Enter your username and API token.")
        return httpx.BasicAuth(username, token)

    async def _fetch_fields(self, client: httpx.AsyncClient, host_url: str) -> list[dict]:
        fields = await self._request_json(client, "GET", f"{host_url}/rest/api/3/field")
        if not isinstance(fields, list):
            raise UpstreamError("Jira field list is not a JSON array")
        return fields

    async def _send_search(self, client: httpx.AsyncClient, host_url: str, params: dict) -> dict:
        return await self._request_json(
            client, "GET", f"{host_url}/rest/api/3/search", params=params
        )
