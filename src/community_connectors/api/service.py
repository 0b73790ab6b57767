"""Connector service running host entry points with logging and metrics."""

import time

import httpx
import structlog

from community_connectors.config import Settings, get_settings
from community_connectors.connectors.base import BaseConnector
from community_connectors.connectors.registry import get_connector
from community_connectors.errors import UpstreamError, UserError
from community_connectors.models.requests import (
    AuthTypeResponse,
    ConnectorConfig,
    Credentials,
    DataRequest,
    DataResponse,
    SchemaRequest,
    SchemaResponse,
)
from community_connectors.observability import DATA_LATENCY, DATA_REQUESTS, ROWS_RETURNED

logger = structlog.get_logger()


class ConnectorService:
    """
    Runs the host entry points of the registered connectors.

    A new connector is built for every call; nothing is shared between
    invocations besides the settings.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self.transport = transport

    def connector(self, name: str, credentials: Credentials | None = None) -> BaseConnector:
        return get_connector(
            name,
            settings=self.settings,
            credentials=credentials,
            transport=self.transport,
        )

    def get_auth_type(self, name: str) -> AuthTypeResponse:
        return self.connector(name).get_auth_type()

    def get_config(self, name: str) -> ConnectorConfig:
        return self.connector(name).get_config()

    def is_admin_user(self, name: str) -> bool:
        return self.connector(name).is_admin_user()

    async def get_schema(
        self,
        name: str,
        request: SchemaRequest,
        credentials: Credentials | None = None,
    ) -> SchemaResponse:
        response = await self.connector(name, credentials).get_schema(request)
        logger.info("schema_complete", connector=name, fields=len(response.fields_schema))
        return response

    async def get_data(
        self,
        name: str,
        request: DataRequest,
        credentials: Credentials | None = None,
    ) -> DataResponse:
        """
        Fetch rows and record request metrics.

        Args:
            name: Registered connector name
            request: Config params, requested fields and date range
            credentials: Credentials of the current user

        Returns:
            DataResponse with the schema of the requested fields and the rows
        """
        start_time = time.time()
        connector = self.connector(name, credentials)

        try:
            response = await connector.get_data(request)
        except UserError as e:
            DATA_REQUESTS.labels(connector=name, status="user_error").inc()
            logger.info("data_user_error", connector=name, error=e.text)
            raise
        except UpstreamError as e:
            DATA_REQUESTS.labels(connector=name, status="upstream_error").inc()
            logger.error("data_upstream_error", connector=name, error=str(e))
            raise

        latency_seconds = time.time() - start_time
        DATA_REQUESTS.labels(connector=name, status="success").inc()
        DATA_LATENCY.labels(connector=name).observe(latency_seconds)
        ROWS_RETURNED.labels(connector=name).inc(len(response.rows))

        logger.info(
            "data_complete",
            connector=name,
            fields=request.field_ids,
            rows=len(response.rows),
            latency_ms=latency_seconds * 1000,
        )
        return response
