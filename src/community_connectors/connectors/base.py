"""Abstract base connector implementing the host's entry-point contract."""

from abc import ABC, abstractmethod
from typing import Any

import httpx
import structlog

from community_connectors.config import Settings, get_settings
from community_connectors.errors import ConfigurationError, UpstreamError
from community_connectors.models.requests import (
    AuthTypeResponse,
    ConnectorConfig,
    Credentials,
    DataRequest,
    DataResponse,
    SchemaRequest,
    SchemaResponse,
)
from community_connectors.observability import UPSTREAM_REQUESTS

logger = structlog.get_logger()


class BaseConnector(ABC):
    """
    Abstract base class for community connectors.

    A connector is built for a single host invocation: it holds the settings,
    the user's credentials and an optional HTTP transport, and owns no state
    that outlives the call.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        credentials: Credentials | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self.credentials = credentials or Credentials()
        self._transport = transport

    @property
    @abstractmethod
    def source_type(self) -> str:
        """Return the registry name of the connector."""
        pass

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return a human-readable name for the connector."""
        pass

    @abstractmethod
    def get_auth_type(self) -> AuthTypeResponse:
        """Declare how the host must authenticate the user."""
        pass

    @abstractmethod
    def get_config(self) -> ConnectorConfig:
        """Declare the inputs of the config screen."""
        pass

    @abstractmethod
    async def get_schema(self, request: SchemaRequest) -> SchemaResponse:
        """Return every field the connector can provide."""
        pass

    @abstractmethod
    async def get_data(self, request: DataRequest) -> DataResponse:
        """Fetch rows for the requested fields."""
        pass

    def is_admin_user(self) -> bool:
        return False

    @staticmethod
    def require_params(config_params: dict[str, str], labels: dict[str, str]):
        """
        Check that every required config input has a value.

        Args:
            config_params: Values entered on the config screen
            labels: Required param id -> label used in the error message
        """
        for param_id, label in labels.items():
            if not config_params.get(param_id):
                raise ConfigurationError(f"{label} cannot be left blank.")

    def _client(self, **kwargs) -> httpx.AsyncClient:
        """Create the HTTP client used for one entry-point call."""
        return httpx.AsyncClient(
            timeout=self.settings.http_timeout_seconds,
            transport=self._transport,
            **kwargs,
        )

    async def _request_json(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        **kwargs,
    ) -> Any:
        """Send one request and decode its JSON body."""
        response = await client.request(method, url, **kwargs)
        UPSTREAM_REQUESTS.labels(
            connector=self.source_type, status=str(response.status_code)
        ).inc()

        if not response.is_success:
            logger.warning(
                "upstream_request_failed",
                connector=self.source_type,
                url=str(response.request.url),
                status=response.status_code,
            )
            raise UpstreamError(
                f"{self.source_name} API returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(
                f"{self.source_name} API returned invalid JSON: {e}",
                status_code=response.status_code,
            ) from e
