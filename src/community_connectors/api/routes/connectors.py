"""Connector entry-point API routes."""

import base64

from fastapi import APIRouter, Depends, Header, HTTPException

from community_connectors.api.schemas import AdminUserSchema, ConnectorListSchema
from community_connectors.api.service import ConnectorService
from community_connectors.connectors.registry import connector_names
from community_connectors.models.requests import (
    AuthTypeResponse,
    ConnectorConfig,
    Credentials,
    DataRequest,
    DataResponse,
    SchemaRequest,
    SchemaResponse,
)

router = APIRouter(prefix="/connectors", tags=["connectors"])


def get_connector_service() -> ConnectorService:
    """Dependency to get the connector service."""
    return ConnectorService()


def parse_authorization(authorization: str | None) -> Credentials:
    """
    Read the user's credentials from an Authorization header.

    ``Bearer``/``token`` carry an OAuth access token, ``Basic`` a username and
    API token.
    """
    if not authorization:
        return Credentials()

    scheme, _, value = authorization.partition(" ")
    scheme = scheme.lower()
    if scheme in ("bearer", "token"):
        return Credentials(token=value.strip())
    if scheme == "basic":
        try:
            decoded = base64.b64decode(value.strip(), validate=True).decode("utf-8")
        except (ValueError, UnicodeDecodeError):
            raise HTTPException(status_code=401, detail="Malformed basic credentials")
        username, sep, token = decoded.partition(":")
        if not sep:
            raise HTTPException(status_code=401, detail="Malformed basic credentials")
        return Credentials(username=username, token=token)

    raise HTTPException(status_code=401, detail=f"Unsupported authorization scheme: {scheme}")


def get_credentials(authorization: str | None = Header(default=None)) -> Credentials:
    """Dependency to get the caller's credentials."""
    return parse_authorization(authorization)


@router.get("", response_model=ConnectorListSchema)
async def list_connectors():
    """List registered connectors."""
    return ConnectorListSchema(connectors=connector_names())


@router.get("/{name}/auth", response_model=AuthTypeResponse)
async def get_auth_type(
    name: str,
    service: ConnectorService = Depends(get_connector_service),
):
    """Declare how the host authenticates users of this connector."""
    return service.get_auth_type(name)


@router.get("/{name}/admin", response_model=AdminUserSchema)
async def is_admin_user(
    name: str,
    service: ConnectorService = Depends(get_connector_service),
):
    return AdminUserSchema(is_admin=service.is_admin_user(name))


@router.post("/{name}/config", response_model=ConnectorConfig)
async def get_config(
    name: str,
    service: ConnectorService = Depends(get_connector_service),
):
    """Return the inputs of the connector's config screen."""
    return service.get_config(name)


@router.post("/{name}/schema", response_model=SchemaResponse)
async def get_schema(
    name: str,
    request: SchemaRequest,
    service: ConnectorService = Depends(get_connector_service),
    credentials: Credentials = Depends(get_credentials),
):
    """Return every field the connector provides for the given config."""
    return await service.get_schema(name, request, credentials)


@router.post("/{name}/data", response_model=DataResponse)
async def get_data(
    name: str,
    request: DataRequest,
    service: ConnectorService = Depends(get_connector_service),
    credentials: Credentials = Depends(get_credentials),
):
    """
    Fetch rows for the requested fields.

    Values in each row follow the order of ``fields`` in the request.
    """
    return await service.get_data(name, request, credentials)
