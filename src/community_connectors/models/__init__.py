"""Models package."""

from community_connectors.models.fields import Field, FieldCatalog, FieldRole, FieldType
from community_connectors.models.requests import (
    AuthType,
    AuthTypeResponse,
    ConfigEntry,
    ConfigOption,
    ConnectorConfig,
    Credentials,
    DataRequest,
    DataResponse,
    DateRange,
    RequestedField,
    Row,
    SchemaRequest,
    SchemaResponse,
)

__all__ = [
    "AuthType",
    "AuthTypeResponse",
    "ConfigEntry",
    "ConfigOption",
    "ConnectorConfig",
    "Credentials",
    "DataRequest",
    "DataResponse",
    "DateRange",
    "Field",
    "FieldCatalog",
    "FieldRole",
    "FieldType",
    "RequestedField",
    "Row",
    "SchemaRequest",
    "SchemaResponse",
]
