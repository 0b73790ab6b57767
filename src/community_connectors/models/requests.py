"""Models for the host entry points: config, auth, schema and data."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class AuthType(str, Enum):
    """Authentication mechanisms a connector can declare."""

    NONE = "NONE"
    OAUTH2 = "OAUTH2"
    USER_TOKEN = "USER_TOKEN"
    USER_PASS = "USER_PASS"
    KEY = "KEY"


class _HostModel(BaseModel):
    """Base for models exchanged with the host (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True)


class ConfigOption(_HostModel):
    """One choice of a select input."""

    label: str
    value: str


class ConfigEntry(_HostModel):
    """A single input on the connector's config screen."""

    type: Literal["TEXTINPUT", "SELECT_SINGLE", "INFO"] = "TEXTINPUT"
    name: str
    display_name: str = Field(alias="displayName")
    help_text: str | None = Field(default=None, alias="helpText")
    placeholder: str | None = None
    allow_override: bool = Field(default=False, alias="allowOverride")
    options: list[ConfigOption] = Field(default_factory=list)


class ConnectorConfig(_HostModel):
    """Config screen returned by ``get_config``."""

    config_params: list[ConfigEntry] = Field(alias="configParams")
    date_range_required: bool = Field(default=False, alias="dateRangeRequired")


class AuthTypeResponse(_HostModel):
    """Response of ``get_auth_type``."""

    type: AuthType


class DateRange(_HostModel):
    """Report date range picked by the user."""

    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")


class RequestedField(_HostModel):
    """A field the host asks rows for."""

    name: str


class SchemaRequest(_HostModel):
    """Request passed to ``get_schema``."""

    config_params: dict[str, str] = Field(default_factory=dict, alias="configParams")


class DataRequest(_HostModel):
    """Request passed to ``get_data``."""

    config_params: dict[str, str] = Field(default_factory=dict, alias="configParams")
    fields: list[RequestedField] = Field(default_factory=list)
    date_range: DateRange | None = Field(default=None, alias="dateRange")

    @property
    def field_ids(self) -> list[str]:
        return [field.name for field in self.fields]


class Row(_HostModel):
    """Values aligned positionally with the requested fields."""

    values: list[Any]


class SchemaResponse(_HostModel):
    """Response of ``get_schema``."""

    fields_schema: list[dict] = Field(alias="schema")
    default_dimension: str | None = Field(default=None, alias="defaultDimension")
    default_metric: str | None = Field(default=None, alias="defaultMetric")


class DataResponse(_HostModel):
    """Response of ``get_data``."""

    fields_schema: list[dict] = Field(alias="schema")
    rows: list[Row] = Field(default_factory=list)


@dataclass
class Credentials:
    """Credentials the host stored for the current user."""

    token: str | None = None
    username: str | None = None
