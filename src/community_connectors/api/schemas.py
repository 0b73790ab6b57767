"""API Pydantic schemas for responses that are not host models."""

from pydantic import BaseModel, ConfigDict, Field


# ===== Connectors =====

class ConnectorListSchema(BaseModel):
    """Registered connectors."""

    connectors: list[str]


class AdminUserSchema(BaseModel):
    """Response of isAdminUser."""

    model_config = ConfigDict(populate_by_name=True)

    is_admin: bool = Field(alias="isAdmin")


# ===== Errors =====

class ErrorDetailSchema(BaseModel):
    """Error surfaced to the host."""

    model_config = ConfigDict(populate_by_name=True)

    type: str
    text: str
    debug_text: str | None = Field(default=None, alias="debugText")


class ErrorResponseSchema(BaseModel):
    """Error response body."""

    error: ErrorDetailSchema


# ===== Health =====

class HealthResponseSchema(BaseModel):
    """Health check response schema."""

    status: str
    version: str
    connectors: list[str]
