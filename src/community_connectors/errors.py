"""Exceptions raised by the connectors.

User errors carry a message meant for the person building the report and are
surfaced through the host's user-error channel. Upstream errors are generic
failures of the remote API and are not reformatted.
"""


class ConnectorError(Exception):
    """Base class for every connector failure."""


class UserError(ConnectorError):
    """An error the end user can act on."""

    def __init__(self, text: str, debug_text: str | None = None):
        super().__init__(text)
        self.text = text
        self.debug_text = debug_text


class ConfigurationError(UserError):
    """Missing config input or an invalid field selection."""


class UnsupportedFieldError(UserError):
    """A requested field has no extraction rule."""

    def __init__(self, field_id: str):
        super().__init__(
            f"You cannot use {field_id} yet.",
            debug_text=f'Field "{field_id}" has not been accounted for in code yet.',
        )
        self.field_id = field_id


class UpstreamError(ConnectorError):
    """The remote API returned a failure or an unreadable response."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ResponseShapeError(UpstreamError):
    """A response node is missing data a requested field depends on."""


class UnknownConnectorError(ConnectorError):
    """No connector is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Unknown connector: {name}")
        self.name = name
