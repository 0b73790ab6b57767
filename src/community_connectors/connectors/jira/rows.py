"""Map Jira issues to host rows."""

import json
import re
from datetime import datetime, timezone
from typing import Any

from community_connectors.errors import ResponseShapeError
from community_connectors.models.fields import FieldCatalog, FieldType
from community_connectors.models.requests import Row

_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")


def format_datetime(value: str) -> str:
    """Format a Jira timestamp as ``yyyyMMddHH`` in GMT."""
    normalized = _COMPACT_OFFSET.sub(r"\1:\2", value.replace("Z", "+00:00"))
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError as e:
        raise ResponseShapeError(f"Unreadable Jira timestamp: {value!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc).strftime("%Y%m%d%H")


def field_value(value: Any) -> Any:
    """Reduce a Jira field value to something the host can display."""
    if value is None:
        return ""
    if isinstance(value, dict):
        for key in ("displayName", "value", "name"):
            if value.get(key):
                return value[key]
        return json.dumps(value, sort_keys=True)
    if isinstance(value, list):
        return ",".join(str(field_value(item)) for item in value)
    return value


def issue_url(host_url: str, key: str) -> str:
    return f"{host_url}/browse/{key}"


def _issue_attr(issue: dict, name: str) -> Any:
    value = issue.get(name)
    if value is None:
        raise ResponseShapeError(f'Jira issue has no "{name}"')
    return value


def to_rows(issues: list[dict], fields: FieldCatalog, host_url: str) -> list[Row]:
    """Build one row per issue, values in requested field order."""
    rows = []
    for issue in issues:
        if not isinstance(issue, dict):
            raise ResponseShapeError("Jira issue is not a JSON object")
        values = []
        for requested in fields:
            if requested.id == "id":
                values.append(_issue_attr(issue, "id"))
            elif requested.id == "url":
                values.append(issue_url(host_url, _issue_attr(issue, "key")))
            elif requested.id == "issuekey":
                values.append(_issue_attr(issue, "key"))
            else:
                raw = (issue.get("fields") or {}).get(requested.id)
                if requested.type is FieldType.DATETIME:
                    values.append(format_datetime(raw) if raw else "")
                else:
                    values.append(field_value(raw))
        rows.append(Row(values=values))
    return rows
