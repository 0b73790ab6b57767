"""Jira field catalog derived from the remote field definitions."""

from community_connectors.errors import UpstreamError
from community_connectors.models.fields import FieldCatalog, FieldType


def build_catalog(remote_fields: list[dict]) -> FieldCatalog:
    """
    Build the catalog for one request from ``/rest/api/3/field``.

    ``id`` and ``url`` always come first. Numeric remote fields become
    metrics, everything else a dimension.
    """
    fields = FieldCatalog()
    fields.new_dimension("id", "ID", FieldType.TEXT)
    fields.new_dimension("url", "Url", FieldType.URL)

    for remote in remote_fields:
        if not isinstance(remote, dict) or not remote.get("id"):
            raise UpstreamError(f"Jira field definition has no id: {remote!r}")
        field_id = remote.get("key") or remote["id"]
        if field_id in fields:
            continue

        schema_type = (remote.get("schema") or {}).get("type")
        if schema_type == "number":
            fields.new_metric(
                field_id, remote.get("name") or field_id, FieldType.NUMBER, remote["id"]
            )
        elif schema_type == "datetime":
            fields.new_dimension(
                field_id, remote.get("name") or field_id, FieldType.DATETIME, remote["id"]
            )
        else:
            fields.new_dimension(
                field_id, remote.get("name") or field_id, FieldType.TEXT, remote["id"]
            )

    return fields
