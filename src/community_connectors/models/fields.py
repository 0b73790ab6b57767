"""Field declarations shared by every connector."""

from enum import Enum
from typing import Iterator

from pydantic import BaseModel

from community_connectors.errors import ConfigurationError, UnsupportedFieldError


class FieldType(str, Enum):
    """Semantic type of a field as the host understands it."""

    TEXT = "TEXT"
    NUMBER = "NUMBER"
    BOOLEAN = "BOOLEAN"
    URL = "URL"
    DATETIME = "YEAR_MONTH_DAY_HOUR"

    @property
    def data_type(self) -> str:
        """Primitive type the host stores values of this field as."""
        if self is FieldType.NUMBER:
            return "NUMBER"
        if self is FieldType.BOOLEAN:
            return "BOOLEAN"
        return "STRING"


class FieldRole(str, Enum):
    """Whether a field is grouped by or aggregated."""

    DIMENSION = "DIMENSION"
    METRIC = "METRIC"


class Field(BaseModel):
    """A single column the connector can return."""

    id: str
    name: str
    type: FieldType
    role: FieldRole = FieldRole.DIMENSION
    description: str | None = None
    group: str | None = None

    def to_schema(self) -> dict:
        """Serialize into the host's field schema shape."""
        schema = {
            "name": self.id,
            "label": self.name,
            "dataType": self.type.data_type,
            "semantics": {
                "conceptType": self.role.value,
                "semanticType": self.type.value,
            },
        }
        if self.description:
            schema["description"] = self.description
        if self.group:
            schema["group"] = self.group
        return schema


class FieldCatalog:
    """
    Ordered, id-unique collection of fields.

    Connectors declare their full catalog once and narrow it to the fields a
    data request asks for with ``for_ids``, which keeps the requested order.
    """

    def __init__(self, fields: list[Field] | None = None):
        self._fields: dict[str, Field] = {}
        self.default_dimension: str | None = None
        self.default_metric: str | None = None
        for field in fields or []:
            self.add(field)

    def add(self, field: Field) -> Field:
        if field.id in self._fields:
            raise ValueError(f"Duplicate field id: {field.id}")
        self._fields[field.id] = field
        return field

    def new_dimension(
        self,
        id: str,
        name: str,
        type: FieldType = FieldType.TEXT,
        description: str | None = None,
        group: str | None = None,
    ) -> Field:
        return self.add(
            Field(
                id=id,
                name=name,
                type=type,
                role=FieldRole.DIMENSION,
                description=description,
                group=group,
            )
        )

    def new_metric(
        self,
        id: str,
        name: str,
        type: FieldType = FieldType.NUMBER,
        description: str | None = None,
        group: str | None = None,
    ) -> Field:
        return self.add(
            Field(
                id=id,
                name=name,
                type=type,
                role=FieldRole.METRIC,
                description=description,
                group=group,
            )
        )

    def get(self, field_id: str) -> Field | None:
        return self._fields.get(field_id)

    def for_ids(self, field_ids: list[str]) -> "FieldCatalog":
        """
        Narrow the catalog to the given ids, in the given order.

        An id missing from the catalog fails here, before any request is
        sent. A catalog field without an extraction rule only fails when the
        first row reaches it.

        Raises:
            UnsupportedFieldError: if an id is not declared in this catalog
            ConfigurationError: if an id is requested more than once
        """
        selected = FieldCatalog()
        for field_id in field_ids:
            field = self._fields.get(field_id)
            if field is None:
                raise UnsupportedFieldError(field_id)
            if field_id in selected:
                raise ConfigurationError(f'Field "{field.name}" was chosen more than once.')
            selected.add(field)
        return selected

    @property
    def ids(self) -> list[str]:
        return list(self._fields)

    def as_list(self) -> list[Field]:
        return list(self._fields.values())

    def build(self) -> list[dict]:
        """Return the host schema for every field, in catalog order."""
        return [field.to_schema() for field in self._fields.values()]

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._fields
