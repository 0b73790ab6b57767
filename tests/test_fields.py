from __future__ import annotations

import pytest

from community_connectors.connectors.github.fields import ISSUES, STARGAZERS, build_catalog
from community_connectors.errors import ConfigurationError, UnsupportedFieldError
from community_connectors.models.fields import Field, FieldCatalog, FieldRole, FieldType


def test_for_ids_keeps_requested_order() -> None:
    catalog = build_catalog()

    selected = catalog.for_ids(["title", "number", "open"])

    assert selected.ids == ["title", "number", "open"]


def test_for_ids_rejects_undeclared_field() -> None:
    with pytest.raises(UnsupportedFieldError) as exc_info:
        build_catalog().for_ids(["number", "foo"])

    assert exc_info.value.field_id == "foo"
    assert "foo" in exc_info.value.text


def test_for_ids_rejects_repeated_field() -> None:
    with pytest.raises(ConfigurationError, match="more than once"):
        build_catalog().for_ids(["number", "title", "number"])


def test_duplicate_field_id_is_rejected() -> None:
    catalog = FieldCatalog()
    catalog.new_dimension("id", "ID")

    with pytest.raises(ValueError):
        catalog.new_dimension("id", "Other")


def test_github_catalog_groups_and_defaults() -> None:
    catalog = build_catalog()

    assert catalog.default_dimension == "number"
    assert catalog.default_metric == "num_comments"
    assert {f.id for f in catalog if f.group == STARGAZERS} == {"starred_at", "stars"}
    assert len([f for f in catalog if f.group == ISSUES]) == 12
    assert catalog.get("num_comments").role is FieldRole.METRIC
    assert catalog.get("created_at").type is FieldType.DATETIME


def test_field_schema_shape() -> None:
    field = Field(
        id="created_at",
        name="Creation Time",
        type=FieldType.DATETIME,
        description="The time this issue was created.",
        group=ISSUES,
    )

    assert field.to_schema() == {
        "name": "created_at",
        "label": "Creation Time",
        "dataType": "STRING",
        "semantics": {
            "conceptType": "DIMENSION",
            "semanticType": "YEAR_MONTH_DAY_HOUR",
        },
        "description": "The time this issue was created.",
        "group": "issues",
    }


def test_metric_schema_uses_number_data_type() -> None:
    field = Field(id="stars", name="Stars", type=FieldType.NUMBER, role=FieldRole.METRIC)

    schema = field.to_schema()

    assert schema["dataType"] == "NUMBER"
    assert schema["semantics"]["conceptType"] == "METRIC"
    assert "group" not in schema
