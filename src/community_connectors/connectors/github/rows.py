"""Map GitHub GraphQL pages to host rows."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from community_connectors.connectors.github.fields import ISSUES, STARGAZERS
from community_connectors.connectors.github.query import page_repository, resource_page
from community_connectors.errors import ResponseShapeError, UnsupportedFieldError
from community_connectors.models.fields import Field, FieldCatalog
from community_connectors.models.requests import Row


def format_date(value: str) -> str:
    """Keep the year, month, day and hour digits of an ISO-8601 timestamp."""
    return value[0:4] + value[5:7] + value[8:10] + value[11:13]


@dataclass(frozen=True)
class FieldRule:
    """How one field is read from a response node."""

    extract: Callable[[dict], Any]
    node_key: str | None = None
    nullable: bool = False


ISSUE_RULES: dict[str, FieldRule] = {
    "number": FieldRule(lambda node: str(node["number"]), "number"),
    "title": FieldRule(lambda node: node["title"], "title"),
    "open": FieldRule(lambda node: not node["closed"], "closed"),
    "url": FieldRule(lambda node: node["url"], "url"),
    "reporter": FieldRule(lambda node: node["author"]["login"], "author"),
    "label": FieldRule(
        lambda node: ", ".join(label["name"] for label in node["labels"]["nodes"]),
        "labels",
    ),
    "milestone": FieldRule(
        lambda node: node["milestone"]["title"] if node["milestone"] else "",
        "milestone",
        nullable=True,
    ),
    "locked": FieldRule(lambda node: node["locked"], "locked"),
    "num_comments": FieldRule(lambda node: node["comments"]["totalCount"], "comments"),
    "is_pull_request": FieldRule(lambda node: "is_pull_request" in node),
    "created_at": FieldRule(lambda node: format_date(node["createdAt"]), "createdAt"),
    "closed_at": FieldRule(
        lambda node: format_date(node["closedAt"]) if node["closedAt"] else "",
        "closedAt",
        nullable=True,
    ),
}

STAR_RULES: dict[str, FieldRule] = {
    "stars": FieldRule(lambda node: 1),
    "starred_at": FieldRule(lambda node: format_date(node["starredAt"]), "starredAt"),
}

RULES_BY_GROUP: dict[str, dict[str, FieldRule]] = {
    ISSUES: ISSUE_RULES,
    STARGAZERS: STAR_RULES,
}


def check_rules(fields: Iterable[Field], rules: dict[str, FieldRule]):
    """Fail on the first field without an extraction rule."""
    for requested in fields:
        if requested.id not in rules:
            raise UnsupportedFieldError(requested.id)


def check_catalog_rules(catalog: FieldCatalog):
    """Fail if a declared field has no rule for its group."""
    for declared in catalog:
        check_rules([declared], RULES_BY_GROUP.get(declared.group, {}))


def check_contracts(
    resource_key: str,
    nodes: list[dict],
    fields: Iterable[Field],
    rules: dict[str, FieldRule],
):
    """
    Verify that every node of a page carries the data the requested fields read.

    Fields without a rule are skipped; they fail when their row is built.

    Raises:
        ResponseShapeError: if a node lacks a key or holds a forbidden null
    """
    for requested in fields:
        rule = rules.get(requested.id)
        if rule is None or rule.node_key is None:
            continue
        for node in nodes:
            value = node.get(rule.node_key)
            if value is None and (rule.node_key not in node or not rule.nullable):
                raise ResponseShapeError(
                    f'{resource_key} node is missing "{rule.node_key}" '
                    f'required by field "{requested.id}"'
                )


def build_rows(
    nodes: list[dict],
    fields: list[Field],
    rules: dict[str, FieldRule],
) -> list[Row]:
    """Build one row per node, values in requested field order."""
    rows = []
    for node in nodes:
        values = []
        for requested in fields:
            rule = rules.get(requested.id)
            if rule is None:
                raise UnsupportedFieldError(requested.id)
            values.append(rule.extract(node))
        rows.append(Row(values=values))
    return rows


def to_rows(pages: list[dict], fields: FieldCatalog) -> list[Row]:
    """
    Convert fetched pages to rows.

    The first page decides which resources are read: stargazers when present,
    otherwise issues followed by pull requests of every page.
    """
    if not pages:
        return []

    requested = fields.as_list()
    first = page_repository(pages[0])
    if first.get("stargazers") is not None:
        keys, rules = ("stargazers",), STAR_RULES
    elif first.get("issues") is not None or first.get("pullRequests") is not None:
        keys, rules = ("issues", "pullRequests"), ISSUE_RULES
    else:
        return []

    rows: list[Row] = []
    for page in pages:
        repository = page_repository(page)
        for key in keys:
            resource = repository.get(key)
            if resource is None:
                continue
            nodes, _ = resource_page(key, resource)
            check_contracts(key, nodes, requested, rules)
            rows.extend(build_rows(nodes, requested, rules))
    return rows
