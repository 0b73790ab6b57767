"""GraphQL document and query variables for the GitHub connector."""

from dataclasses import dataclass, field
from typing import Any, Iterable

from community_connectors.connectors.github.fields import ISSUES, STARGAZERS
from community_connectors.errors import ConfigurationError, UpstreamError
from community_connectors.models.fields import Field

SUPPORTED_GROUPS = (ISSUES, STARGAZERS)

# Include toggles are named after the field ids and groups they switch on.
_ISSUE_NODE = """
          number @include(if: $number)
          title @include(if: $title)
          closed @include(if: $open)
          url @include(if: $url)
          createdAt @include(if: $created_at)
          closedAt @include(if: $closed_at)
          author @include(if: $reporter) {
            login
          }
          labels(first: 100) @include(if: $label) {
            nodes {
              name
            }
          }
          milestone @include(if: $milestone) {
            title
          }
          locked @include(if: $locked)
          comments @include(if: $num_comments) {
            totalCount
          }"""

QUERY = f"""
query (
  $organization: String!,
  $repository: String!,
  $page_size: Int = 100,
  $issues: Boolean = false,
  $stargazers: Boolean = false,
  $issues_pointer: String,
  $pull_requests_pointer: String,
  $star_gazer_pointer: String,
  $number: Boolean = false,
  $title: Boolean = false,
  $open: Boolean = false,
  $url: Boolean = false,
  $reporter: Boolean = false,
  $label: Boolean = false,
  $milestone: Boolean = false,
  $locked: Boolean = false,
  $num_comments: Boolean = false,
  $created_at: Boolean = false,
  $closed_at: Boolean = false
) {{
  repositoryOwner(login: $organization) {{
    repository(name: $repository) {{
      issues(first: $page_size, after: $issues_pointer) @include(if: $issues) {{
        totalCount
        pageInfo {{
          endCursor
          hasNextPage
        }}
        nodes {{{_ISSUE_NODE}
        }}
      }}
      pullRequests(first: $page_size, after: $pull_requests_pointer) @include(if: $issues) {{
        totalCount
        pageInfo {{
          endCursor
          hasNextPage
        }}
        nodes {{{_ISSUE_NODE}
        }}
      }}
      stargazers(first: $page_size, after: $star_gazer_pointer) @include(if: $stargazers) {{
        totalCount
        pageInfo {{
          endCursor
          hasNextPage
        }}
        nodes: edges {{
          starredAt
        }}
      }}
    }}
  }}
}}
"""

# Toggles declared by QUERY; anything else in the toggle map is not sent.
DECLARED_TOGGLES = frozenset({
    "issues",
    "stargazers",
    "number",
    "title",
    "open",
    "url",
    "reporter",
    "label",
    "milestone",
    "locked",
    "num_comments",
    "created_at",
    "closed_at",
})


@dataclass
class QueryVariables:
    """Variables sent with every page request; the pager advances the cursors."""

    organization: str
    repository: str
    toggles: dict[str, bool] = field(default_factory=dict)
    cursors: dict[str, str | None] = field(default_factory=dict)
    page_size: int = 100

    def is_enabled(self, toggle: str) -> bool:
        return self.toggles.get(toggle, False)

    def disable(self, toggle: str):
        self.toggles[toggle] = False

    def to_graphql(self) -> dict[str, Any]:
        """Flatten into the ``variables`` object of a GraphQL request."""
        variables: dict[str, Any] = {
            "organization": self.organization,
            "repository": self.repository,
            "page_size": self.page_size,
        }
        variables.update(
            (name, value) for name, value in self.toggles.items() if name in DECLARED_TOGGLES
        )
        variables.update(self.cursors)
        return variables


def resolve_group(fields: Iterable[Field]) -> str:
    """
    Return the group shared by every requested field.

    Raises:
        ConfigurationError: if fields span several groups or the group is unsupported
    """
    group = None
    for requested in fields:
        if group is None:
            group = requested.group
        elif group != requested.group:
            raise ConfigurationError(
                "You can only choose fields in the same group. "
                f'You chose fields from "{group}" and "{requested.group}"'
            )
    if group not in SUPPORTED_GROUPS:
        raise ConfigurationError(f"Group: {group} is not supported")
    return group


def build_variables(
    group: str,
    config_params: dict[str, str],
    fields: Iterable[Field],
    page_size: int = 100,
) -> QueryVariables:
    """Switch on the group and every requested field."""
    toggles = {group: True}
    for requested in fields:
        toggles[requested.id] = True
    return QueryVariables(
        organization=config_params["organization"],
        repository=config_params["repository"],
        toggles=toggles,
        page_size=page_size,
    )


def page_repository(page: dict) -> dict:
    """Return the repository object of one GraphQL response."""
    if not isinstance(page, dict):
        raise UpstreamError("GraphQL response is not a JSON object")
    errors = page.get("errors")
    if errors:
        first = errors[0] if isinstance(errors, list) and errors else {}
        message = first.get("message") if isinstance(first, dict) else None
        raise UpstreamError(f"GraphQL returned {len(errors)} error(s). First: {message!r}")
    try:
        repository = page["data"]["repositoryOwner"]["repository"]
    except (KeyError, TypeError) as e:
        raise UpstreamError(f"GraphQL response has no repository: {e!r}") from e
    if not isinstance(repository, dict):
        raise UpstreamError("GraphQL response has no repository")
    return repository


def resource_page(key: str, resource: Any) -> tuple[list[dict], dict]:
    """Return the ``nodes`` and ``pageInfo`` of one paginated resource."""
    if not isinstance(resource, dict):
        raise UpstreamError(f'GraphQL resource "{key}" is not an object')
    nodes = resource.get("nodes")
    page_info = resource.get("pageInfo")
    if not isinstance(nodes, list) or not all(isinstance(node, dict) for node in nodes):
        raise UpstreamError(f'GraphQL resource "{key}" has no node list')
    if not isinstance(page_info, dict) or "hasNextPage" not in page_info:
        raise UpstreamError(f'GraphQL resource "{key}" has no pageInfo')
    return nodes, page_info
