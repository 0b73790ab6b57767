"""GitHub field catalog."""

from community_connectors.models.fields import FieldCatalog, FieldType

ISSUES = "issues"
STARGAZERS = "stargazers"


def build_catalog() -> FieldCatalog:
    """Declare every field the GitHub connector can return."""
    fields = FieldCatalog()

    # Issues
    default_dimension = fields.new_dimension(
        "number", "Number", FieldType.TEXT, "The issue number.", group=ISSUES
    )
    fields.new_dimension(
        "title", "Title", FieldType.TEXT, "The title of the issue.", group=ISSUES
    )
    fields.new_dimension(
        "open",
        "Is Open",
        FieldType.BOOLEAN,
        "True if the issue is open, false otherwise.",
        group=ISSUES,
    )
    fields.new_dimension(
        "url", "Issue URL", FieldType.URL, "The URL of the issue.", group=ISSUES
    )
    fields.new_dimension(
        "reporter", "Reporter", FieldType.TEXT, "Issue reporter username.", group=ISSUES
    )
    fields.new_dimension(
        "label", "Label", FieldType.TEXT, "Issue has this label.", group=ISSUES
    )
    fields.new_dimension(
        "milestone",
        "Milestone",
        FieldType.TEXT,
        "Issue added to this milestone.",
        group=ISSUES,
    )
    fields.new_dimension(
        "locked",
        "Is Locked",
        FieldType.BOOLEAN,
        "True if the issue is locked, false otherwise.",
        group=ISSUES,
    )
    default_metric = fields.new_metric(
        "num_comments",
        "Number of Comments",
        FieldType.NUMBER,
        "Number of comments on the issue.",
        group=ISSUES,
    )
    fields.new_dimension(
        "is_pull_request",
        "Is Pull Request",
        FieldType.BOOLEAN,
        "True if this issue is a Pull Request, false otherwise.",
        group=ISSUES,
    )
    fields.new_dimension(
        "created_at",
        "Creation Time",
        FieldType.DATETIME,
        "The time this issue was created.",
        group=ISSUES,
    )
    fields.new_dimension(
        "closed_at",
        "Close Time",
        FieldType.DATETIME,
        "The time this issue was closed.",
        group=ISSUES,
    )

    # Stars
    fields.new_dimension(
        "starred_at",
        "Starred Date",
        FieldType.DATETIME,
        "The date the star was given.",
        group=STARGAZERS,
    )
    fields.new_metric(
        "stars", "Stars", FieldType.NUMBER, "The number of stars", group=STARGAZERS
    )

    fields.default_dimension = default_dimension.id
    fields.default_metric = default_metric.id
    return fields
