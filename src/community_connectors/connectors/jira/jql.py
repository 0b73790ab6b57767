"""JQL assembly for the Jira search endpoint."""

from datetime import date

NO_DATE_FILTER = "none"


def build_jql(
    date_field: str | None,
    start_date: date | str | None,
    end_date: date | str | None,
    projects: str | None,
    additional_query: str | None,
) -> str:
    """
    Join the date range, project and free-text filters with AND.

    Empty filters are left out; the order of the remaining clauses is fixed.

    Example:
        >>> build_jql("created", "2021-01-01", "2021-01-31", "ABC,DEF", "status = Done")
        'created >= 2021-01-01 AND created <= 2021-01-31 AND project in (ABC,DEF) AND status = Done'
    """
    clauses = []
    if date_field and date_field != NO_DATE_FILTER:
        clauses.append(f"{date_field} >= {start_date} AND {date_field} <= {end_date}")
    if projects:
        clauses.append(f"project in ({projects})")
    if additional_query:
        clauses.append(additional_query)
    return " AND ".join(clauses)
