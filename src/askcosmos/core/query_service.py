"""Bounded read-only query execution with result-shape normalisation."""

from __future__ import annotations

from typing import Any

from askcosmos.core.models import DEFAULT_QUERY_LIMIT, Outcome
from askcosmos.core.protocols import DatabaseClient
from askcosmos.exceptions import NotFoundError, RequestError, UsageError

MISSING_ARGUMENTS_MESSAGE = "query requires --db, --cont, and --sql"


class QueryService:
    """Runs the ``query`` verb against an injected :class:`DatabaseClient`."""

    def __init__(self, client: DatabaseClient) -> None:
        self._client: DatabaseClient = client

    def query(
        self,
        db: str | None,
        container: str | None,
        sql: str | None,
        limit: int = DEFAULT_QUERY_LIMIT,
    ) -> Any:
        """Collect up to *limit* rows and return them in output shape.

        Exactly one row is returned bare so that ``SELECT VALUE COUNT(1)``
        yields a scalar; any other count is returned as a list.

        Raises
        ------
        UsageError
            When *db*, *container* or *sql* is missing.  The service is
            not contacted.
        NotFoundError
            When the database or container does not exist.
        RequestError
            When a page request fails for another reason.
        """
        db, container, sql = validate_query_arguments(db, container, sql)
        rows = self.collect_rows(db, container, sql, limit)
        return normalize_rows(rows)

    def collect_rows(
        self,
        db: str,
        container: str,
        sql: str,
        limit: int,
    ) -> list[Any]:
        """Accumulate rows page by page, stopping once *limit* is reached."""
        rows: list[Any] = []
        if limit <= 0:
            return rows

        pages = self._client.run_query(db, container, sql, limit)
        try:
            for page in pages:
                if page.result.outcome is Outcome.NOT_FOUND:
                    raise NotFoundError(
                        f"Database '{db}' or container '{container}' not found",
                    )
                if not page.result.ok:
                    raise RequestError(
                        f"Query failed with status {page.result.status_code}: "
                        f"{page.result.message}",
                        status_code=page.result.status_code,
                    )
                for row in page.rows:
                    rows.append(row)
                    if len(rows) >= limit:
                        return rows
        finally:
            close = getattr(pages, "close", None)
            if close is not None:
                close()
        return rows


def validate_query_arguments(
    db: str | None,
    container: str | None,
    sql: str | None,
) -> tuple[str, str, str]:
    """Return the required inputs, or raise :class:`UsageError`."""
    if not db or not container or not sql:
        raise UsageError(MISSING_ARGUMENTS_MESSAGE)
    return db, container, sql


def normalize_rows(rows: list[Any]) -> Any:
    """Unwrap a single row; leave zero or several rows as a list."""
    if len(rows) == 1:
        return rows[0]
    return list(rows)
