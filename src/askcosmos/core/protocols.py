"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on the azure-cosmos
SDK — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from askcosmos.core.models import ProbeResult, QueryPage


class DatabaseClient(Protocol):
    """Contract for document-database backends.

    Every method reports "not found" and other service failures as a
    tagged :class:`ProbeResult` rather than an exception.  Transport
    failures (the service never answered) are raised as
    :class:`~askcosmos.exceptions.ServiceConnectionError`.
    """

    def probe_account(self) -> ProbeResult:
        """Check that the account endpoint answers."""
        ...  # pragma: no cover

    def probe_database(self, name: str) -> ProbeResult:
        """Check that database *name* exists."""
        ...  # pragma: no cover

    def probe_container(self, db: str, name: str) -> ProbeResult:
        """Check that container *name* exists in database *db*."""
        ...  # pragma: no cover

    def run_query(
        self,
        db: str,
        container: str,
        sql: str,
        page_size: int,
    ) -> Iterator[QueryPage]:
        """Execute *sql* and yield result pages lazily.

        A page is only requested from the service when the caller asks
        the iterator for it.  A failed request yields a single page whose
        ``result`` is not :attr:`~askcosmos.core.models.Outcome.SUCCESS`,
        after which iteration ends.
        """
        ...  # pragma: no cover
