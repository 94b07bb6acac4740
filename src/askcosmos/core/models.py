"""Domain models for askcosmos.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and zero
dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


DEFAULT_QUERY_LIMIT: int = 5
"""Number of rows collected by ``query`` when ``--limit`` is omitted."""


# ---------------------------------------------------------------------------
# Connection
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Connection:
    """Resolved endpoint and account key for one invocation."""

    endpoint: str
    """Account endpoint URL (e.g. ``https://localhost:8081/``)."""

    key: str = field(repr=False)
    """Account key.  Excluded from ``repr`` so it never reaches output."""


# ---------------------------------------------------------------------------
# Parsed command
# ---------------------------------------------------------------------------

class Verb(str, enum.Enum):
    VERIFY = "verify"
    QUERY = "query"


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """Verb plus named options, as parsed from the argument vector."""

    verb: Verb
    db: str | None = None
    container: str | None = None
    sql: str | None = None
    limit: int = DEFAULT_QUERY_LIMIT


# ---------------------------------------------------------------------------
# Tagged service results
# ---------------------------------------------------------------------------

class Outcome(str, enum.Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FAILURE = "failure"


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Result of a single request against the service.

    ``status_code`` and ``message`` are only meaningful for
    :attr:`Outcome.FAILURE`.
    """

    outcome: Outcome
    status_code: int | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    @classmethod
    def success(cls) -> ProbeResult:
        return cls(Outcome.SUCCESS)

    @classmethod
    def not_found(cls) -> ProbeResult:
        return cls(Outcome.NOT_FOUND, status_code=404)

    @classmethod
    def failure(cls, status_code: int | None, message: str) -> ProbeResult:
        return cls(Outcome.FAILURE, status_code=status_code, message=message)


@dataclass(frozen=True, slots=True)
class QueryPage:
    """One page of query results together with the page's outcome."""

    result: ProbeResult
    rows: tuple[Any, ...] = ()


# ---------------------------------------------------------------------------
# Verify result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VerifyReport:
    """Successful reachability check at the requested granularity."""

    endpoint: str
    latency_ms: int
    database: str | None = None
    container: str | None = None

    def to_envelope(self) -> dict[str, Any]:
        """Return the success envelope, omitting levels not checked."""
        envelope: dict[str, Any] = {"status": "ok", "endpoint": self.endpoint}
        if self.database is not None:
            envelope["database"] = self.database
        if self.container is not None:
            envelope["container"] = self.container
        envelope["latency_ms"] = self.latency_ms
        return envelope
