"""Core / service layer — credential resolution and verb logic.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O; capabilities are injected.
* No imports from ``cli`` or ``infra``.
"""

from askcosmos.core.connection_resolver import resolve_connection
from askcosmos.core.env_resolver import resolve_env
from askcosmos.core.models import (
    CommandSpec,
    Connection,
    Outcome,
    ProbeResult,
    QueryPage,
    Verb,
    VerifyReport,
)
from askcosmos.core.protocols import DatabaseClient
from askcosmos.core.query_service import QueryService
from askcosmos.core.verify_service import VerifyService

__all__: list[str] = [
    "CommandSpec",
    "Connection",
    "DatabaseClient",
    "Outcome",
    "ProbeResult",
    "QueryPage",
    "QueryService",
    "Verb",
    "VerifyReport",
    "VerifyService",
    "resolve_connection",
    "resolve_env",
]
