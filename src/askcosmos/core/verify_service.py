"""Reachability check at increasing granularity.

account → database → container.  Latency is measured once, around the
account probe, and reported unchanged at every level.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from askcosmos.core.models import Outcome, ProbeResult, VerifyReport
from askcosmos.core.protocols import DatabaseClient
from askcosmos.exceptions import NotFoundError, RequestError


class VerifyService:
    """Runs the ``verify`` verb against an injected :class:`DatabaseClient`.

    Parameters
    ----------
    client:
        Any object satisfying the :class:`DatabaseClient` protocol.
    clock:
        Monotonic clock returning seconds; replaceable in tests.
    """

    def __init__(
        self,
        client: DatabaseClient,
        *,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._client: DatabaseClient = client
        self._clock = clock

    def verify(
        self,
        endpoint: str,
        db: str | None = None,
        container: str | None = None,
    ) -> VerifyReport:
        """Probe the account and, when given, the database and container.

        A container without a database is not probed: only the account
        is checked, though a not-found answer still names the container.

        Raises
        ------
        NotFoundError
            When any probe reports the resource missing.
        RequestError
            When any probe fails for another reason.
        """
        started = self._clock()
        account = self._client.probe_account()
        latency_ms = int((self._clock() - started) * 1000)
        self._check(account, endpoint, db, container)

        if db is None:
            return VerifyReport(endpoint=endpoint, latency_ms=latency_ms)

        self._check(self._client.probe_database(db), endpoint, db, container)
        if container is None:
            return VerifyReport(endpoint=endpoint, latency_ms=latency_ms, database=db)

        self._check(
            self._client.probe_container(db, container), endpoint, db, container,
        )
        return VerifyReport(
            endpoint=endpoint,
            latency_ms=latency_ms,
            database=db,
            container=container,
        )

    # ------------------------------------------------------------------
    # Result mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _check(
        result: ProbeResult,
        endpoint: str,
        db: str | None,
        container: str | None,
    ) -> None:
        if result.ok:
            return
        if result.outcome is Outcome.NOT_FOUND:
            # The message depends on what was asked for, not on which
            # probe answered 404.
            if container is not None:
                raise NotFoundError(
                    f"Container '{container}' not found in database '{db or ''}'",
                )
            if db is not None:
                raise NotFoundError(f"Database '{db}' not found")
            raise NotFoundError(f"Service not reachable at {endpoint}")
        raise RequestError(
            f"Request failed with status {result.status_code}: {result.message}",
            status_code=result.status_code,
        )
