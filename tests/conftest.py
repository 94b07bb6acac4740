"""Shared pytest fixtures and configuration for the askcosmos test suite.

Guidelines
----------
* No network access in any test.
* azure-cosmos is mocked at the infra boundary.
* Core tests drive a fake :class:`DatabaseClient` — no side effects.
* Tests must not depend on the caller's environment or working directory.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from askcosmos.core.models import ProbeResult, QueryPage

COSMOS_VARS = (
    "COSMOS_CONNECTION_STRING",
    "COSMOS_ENDPOINT",
    "COSMOS_KEY",
    "COSMOS_KEY_FILE",
    "ASKCOSMOS_DEBUG",
)


class FakeDatabaseClient:
    """In-memory :class:`DatabaseClient` recording every call."""

    def __init__(
        self,
        *,
        account: ProbeResult | None = None,
        database: ProbeResult | None = None,
        container: ProbeResult | None = None,
        pages: list[QueryPage] | None = None,
    ) -> None:
        self.account = account or ProbeResult.success()
        self.database = database or ProbeResult.success()
        self.container = container or ProbeResult.success()
        self.pages = pages or []
        self.calls: list[tuple[Any, ...]] = []
        self.pages_served = 0

    def probe_account(self) -> ProbeResult:
        self.calls.append(("account",))
        return self.account

    def probe_database(self, name: str) -> ProbeResult:
        self.calls.append(("database", name))
        return self.database

    def probe_container(self, db: str, name: str) -> ProbeResult:
        self.calls.append(("container", db, name))
        return self.container

    def run_query(
        self, db: str, container: str, sql: str, page_size: int,
    ) -> Iterator[QueryPage]:
        self.calls.append(("query", db, container, sql, page_size))
        for page in self.pages:
            self.pages_served += 1
            yield page


def rows_page(*rows: Any) -> QueryPage:
    return QueryPage(result=ProbeResult.success(), rows=tuple(rows))


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Empty Cosmos settings and an empty working directory."""
    for name in COSMOS_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
