"""azure-cosmos backed implementation of :class:`~askcosmos.core.protocols.DatabaseClient`.

This module is the **only** place in the codebase that imports
``azure.cosmos``.  HTTP error responses are translated into tagged
:class:`~askcosmos.core.models.ProbeResult` values; transport failures
are re-raised as :class:`~askcosmos.exceptions.ServiceConnectionError`.
Nothing raw escapes the infrastructure boundary.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import urllib3
from azure.core.exceptions import AzureError
from azure.cosmos import CosmosClient
from azure.cosmos.exceptions import CosmosHttpResponseError, CosmosResourceNotFoundError

from askcosmos.core.models import Connection, ProbeResult, QueryPage
from askcosmos.exceptions import ServiceConnectionError


def build_sdk_client(endpoint: str, key: str) -> CosmosClient:
    """Construct an ``azure.cosmos.CosmosClient`` for *endpoint*.

    Certificate validation is disabled so that the emulator's
    self-signed certificate is accepted.  The Python SDK talks to the
    HTTP gateway only; there is no direct-mode transport to select.
    """
    urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
    return CosmosClient(endpoint, credential=key, connection_verify=False)


class CosmosDatabaseClient:
    """Concrete :class:`DatabaseClient` backed by the azure-cosmos SDK.

    Usage::

        client = CosmosDatabaseClient(connection)
        result = client.probe_account()

    The SDK client reads the database account while it is constructed,
    so construction is deferred to the first request and counted as
    part of the account probe.
    """

    def __init__(
        self,
        connection: Connection,
        *,
        sdk_factory: Callable[[str, str], Any] = build_sdk_client,
    ) -> None:
        self._connection: Connection = connection
        self._sdk_factory = sdk_factory
        self._sdk_client: Any = None

    @property
    def endpoint(self) -> str:
        return self._connection.endpoint

    def _client(self) -> Any:
        if self._sdk_client is None:
            self._sdk_client = self._sdk_factory(
                self._connection.endpoint, self._connection.key,
            )
        return self._sdk_client

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def probe_account(self) -> ProbeResult:
        return self._call(lambda: self._client().get_database_account())

    def probe_database(self, name: str) -> ProbeResult:
        return self._call(lambda: self._client().get_database_client(name).read())

    def probe_container(self, db: str, name: str) -> ProbeResult:
        return self._call(
            lambda: self._client()
            .get_database_client(db)
            .get_container_client(name)
            .read(),
        )

    def run_query(
        self,
        db: str,
        container: str,
        sql: str,
        page_size: int,
    ) -> Iterator[QueryPage]:
        """Yield one :class:`QueryPage` per service round trip."""
        try:
            items = (
                self._client()
                .get_database_client(db)
                .get_container_client(container)
                .query_items(
                    query=sql,
                    enable_cross_partition_query=True,
                    max_item_count=page_size,
                )
            )
            for page in items.by_page():
                yield QueryPage(result=ProbeResult.success(), rows=tuple(page))
        except CosmosHttpResponseError as exc:
            yield QueryPage(result=_map_http_error(exc))
        except AzureError as exc:
            raise _connection_error(exc) from exc

    # ------------------------------------------------------------------
    # Exception mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _call(request: Callable[[], Any]) -> ProbeResult:
        """Run *request* and translate SDK exceptions into a result."""
        try:
            request()
        except CosmosHttpResponseError as exc:
            return _map_http_error(exc)
        except AzureError as exc:
            raise _connection_error(exc) from exc
        return ProbeResult.success()


def _map_http_error(exc: CosmosHttpResponseError) -> ProbeResult:
    if isinstance(exc, CosmosResourceNotFoundError) or exc.status_code == 404:
        return ProbeResult.not_found()
    return ProbeResult.failure(exc.status_code, _message_of(exc))


def _message_of(exc: Exception) -> str:
    # CosmosHttpResponseError.message is prefixed with "Status code: N"; the
    # raw service text is kept separately.
    for attribute in ("http_error_message", "message"):
        value = getattr(exc, attribute, None)
        if value:
            return str(value)
    return str(exc)


def _connection_error(exc: AzureError) -> ServiceConnectionError:
    return ServiceConnectionError(
        _message_of(exc),
        hint="Check that the endpoint is reachable and the emulator is running.",
    )


def create_client(connection: Connection) -> CosmosDatabaseClient:
    """Return a :class:`DatabaseClient` configured for *connection*."""
    return CosmosDatabaseClient(connection)
