"""Connection resolution — the credential precedence chain.

Priority (strict, each branch terminal)
---------------------------------------
1. ``COSMOS_CONNECTION_STRING``
2. ``COSMOS_ENDPOINT`` with ``COSMOS_KEY_FILE``, else ``COSMOS_KEY``
3. nothing set → guidance listing both accepted shapes

Every failure raises :class:`~askcosmos.exceptions.ConfigurationError`
before any network activity.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from askcosmos.core.models import Connection
from askcosmos.exceptions import ConfigurationError

CONNECTION_STRING_VAR = "COSMOS_CONNECTION_STRING"
ENDPOINT_VAR = "COSMOS_ENDPOINT"
KEY_VAR = "COSMOS_KEY"
KEY_FILE_VAR = "COSMOS_KEY_FILE"

_ENDPOINT_PREFIX = "accountendpoint="
_KEY_PREFIX = "accountkey="

NO_CONFIGURATION_MESSAGE = (
    "No Cosmos connection info found. Set one of:\n"
    f"  {CONNECTION_STRING_VAR}=AccountEndpoint=...;AccountKey=...\n"
    f"  {ENDPOINT_VAR}=https://... + {KEY_FILE_VAR}=<path> "
    f"(or {KEY_VAR}=<value>)"
)

SettingLookup = Callable[[str], str | None]
"""Resolves a setting name to a value, e.g. a bound :func:`resolve_env`."""

KeyFileReader = Callable[[Path], str | None]
"""Returns the key file's text, or ``None`` when the file does not exist."""


def resolve_connection(
    lookup: SettingLookup,
    read_key_file: KeyFileReader,
) -> Connection:
    """Resolve the (endpoint, key) pair for this invocation.

    Raises
    ------
    ConfigurationError
        When no branch of the precedence chain yields a connection.
    """
    connection_string = lookup(CONNECTION_STRING_VAR)
    if connection_string is not None:
        return parse_connection_string(connection_string)

    endpoint = lookup(ENDPOINT_VAR)
    if endpoint is None:
        raise ConfigurationError(NO_CONFIGURATION_MESSAGE)

    key_file = lookup(KEY_FILE_VAR)
    if key_file is not None:
        contents = read_key_file(Path(key_file))
        if contents is None:
            raise ConfigurationError(
                f"{KEY_FILE_VAR} points to '{key_file}' which does not exist",
            )
        return Connection(endpoint=endpoint, key=contents.strip())

    inline_key = lookup(KEY_VAR)
    if inline_key is not None:
        return Connection(endpoint=endpoint, key=inline_key)

    raise ConfigurationError(
        f"{ENDPOINT_VAR} is set but neither {KEY_FILE_VAR} nor {KEY_VAR} is set",
    )


def parse_connection_string(value: str) -> Connection:
    """Extract ``AccountEndpoint`` and ``AccountKey`` from *value*.

    Segment prefixes are matched case-insensitively.  Anything short of
    both parts is a configuration error; there is no partial result.
    """
    endpoint: str | None = None
    key: str | None = None
    for segment in value.split(";"):
        if not segment:
            continue
        lowered = segment.lower()
        if lowered.startswith(_ENDPOINT_PREFIX):
            endpoint = segment[len(_ENDPOINT_PREFIX):].strip()
        elif lowered.startswith(_KEY_PREFIX):
            key = segment[len(_KEY_PREFIX):].strip()

    if endpoint is None or key is None:
        raise ConfigurationError(
            f"{CONNECTION_STRING_VAR} is set but could not parse "
            "AccountEndpoint and AccountKey",
        )
    return Connection(endpoint=endpoint, key=key)
