"""Infrastructure layer — external system integration.

This layer wraps all interaction with the azure-cosmos SDK, the process
environment and the local filesystem.  Every raw third-party exception
must be caught here and either mapped to a tagged result or re-raised
as an :class:`~askcosmos.exceptions.AskCosmosError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from askcosmos.infra.cosmos_client import CosmosDatabaseClient, create_client
from askcosmos.infra.local_files import (
    environment_snapshot,
    read_key_file,
    read_text_or_none,
)

__all__: list[str] = [
    "CosmosDatabaseClient",
    "create_client",
    "environment_snapshot",
    "read_key_file",
    "read_text_or_none",
]
