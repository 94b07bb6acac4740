"""Custom exception hierarchy for askcosmos.

All exceptions that cross layer boundaries must inherit from
:class:`AskCosmosError`.  Raw azure-cosmos exceptions must NEVER
propagate beyond the infrastructure layer — they are either mapped to a
tagged probe result or re-raised as a typed subclass defined here.

Hierarchy
---------
AskCosmosError
├── ConfigurationError
├── UsageError
├── NotFoundError
├── RequestError
└── ServiceConnectionError
"""

from __future__ import annotations


class AskCosmosError(Exception):
    """Base exception for all askcosmos errors.

    The CLI error boundary renders ``str(exc)`` as the ``message`` of
    the error envelope.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance, shown on stderr in debug mode."""


# --- Before any network activity ------------------------------------------

class ConfigurationError(AskCosmosError):
    """Raised when no usable connection information can be resolved."""


class UsageError(AskCosmosError):
    """Raised for missing or invalid command-line arguments."""


# --- Service responses -----------------------------------------------------

class NotFoundError(AskCosmosError):
    """Raised when the account, database or container does not exist."""


class RequestError(AskCosmosError):
    """Raised for any other non-success response from the service."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code: int | None = status_code


class ServiceConnectionError(AskCosmosError):
    """Raised when the service cannot be reached at the transport level."""
