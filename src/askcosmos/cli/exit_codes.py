"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""A success envelope was printed."""

GENERAL_ERROR: int = 1
"""An error envelope was printed, whatever the cause."""
