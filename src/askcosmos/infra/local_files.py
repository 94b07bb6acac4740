"""Infrastructure: the real environment snapshot and file readers.

These are the concrete capabilities injected into the pure resolvers in
:mod:`askcosmos.core`.  Missing or unreadable dotenv files are reported
as ``None``; an unreadable key file is a configuration error.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from askcosmos.exceptions import ConfigurationError


def environment_snapshot() -> Mapping[str, str]:
    """Return a copy of the process environment."""
    return dict(os.environ)


def read_text_or_none(path: Path) -> str | None:
    """Return the text of *path*, or ``None`` if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def read_key_file(path: Path) -> str | None:
    """Return the key file's text, or ``None`` when it does not exist.

    Raises
    ------
    ConfigurationError
        When the file exists but cannot be read or decoded.
    """
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(
            f"Key file '{path}' could not be read: {exc}",
        ) from exc
