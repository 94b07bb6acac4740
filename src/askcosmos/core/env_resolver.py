"""Named-setting lookup over the environment and local dotenv files.

Resolution is a pure function of an environment snapshot and a
file-reader capability, so it can be exercised without touching the
real process environment or filesystem.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

FileReader = Callable[[Path], str | None]
"""Returns a file's text, or ``None`` when it cannot be read."""

DOTENV_FILES: tuple[str, ...] = (".env.local", ".env")
"""Checked in this order, relative to the working directory."""

_QUOTES: tuple[str, ...] = ('"', "'")


def resolve_env(
    name: str,
    environ: Mapping[str, str],
    read_file: FileReader,
    *,
    directory: Path | None = None,
    files: Sequence[str] = DOTENV_FILES,
) -> str | None:
    """Return the value of setting *name*, or ``None`` when absent.

    The process environment wins when it holds a non-blank value.
    Otherwise ``.env.local`` and then ``.env`` are scanned; the first
    line assigning a non-blank value to *name* is used.
    """
    value = environ.get(name)
    if value is not None and value.strip():
        return value.strip()

    base = directory if directory is not None else Path()
    for filename in files:
        text = read_file(base / filename)
        if text is None:
            continue
        found = find_dotenv_value(name, text)
        if found is not None:
            return found
    return None


def find_dotenv_value(name: str, text: str) -> str | None:
    """Scan dotenv *text* for the first non-blank assignment to *name*."""
    for line in text.splitlines():
        if line.strip().startswith("#"):
            continue
        key, sep, raw_value = line.partition("=")
        if not sep or key.strip() != name:
            continue
        value = strip_quotes(raw_value.strip())
        if value.strip():
            return value
    return None


def strip_quotes(value: str) -> str:
    """Remove one layer of matching surrounding quotes, if present."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value
