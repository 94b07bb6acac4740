"""JSON envelope rendering for standard output.

Every invocation writes exactly one line: compact JSON, no trailing
whitespace beyond the newline.
"""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

ERROR_STATUS = "error"


def render(value: Any) -> str:
    """Serialise *value* as single-line compact JSON."""
    return json.dumps(value, separators=(",", ":"))


def error_envelope(message: str) -> dict[str, str]:
    return {"status": ERROR_STATUS, "message": message}


def write_line(line: str, stream: TextIO | None = None) -> None:
    """Write an already rendered envelope to *stream* (stdout by default)."""
    out = stream if stream is not None else sys.stdout
    out.write(line + "\n")
    out.flush()


def emit(value: Any, stream: TextIO | None = None) -> None:
    """Write *value* as one JSON line to *stream* (stdout by default)."""
    write_line(render(value), stream)


def emit_error(message: str, stream: TextIO | None = None) -> None:
    emit(error_envelope(message), stream)
