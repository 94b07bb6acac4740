"""Allow ``python -m askcosmos`` invocation.

This module simply delegates to the CLI entry point so that
``python -m askcosmos`` behaves identically to the ``askcosmos``
console script.
"""

from __future__ import annotations

from askcosmos.cli.app import cli

if __name__ == "__main__":
    cli()
