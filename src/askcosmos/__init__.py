"""askcosmos — Cosmos DB connectivity check and ad-hoc query tool.

Every invocation prints exactly one line of compact JSON on stdout.
"""

from askcosmos.version import __version__

__all__: list[str] = ["__version__"]
