"""Stderr diagnostics console with optional Rich support.

Standard output is reserved for the JSON envelope, so every
human-oriented rendering (hints and debug tracebacks) goes
through the proxy defined here, which always targets stderr.
"""

from __future__ import annotations

import sys
import traceback
from typing import Any

from askcosmos.exceptions import AskCosmosError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``AskCosmosError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise AskCosmosError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except AskCosmosError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)

	def print_exception(self, exc: BaseException) -> None:
		"""Render *exc* with its traceback on stderr."""
		try:
			rich_console = get_rich_console()
		except AskCosmosError:
			traceback.print_exception(type(exc), exc, exc.__traceback__, file=sys.stderr)
			return
		from rich.traceback import Traceback

		rich_console.print(Traceback.from_exception(type(exc), exc, exc.__traceback__))


console = _ConsoleProxy()
