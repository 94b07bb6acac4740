"""CLI application entry point and command routing for askcosmos.

This module is the **sole error boundary** for the entire application.
It catches :class:`~askcosmos.exceptions.AskCosmosError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering each
as a JSON error envelope on stdout and returning a well-defined exit
code.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  services and the infrastructure adapters.
* Standard output carries exactly one JSON line per invocation.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Mapping, Sequence
from functools import partial
from pathlib import Path
from typing import Any, NoReturn

from askcosmos.cli import exit_codes, output
from askcosmos.cli.console import console
from askcosmos.core.connection_resolver import resolve_connection
from askcosmos.core.env_resolver import resolve_env
from askcosmos.core.models import DEFAULT_QUERY_LIMIT, CommandSpec, Connection, Verb
from askcosmos.core.protocols import DatabaseClient
from askcosmos.core.query_service import QueryService, validate_query_arguments
from askcosmos.core.verify_service import VerifyService
from askcosmos.exceptions import AskCosmosError, UsageError
from askcosmos.infra import cosmos_client
from askcosmos.infra.local_files import (
    environment_snapshot,
    read_key_file,
    read_text_or_none,
)

DEBUG_VAR = "ASKCOSMOS_DEBUG"

USAGE_MESSAGE = (
    "No command specified. Usage: verify | verify --db <name> [--cont <name>] "
    "| query --db <name> --cont <name> --sql <sql> [--limit N]"
)

ClientFactory = Callable[[Connection], DatabaseClient]


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports problems as :class:`UsageError`.

    argparse would otherwise print to stderr and exit with status 2.
    """

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"--limit must be a positive integer, got '{value}'",
        ) from None
    if number < 1:
        raise argparse.ArgumentTypeError(
            f"--limit must be a positive integer, got '{value}'",
        )
    return number


class _KeepFirst(argparse.Action):
    """Store an option's value unless an earlier occurrence already did."""

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        if getattr(namespace, self.dest, None) is None:
            setattr(namespace, self.dest, values)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Help and version flags are not registered: stdout is reserved for
    the JSON envelope.  Option names must be spelled out in full, and a
    repeated option keeps its first value.
    """
    parser = _ArgumentParser(prog="askcosmos", add_help=False, allow_abbrev=False)
    verbs = parser.add_subparsers(dest="verb", parser_class=_ArgumentParser)

    verify = verbs.add_parser(Verb.VERIFY.value, add_help=False, allow_abbrev=False)
    verify.add_argument("--db", action=_KeepFirst)
    verify.add_argument("--cont", dest="container", action=_KeepFirst)

    query = verbs.add_parser(Verb.QUERY.value, add_help=False, allow_abbrev=False)
    query.add_argument("--db", action=_KeepFirst)
    query.add_argument("--cont", dest="container", action=_KeepFirst)
    query.add_argument("--sql", action=_KeepFirst)
    query.add_argument("--limit", type=_positive_int, action=_KeepFirst)
    return parser


def parse_command(argv: Sequence[str]) -> CommandSpec:
    """Turn the argument vector into a :class:`CommandSpec`.

    Raises
    ------
    UsageError
        For an empty vector, an unknown verb, or invalid options.
    """
    if not argv:
        raise UsageError(USAGE_MESSAGE)

    verb_token = argv[0].lower()
    known = [verb.value for verb in Verb]
    if verb_token not in known:
        raise UsageError(
            f"Unknown command '{argv[0]}'. Expected: {', '.join(known)}",
        )

    args = _build_parser().parse_args([verb_token, *argv[1:]])
    return CommandSpec(
        verb=Verb(args.verb),
        db=getattr(args, "db", None),
        container=getattr(args, "container", None),
        sql=getattr(args, "sql", None),
        limit=getattr(args, "limit", None) or DEFAULT_QUERY_LIMIT,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_verify(
    command: CommandSpec,
    connection: Connection,
    client_factory: ClientFactory,
) -> dict[str, Any]:
    client = client_factory(connection)
    report = VerifyService(client).verify(
        connection.endpoint, command.db, command.container,
    )
    return report.to_envelope()


def _handle_query(
    command: CommandSpec,
    connection: Connection,
    client_factory: ClientFactory,
) -> Any:
    client = client_factory(connection)
    return QueryService(client).query(
        command.db, command.container, command.sql, command.limit,
    )


def run(
    argv: Sequence[str],
    *,
    environ: Mapping[str, str] | None = None,
    directory: Path | None = None,
    client_factory: ClientFactory | None = None,
) -> Any:
    """Execute one command and return its success value.

    Usage errors are raised before credentials are resolved, and
    credentials are resolved before any client is built.
    """
    command = parse_command(argv)
    if command.verb is Verb.QUERY:
        validate_query_arguments(command.db, command.container, command.sql)

    lookup = partial(
        resolve_env,
        environ=environ if environ is not None else environment_snapshot(),
        read_file=read_text_or_none,
        directory=directory,
    )

    connection = resolve_connection(lookup, read_key_file)
    factory = client_factory if client_factory is not None else cosmos_client.create_client

    if command.verb is Verb.VERIFY:
        return _handle_verify(command, connection, factory)
    return _handle_query(command, connection, factory)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def _debug_enabled() -> bool:
    return bool(os.environ.get(DEBUG_VAR, "").strip())


def main(
    argv: Sequence[str] | None = None,
    *,
    client_factory: ClientFactory | None = None,
) -> int:
    """Run the askcosmos CLI and print exactly one JSON envelope.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    client_factory:
        Builds the :class:`DatabaseClient` for a resolved connection.
        Defaults to the azure-cosmos adapter.

    Returns
    -------
    int
        OS process exit code.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        result = run(args, client_factory=client_factory)
        line = output.render(result)
        output.write_line(line)
    except AskCosmosError as exc:
        if _debug_enabled() and exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        output.emit_error(str(exc))
        return exit_codes.GENERAL_ERROR
    except KeyboardInterrupt:
        output.emit_error("Aborted by user.")
        return exit_codes.GENERAL_ERROR
    except Exception as exc:  # noqa: BLE001
        if _debug_enabled():
            console.print_exception(exc)
        output.emit_error(str(exc) or type(exc).__name__)
        return exit_codes.GENERAL_ERROR

    return exit_codes.SUCCESS


def cli() -> None:
    """Console-script entry point."""
    sys.exit(main())
