"""CLI application entry point and command routing for tracc.

This module is the **sole error boundary** for the entire application.
It catches :class:`~tracc.exceptions.TraccError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No tracking rules live here — all work is delegated to
  :class:`~tracc.core.tracking_service.TrackingService`.
* ``print()`` is forbidden; Rich consoles are used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from rich.markup import escape

from tracc.cli import exit_codes
from tracc.cli.console import console, output
from tracc.config.logging import configure_logging
from tracc.core.models import format_timestamp
from tracc.core.tracking_service import TrackingService
from tracc.exceptions import TraccError
from tracc.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``tracc begin`` — start a work period
    * ``tracc end``   — end the running work period
    * ``tracc show``  — list all work periods
    """
    parser = argparse.ArgumentParser(
        prog="tracc",
        description="Minimal personal time tracker.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging on stderr.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.add_parser("begin", help="Start a new work period.")
    subparsers.add_parser("end", help="End the running work period.")
    subparsers.add_parser("show", help="List all recorded work periods.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_service() -> TrackingService:
    """Wire the JSON Lines store into a tracking service."""
    from tracc.config.paths import ensure_data_file
    from tracc.infra.jsonl_store import JsonlPeriodStore

    return TrackingService(JsonlPeriodStore(ensure_data_file()))


def _handle_begin(service: TrackingService) -> int:
    previous = service.last_period
    period = service.begin()

    if previous is not None and previous.end is not None:
        console.print(
            "[bold green]Starting new period.[/bold green] "
            f"Last one ended at {format_timestamp(previous.end)}"
        )
    else:
        console.print("[bold green]Starting new period.[/bold green]")
    console.print(f"[dim]Started at {format_timestamp(period.start)}[/dim]")
    return exit_codes.SUCCESS


def _handle_end(service: TrackingService) -> int:
    period = service.end()
    console.print(
        "[bold green]Ending period[/bold green] "
        f"started at {format_timestamp(period.start)}"
    )
    return exit_codes.SUCCESS


def _handle_show(service: TrackingService) -> int:
    for period in service.list_periods():
        output.print(period.render())
    return exit_codes.SUCCESS


_HANDLERS = {
    "begin": _handle_begin,
    "end": _handle_end,
    "show": _handle_show,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the tracc CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    TraccError
        Propagated unchanged for :func:`cli` to render.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    handler = _HANDLERS[args.command]
    return handler(_build_service())


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TraccError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
