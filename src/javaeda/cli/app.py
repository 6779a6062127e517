"""CLI application entry point and command routing for javaeda.

This module is the **sole error boundary** for the entire application.
It catches :class:`~javaeda.exceptions.JavaedaError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the
  application, automation and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from javaeda.cli import exit_codes
from javaeda.cli.console import console, escape
from javaeda.cli.log_config import configure_logging
from javaeda.exceptions import JavaedaError
from javaeda.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``javaeda status``        — layer readiness
    * ``javaeda doctor``        — environment diagnostics
    * ``javaeda pages-health``  — Pages site health check
    * ``javaeda auto-patch``    — automatic patch release
    """
    parser = argparse.ArgumentParser(
        prog="javaeda",
        description="Javaeda framework status and repository automation.",
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
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug).",
    )
    subparsers = parser.add_subparsers(dest="command")

    status = subparsers.add_parser("status", help="Show framework layer readiness.")
    status.add_argument("--plain", action="store_true", help="Print the plain-text summary.")

    subparsers.add_parser("doctor", help="Run environment diagnostics.")

    pages = subparsers.add_parser("pages-health", help="Check the GitHub Pages site.")
    pages.add_argument("--url", default=None, help="Site URL (default: derived from GITHUB_REPOSITORY).")
    pages.add_argument(
        "--path",
        dest="paths",
        action="append",
        default=None,
        help="Extra page path to probe; may be repeated.",
    )
    pages.add_argument("--retries", type=_positive_int, default=None, help="Attempts per page.")

    patch = subparsers.add_parser("auto-patch", help="Detect and publish a patch release.")
    patch.add_argument(
        "java_version",
        nargs="?",
        default=None,
        help="Java version recorded in the release notes (default: 17).",
    )
    patch.add_argument(
        "--force",
        action="store_true",
        default=None,
        help="Force a patch release (manual workflow runs only).",
    )
    patch.add_argument("--dry-run", action="store_true", help="Decide without publishing.")
    patch.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_status(args: argparse.Namespace) -> int:
    from javaeda.cli.status import run_status

    return run_status(plain=args.plain)


def _handle_doctor(args: argparse.Namespace) -> int:
    from javaeda.cli.doctor import run_doctor

    return run_doctor()


def _handle_pages_health(args: argparse.Namespace) -> int:
    from javaeda.cli.pages import run_pages_health

    return run_pages_health(url=args.url, paths=args.paths, retries=args.retries)


def _handle_auto_patch(args: argparse.Namespace) -> int:
    from javaeda.cli.release import run_auto_patch

    return run_auto_patch(
        java_version=args.java_version,
        force=args.force,
        dry_run=args.dry_run,
        assume_yes=args.yes,
    )


_HANDLERS = {
    "status": _handle_status,
    "doctor": _handle_doctor,
    "pages-health": _handle_pages_health,
    "auto-patch": _handle_auto_patch,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the javaeda CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)
    return _HANDLERS[args.command](args)


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
    except JavaedaError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
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
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
