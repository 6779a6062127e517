"""``javaeda doctor`` — environment diagnostics command.

Gathers runtime information and renders a Rich table summarising
whether the environment satisfies javaeda's requirements.

This module lives in the CLI layer — it may import from every other
layer, and it renders via Rich.  It purely collects and displays
diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata

from javaeda.application.facade import JavaedaApplication
from javaeda.cli import exit_codes
from javaeda.cli.console import console, rich_table_class
from javaeda.core.framework import format_readiness
from javaeda.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _package_check(distribution: str, *, required: bool) -> Check:
    """Return (label, value, status) for an installed distribution."""
    try:
        version = metadata.version(distribution)
    except metadata.PackageNotFoundError:
        status = "[red]FAIL[/red]" if required else "[yellow]WARN[/yellow]"
        return distribution, "NOT INSTALLED", status
    return distribution, version, "[green]OK[/green]"


def _httpx_check() -> Check:
    return _package_check("httpx", required=True)


def _pydantic_settings_check() -> Check:
    return _package_check("pydantic-settings", required=True)


def _rich_check() -> Check:
    return _package_check("rich", required=False)


def _questionary_check() -> Check:
    return _package_check("questionary", required=False)


def _layer_checks() -> list[Check]:
    """One row per framework layer; a layer that is not ready fails."""
    rows: list[Check] = []
    for report in JavaedaApplication.layer_reports():
        status = "[green]OK[/green]" if report.ready else "[red]FAIL[/red]"
        rows.append((f"{report.name} layer", format_readiness(report.ready), status))
    return rows


def _javaeda_version_check() -> Check:
    """Return (label, value, status) for the javaeda version row."""
    return "javaeda", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\njavaeda doctor", file=sys.stderr)
    print("=" * 62, file=sys.stderr)
    print(f"{'Component':<22} {'Value':<28} {'Status':<8}", file=sys.stderr)
    print("-" * 62, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<22} {value:<28} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  WARN rows do not fail.
    """
    checks = [
        _javaeda_version_check(),
        _python_version_check(),
        _httpx_check(),
        _pydantic_settings_check(),
        _rich_check(),
        _questionary_check(),
        *_layer_checks(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    table_class = rich_table_class()
    if table_class is not None:
        table = table_class(
            title="javaeda doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
    else:
        _print_plain_doctor_table(checks)

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]" if table_class else "Some checks failed.")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]" if table_class else "All checks passed.")
    return exit_codes.SUCCESS
