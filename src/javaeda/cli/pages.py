"""``javaeda pages-health`` — scheduled GitHub Pages health check."""

from __future__ import annotations

import sys

from javaeda.automation.pages_health import PagesHealthService
from javaeda.automation.settings import PagesHealthSettings
from javaeda.cli import exit_codes
from javaeda.cli.console import console, escape, rich_table_class
from javaeda.core.models import PageCheck, PagesHealthReport
from javaeda.infra.github_client import GitHubClient
from javaeda.infra.pages_probe import HttpPageProbe


def _format_status(check: PageCheck) -> str:
    if check.status_code is None:
        return "no response"
    return str(check.status_code)


def _format_elapsed(check: PageCheck) -> str:
    if check.elapsed_ms is None:
        return "—"
    return f"{check.elapsed_ms:.0f} ms"


def _render_report(report: PagesHealthReport) -> None:
    table_class = rich_table_class()
    if table_class is None:
        print(f"\nPages health: {report.url}", file=sys.stderr)
        for check in report.checks:
            verdict = "OK" if check.healthy else "FAIL"
            detail = f" ({check.error})" if check.error else ""
            print(
                f"  {verdict:<5} {_format_status(check):<12} {_format_elapsed(check):<10} "
                f"{check.url}{detail}",
                file=sys.stderr,
            )
    else:
        table = table_class(
            title=f"Pages health: {report.url}",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("URL", style="bold")
        table.add_column("HTTP", justify="right")
        table.add_column("Time", justify="right")
        table.add_column("Tries", justify="right")
        table.add_column("Status", justify="center")
        for check in report.checks:
            verdict = "[green]OK[/green]" if check.healthy else f"[red]FAIL[/red] {escape(check.error or '')}"
            table.add_row(
                escape(check.url),
                _format_status(check),
                _format_elapsed(check),
                str(check.attempts),
                verdict.strip(),
            )
        console.print(table)

    if report.build_status is not None:
        console.print(f"Pages build status: {report.build_status}")


def run_pages_health(
    *,
    url: str | None = None,
    paths: list[str] | None = None,
    retries: int | None = None,
) -> int:
    """Run the health check configured from the environment; CLI args override it."""
    settings = PagesHealthSettings.from_env()
    if url:
        settings = settings.model_copy(update={"pages_url": url})
    if paths:
        settings = settings.model_copy(update={"extra_paths": settings.extra_paths + tuple(paths)})
    if retries is not None:
        settings = settings.model_copy(update={"retries": retries})

    with HttpPageProbe(timeout=settings.timeout) as probe:
        if settings.token:
            with GitHubClient(settings.token, settings.repository, timeout=settings.timeout) as host:
                report = PagesHealthService(probe, host).run(settings)
        else:
            report = PagesHealthService(probe).run(settings)

    _render_report(report)
    if report.healthy:
        console.print("[bold green]Pages site is healthy.[/bold green]")
        return exit_codes.SUCCESS
    console.print("[bold red]Pages site is unhealthy.[/bold red]")
    return exit_codes.GENERAL_ERROR
