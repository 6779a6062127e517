"""``javaeda status`` — framework layer readiness."""

from __future__ import annotations

from javaeda.application.facade import JavaedaApplication
from javaeda.cli import exit_codes
from javaeda.cli.console import console, rich_table_class
from javaeda.core.framework import format_readiness


def run_status(*, plain: bool = False) -> int:
    """Print layer readiness; exit non-zero when the application layer is not ready."""
    table_class = None if plain else rich_table_class()

    if table_class is None:
        console.print(JavaedaApplication.get_framework_status())
    else:
        table = table_class(
            title=JavaedaApplication.get_application_status(),
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Layer", style="bold")
        table.add_column("Identifier")
        table.add_column("Status", justify="center")
        for report in JavaedaApplication.layer_reports():
            colour = "green" if report.ready else "red"
            table.add_row(
                report.name,
                report.identifier,
                f"[{colour}]{format_readiness(report.ready)}[/{colour}]",
            )
        console.print(table)

    if JavaedaApplication.is_application_layer_ready():
        return exit_codes.SUCCESS
    return exit_codes.GENERAL_ERROR
