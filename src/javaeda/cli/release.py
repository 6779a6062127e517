"""``javaeda auto-patch`` — automatic patch release detection.

Confirmation uses questionary, imported lazily, and is only asked on an
interactive terminal without ``--yes``.
"""

from __future__ import annotations

import sys
from typing import Any

from javaeda.automation.patch_release import PatchReleaseResult, PatchReleaseService
from javaeda.automation.settings import PatchReleaseSettings
from javaeda.cli import exit_codes
from javaeda.cli.console import console, escape
from javaeda.core.models import PatchDecision
from javaeda.exceptions import missing_dependency_error
from javaeda.infra.github_client import GitHubClient


def _import_questionary() -> Any:
    """Import questionary lazily for interactive confirmation."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise missing_dependency_error("questionary") from exc
    return questionary


def confirm_release(decision: PatchDecision) -> bool:
    """Ask the user whether to publish *decision*'s release."""
    questionary = _import_questionary()
    tag = decision.next_version.tag if decision.next_version else "?"
    answer: bool | None = questionary.confirm(
        f"Publish release {tag} ({len(decision.commits)} commit(s))?",
        default=False,
    ).ask()  # Returns None on Ctrl+C / Esc
    return bool(answer)


def _render_result(result: PatchReleaseResult) -> None:
    decision = result.decision
    console.print(f"[bold]Current version:[/bold] {decision.current}")
    console.print(f"[bold]Decision:[/bold] {escape(decision.reason)}")
    for commit in decision.commits:
        console.print(f"  [dim]{commit.sha[:7]}[/dim] {escape(commit.subject)}")

    if result.released:
        console.print(f"[bold green]Released {decision.next_version}[/bold green]  {result.release_url}")
    elif decision.should_release and result.dry_run:
        console.print(f"[yellow]Dry run:[/yellow] would release {decision.next_version}")
    else:
        console.print("[dim]No release created.[/dim]")


def run_auto_patch(
    *,
    java_version: str | None = None,
    force: bool | None = None,
    dry_run: bool = False,
    assume_yes: bool = False,
) -> int:
    """Detect and publish a patch release for the workflow environment."""
    settings = PatchReleaseSettings.from_env(
        java_version=java_version,
        force_patch=force,
        dry_run=dry_run,
    )

    confirm = None
    if not assume_yes and sys.stdin.isatty():
        confirm = confirm_release

    with GitHubClient(settings.token, settings.repository) as host:
        result = PatchReleaseService(host, confirm=confirm).run(settings)

    _render_result(result)
    return exit_codes.SUCCESS
