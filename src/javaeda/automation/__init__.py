"""Automation layer — the CI jobs run by ``.github/workflows``.

Services here orchestrate infrastructure adapters through the protocols
in :mod:`javaeda.core.protocols`.  No user-facing output; the CLI
renders results.
"""

from javaeda.automation.pages_health import PagesHealthService, pages_url_for
from javaeda.automation.patch_release import PatchReleaseResult, PatchReleaseService
from javaeda.automation.settings import PagesHealthSettings, PatchReleaseSettings

__all__: list[str] = [
    "PagesHealthService",
    "PagesHealthSettings",
    "PatchReleaseResult",
    "PatchReleaseService",
    "PatchReleaseSettings",
    "pages_url_for",
]
