"""Automatic patch release service.

Looks at what landed on the default branch since the latest ``vX.Y.Z``
tag and, when every change is patch-level, publishes the next patch
release through the injected :class:`RepositoryHost`.

Guarantees
----------
* The decision itself is delegated to the pure rules in
  :mod:`javaeda.core.release_rules`.
* Nothing is written to the host in dry-run mode.
* Only :class:`~javaeda.exceptions.JavaedaError` subclasses escape.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from javaeda.automation.settings import PatchReleaseSettings
from javaeda.core.models import PatchDecision
from javaeda.core.protocols import RepositoryHost
from javaeda.core.release_rules import (
    build_release_notes,
    decide_patch_release,
    latest_version_tag,
)
from javaeda.exceptions import JavaedaError, ReleaseError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PatchReleaseResult:
    decision: PatchDecision
    release_url: str | None = None
    """HTML URL of the created release; ``None`` if nothing was published."""

    dry_run: bool = False

    @property
    def released(self) -> bool:
        return self.release_url is not None


class PatchReleaseService:
    """Detect and publish automatic patch releases.

    Parameters
    ----------
    host:
        Any object satisfying :class:`RepositoryHost`.
    confirm:
        Optional callback asked before publishing; returning ``False``
        aborts the release.
    """

    def __init__(
        self,
        host: RepositoryHost,
        *,
        confirm: Callable[[PatchDecision], bool] | None = None,
    ) -> None:
        self._host = host
        self._confirm = confirm

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def detect(self, settings: PatchReleaseSettings) -> PatchDecision:
        """Compute the release decision for ``settings.sha``.

        Raises
        ------
        ReleaseError
            When repository history cannot be read.
        """
        try:
            current, current_tag = latest_version_tag(self._host.list_tags())
            if current_tag is None:
                history = self._host.list_commits(settings.sha)
            else:
                history = self._host.compare(current_tag.name, settings.sha)
        except JavaedaError as exc:
            raise ReleaseError(
                f"Could not read repository history: {exc}",
                hint=exc.hint,
            ) from exc
        except Exception as exc:
            raise ReleaseError(f"Unexpected repository host error: {exc}") from exc

        decision = decide_patch_release(
            current,
            current_tag,
            settings.sha,
            history,
            force=settings.forced,
        )
        logger.info("Patch release decision: %s", decision.reason)
        return decision

    def run(self, settings: PatchReleaseSettings) -> PatchReleaseResult:
        """Detect and, when warranted, publish the next patch release."""
        decision = self.detect(settings)
        if not decision.should_release or decision.next_version is None:
            return PatchReleaseResult(decision=decision, dry_run=settings.dry_run)

        if settings.dry_run:
            logger.info("Dry run: would release %s", decision.next_version.tag)
            return PatchReleaseResult(decision=decision, dry_run=True)

        if self._confirm is not None and not self._confirm(decision):
            raise ReleaseError(
                f"Release {decision.next_version.tag} was not confirmed.",
                hint="Re-run with --yes to skip the confirmation prompt.",
            )

        tag = decision.next_version.tag
        body = build_release_notes(decision.commits, settings.java_version)
        try:
            url = self._host.create_release(tag, settings.sha, f"Release {tag}", body)
        except JavaedaError as exc:
            raise ReleaseError(f"Could not create release {tag}: {exc}", hint=exc.hint) from exc
        except Exception as exc:
            raise ReleaseError(f"Unexpected error creating release {tag}: {exc}") from exc

        return PatchReleaseResult(decision=decision, release_url=url or tag)
