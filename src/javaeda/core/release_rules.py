"""Pure release rules — tag selection, commit classification, path filters.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Decision order (enforced by :func:`decide_patch_release`):

1. **Tag** — pick the highest ``vX.Y.Z`` tag as the baseline.
2. **Range** — nothing new since the baseline means nothing to release.
3. **Force** — a forced run always releases.
4. **Bump level** — ``feat`` or breaking commits block an automatic patch.
5. **Paths** — only docs / markdown / workflow changes do not release.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from fnmatch import fnmatchcase
from typing import Literal

from javaeda.core.models import Commit, CommitRange, PatchDecision, SemanticVersion, Tag

BumpLevel = Literal["major", "minor", "patch", "skip"]

IGNORED_PATHS: tuple[str, ...] = (
    "docs/**",
    "**.md",
    ".github/workflows/**",
)
"""Mirrors the ``paths-ignore`` filter of the auto-patch workflow."""

BASELINE: SemanticVersion = SemanticVersion(0, 0, 0)

_HEADER_RE = re.compile(r"^(?P<type>[a-zA-Z]+)(?:\((?P<scope>[^)]*)\))?(?P<breaking>!)?:")
# Footer tokens must start a line of the body, not appear in prose.
_BREAKING_FOOTER_RE = re.compile(r"^BREAKING[ -]CHANGE:", re.MULTILINE)


# ---------------------------------------------------------------------------
# 1. Tags
# ---------------------------------------------------------------------------

def latest_version_tag(tags: Iterable[Tag]) -> tuple[SemanticVersion, Tag | None]:
    """Return the highest semantic version among *tags* and its tag.

    Non-semver tags are ignored.  Without any version tag the
    :data:`BASELINE` is returned with ``None``.
    """
    best: tuple[SemanticVersion, Tag] | None = None
    for tag in tags:
        version = SemanticVersion.try_parse(tag.name)
        if version is None:
            continue
        if best is None or version > best[0]:
            best = (version, tag)
    if best is None:
        return BASELINE, None
    return best


# ---------------------------------------------------------------------------
# 2. Paths
# ---------------------------------------------------------------------------

def is_ignored_path(path: str, patterns: Sequence[str] = IGNORED_PATHS) -> bool:
    """Return ``True`` when *path* matches one of the ignore globs."""
    return any(fnmatchcase(path, pattern) for pattern in patterns)


def relevant_files(
    paths: Iterable[str],
    patterns: Sequence[str] = IGNORED_PATHS,
) -> list[str]:
    """Return the changed paths that are not covered by *patterns*."""
    return [path for path in paths if not is_ignored_path(path, patterns)]


# ---------------------------------------------------------------------------
# 3. Commits
# ---------------------------------------------------------------------------

def classify_commit(commit: Commit) -> BumpLevel:
    """Map a conventional-commit message to the bump it requires.

    * ``chore(release)`` commits are skipped.
    * ``type!:`` headers or a ``BREAKING CHANGE`` footer are major.
    * ``feat`` is minor.
    * Everything else (``fix``, ``perf``, ``deps``, free-form) is patch.
    """
    match = _HEADER_RE.match(commit.subject)
    commit_type = scope = ""
    if match is not None:
        commit_type = match.group("type").lower()
        scope = (match.group("scope") or "").lower()
    if commit_type == "chore" and scope == "release":
        return "skip"
    body = commit.message.partition("\n")[2]
    if (match is not None and match.group("breaking")) or _BREAKING_FOOTER_RE.search(body):
        return "major"
    if commit_type == "feat":
        return "minor"
    return "patch"


def build_release_notes(commits: Sequence[Commit], java_version: str) -> str:
    """Render a markdown body listing commit subjects."""
    lines = ["## Changes", ""]
    lines.extend(f"- {commit.subject} ({commit.sha[:7]})" for commit in commits)
    if not commits:
        lines.append("- Maintenance release")
    lines.extend(["", f"Built with Java {java_version}"])
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Decision
# ---------------------------------------------------------------------------

def decide_patch_release(
    current: SemanticVersion,
    current_tag: Tag | None,
    head_sha: str,
    history: CommitRange,
    *,
    force: bool = False,
) -> PatchDecision:
    """Decide whether *history* since *current_tag* warrants a patch."""
    next_version = current.bump_patch()

    if current_tag is not None and current_tag.sha == head_sha:
        return PatchDecision(False, f"{head_sha[:7]} is already tagged {current_tag.name}", current)

    if force:
        return PatchDecision(
            True, "patch release forced", current, next_version, history.commits,
        )

    if not history:
        return PatchDecision(False, "no commits since last release", current)

    releasable = [c for c in history.commits if classify_commit(c) != "skip"]
    if not releasable:
        return PatchDecision(False, "only release commits since last release", current)

    levels = {classify_commit(c) for c in releasable}
    if "major" in levels or "minor" in levels:
        level = "major" if "major" in levels else "minor"
        return PatchDecision(
            False,
            f"{level} changes detected; cut this release manually",
            current,
            commits=tuple(releasable),
        )

    if not relevant_files(history.changed_files):
        return PatchDecision(
            False,
            "only documentation or workflow files changed",
            current,
            commits=tuple(releasable),
        )

    return PatchDecision(
        True,
        f"{len(releasable)} patch-level commit(s) since {current.tag}",
        current,
        next_version,
        tuple(releasable),
    )
