"""Domain models for javaeda.

All models are **frozen** dataclasses — immutable value objects with
little behaviour beyond data access.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from javaeda.exceptions import InvalidArgumentError


# ---------------------------------------------------------------------------
# Layer status
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LayerReport:
    """Readiness snapshot of a single framework layer."""

    name: str
    """Layer label (``Domain``, ``Infrastructure``, ``Application``)."""

    identifier: str
    """Framework-qualified identifier, e.g. ``Javaeda-1.0.0-Domain``."""

    ready: bool


# ---------------------------------------------------------------------------
# Semantic versions
# ---------------------------------------------------------------------------

_SEMVER_RE = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)$")


@dataclass(frozen=True, slots=True, order=True)
class SemanticVersion:
    """``MAJOR.MINOR.PATCH`` triple, ordered numerically."""

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, text: str) -> SemanticVersion:
        """Parse ``"1.2.3"`` or ``"v1.2.3"``.

        Raises
        ------
        InvalidArgumentError
            If *text* is not a plain three-part version.
        """
        match = _SEMVER_RE.match(text.strip())
        if match is None:
            raise InvalidArgumentError(f"Not a semantic version: {text!r}")
        major, minor, patch = (int(part) for part in match.groups())
        return cls(major=major, minor=minor, patch=patch)

    @classmethod
    def try_parse(cls, text: str) -> SemanticVersion | None:
        try:
            return cls.parse(text)
        except InvalidArgumentError:
            return None

    def bump_patch(self) -> SemanticVersion:
        return SemanticVersion(self.major, self.minor, self.patch + 1)

    @property
    def tag(self) -> str:
        """Git tag form, ``v``-prefixed."""
        return f"v{self}"

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


# ---------------------------------------------------------------------------
# Repository history
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Tag:
    """A git tag and the commit it points at."""

    name: str
    sha: str


@dataclass(frozen=True, slots=True)
class Commit:
    sha: str
    message: str

    @property
    def subject(self) -> str:
        """First line of the commit message."""
        return self.message.splitlines()[0].strip() if self.message else ""


@dataclass(frozen=True, slots=True)
class CommitRange:
    """Commits and changed files between two refs (base exclusive)."""

    commits: tuple[Commit, ...]
    changed_files: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.commits)

    def __bool__(self) -> bool:
        return len(self.commits) > 0


# ---------------------------------------------------------------------------
# Pages health
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PageResponse:
    """Raw result of a single HTTP GET against a Pages URL."""

    status_code: int
    elapsed_ms: float
    content_length: int


@dataclass(frozen=True, slots=True)
class PageCheck:
    """Outcome of probing a single Pages URL."""

    url: str
    status_code: int | None
    """Final HTTP status, or ``None`` when no response was received."""

    elapsed_ms: float | None
    attempts: int
    error: str | None = None

    @property
    def healthy(self) -> bool:
        return self.error is None and self.status_code is not None and 200 <= self.status_code < 300


@dataclass(frozen=True, slots=True)
class PagesHealthReport:
    """Aggregated Pages health for one repository."""

    url: str
    checks: tuple[PageCheck, ...]
    build_status: str | None = None
    """Pages build status from the GitHub API, when a token was available."""

    @property
    def healthy(self) -> bool:
        if self.build_status == "errored":
            return False
        return bool(self.checks) and all(check.healthy for check in self.checks)


# ---------------------------------------------------------------------------
# Patch release decision
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PatchDecision:
    """Whether a patch release should be cut, and why."""

    should_release: bool
    reason: str
    current: SemanticVersion
    next_version: SemanticVersion | None = None
    commits: tuple[Commit, ...] = field(default_factory=tuple)
