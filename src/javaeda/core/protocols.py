"""Protocols (interfaces) consumed by the automation services.

These define the contracts that infrastructure adapters must satisfy.
Services depend ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Any, Protocol

from javaeda.core.models import CommitRange, PageResponse, Tag


class RepositoryHost(Protocol):
    """Contract for the hosting backend (GitHub REST API in production).

    Implementations must map all backend-specific exceptions to
    :class:`~javaeda.exceptions.JavaedaError` subclasses.
    """

    def list_tags(self) -> list[Tag]:
        """Return every tag of the repository."""
        ...  # pragma: no cover

    def compare(self, base: str, head: str) -> CommitRange:
        """Return commits and changed files in ``base...head``."""
        ...  # pragma: no cover

    def list_commits(self, head: str) -> CommitRange:
        """Return the history reachable from *head* (untagged repositories)."""
        ...  # pragma: no cover

    def create_release(self, tag: str, target: str, name: str, body: str) -> str:
        """Create a release (and its tag) and return its HTML URL.

        Raises
        ------
        GitHubApiError
            When the backend rejects the release.
        """
        ...  # pragma: no cover

    def get_pages_info(self) -> dict[str, Any] | None:
        """Return Pages metadata, or ``None`` when Pages is not enabled."""
        ...  # pragma: no cover


class PageFetcher(Protocol):
    """Contract for fetching a single web page."""

    def fetch(self, url: str) -> PageResponse:
        """GET *url*, following redirects.

        Raises
        ------
        PagesHealthError
            When no HTTP response could be obtained (DNS, timeout, TLS…).
        """
        ...  # pragma: no cover
