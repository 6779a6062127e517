"""httpx-backed implementation of :class:`~javaeda.core.protocols.RepositoryHost`.

This module is the **only** place that talks to the GitHub REST API.
All httpx exceptions and error statuses are caught here and re-raised
as :class:`~javaeda.exceptions.GitHubApiError` — nothing raw escapes
the infrastructure boundary.
"""

from __future__ import annotations

import logging
from typing import Any

from javaeda.core.models import Commit, CommitRange, Tag
from javaeda.exceptions import GitHubApiError, missing_dependency_error
from javaeda.utils.validation import require_non_empty

logger = logging.getLogger(__name__)

DEFAULT_API_URL: str = "https://api.github.com"
_PER_PAGE: int = 100
_MAX_PAGES: int = 50


def import_httpx() -> Any:
    """Import httpx lazily so ``--help`` works without it."""
    try:
        import httpx
    except ModuleNotFoundError as exc:
        raise missing_dependency_error("httpx") from exc
    return httpx


class GitHubClient:
    """Minimal GitHub REST client for release and Pages automation.

    Usage::

        with GitHubClient(token, "owner/repo") as client:
            tags = client.list_tags()

    Parameters
    ----------
    token:
        API token; ``None`` sends unauthenticated requests.
    repository:
        ``owner/name`` slug.
    transport:
        Optional ``httpx`` transport, used by tests to inject a
        ``MockTransport``.
    """

    def __init__(
        self,
        token: str | None,
        repository: str,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        transport: Any = None,
    ) -> None:
        require_non_empty(repository, "Repository")
        httpx = import_httpx()
        self._httpx = httpx
        self.repository = repository

        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "javaeda-automation",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._client: Any = httpx.Client(
            base_url=api_url.rstrip("/"),
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def list_tags(self) -> list[Tag]:
        """Return all tags, following pagination."""
        tags: list[Tag] = []
        for page in range(1, _MAX_PAGES + 1):
            batch = self._request(
                "GET",
                f"/repos/{self.repository}/tags",
                params={"per_page": _PER_PAGE, "page": page},
            )
            if not isinstance(batch, list):
                raise GitHubApiError("Unexpected tag listing payload from GitHub.")
            tags.extend(
                Tag(name=str(item.get("name", "")), sha=str(item.get("commit", {}).get("sha", "")))
                for item in batch
                if isinstance(item, dict)
            )
            if len(batch) < _PER_PAGE:
                break
        logger.debug("Fetched %d tag(s) for %s", len(tags), self.repository)
        return tags

    def compare(self, base: str, head: str) -> CommitRange:
        """Return the commits and changed files of ``base...head``.

        Commits are paged; GitHub lists the changed files on the first
        page only.  A comparison whose commits cannot all be fetched
        raises rather than returning a partial history.
        """
        path = f"/repos/{self.repository}/compare/{base}...{head}"
        commits: list[Commit] = []
        files: list[str] = []
        total: int | None = None
        for page in range(1, _MAX_PAGES + 1):
            payload = self._request("GET", path, params={"per_page": _PER_PAGE, "page": page})
            if not isinstance(payload, dict):
                raise GitHubApiError("Unexpected compare payload from GitHub.")
            if page == 1:
                total = payload.get("total_commits")
                files = self._parse_files(payload.get("files"))
            batch = self._parse_commits(payload.get("commits"))
            commits.extend(batch)
            if len(batch) < _PER_PAGE or (isinstance(total, int) and len(commits) >= total):
                break
        if isinstance(total, int) and len(commits) < total:
            raise GitHubApiError(
                f"Compare {base}...{head} returned {len(commits)} of {total} commits.",
                hint="Cut this release manually; the history is too long to inspect.",
            )
        logger.debug("Compared %s...%s: %d commit(s), %d file(s)", base, head, len(commits), len(files))
        return CommitRange(commits=tuple(commits), changed_files=tuple(files))

    def list_commits(self, head: str) -> CommitRange:
        """Return the whole history reachable from *head*, following pagination.

        The commit listing endpoint carries no file information, so the
        changed files are reported from the head commit only.
        """
        commits: list[Commit] = []
        for page in range(1, _MAX_PAGES + 1):
            batch = self._request(
                "GET",
                f"/repos/{self.repository}/commits",
                params={"sha": head, "per_page": _PER_PAGE, "page": page},
            )
            if not isinstance(batch, list):
                raise GitHubApiError("Unexpected commit listing payload from GitHub.")
            commits.extend(self._parse_commits(batch))
            if len(batch) < _PER_PAGE:
                break
        else:
            raise GitHubApiError(
                f"History of {head[:7]} exceeds {_MAX_PAGES * _PER_PAGE} commits.",
                hint="Tag a baseline release so later runs compare against it.",
            )
        head_detail = self._request("GET", f"/repos/{self.repository}/commits/{head}")
        files = head_detail.get("files") if isinstance(head_detail, dict) else None
        return CommitRange(commits=tuple(commits), changed_files=tuple(self._parse_files(files)))

    def create_release(self, tag: str, target: str, name: str, body: str) -> str:
        """Create a published release; GitHub creates *tag* at *target*."""
        payload = self._request(
            "POST",
            f"/repos/{self.repository}/releases",
            json={
                "tag_name": tag,
                "target_commitish": target,
                "name": name,
                "body": body,
                "draft": False,
                "prerelease": False,
            },
        )
        url = payload.get("html_url", "") if isinstance(payload, dict) else ""
        logger.info("Created release %s for %s", tag, self.repository)
        return str(url)

    def get_pages_info(self) -> dict[str, Any] | None:
        """Return ``{"status", "html_url"}`` or ``None`` if Pages is off."""
        try:
            payload = self._request("GET", f"/repos/{self.repository}/pages")
        except GitHubApiError as exc:
            if exc.status_code == 404:
                return None
            raise
        if not isinstance(payload, dict):
            return None
        return {"status": payload.get("status"), "html_url": payload.get("html_url")}

    # ------------------------------------------------------------------
    # Transport (safe boundary)
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """Send one request; map every failure to :class:`GitHubApiError`."""
        httpx = self._httpx
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise GitHubApiError(
                f"{method} {path} failed: {exc}",
                hint="Check network access to the GitHub API.",
            ) from exc

        if response.status_code >= 400:
            raise GitHubApiError(
                f"{method} {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
                hint=self._hint_for_status(response.status_code),
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise GitHubApiError(f"{method} {path} returned invalid JSON") from exc

    @staticmethod
    def _hint_for_status(status_code: int) -> str | None:
        if status_code in (401, 403):
            return "Check that GITHUB_TOKEN is set and has 'contents: write' permission."
        if status_code == 404:
            return "Check that GITHUB_REPOSITORY names an existing repository."
        if status_code == 422:
            return "The release or tag may already exist."
        return None

    @staticmethod
    def _parse_commits(raw: object) -> list[Commit]:
        if not isinstance(raw, list):
            return []
        return [
            Commit(
                sha=str(entry.get("sha", "")),
                message=str((entry.get("commit") or {}).get("message", "")),
            )
            for entry in raw
            if isinstance(entry, dict)
        ]

    @staticmethod
    def _parse_files(raw: object) -> list[str]:
        if not isinstance(raw, list):
            return []
        return [
            str(entry["filename"])
            for entry in raw
            if isinstance(entry, dict) and "filename" in entry
        ]
