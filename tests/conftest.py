"""Shared pytest fixtures and configuration for the javaeda test suite.

Guidelines
----------
* No internet access in any test — HTTP goes through ``httpx.MockTransport``
  or in-memory fakes of the core protocols.
* Settings are built from explicit mappings or a ``monkeypatch``-ed environment.
* Tests must not depend on OS state.
"""

from __future__ import annotations

from typing import Any

import pytest

from javaeda.core.models import Commit, CommitRange, PageResponse, Tag
from javaeda.exceptions import PagesHealthError


class FakeRepositoryHost:
    """In-memory :class:`~javaeda.core.protocols.RepositoryHost`."""

    def __init__(
        self,
        tags: list[Tag] | None = None,
        history: CommitRange | None = None,
        pages_info: dict[str, Any] | None = None,
    ) -> None:
        self.tags = tags or []
        self.history = history or CommitRange(commits=(), changed_files=())
        self.pages_info = pages_info
        self.compared: list[tuple[str, str]] = []
        self.listed: list[str] = []
        self.releases: list[dict[str, str]] = []

    def list_tags(self) -> list[Tag]:
        return list(self.tags)

    def compare(self, base: str, head: str) -> CommitRange:
        self.compared.append((base, head))
        return self.history

    def list_commits(self, head: str) -> CommitRange:
        self.listed.append(head)
        return self.history

    def create_release(self, tag: str, target: str, name: str, body: str) -> str:
        self.releases.append({"tag": tag, "target": target, "name": name, "body": body})
        return f"https://github.com/acme/widgets/releases/tag/{tag}"

    def get_pages_info(self) -> dict[str, Any] | None:
        return self.pages_info


class FakePageFetcher:
    """Replays queued responses (or errors) per URL."""

    def __init__(self, responses: dict[str, list[PageResponse | Exception]]) -> None:
        self._responses = {url: list(queue) for url, queue in responses.items()}
        self.calls: list[str] = []

    def fetch(self, url: str) -> PageResponse:
        self.calls.append(url)
        queue = self._responses.get(url)
        if not queue:
            raise PagesHealthError(f"GET {url} failed: no route")
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, Exception):
            raise item
        return item


def commit(message: str, sha: str = "a" * 40) -> Commit:
    return Commit(sha=sha, message=message)


def history(*messages: str, files: tuple[str, ...] = ("src/Main.java",)) -> CommitRange:
    return CommitRange(
        commits=tuple(commit(m, sha=f"{i:040d}") for i, m in enumerate(messages, start=1)),
        changed_files=files,
    )


@pytest.fixture()
def ok_page() -> PageResponse:
    return PageResponse(status_code=200, elapsed_ms=12.5, content_length=512)
