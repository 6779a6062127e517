"""httpx-backed implementation of :class:`~javaeda.core.protocols.PageFetcher`.

Transport failures (DNS, timeouts, TLS) are mapped to
:class:`~javaeda.exceptions.PagesHealthError`.  HTTP error statuses are
*not* errors here — they are returned so the caller can judge health.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from javaeda.core.models import PageResponse
from javaeda.exceptions import PagesHealthError
from javaeda.infra.github_client import import_httpx

logger = logging.getLogger(__name__)


class HttpPageProbe:
    """Fetch pages with redirects followed and a per-request timeout."""

    def __init__(self, *, timeout: float = 10.0, transport: Any = None) -> None:
        httpx = import_httpx()
        self._httpx = httpx
        self._client: Any = httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": "javaeda-pages-health"},
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpPageProbe:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def fetch(self, url: str) -> PageResponse:
        started = time.perf_counter()
        try:
            response = self._client.get(url)
        except self._httpx.HTTPError as exc:
            raise PagesHealthError(f"GET {url} failed: {type(exc).__name__}: {exc}") from exc
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        logger.debug("GET %s -> %s in %.0f ms", url, response.status_code, elapsed_ms)
        return PageResponse(
            status_code=response.status_code,
            elapsed_ms=elapsed_ms,
            content_length=len(response.content),
        )
