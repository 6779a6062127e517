"""Pages health check service.

Probes the published GitHub Pages site of a repository and, when a
token is available, the Pages build status reported by the API.

Guarantees
----------
* Pure orchestration — HTTP goes through injected protocol objects.
* Retries transport failures and 5xx responses; 4xx is final.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from javaeda.automation.settings import PagesHealthSettings
from javaeda.core.models import PageCheck, PagesHealthReport
from javaeda.core.protocols import PageFetcher, RepositoryHost
from javaeda.exceptions import GitHubApiError, InvalidArgumentError, PagesHealthError

logger = logging.getLogger(__name__)


def pages_url_for(owner: str, repository_name: str) -> str:
    """Return the default Pages URL for ``owner/repository_name``.

    User and organisation sites (``<owner>.github.io``) live at the
    domain root; project sites live under ``/<repository_name>/``.
    """
    host = f"{owner.lower()}.github.io"
    if repository_name.lower() == host:
        return f"https://{host}/"
    return f"https://{host}/{repository_name}/"


def join_page_url(base: str, path: str) -> str:
    """Join *path* onto the site root *base*."""
    return base.rstrip("/") + "/" + path.lstrip("/")


class PagesHealthService:
    """Run the Pages health check for one repository.

    Parameters
    ----------
    fetcher:
        Any object satisfying :class:`PageFetcher`.
    host:
        Optional :class:`RepositoryHost`; the build status is only
        queried when one is supplied.
    sleep:
        Back-off function, injectable for tests.
    """

    def __init__(
        self,
        fetcher: PageFetcher,
        host: RepositoryHost | None = None,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._fetcher = fetcher
        self._host = host
        self._sleep = sleep

    def run(self, settings: PagesHealthSettings) -> PagesHealthReport:
        base_url = settings.pages_url or pages_url_for(settings.site_owner, settings.repository_name)
        urls = [base_url] + [join_page_url(base_url, p) for p in settings.extra_paths]

        checks = tuple(
            self.check_page(url, retries=settings.retries, delay=settings.retry_delay)
            for url in urls
        )
        report = PagesHealthReport(
            url=base_url,
            checks=checks,
            build_status=self._build_status(),
        )
        if report.healthy:
            logger.info("Pages site %s is healthy", base_url)
        else:
            logger.warning("Pages site %s is unhealthy", base_url)
        return report

    def check_page(self, url: str, *, retries: int = 3, delay: float = 2.0) -> PageCheck:
        """Probe *url* up to *retries* times with linear back-off."""
        if retries < 1:
            raise InvalidArgumentError(f"retries must be at least 1, got {retries}")
        last_error: str | None = None
        for attempt in range(1, retries + 1):
            try:
                response = self._fetcher.fetch(url)
            except PagesHealthError as exc:
                last_error = str(exc)
                logger.debug("Attempt %d/%d for %s failed: %s", attempt, retries, url, exc)
            else:
                if response.status_code >= 500 and attempt < retries:
                    logger.debug(
                        "Attempt %d/%d for %s returned HTTP %d",
                        attempt, retries, url, response.status_code,
                    )
                else:
                    error = None
                    if 200 <= response.status_code < 300 and response.content_length == 0:
                        error = "empty response body"
                    return PageCheck(
                        url=url,
                        status_code=response.status_code,
                        elapsed_ms=response.elapsed_ms,
                        attempts=attempt,
                        error=error,
                    )
            if attempt < retries:
                self._sleep(delay * attempt)

        return PageCheck(
            url=url,
            status_code=None,
            elapsed_ms=None,
            attempts=retries,
            error=last_error,
        )

    def _build_status(self) -> str | None:
        if self._host is None:
            return None
        try:
            info = self._host.get_pages_info()
        except GitHubApiError as exc:
            logger.warning("Could not read Pages build status: %s", exc)
            return None
        if info is None:
            return "disabled"
        status = info.get("status")
        return str(status) if status is not None else None
