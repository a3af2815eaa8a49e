"""
Firecrawl adapter.

This module wraps the Firecrawl scraping API (https://firecrawl.dev)
behind a small async `CrawlClient`.  A crawl either succeeds with a
list of labelled `RawRecord` objects or fails with an error message;
provider errors never escape as exceptions.  The only exception the
client raises is `MissingCredential`, so that the caller can route
straight to synthetic data without waiting on the network.

The client speaks the v0 crawl API of the 0.x SDK: it starts a crawl
job, then polls the job status from the event loop until the job
completes, fails or the timeout runs out.  The SDK is synchronous, so
each request runs in a daemon thread; an abandoned request never keeps
the process alive.  Jobs are started once; there is no retry.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from firecrawl import FirecrawlApp

from ..errors import MissingCredential
from ..normalize.html_records import Extractor, records_from_page
from ..normalize.profile_fields import (
    CONTENT,
    META_KEYWORDS,
    POSTS,
    PROFILE_HEADER,
    PROFILE_META,
    PROFILE_STATS,
    TITLE,
)
from ..normalize.schema import RawRecord
from .credentials import CredentialStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrawlOptions:
    limit: int
    formats: Tuple[str, ...]
    extractors: Tuple[Extractor, ...] = ()

    def to_params(self) -> Dict[str, Any]:
        """Request body for the v0 crawl endpoint, minus the url.

        v0 always returns markdown and returns HTML only on request.
        Extractors are not sent; they are applied to the returned HTML.
        """
        return {
            "crawlerOptions": {"limit": self.limit},
            "pageOptions": {
                "includeHtml": "html" in self.formats,
                "onlyMainContent": False,
            },
        }


PROFILE_CRAWL = CrawlOptions(
    limit=10,
    formats=("markdown", "html"),
    extractors=(
        Extractor(PROFILE_META, "head meta", "meta"),
        Extractor(
            PROFILE_HEADER,
            '[data-testid="UserName"], [data-testid="UserDescription"], [data-testid="UserProfileHeader"]',
        ),
        Extractor(PROFILE_STATS, '[data-testid="UserProfileStats"]'),
        Extractor(POSTS, '[data-testid="tweet"]'),
    ),
)

REFERENCE_CRAWL = CrawlOptions(
    limit=5,
    formats=("html", "markdown"),
    extractors=(
        Extractor(TITLE, "title"),
        Extractor(CONTENT, "main, article"),
        Extractor(META_KEYWORDS, 'meta[name="keywords"]', "meta"),
    ),
)


@dataclass
class CrawlResult:
    success: bool
    records: List[RawRecord] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def ok(cls, records: List[RawRecord]) -> "CrawlResult":
        return cls(success=True, records=records)

    @classmethod
    def failed(cls, error: str) -> "CrawlResult":
        return cls(success=False, error=error)


def _field(obj: Any, name: str, default: Any = None) -> Any:
    """Read `name` from a dict or an attribute object."""
    if isinstance(obj, dict):
        return obj.get(name, default)
    return getattr(obj, name, default)


def _as_dict(doc: Any) -> Dict[str, Any]:
    if isinstance(doc, dict):
        return doc
    if hasattr(doc, "model_dump"):
        return doc.model_dump()
    return {k: getattr(doc, k) for k in ("html", "rawHtml", "markdown", "content") if hasattr(doc, k)}


ACTIVE_STATUSES = frozenset({"active", "paused", "pending", "queued", "waiting"})


def _job_id(response: Any) -> Optional[str]:
    job_id = _field(response, "jobId", None) or _field(response, "id", None)
    return str(job_id) if job_id else None


def _job_state(status: Any) -> Tuple[str, List[Any], Optional[str]]:
    """Read a crawl job status response.

    Returns `(state, documents, error)` where state is one of
    "completed", "active" or "failed".
    """
    if status is None:
        return "failed", [], "empty status response"
    state = str(_field(status, "status", "") or "").lower()
    if state == "completed":
        return "completed", list(_field(status, "data", None) or []), None
    if state in ACTIVE_STATUSES:
        return "active", [], None
    error = _field(status, "error", None) or f"crawl job ended with status {state or 'unknown'}"
    return "failed", [], str(error)


def records_from_documents(docs: List[Any], options: CrawlOptions) -> List[RawRecord]:
    """Split crawled page documents into labelled records."""
    records: List[RawRecord] = []
    for doc in docs:
        records.extend(records_from_page(_as_dict(doc), options.extractors))
    return records


async def _in_daemon_thread(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run a blocking call in a daemon thread and await its result.

    A call that is still running when its awaiter gives up does not
    hold up `asyncio.run` shutdown or interpreter exit.
    """
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def _settle(result: Any, exc: Optional[BaseException]) -> None:
        if future.done():
            return
        if exc is not None:
            future.set_exception(exc)
        else:
            future.set_result(result)

    def _target() -> None:
        try:
            outcome: Tuple[Any, Optional[BaseException]] = (func(*args, **kwargs), None)
        except Exception as exc:  # noqa: BLE001
            outcome = (None, exc)
        try:
            loop.call_soon_threadsafe(_settle, *outcome)
        except RuntimeError:
            # loop already closed; nobody is waiting for the result
            pass

    threading.Thread(target=_target, daemon=True).start()
    return await future


def _default_app_factory(api_key: str) -> Any:
    return FirecrawlApp(api_key=api_key)


class CrawlClient:
    """Async wrapper around the Firecrawl crawl endpoint.

    Args:
        credentials: Store the API key is read from on every call.
        app_factory: Builds an SDK client for a key.  Defaults to
            `FirecrawlApp`; tests pass a fake.
        timeout: Optional bound in seconds on a whole crawl, from
            starting the job to reading its pages.
        poll_interval: Seconds between job status checks.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        app_factory: Optional[Callable[[str], Any]] = None,
        timeout: Optional[float] = None,
        poll_interval: float = 2.0,
    ) -> None:
        self.credentials = credentials
        self.app_factory = app_factory or _default_app_factory
        self.timeout = timeout
        self.poll_interval = poll_interval
        self._apps: Dict[str, Any] = {}

    def has_credential(self) -> bool:
        return bool(self.credentials.get())

    def _app_for(self, api_key: str) -> Any:
        if api_key not in self._apps:
            self._apps[api_key] = self.app_factory(api_key)
        return self._apps[api_key]

    async def _run_job(self, app: Any, url: str, options: CrawlOptions) -> CrawlResult:
        job = await _in_daemon_thread(app.crawl_url, url, params=options.to_params(), wait_until_done=False)
        job_id = _job_id(job)
        if not job_id:
            return CrawlResult.failed("crawl job was not started")
        logger.debug("Crawl job %s started for %s", job_id, url)
        while True:
            status = await _in_daemon_thread(app.check_crawl_status, job_id)
            state, docs, error = _job_state(status)
            if state == "completed":
                records = records_from_documents(docs, options)
                logger.debug("Crawl of %s produced %d records", url, len(records))
                return CrawlResult.ok(records)
            if state == "failed":
                logger.warning("Crawl of %s returned an error: %s", url, error)
                return CrawlResult.failed(error or "crawl failed")
            await asyncio.sleep(self.poll_interval)

    async def crawl(self, url: str, options: CrawlOptions) -> CrawlResult:
        """Crawl `url` once and return its records or an error.

        Raises:
            MissingCredential: If no API key is configured.
        """
        api_key = self.credentials.get()
        if not api_key:
            raise MissingCredential("Firecrawl API key is not configured")
        logger.info("Crawling %s (limit=%d)", url, options.limit)
        try:
            job = self._run_job(self._app_for(api_key), url, options)
            if self.timeout:
                return await asyncio.wait_for(job, timeout=self.timeout)
            return await job
        except asyncio.TimeoutError:
            logger.warning("Crawl of %s timed out after %ss", url, self.timeout)
            return CrawlResult.failed(f"timed out after {self.timeout}s")
        except Exception as exc:  # noqa: BLE001
            logger.warning("Crawl of %s failed: %s", url, exc)
            return CrawlResult.failed(str(exc) or exc.__class__.__name__)
