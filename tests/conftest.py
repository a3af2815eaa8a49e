"""Shared fixtures for the resumeflow test suite.

Most tests never reach the Firecrawl service.  `FakeFirecrawlApp`
stands in for `FirecrawlApp` and follows its v0 job protocol:
`crawl_url(..., wait_until_done=False)` starts a job and
`check_crawl_status` reports it.  The canned outcome per URL is a list
of page documents (a completed job), a status dict returned as is, or
an exception raised when the job is started.  Every call is recorded
so tests can assert which URLs were crawled.
"""

from __future__ import annotations

import html
import threading
from typing import Dict, List

import pytest  # type: ignore

from resumeflow.ingest.credentials import InMemoryCredentialStore
from resumeflow.ingest.firecrawl_adapter import CrawlClient


class FakeFirecrawlApp:
    def __init__(self, responses: Dict[str, object]) -> None:
        self.responses = responses
        self.calls: List[Dict[str, object]] = []
        self.jobs: Dict[str, object] = {}
        self._lock = threading.Lock()

    def crawl_url(self, url: str, params=None, wait_until_done=True):
        with self._lock:
            self.calls.append({"url": url, "params": params, "wait_until_done": wait_until_done})
            job_id = f"job-{len(self.calls)}"
        outcome = self.responses.get(url, {"status": "failed", "error": "not found"})
        if isinstance(outcome, BaseException):
            raise outcome
        self.jobs[job_id] = outcome
        return {"jobId": job_id}

    def check_crawl_status(self, job_id: str):
        outcome = self.jobs[job_id]
        if isinstance(outcome, list):
            return {"status": "completed", "data": outcome}
        return outcome

    @property
    def crawled_urls(self) -> List[str]:
        return [call["url"] for call in self.calls]


@pytest.fixture
def make_client():
    """Return a factory building a CrawlClient backed by a fake app."""

    def _make(responses: Dict[str, object], api_key: str | None = "fc-test", timeout: float | None = None):
        app = FakeFirecrawlApp(responses)
        client = CrawlClient(
            InMemoryCredentialStore(api_key),
            app_factory=lambda key: app,
            timeout=timeout,
            poll_interval=0.01,
        )
        return client, app

    return _make


def _header_page(header: str, stats: str = "", posts: List[str] = ()) -> List[Dict[str, str]]:
    parts = [f'<div data-testid="UserProfileHeader">{html.escape(header)}</div>']
    if stats:
        parts.append(f'<div data-testid="UserProfileStats">{html.escape(stats)}</div>')
    parts += [f'<article data-testid="tweet">{html.escape(text)}</article>' for text in posts]
    body = "".join(parts)
    return [{"html": f"<html><body>{body}</body></html>", "markdown": header}]


def _reference_page(title: str, content: str, keywords: str = "") -> List[Dict[str, str]]:
    meta = f'<meta name="keywords" content="{html.escape(keywords)}">' if keywords else ""
    page = (
        f"<html><head><title>{html.escape(title)}</title>{meta}</head>"
        f"<body><main>{html.escape(content)}</main></body></html>"
    )
    return [{"html": page, "markdown": content}]


@pytest.fixture
def header_response():
    """Build the crawled page of a profile."""
    return _header_page


@pytest.fixture
def reference_response():
    """Build the crawled page of a reference site."""
    return _reference_page
