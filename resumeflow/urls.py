"""
URL validation helpers.

Every URL submitted to the pipeline passes through this module before
any network call.  Profile URLs must point at an X (or legacy Twitter)
profile page; reference URLs only need to be well‑formed absolute
URLs.  Blank reference entries are considered valid so that a form
with empty rows can be submitted, but they are dropped before
fetching.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List
from urllib.parse import urlparse

from .errors import InvalidUrl

logger = logging.getLogger(__name__)

PROFILE_URL_RE = re.compile(r"https?://(www\.)?(twitter|x)\.com/[A-Za-z0-9_]+/?")


def is_profile_url(value: str) -> bool:
    """Return True if `value` is an X/Twitter profile URL."""
    if not isinstance(value, str):
        return False
    return PROFILE_URL_RE.fullmatch(value) is not None


def is_reference_url(value: str) -> bool:
    """Return True if `value` is blank or a well‑formed absolute URL."""
    if value is None or not value.strip():
        return True
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    if any(ch.isspace() for ch in value.strip()):
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def select_reference_urls(urls: Iterable[str]) -> List[str]:
    """Drop blank and malformed reference URLs, keeping input order."""
    selected: List[str] = []
    for url in urls or []:
        if url is None or not url.strip():
            continue
        if not is_reference_url(url):
            logger.warning("Ignoring malformed reference URL: %r", url)
            continue
        selected.append(url.strip())
    return selected


def username_from_url(url: str) -> str:
    """Return the first path segment of `url`.

    Raises:
        InvalidUrl: If the URL cannot be parsed or has no path segment.
    """
    try:
        parsed = urlparse(url)
    except (TypeError, ValueError) as exc:
        raise InvalidUrl(f"Invalid profile URL: {url!r}") from exc
    if not parsed.scheme or not parsed.netloc:
        raise InvalidUrl(f"Invalid profile URL: {url!r}")
    segments = [part for part in parsed.path.split("/") if part]
    if not segments:
        raise InvalidUrl(f"Profile URL has no username segment: {url!r}")
    return segments[0]
