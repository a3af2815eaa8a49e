"""
Profile fetch runner.

This module exposes `fetch_profile_data`, which orchestrates fetching
a profile and its reference pages.  The run moves through a fixed
sequence of stages:

    VALIDATING_INPUT -> FETCHING_PROFILE -> FETCHING_REFERENCES
        -> MERGING_SKILLS -> DONE

with an ERROR_FALLBACK branch that substitutes synthetic data.  Only
an invalid profile URL is reported to the caller; once validation has
passed every failure is absorbed.  A missing credential sends the
whole run to the mock adapter, a failed profile crawl replaces the
profile with mock data, and a failed reference crawl simply drops that
reference.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from typing import Awaitable, Iterable, List, Optional, Sequence, Tuple, TypeVar

from ..errors import InvalidUrl, ProviderFailure
from ..ingest.firecrawl_adapter import PROFILE_CRAWL, REFERENCE_CRAWL, CrawlClient
from ..ingest.mock_adapter import MockDataGenerator
from ..normalize.profile_fields import extract_profile, extract_reference
from ..normalize.schema import AggregatedFetchResult, ProfileRecord, ReferenceRecord
from ..normalize.skills import merge_skills
from ..urls import is_profile_url, select_reference_urls

logger = logging.getLogger(__name__)

K = TypeVar("K")
T = TypeVar("T")


class Stage(enum.Enum):
    VALIDATING_INPUT = "validating_input"
    FETCHING_PROFILE = "fetching_profile"
    FETCHING_REFERENCES = "fetching_references"
    MERGING_SKILLS = "merging_skills"
    ERROR_FALLBACK = "error_fallback"
    DONE = "done"


def _enter(stage: Stage, url: str) -> None:
    logger.debug("[%s] %s", stage.value, url)


async def settle_all(
    jobs: Sequence[Tuple[K, Awaitable[T]]],
) -> Tuple[List[Tuple[K, T]], List[Tuple[K, BaseException]]]:
    """Wait for every job and partition the outcomes.

    Args:
        jobs: Pairs of (key, awaitable).  Keys identify each job in
            the returned lists.

    Returns:
        Two lists in input order: `(key, result)` pairs for jobs that
        completed and `(key, exception)` pairs for jobs that raised.
        A failing job never cancels the others.
    """
    outcomes = await asyncio.gather(*(aw for _, aw in jobs), return_exceptions=True)
    succeeded: List[Tuple[K, T]] = []
    failed: List[Tuple[K, BaseException]] = []
    for (key, _), outcome in zip(jobs, outcomes):
        if isinstance(outcome, BaseException):
            failed.append((key, outcome))
        else:
            succeeded.append((key, outcome))
    return succeeded, failed


async def fetch_profile(client: CrawlClient, url: str) -> ProfileRecord:
    """Crawl and extract a single profile.

    Raises:
        MissingCredential: If the client has no API key.
        ProviderFailure: If the crawl returned an error.
    """
    result = await client.crawl(url, PROFILE_CRAWL)
    if not result.success:
        raise ProviderFailure(result.error or "profile crawl failed")
    return extract_profile(result.records, url)


async def fetch_reference(client: CrawlClient, url: str) -> ReferenceRecord:
    """Crawl and extract a single reference page."""
    result = await client.crawl(url, REFERENCE_CRAWL)
    if not result.success:
        raise ProviderFailure(result.error or "reference crawl failed")
    return extract_reference(result.records, url)


async def fetch_references(client: CrawlClient, urls: Sequence[str]) -> List[ReferenceRecord]:
    """Fetch every reference concurrently, dropping the ones that fail."""
    if not urls:
        return []
    succeeded, failed = await settle_all([(url, fetch_reference(client, url)) for url in urls])
    for url, exc in failed:
        logger.warning("Dropping reference %s: %s", url, exc)
    return [record for _, record in succeeded]


async def fetch_profile_data(
    profile_url: str,
    reference_urls: Iterable[str] = (),
    *,
    client: Optional[CrawlClient] = None,
    generator: Optional[MockDataGenerator] = None,
) -> AggregatedFetchResult:
    """Fetch a profile plus its references and merge their skills.

    Args:
        profile_url: X/Twitter profile URL.
        reference_urls: Additional pages to mine for skills.  Blank and
            malformed entries are ignored.
        client: Crawl client.  When None, or when it has no API key,
            the result is generated by the mock adapter.
        generator: Mock adapter used for fallback data.

    Returns:
        An `AggregatedFetchResult`, real or synthetic.

    Raises:
        InvalidUrl: If `profile_url` is not a profile URL.  No crawl is
            attempted in that case.
    """
    _enter(Stage.VALIDATING_INPUT, profile_url)
    if not is_profile_url(profile_url):
        raise InvalidUrl(f"Not an X profile URL: {profile_url!r}")
    references = select_reference_urls(reference_urls)
    generator = generator or MockDataGenerator()

    if client is None or not client.has_credential():
        _enter(Stage.ERROR_FALLBACK, profile_url)
        logger.info("No crawl API key configured; generating sample data for %s", profile_url)
        return generator.fallback(profile_url, references)

    _enter(Stage.FETCHING_PROFILE, profile_url)
    profile: Optional[ProfileRecord]
    try:
        profile = await fetch_profile(client, profile_url)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Profile fetch failed for %s: %s", profile_url, exc)
        profile = None

    _enter(Stage.FETCHING_REFERENCES, profile_url)
    fetched = await fetch_references(client, references)

    if profile is None:
        _enter(Stage.ERROR_FALLBACK, profile_url)
        logger.info("Using sample profile data for %s", profile_url)
        return AggregatedFetchResult(profile=generator.profile(profile_url), references=fetched)

    _enter(Stage.MERGING_SKILLS, profile_url)
    if fetched:
        profile.skills = merge_skills(profile.skills, *(ref.extracted_skills for ref in fetched))

    _enter(Stage.DONE, profile_url)
    logger.info(
        "Fetched profile %s with %d/%d references", profile.username, len(fetched), len(references)
    )
    return AggregatedFetchResult(profile=profile, references=fetched)


def fetch_profile_data_sync(
    profile_url: str,
    reference_urls: Iterable[str] = (),
    *,
    client: Optional[CrawlClient] = None,
    generator: Optional[MockDataGenerator] = None,
) -> AggregatedFetchResult:
    """Blocking wrapper around `fetch_profile_data`."""
    return asyncio.run(
        fetch_profile_data(profile_url, reference_urls, client=client, generator=generator)
    )
