"""
Provider adapters for resumeflow.

This package contains thin wrappers around the data sources the
pipeline reads from.  The Firecrawl adapter speaks to the crawling
API and returns labelled records; the mock adapter generates sample
profiles when no API key is configured or a crawl fails.  The API key
itself is kept in a `CredentialStore`.
"""

from .credentials import CredentialStore, FileCredentialStore, InMemoryCredentialStore  # noqa: F401
from .firecrawl_adapter import PROFILE_CRAWL, REFERENCE_CRAWL, CrawlClient, CrawlOptions, CrawlResult  # noqa: F401
from .mock_adapter import MockDataGenerator  # noqa: F401
