"""
Collection subsystem for resumeflow.

The `collect` package orchestrates a fetch: it validates the profile
URL, crawls the profile and every reference page through the ingest
adapters, and falls back to synthetic data when crawling is not
possible.  Reference pages are crawled concurrently and a failure on
one page never affects the others.
"""

from .runner import fetch_profile_data, fetch_profile_data_sync, settle_all  # noqa: F401
