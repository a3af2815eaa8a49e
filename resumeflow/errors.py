"""
Exception types shared across the pipeline.

Only `InvalidUrl` is expected to reach callers of the aggregator.  The
other errors are raised close to their origin and absorbed there: a
missing credential or a provider failure turns into synthetic data or
a dropped reference, and a parse anomaly leaves a single field at its
default.
"""

from __future__ import annotations


class ResumeflowError(Exception):
    """Base class for all resumeflow errors."""


class InvalidUrl(ResumeflowError, ValueError):
    """A profile or reference URL is malformed."""


class MissingCredential(ResumeflowError, RuntimeError):
    """No crawl API key has been configured."""


class ProviderFailure(ResumeflowError, RuntimeError):
    """The crawl provider returned an error or raised."""


class ParseAnomaly(ResumeflowError):
    """A single extraction step failed on a crawl record."""
