"""
Normalization subsystem for resumeflow.

This package converts labelled crawl records into structured
`ProfileRecord` and `ReferenceRecord` instances.  Fields are pulled
out with a table of regex rules, skills are inferred from a fixed
vocabulary and hashtags, and plain HTML pages are split into records
with CSS selectors when the provider does not label them.

The record types are defined in `schema.py`.
"""

from .schema import AggregatedFetchResult, Post, ProfileRecord, RawRecord, ReferenceRecord  # noqa: F401
from .profile_fields import extract_profile, extract_reference  # noqa: F401
from .skills import infer_skills, merge_skills  # noqa: F401
