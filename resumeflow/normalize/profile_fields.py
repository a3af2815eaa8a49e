"""
Crawl records to profile fields.

This module turns the labelled records returned by the crawl client
into a `ProfileRecord` or a `ReferenceRecord`.  Header and statistics
fields are described by a declarative table of `FieldRule` entries;
each rule is applied independently and yields either a value or
`None`.  Defaults are applied explicitly with `or_default`, so a rule
that fails to match or raises on a malformed record only loses its own
field.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Dict, Iterable, List, Optional, Pattern, TypeVar

from ..urls import username_from_url
from ..errors import ParseAnomaly
from .schema import (
    MAX_POST_CHARS,
    MAX_POSTS,
    MAX_REFERENCE_CHARS,
    UNKNOWN_DATE,
    Post,
    ProfileRecord,
    RawRecord,
    ReferenceRecord,
)
from .skills import infer_skills, match_vocabulary, merge_skills

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Record labels requested from the crawl provider.
PROFILE_META = "profile_meta"
PROFILE_HEADER = "profile_header"
PROFILE_STATS = "profile_stats"
POSTS = "tweets"
TITLE = "title"
CONTENT = "content"
META_KEYWORDS = "meta_keywords"
MARKDOWN = "markdown"

MISSING_CONTENT = "Content could not be retrieved from this page."

POST_DATE_RE = re.compile(
    r"([0-9]{4}年[0-9]{1,2}月[0-9]{1,2}日|[0-9]{1,2}月[0-9]{1,2}日|[0-9]{1,2}時間前|[0-9]{1,2}分前)"
)


def _clean(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


def parse_count(value: str) -> int:
    """Parse a count such as '1,234' or '12.345'; unparseable input is 0."""
    cleaned = re.sub(r"[,.]", "", value or "").strip()
    try:
        return max(int(cleaned), 0)
    except ValueError:
        return 0


@dataclass(frozen=True)
class FieldRule:
    label: str                    # record label the rule reads
    field: str                    # ProfileRecord attribute it fills
    pattern: Pattern[str]
    convert: Callable[[str], object] = _clean

    def apply(self, text: str) -> Optional[object]:
        """Return the converted first capture group, or None without a match.

        Raises:
            ParseAnomaly: If the matched text cannot be converted.
        """
        match = self.pattern.search(text)
        if not match:
            return None
        try:
            return self.convert(match.group(1))
        except (TypeError, ValueError, IndexError) as exc:
            raise ParseAnomaly(f"{self.field}: {exc}") from exc


PROFILE_RULES: List[FieldRule] = [
    FieldRule(PROFILE_HEADER, "display_name", re.compile(r"@([a-zA-Z0-9_]+)")),
    FieldRule(PROFILE_HEADER, "bio", re.compile(r"Bio:(.*?)(?:Location:|Website:|Joined:|$)", re.S)),
    FieldRule(PROFILE_HEADER, "location", re.compile(r"Location:(.*?)(?:Website:|Joined:|$)", re.S)),
    FieldRule(PROFILE_HEADER, "website", re.compile(r"Website:(.*?)(?:Joined:|$)", re.S)),
    FieldRule(PROFILE_HEADER, "join_date", re.compile(r"Joined:(.*?)$", re.S)),
    FieldRule(PROFILE_STATS, "followers_count", re.compile(r"([0-9,.]+)\s*(?:フォロワー|Followers)"), parse_count),
    FieldRule(PROFILE_STATS, "following_count", re.compile(r"([0-9,.]+)\s*(?:フォロー中|Following)"), parse_count),
    FieldRule(PROFILE_STATS, "tweet_count", re.compile(r"([0-9,.]+)\s*(?:ポスト|posts)", re.I), parse_count),
]


def or_default(value: Optional[T], default: T) -> T:
    """Return `value` unless it is None."""
    return default if value is None else value


def apply_rule(rule: FieldRule, text: str) -> Optional[object]:
    """Apply a single rule to `text`, logging and dropping a malformed value."""
    try:
        return rule.apply(text)
    except ParseAnomaly as exc:
        logger.warning("Skipping field: %s", exc)
        return None


def _first_record(records: Iterable[RawRecord], label: str) -> Optional[RawRecord]:
    for record in records:
        if record.label == label and record.data:
            return record
    return None


def _label_text(records: Iterable[RawRecord], label: str) -> str:
    """Join every record carrying `label`; a page may split one section
    across several elements."""
    return " ".join(str(r.data) for r in records if r.label == label and r.data)


def extract_fields(records: List[RawRecord], rules: Iterable[FieldRule] = PROFILE_RULES) -> Dict[str, object]:
    """Run `rules` over `records` and return the fields that matched."""
    found: Dict[str, object] = {}
    texts: Dict[str, str] = {}
    for rule in rules:
        if rule.field in found:
            continue
        if rule.label not in texts:
            texts[rule.label] = _label_text(records, rule.label)
        if not texts[rule.label]:
            continue
        value = apply_rule(rule, texts[rule.label])
        if value is not None:
            found[rule.field] = value
    return found


def extract_posts(records: Iterable[RawRecord], limit: int = MAX_POSTS) -> List[Post]:
    """Collect post records, most recent first as returned by the source."""
    posts: List[Post] = []
    for record in records:
        if record.label != POSTS or not record.data:
            continue
        text = str(record.data)
        match = POST_DATE_RE.search(text)
        posts.append(Post(text=text[:MAX_POST_CHARS], date=match.group(1) if match else UNKNOWN_DATE))
    return posts[:limit]


def extract_profile(records: List[RawRecord], url: str) -> ProfileRecord:
    """Build a `ProfileRecord` from crawl records.

    Args:
        records: Labelled records from the profile crawl.
        url: The profile URL the records were crawled from.

    Returns:
        A populated profile.  Fields that could not be extracted keep
        their defaults.

    Raises:
        InvalidUrl: If no username can be derived from `url`.
    """
    username = username_from_url(url)
    fields = extract_fields(records)
    posts = extract_posts(records)
    bio = or_default(fields.get("bio"), "")
    profile = ProfileRecord(
        username=username,
        display_name=or_default(fields.get("display_name"), username),
        bio=bio,
        join_date=or_default(fields.get("join_date"), ""),
        location=or_default(fields.get("location"), ""),
        website=or_default(fields.get("website"), ""),
        tweet_count=or_default(fields.get("tweet_count"), 0),
        followers_count=or_default(fields.get("followers_count"), 0),
        following_count=or_default(fields.get("following_count"), 0),
        skills=infer_skills(bio, [p.text for p in posts]),
        recent_posts=posts,
    )
    logger.debug("Extracted profile for %s: %d posts, %d skills", username, len(posts), len(profile.skills))
    return profile


def extract_reference(records: List[RawRecord], url: str) -> ReferenceRecord:
    """Build a `ReferenceRecord` from the records of a reference page."""
    title_record = _first_record(records, TITLE)
    body_record = _first_record(records, CONTENT) or _first_record(records, MARKDOWN)
    keywords_record = _first_record(records, META_KEYWORDS)

    title = _clean(str(title_record.data)) if title_record else None
    content = str(body_record.data)[:MAX_REFERENCE_CHARS] if body_record else MISSING_CONTENT
    keywords: List[str] = []
    if keywords_record:
        raw = str(keywords_record.data)
        # meta records are rendered as "keywords: a, b, c"
        raw = re.sub(r"^\s*keywords\s*:", "", raw, flags=re.I)
        keywords = [k.strip() for k in raw.split(",") if k.strip()]

    return ReferenceRecord(
        url=url,
        title=or_default(title, url),
        content=content,
        keywords=keywords,
        extracted_skills=merge_skills(match_vocabulary(content) if body_record else []),
        last_scraped=datetime.now(timezone.utc).isoformat(),
    )
