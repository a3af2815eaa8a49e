"""
Mock profile adapter.

This module produces plausible profile and reference data without any
network access or credential.  The aggregator uses it whenever a real
crawl cannot run or the profile crawl fails, so the pipeline always
yields something the user can edit.  The shape of the output is fixed;
only the content is random.  Pass a seeded `random.Random` to get
reproducible data in tests.
"""

from __future__ import annotations

import logging
import random
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Optional
from urllib.parse import urlparse

from ..normalize.schema import (
    AggregatedFetchResult,
    Post,
    ProfileRecord,
    ReferenceRecord,
)
from ..normalize.skills import SKILL_VOCABULARY
from ..urls import username_from_url

logger = logging.getLogger(__name__)

LOCATIONS = ["Tokyo", "Osaka", "Kanagawa", "Kyoto", "Saitama", "Chiba", "Aichi", "Fukuoka", "Hokkaido", "Okinawa"]

TECH_EVENTS = [
    "Tech Conference 2023", "Developers Summit", "JavaScript Fest",
    "Python Study Group", "AI Summit", "Web Design Workshop",
    "React Meetup", "Cloud Computing Conference",
    "Mobile App Development Seminar", "Data Science Forum",
]
TECHS = [
    "React", "Vue.js", "Angular", "Node.js", "Python",
    "Java", "PHP", "Ruby", "Swift", "Kotlin",
    "Go", "Rust", "TypeScript", "C#", "AWS",
    "Docker", "Kubernetes", "TensorFlow", "PyTorch", "Flutter",
]
COMPANIES = [
    "a tech startup", "a global IT company", "a major telecom",
    "a fintech company", "a large e-commerce company", "a consulting firm",
    "a marketing agency", "a healthcare IT company", "an edtech company",
    "a mobile app studio",
]
BOOKS = [
    "Clean Code", "The Art of Readable Code", "Design Patterns",
    "The Pragmatic Programmer", "Don't Make Me Think", "Agile Software Development",
    "Life 3.0", "Data Science from Scratch", "Blockchain Revolution",
    "Management 3.0",
]
CONFERENCES = [
    "JSConf", "PyCon", "RubyKaigi", "AWS Summit",
    "Google I/O", "Apple WWDC", "Microsoft Build",
    "TensorFlow Developer Summit", "ReactConf", "DevOps Days",
]

REFERENCE_KEYWORDS = ["portfolio", "projects", "development"]
REFERENCE_CONTENT = (
    "This page could not be scraped, so placeholder content was generated. "
    "Replace it with a summary of the projects and experience shown on the site."
)


def capitalize_username(username: str) -> str:
    return username[:1].upper() + username[1:].lower()


def format_date(value: date) -> str:
    """Format a date the way X renders it for Japanese locales."""
    return f"{value.year}年{value.month}月{value.day}日"


class MockDataGenerator:
    """Generate synthetic profiles and references."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def _join_date(self) -> str:
        year = self.rng.randint(2006, 2021)
        month = self.rng.randint(1, 12)
        day = self.rng.randint(1, 28)
        return format_date(date(year, month, day))

    def _skills(self, low: int, high: int) -> List[str]:
        return self.rng.sample(SKILL_VOCABULARY, self.rng.randint(low, high))

    def _post_text(self) -> str:
        rng = self.rng
        templates = [
            lambda: "Kicked off a new project today! More details soon #newproject",
            lambda: "Another productive day. Let's keep going tomorrow! #dailygrind",
            lambda: f"Attended {rng.choice(TECH_EVENTS)} and learned a lot! #event",
            lambda: f"Published a new {rng.choice(TECHS)} tutorial. Check it out if you're interested.",
            lambda: f"Just finished a meeting with {rng.choice(COMPANIES)}. Looking forward to working with a great team!",
            lambda: f"Finished reading {rng.choice(BOOKS)}. Highly recommended! #reading",
            lambda: f"Picked up some new {rng.choice(TECHS)} skills. Learning is fun! #skillup",
            lambda: f"Gave a talk at {rng.choice(CONFERENCES)} and got lots of feedback!",
            lambda: f"Thinking about where {rng.choice(TECHS)} is heading lately. What do you all think?",
            lambda: "Starting a new position! Looking forward to what comes next #career",
        ]
        return rng.choice(templates)()

    def _posts(self) -> List[Post]:
        today = datetime.now().date()
        posts = []
        for _ in range(self.rng.randint(5, 8)):
            posted = today - timedelta(days=self.rng.randrange(90))
            posts.append(Post(text=self._post_text(), date=format_date(posted)))
        return posts

    def profile(self, url: str) -> ProfileRecord:
        """Return a synthetic profile for `url`.

        Raises:
            InvalidUrl: If no username can be derived from `url`.
        """
        username = username_from_url(url)
        website = f"https://{username}.com" if self.rng.random() > 0.5 else ""
        profile = ProfileRecord(
            username=username,
            display_name=capitalize_username(username),
            bio=f"This is a sample bio for {username}. The real profile could not be fetched, so it was generated.",
            join_date=self._join_date(),
            location=self.rng.choice(LOCATIONS),
            website=website,
            tweet_count=self.rng.randrange(10000),
            followers_count=self.rng.randrange(5000),
            following_count=self.rng.randrange(1000),
            skills=self._skills(5, 10),
            recent_posts=self._posts(),
        )
        logger.debug("Generated mock profile for %s", username)
        return profile

    def reference(self, url: str) -> ReferenceRecord:
        """Return a synthetic reference record for `url`."""
        host = urlparse(url).hostname or url
        if host.startswith("www."):
            host = host[len("www."):]
        return ReferenceRecord(
            url=url,
            title=f"{host} (reference)",
            content=REFERENCE_CONTENT,
            keywords=list(REFERENCE_KEYWORDS),
            extracted_skills=self.rng.sample(SKILL_VOCABULARY, 5),
            last_scraped=datetime.now(timezone.utc).isoformat(),
        )

    def fallback(self, profile_url: str, reference_urls: Iterable[str] = ()) -> AggregatedFetchResult:
        """Synthetic result for a profile and every given reference URL."""
        return AggregatedFetchResult(
            profile=self.profile(profile_url),
            references=[self.reference(url) for url in reference_urls],
        )
