"""Tests for synthetic profile and reference generation."""

from __future__ import annotations

import random
import re
from datetime import datetime, timedelta

import pytest  # type: ignore

from resumeflow.errors import InvalidUrl
from resumeflow.ingest.mock_adapter import (
    LOCATIONS,
    REFERENCE_CONTENT,
    MockDataGenerator,
    capitalize_username,
    format_date,
)
from resumeflow.normalize.skills import SKILL_VOCABULARY

JOIN_DATE_RE = re.compile(r"^(\d{4})年(\d{1,2})月(\d{1,2})日$")


@pytest.fixture
def generator() -> MockDataGenerator:
    return MockDataGenerator(random.Random(1234))


def test_profile_shape(generator: MockDataGenerator) -> None:
    profile = generator.profile("https://x.com/aLICE")
    assert profile.username == "aLICE"
    assert profile.display_name == "Alice"
    assert profile.bio.startswith("This is a sample bio for aLICE.")
    assert profile.location in LOCATIONS
    assert profile.website in ("", "https://aLICE.com")
    assert 0 <= profile.tweet_count < 10000
    assert 0 <= profile.followers_count < 5000
    assert 0 <= profile.following_count < 1000
    assert 5 <= len(profile.skills) <= 10
    assert set(profile.skills) <= set(SKILL_VOCABULARY)
    assert len(set(profile.skills)) == len(profile.skills)


@pytest.mark.parametrize("seed", range(20))
def test_join_date_bounds(seed: int) -> None:
    profile = MockDataGenerator(random.Random(seed)).profile("https://x.com/bob")
    year, month, day = map(int, JOIN_DATE_RE.match(profile.join_date).groups())
    assert 2006 <= year <= 2021
    assert 1 <= month <= 12
    assert 1 <= day <= 28


def test_posts_are_recent(generator: MockDataGenerator) -> None:
    profile = generator.profile("https://x.com/bob")
    assert 5 <= len(profile.recent_posts) <= 8
    today = datetime.now().date()
    for post in profile.recent_posts:
        assert post.text
        year, month, day = map(int, JOIN_DATE_RE.match(post.date).groups())
        age = today - datetime(year, month, day).date()
        assert timedelta(0) <= age < timedelta(days=91)


def test_same_seed_same_profile() -> None:
    first = MockDataGenerator(random.Random(7)).profile("https://x.com/bob")
    second = MockDataGenerator(random.Random(7)).profile("https://x.com/bob")
    assert first.to_dict() == second.to_dict()


def test_profile_requires_username(generator: MockDataGenerator) -> None:
    with pytest.raises(InvalidUrl):
        generator.profile("https://x.com/")


def test_reference_shape(generator: MockDataGenerator) -> None:
    ref = generator.reference("https://www.github.com/alice")
    assert ref.url == "https://www.github.com/alice"
    assert ref.title == "github.com (reference)"
    assert ref.content == REFERENCE_CONTENT
    assert ref.keywords == ["portfolio", "projects", "development"]
    assert len(ref.extracted_skills) == 5
    assert ref.last_scraped


def test_fallback_covers_every_reference(generator: MockDataGenerator) -> None:
    result = generator.fallback("https://x.com/bob", ["https://a.example", "https://b.example"])
    assert result.profile.username == "bob"
    assert [r.url for r in result.references] == ["https://a.example", "https://b.example"]


def test_helpers() -> None:
    assert capitalize_username("jOHN_doe") == "John_doe"
    assert capitalize_username("") == ""
    assert format_date(datetime(2024, 1, 5).date()) == "2024年1月5日"
