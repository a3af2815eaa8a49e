"""Tests for profile and reference URL validation."""

from __future__ import annotations

import pytest  # type: ignore

from resumeflow.errors import InvalidUrl
from resumeflow.urls import (
    is_profile_url,
    is_reference_url,
    select_reference_urls,
    username_from_url,
)


@pytest.mark.parametrize(
    "url",
    [
        "https://x.com/alice",
        "https://x.com/alice/",
        "http://twitter.com/bob_1",
        "https://www.x.com/Alice",
        "https://www.twitter.com/dev_2024/",
    ],
)
def test_profile_url_accepts_x_and_twitter(url: str) -> None:
    assert is_profile_url(url)


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/alice",
        "https://x.com/",
        "https://x.com",
        "x.com/alice",
        "https://x.com/alice/status/1",
        "https://x.com/al-ice",
        "https://x.com/alice\n",
        "ftp://x.com/alice",
        "",
    ],
)
def test_profile_url_rejects_other_hosts_and_paths(url: str) -> None:
    assert not is_profile_url(url)


@pytest.mark.parametrize("url", ["https://x.com/alice", "https://x.com/alice/"])
def test_username_ignores_trailing_slash(url: str) -> None:
    assert username_from_url(url) == "alice"


def test_username_requires_path_segment() -> None:
    with pytest.raises(InvalidUrl):
        username_from_url("https://x.com/")
    with pytest.raises(InvalidUrl):
        username_from_url("not a url")


def test_reference_url_rules() -> None:
    assert is_reference_url("")
    assert is_reference_url("   ")
    assert is_reference_url("https://github.com/alice")
    assert is_reference_url("http://alice.dev/projects?page=2")
    assert not is_reference_url("not a url")
    assert not is_reference_url("github.com/alice")


def test_select_reference_urls_drops_blank_and_invalid() -> None:
    urls = ["", "not a url", "https://alice.dev", "  ", "https://github.com/alice"]
    assert select_reference_urls(urls) == ["https://alice.dev", "https://github.com/alice"]
