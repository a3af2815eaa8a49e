"""Tests for splitting crawled HTML pages into labelled records."""

from __future__ import annotations

from resumeflow.normalize.html_records import Extractor, records_from_html, records_from_page

PAGE = """
<html>
  <head>
    <title>Alice Example (@alice_dev) / X</title>
    <meta name="description" content="Python engineer">
    <meta property="og:title" content="Alice Example">
    <meta name="keywords" content="python, react">
  </head>
  <body>
    <div data-testid="UserName">Alice Example <span>@alice_dev</span></div>
    <article data-testid="tweet">First <b>post</b></article>
    <article data-testid="tweet">   </article>
    <article data-testid="tweet">Second post</article>
  </body>
</html>
"""


def test_text_extractor_emits_one_record_per_element() -> None:
    records = records_from_html(PAGE, [Extractor("tweets", '[data-testid="tweet"]')])
    assert [r.data for r in records] == ["First post", "Second post"]
    assert {r.label for r in records} == {"tweets"}


def test_meta_extractor_joins_tags() -> None:
    records = records_from_html(PAGE, [Extractor("profile_meta", "head meta", "meta")])
    assert len(records) == 1
    assert records[0].data.splitlines() == [
        "description: Python engineer",
        "og:title: Alice Example",
        "keywords: python, react",
    ]


def test_records_follow_extractor_order() -> None:
    extractors = [
        Extractor("tweets", '[data-testid="tweet"]'),
        Extractor("profile_header", '[data-testid="UserName"]'),
    ]
    labels = [r.label for r in records_from_html(PAGE, extractors)]
    assert labels == ["tweets", "tweets", "profile_header"]


def test_unmatched_selector_yields_nothing() -> None:
    assert records_from_html(PAGE, [Extractor("content", "main")]) == []
    assert records_from_html("", [Extractor("title", "title")]) == []


def test_page_markdown_is_appended() -> None:
    page = {"html": PAGE, "markdown": "# Alice"}
    records = records_from_page(page, [Extractor("title", "title")])
    assert [(r.label, r.data) for r in records] == [
        ("title", "Alice Example (@alice_dev) / X"),
        ("markdown", "# Alice"),
    ]


def test_markdown_only_page() -> None:
    records = records_from_page({"markdown": "plain text"}, [Extractor("title", "title")])
    assert [(r.label, r.data) for r in records] == [("markdown", "plain text")]
    assert records_from_page({"markdown": "plain text"}, [], markdown_label=None) == []


def test_page_content_stands_in_for_markdown() -> None:
    records = records_from_page({"content": "Alice builds things"}, [])
    assert [(r.label, r.data) for r in records] == [("markdown", "Alice builds things")]
