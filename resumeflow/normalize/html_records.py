"""
HTML to labelled records.

The crawl provider may hand back plain page documents instead of the
labelled chunks requested through the extractor list.  This module
applies the extractor selectors to the page HTML with BeautifulSoup so
that both shapes end up as the same list of `RawRecord` objects.  A
selector that matches several elements yields one record per element,
which is how individual posts are collected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup

from .schema import RawRecord


@dataclass(frozen=True)
class Extractor:
    name: str
    selector: str
    type: str = "text"            # 'text' | 'meta'


def _meta_text(tag) -> str:
    key = tag.get("name") or tag.get("property") or ""
    content = tag.get("content") or ""
    return f"{key}: {content}".strip() if key else content.strip()


def records_from_html(html: str, extractors: Iterable[Extractor]) -> List[RawRecord]:
    """Split an HTML page into records using CSS selectors.

    Args:
        html: Raw HTML of a crawled page.
        extractors: Selector definitions.  `text` extractors emit one
            record per matched element with its visible text; `meta`
            extractors emit a single record joining `name: content`
            lines of the matched meta tags.

    Returns:
        Records in extractor order, then document order.  Elements with
        no text are skipped.
    """
    soup = BeautifulSoup(html or "", "html.parser")
    records: List[RawRecord] = []
    for extractor in extractors:
        tags = soup.select(extractor.selector)
        if extractor.type == "meta":
            lines = [_meta_text(tag) for tag in tags]
            lines = [line for line in lines if line]
            if lines:
                records.append(RawRecord(extractor.name, "\n".join(lines)))
            continue
        for tag in tags:
            text = tag.get_text(" ", strip=True)
            if text:
                records.append(RawRecord(extractor.name, text))
    return records


def records_from_page(
    page: dict, extractors: Iterable[Extractor], markdown_label: Optional[str] = "markdown"
) -> List[RawRecord]:
    """Convert one crawled page document into records.

    HTML is preferred because selectors can be applied to it; the page
    markdown, when present, is appended under `markdown_label` so that
    callers have a plain‑text body to fall back on.
    """
    html = page.get("html") or page.get("rawHtml") or ""
    records = records_from_html(html, extractors) if html else []
    markdown = page.get("markdown") or page.get("content") or ""
    if markdown_label and markdown:
        records.append(RawRecord(markdown_label, markdown))
    return records
