"""Release search: ``/releases/search?query=...`` → :class:`SearchResult` rows."""

from __future__ import annotations

import re
from typing import List, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from docsrs.scraper.fetcher import fetch_markup
from docsrs.scraper.models import SearchResult
from docsrs.scraper.shapes import Shape, first_match, or_none, parse_html, text_of
from docsrs.scraper.urls import absolute_url, search_url

# "{name}-{version}" where the version starts with a digit ("1.2.3", "0.1.0-alpha.1").
_COMBINED_LABEL = re.compile(r"^(?P<name>.+)-(?P<version>\d[\w.+-]*)$")


def split_label(label: str) -> Tuple[str, str | None]:
    """Split a combined ``{name}-{version}`` label on its last hyphen.

    Crate names may contain hyphens themselves, so ``"my-crate-1.2.3"``
    becomes ``("my-crate", "1.2.3")``.  Hyphens inside a pre-release suffix
    are skipped: the split lands on the last hyphen that is followed by a
    digit (``"foo-0.1.0-alpha.1"`` → ``("foo", "0.1.0-alpha.1")``).  A label
    without such a hyphen is returned whole as the name.
    """
    label = label.strip()
    match = _COMBINED_LABEL.match(label)
    if match is None:
        return label, None
    return match.group("name"), match.group("version")


def _build(label: str, href: str | None, version: str, description: str) -> SearchResult | None:
    if not version:
        label, split_version = split_label(label)
        version = split_version or ""
    if not label or not href:
        return None
    return SearchResult(
        name=label,
        version=or_none(version),
        description=or_none(description),
        docs_url=absolute_url(href),
    )


def _from_labeled_rows(soup: BeautifulSoup, rows: List[Tag]) -> List[SearchResult]:
    results: List[SearchResult] = []
    for row in rows:
        link = row.select_one(".release-name a")
        result = _build(
            text_of(link),
            link.get("href") if link is not None else None,
            text_of(row.select_one(".version")),
            text_of(row.select_one(".description")),
        )
        if result is not None:
            results.append(result)
    return results


def _from_combined_label(soup: BeautifulSoup, rows: List[Tag]) -> List[SearchResult]:
    results: List[SearchResult] = []
    for row in rows:
        result = _build(
            text_of(row.select_one(".name")),
            row.get("href"),
            "",
            text_of(row.select_one(".description")),
        )
        if result is not None:
            results.append(result)
    return results


SEARCH_SHAPES: Tuple[Shape[List[SearchResult]], ...] = (
    Shape("labeled-rows", "li.release", _from_labeled_rows),
    Shape("combined-label", "a.release", _from_combined_label),
)


def parse_search(html: str) -> List[SearchResult]:
    """Extract search hits in document order.

    Rows without a name or link are skipped; the rest are still returned.
    """
    return first_match(parse_html(html), SEARCH_SHAPES) or []


async def search_crates(query: str) -> List[SearchResult]:
    """Search docs.rs for *query* and return every hit on the first page."""
    html = await fetch_markup(search_url(query))
    return parse_search(html)
