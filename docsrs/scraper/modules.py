"""Crate root listing: ``/{crate}/{version}/{crate_mod}/index.html`` → :class:`ModuleListing`."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from docsrs.scraper.doc_page import definition_description, nearest_description
from docsrs.scraper.fetcher import fetch_markup
from docsrs.scraper.models import DocItem, ModuleListing
from docsrs.scraper.shapes import Shape, first_match, parse_html, text_of
from docsrs.scraper.urls import modules_url, normalize_version

# (ModuleListing field, section heading id, rustdoc link class)
CATEGORIES: Tuple[Tuple[str, str, str], ...] = (
    ("modules", "modules", "mod"),
    ("structs", "structs", "struct"),
    ("enums", "enums", "enum"),
    ("functions", "functions", "fn"),
    ("traits", "traits", "trait"),
    ("macros", "macros", "macro"),
)

Listing = Dict[str, List[DocItem]]


def _row_selector(section: str) -> str:
    return f"#{section} + .item-table .item-name, #{section} + .item-table-wrap .item-name"


def _definition_selector(section: str) -> str:
    return f"#{section} + dl.item-table > dt"


def _collect(
    soup: BeautifulSoup,
    selector_for: Callable[[str], str],
    describe: Callable[[Tag], str | None],
) -> Listing:
    listing: Listing = {}
    for field_name, section, link_class in CATEGORIES:
        entries: List[DocItem] = []
        for node in soup.select(selector_for(section)):
            name = text_of(node.select_one(f"a.{link_class}"))
            if name:
                entries.append(DocItem(name=name, description=describe(node)))
        listing[field_name] = entries
    return listing


def _from_rows(soup: BeautifulSoup, nodes: List[Tag]) -> Listing:
    return _collect(soup, _row_selector, nearest_description)


def _from_definitions(soup: BeautifulSoup, nodes: List[Tag]) -> Listing:
    return _collect(soup, _definition_selector, definition_description)


LISTING_SHAPES: Tuple[Shape[Listing], ...] = (
    Shape(
        "definition-list",
        ", ".join(_definition_selector(section) for _, section, _ in CATEGORIES),
        _from_definitions,
    ),
    Shape(
        "item-name-rows",
        ", ".join(_row_selector(section) for _, section, _ in CATEGORIES),
        _from_rows,
    ),
)


def parse_module_listing(html: str, crate: str, version: str) -> ModuleListing:
    """Group the items on a crate root page by kind.

    Only one markup shape is used per page.  Kinds missing from the page come
    back as empty lists.
    """
    listing = first_match(parse_html(html), LISTING_SHAPES) or {}
    return ModuleListing(
        crate=crate,
        version=version,
        **{field_name: listing.get(field_name, []) for field_name, _, _ in CATEGORIES},
    )


async def fetch_module_listing(crate: str, version: str | None = None) -> ModuleListing:
    version = normalize_version(version)
    html = await fetch_markup(modules_url(crate, version))
    return parse_module_listing(html, crate, version)
