"""Rustdoc page: ``/{crate}/{version}/{path}`` → :class:`DocPage`.

Rustdoc has rendered item tables in two ways over the years, tried in this
order:

* a ``<dl class="item-table">`` where each ``<dt>`` is followed by its ``<dd>``, and
* older rows where each ``.item-name`` cell sits next to a ``.desc`` cell
  (``<ul>`` or ``<div>`` based ``.item-table``).

The helpers here are shared with :mod:`docsrs.scraper.modules`.
"""

from __future__ import annotations

from typing import List, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from docsrs.scraper.fetcher import fetch_markup
from docsrs.scraper.models import DocItem, DocPage
from docsrs.scraper.shapes import Shape, first_match, first_text, or_none, parse_html, text_of
from docsrs.scraper.urls import doc_url, normalize_version

MAX_CONTENT_BLOCKS = 5
MAX_ITEMS = 20

DESC_CLASSES = frozenset({"desc", "desc-docblock", "docblock-short"})
DESC_SELECTOR = ".desc, .desc-docblock, .docblock-short"
TABLE_CLASSES = frozenset({"item-table", "item-table-wrap"})

TITLE_SELECTORS = ("h1.fqn", ".main-heading h1", "title")
DESCRIPTION_SELECTORS = (".docblock.type-decl-sub", ".docblock")
CONTENT_SELECTOR = ".main-heading, .docblock"


def _has_desc_class(node: Tag | None) -> bool:
    return node is not None and bool(DESC_CLASSES.intersection(node.get("class") or []))


def nearest_description(node: Tag) -> str | None:
    """Summary text belonging to an ``.item-name`` cell.

    Looks at the cell's next sibling first, then widens to enclosing rows.
    The surrounding ``.item-table`` itself is not searched.
    """
    sibling = node.find_next_sibling()
    if _has_desc_class(sibling):
        return or_none(text_of(sibling))

    for ancestor in node.parents:
        if ancestor.name in ("body", "[document]"):
            break
        if TABLE_CLASSES.intersection(ancestor.get("class") or []):
            break
        desc = ancestor.select_one(DESC_SELECTOR)
        if desc is not None:
            return or_none(text_of(desc))
    return None


def definition_description(term: Tag) -> str | None:
    """Text of the ``<dd>`` directly following *term*, if there is one."""
    detail = term.find_next_sibling()
    if detail is None or detail.name != "dd":
        return None
    return or_none(text_of(detail))


def _items_from_rows(soup: BeautifulSoup, nodes: List[Tag]) -> List[DocItem]:
    items: List[DocItem] = []
    for node in nodes:
        name = text_of(node)
        if name:
            items.append(DocItem(name=name, description=nearest_description(node)))
    return items


def _items_from_definitions(soup: BeautifulSoup, nodes: List[Tag]) -> List[DocItem]:
    items: List[DocItem] = []
    for node in nodes:
        name = text_of(node)
        if name:
            items.append(DocItem(name=name, description=definition_description(node)))
    return items


ITEM_SHAPES: Tuple[Shape[List[DocItem]], ...] = (
    Shape("definition-list", "dl.item-table > dt", _items_from_definitions),
    Shape("item-name-rows", ".item-name", _items_from_rows),
)


def parse_doc_page(html: str, crate: str, version: str, path: str, url: str) -> DocPage:
    """Build a :class:`DocPage` from rustdoc *html*.

    ``content`` keeps the first five non-empty heading/docblock texts in
    document order and ``items`` the first twenty named items.
    """
    soup = parse_html(html)

    content = [text for text in (text_of(node) for node in soup.select(CONTENT_SELECTOR)) if text]
    items = first_match(soup, ITEM_SHAPES) or []

    return DocPage(
        crate=crate,
        version=version,
        path=path or "index",
        url=url,
        title=first_text(soup, TITLE_SELECTORS),
        description=first_text(soup, DESCRIPTION_SELECTORS),
        content=content[:MAX_CONTENT_BLOCKS],
        items=items[:MAX_ITEMS],
    )


async def fetch_doc_page(crate: str, version: str | None = None, path: str = "") -> DocPage:
    """Fetch and parse a rustdoc page.

    Args:
        crate: Crate name, e.g. ``"tokio"``.
        version: Crate version; ``"latest"`` when omitted.
        path: Page path below the version, e.g. ``"tokio/runtime/index.html"``.
            Empty means the crate's root module page.
    """
    version = normalize_version(version)
    url = doc_url(crate, version, path)
    html = await fetch_markup(url)
    return parse_doc_page(html, crate, version, path, url)
