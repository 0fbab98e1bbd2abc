"""Selector cascades for docs.rs markup that changes between deployments.

Each page type knows a few historical DOM shapes.  A shape pairs a CSS
selector with an adapter that turns the matched nodes into records.  Shapes
are tried in priority order and the first one whose selector matches
anything wins; later shapes are not consulted and results are never merged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, Sequence, TypeVar

from bs4 import BeautifulSoup
from bs4.element import Tag

logger = logging.getLogger(__name__)

T = TypeVar("T")

PARSER = "html.parser"


@dataclass(frozen=True)
class Shape(Generic[T]):
    """One known markup shape.

    Attributes:
        name: Label used in debug logs and tests.
        selector: CSS selector that identifies the shape on a page.
        adapter: Called with the parsed document and the matched nodes.
    """

    name: str
    selector: str
    adapter: Callable[[BeautifulSoup, List[Tag]], T]


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, PARSER)


def first_match(soup: BeautifulSoup, shapes: Sequence[Shape[T]]) -> Optional[T]:
    """Run the adapter of the first shape whose selector matches, else ``None``."""
    for shape in shapes:
        nodes = soup.select(shape.selector)
        if nodes:
            logger.debug("shape %s matched %d node(s)", shape.name, len(nodes))
            return shape.adapter(soup, nodes)
    return None


def text_of(node: Tag | None) -> str:
    """Stripped text content of *node*; empty string for ``None``."""
    if node is None:
        return ""
    return node.get_text().strip()


def first_text(soup: BeautifulSoup | Tag, selectors: Iterable[str]) -> str | None:
    """Text of the first node found by the first selector yielding non-empty text."""
    for selector in selectors:
        text = text_of(soup.select_one(selector))
        if text:
            return text
    return None


def or_none(text: str) -> str | None:
    return text or None
