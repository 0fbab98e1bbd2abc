"""Crate landing page: ``/{crate}/`` → :class:`CrateHome`."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from docsrs.scraper.fetcher import fetch_markup
from docsrs.scraper.models import CrateHome
from docsrs.scraper.shapes import first_text, or_none, parse_html
from docsrs.scraper.urls import crate_home_url


def _latest_version(soup: BeautifulSoup, crate: str) -> str | None:
    """Version segment of the first link rooted at ``/{crate}/``, if any."""
    prefix = f"/{crate}/"
    pattern = re.compile(rf"/{re.escape(crate)}/([^/]+)/")
    for link in soup.find_all("a", href=True):
        href = link["href"]
        if href.startswith(prefix):
            match = pattern.search(href)
            return match.group(1) if match else None
    return None


def parse_crate_home(html: str, crate: str, url: str) -> CrateHome:
    soup = parse_html(html)
    meta = soup.find("meta", attrs={"name": "description"})
    description = meta.get("content", "").strip() if meta is not None else ""

    return CrateHome(
        crate=crate,
        title=first_text(soup, ["h1"]) or crate,
        description=or_none(description),
        latest_version=_latest_version(soup, crate),
        homepage=url,
    )


async def fetch_crate_home(crate: str) -> CrateHome:
    url = crate_home_url(crate)
    html = await fetch_markup(url)
    return parse_crate_home(html, crate, url)
