"""Crate metadata page: ``/crate/{crate}/{version}`` → :class:`ReadmeInfo`."""

from __future__ import annotations

import re
from typing import Dict, List
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from docsrs.config import settings
from docsrs.scraper.fetcher import fetch_markup
from docsrs.scraper.models import ReadmeInfo
from docsrs.scraper.shapes import parse_html
from docsrs.scraper.urls import absolute_url, normalize_version, readme_url

NON_CONTENT_TAGS = ["script", "style", "nav", "header", "footer"]
README_SELECTORS = (".readme", ".pure-u-14-24", "#main")

SOURCE_HOSTS = ("github.com", "gitlab.com", "codeberg.org", "bitbucket.org")
_HOSTS_PATTERN = "|".join(re.escape(host) for host in SOURCE_HOSTS)
# https://host/owner/repo with nothing after the repository name.
_STRICT_REPOSITORY = re.compile(
    rf"^https?://(?:www\.)?(?:{_HOSTS_PATTERN})/[^/?#\s]+/[^/?#\s]+/?$",
    re.IGNORECASE,
)
_ANY_REPOSITORY = re.compile(rf"^https?://(?:www\.)?(?:{_HOSTS_PATTERN})/", re.IGNORECASE)


def _strip_non_content(soup: BeautifulSoup) -> None:
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()


def _readme_text(soup: BeautifulSoup) -> str | None:
    for selector in README_SELECTORS:
        container = soup.select_one(selector)
        if container is None:
            continue
        text = container.get_text(separator="\n", strip=True)
        if text:
            return text
    return None


def _repository_link(hrefs: List[str]) -> str | None:
    """Prefer a strict ``host/owner/repo`` link, else any source-hosting link."""
    for href in hrefs:
        if _STRICT_REPOSITORY.match(href):
            return href
    for href in hrefs:
        if _ANY_REPOSITORY.match(href):
            return href
    return None


def _documentation_link(hrefs: List[str], crate: str) -> str | None:
    docs_host = urlparse(settings.base_url).netloc
    prefix = f"/{crate}/"
    for href in hrefs:
        parsed = urlparse(href)
        if parsed.netloc and parsed.netloc != docs_host:
            continue
        if parsed.path.startswith(prefix):
            return absolute_url(href)
    return None


def parse_readme(html: str, crate: str, version: str) -> ReadmeInfo:
    soup = parse_html(html)
    _strip_non_content(soup)

    hrefs = [link["href"].strip() for link in soup.find_all("a", href=True)]
    metadata: Dict[str, str] = {}
    repository = _repository_link(hrefs)
    if repository:
        metadata["repository"] = repository
    documentation = _documentation_link(hrefs, crate)
    if documentation:
        metadata["documentation"] = documentation

    return ReadmeInfo(
        crate=crate,
        version=version,
        readme=_readme_text(soup),
        metadata=metadata,
    )


async def fetch_readme(crate: str, version: str | None = None) -> ReadmeInfo:
    version = normalize_version(version)
    html = await fetch_markup(readme_url(crate, version))
    return parse_readme(html, crate, version)
