"""Scraper package: docs.rs fetch & page extraction."""

from docsrs.scraper.crate_home import fetch_crate_home, parse_crate_home
from docsrs.scraper.doc_page import fetch_doc_page, parse_doc_page
from docsrs.scraper.errors import DocsRsError, FetchTimeoutError, UpstreamError
from docsrs.scraper.fetcher import fetch_markup
from docsrs.scraper.models import (
    CrateHome,
    DocItem,
    DocPage,
    ModuleListing,
    ReadmeInfo,
    SearchResult,
)
from docsrs.scraper.modules import fetch_module_listing, parse_module_listing
from docsrs.scraper.readme import fetch_readme, parse_readme
from docsrs.scraper.search import parse_search, search_crates, split_label

__all__ = [
    "fetch_markup",
    "search_crates",
    "fetch_crate_home",
    "fetch_doc_page",
    "fetch_module_listing",
    "fetch_readme",
    "parse_search",
    "parse_crate_home",
    "parse_doc_page",
    "parse_module_listing",
    "parse_readme",
    "split_label",
    "SearchResult",
    "CrateHome",
    "DocItem",
    "DocPage",
    "ModuleListing",
    "ReadmeInfo",
    "DocsRsError",
    "FetchTimeoutError",
    "UpstreamError",
]
