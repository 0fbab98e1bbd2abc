"""Named docs.rs operations returning JSON-ready dicts.

Operations
----------
    search        query, limit=10       → {query, total, results}
    crate_home    crate                 → CrateHome
    get_doc       crate, version, path  → DocPage
    list_modules  crate, version        → ModuleListing
    get_readme    crate, version        → ReadmeInfo

Arguments are validated before any request is made.  Fetch failures
(:class:`~docsrs.scraper.errors.DocsRsError`) propagate unchanged.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict

from docsrs.config import settings
from docsrs.scraper import (
    fetch_crate_home,
    fetch_doc_page,
    fetch_module_listing,
    fetch_readme,
    search_crates,
)


class InvalidArgumentError(ValueError):
    """Raised when an operation is called with arguments outside its schema."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _require_text(name: str, value: str | None) -> str:
    if not value or not value.strip():
        raise InvalidArgumentError(f"{name} must be a non-empty string")
    return value


def _resolve_limit(limit: int | None) -> int:
    if limit is None:
        return settings.search_limit
    if not 1 <= limit <= settings.search_max_limit:
        raise InvalidArgumentError(
            f"limit must be between 1 and {settings.search_max_limit}, got {limit}"
        )
    return limit


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

async def search(query: str, limit: int | None = None) -> Dict[str, Any]:
    """Search crates; ``total`` counts every hit, ``results`` at most *limit*."""
    query = _require_text("query", query)
    limit = _resolve_limit(limit)
    hits = await search_crates(query)
    return {
        "query": query,
        "total": len(hits),
        "results": [hit.to_dict() for hit in hits[:limit]],
    }


async def crate_home(crate: str) -> Dict[str, Any]:
    home = await fetch_crate_home(_require_text("crate", crate))
    return home.to_dict()


async def get_doc(crate: str, version: str | None = None, path: str | None = None) -> Dict[str, Any]:
    page = await fetch_doc_page(_require_text("crate", crate), version, path or "")
    return page.to_dict()


async def list_modules(crate: str, version: str | None = None) -> Dict[str, Any]:
    listing = await fetch_module_listing(_require_text("crate", crate), version)
    return listing.to_dict()


async def get_readme(crate: str, version: str | None = None) -> Dict[str, Any]:
    info = await fetch_readme(_require_text("crate", crate), version)
    return info.to_dict()


OPERATIONS: Dict[str, Callable[..., Awaitable[Dict[str, Any]]]] = {
    "search": search,
    "crate_home": crate_home,
    "get_doc": get_doc,
    "list_modules": list_modules,
    "get_readme": get_readme,
}
