"""URL builders for the docs.rs pages each extractor reads.

All functions are pure: they only format strings against
``settings.base_url`` and never touch the network.
"""

from __future__ import annotations

from urllib.parse import quote, urljoin

from docsrs.config import settings

DEFAULT_VERSION = "latest"


def _quote(text: str) -> str:
    return quote(text, safe="")


def normalize_version(version: str | None) -> str:
    """Return *version*, or ``"latest"`` when it is missing or blank.

    ``latest`` is sent to docs.rs as-is; docs.rs resolves it server side.
    """
    return version or DEFAULT_VERSION


def module_name(crate: str) -> str:
    """Return the root module name rustdoc uses for *crate* (``-`` → ``_``)."""
    return crate.replace("-", "_")


def absolute_url(href: str) -> str:
    """Resolve a path-only *href* against the docs.rs base URL."""
    return urljoin(settings.base_url + "/", href)


def search_url(query: str) -> str:
    return f"{settings.base_url}/releases/search?query={_quote(query)}"


def crate_home_url(crate: str) -> str:
    return f"{settings.base_url}/{_quote(crate)}/"


def doc_url(crate: str, version: str | None = None, path: str = "") -> str:
    """Build the URL of a rustdoc page.

    Leading and trailing slashes on *path* are ignored.  An empty *path*
    points at the crate's root ``index.html``.
    """
    base = f"{settings.base_url}/{_quote(crate)}/{_quote(normalize_version(version))}/"
    clean_path = path.strip("/") if path else ""
    if clean_path:
        return base + clean_path
    return base + f"{module_name(crate)}/index.html"


def modules_url(crate: str, version: str | None = None) -> str:
    return doc_url(crate, version)


def readme_url(crate: str, version: str | None = None) -> str:
    return f"{settings.base_url}/crate/{_quote(crate)}/{_quote(normalize_version(version))}"
