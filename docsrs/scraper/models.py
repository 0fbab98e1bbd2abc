"""Records produced by the docs.rs extractors.

Every record is built fresh per call and is JSON-serialisable through
:meth:`to_dict`.  Identifying fields (``crate``, ``version``, ``path``) always
echo the caller's request, never values read from the page.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


class _Record:
    def to_dict(self) -> Dict[str, Any]:
        """Return a plain dict ready for ``json.dumps``."""
        return asdict(self)  # type: ignore[call-overload]


@dataclass(frozen=True)
class SearchResult(_Record):
    """One hit from the docs.rs release search page."""

    name: str
    version: str | None
    description: str | None
    docs_url: str


@dataclass(frozen=True)
class CrateHome(_Record):
    crate: str
    title: str
    description: str | None
    latest_version: str | None
    homepage: str


@dataclass(frozen=True)
class DocItem(_Record):
    """A named item (module, struct, function, ...) and its short summary."""

    name: str
    description: str | None = None


@dataclass(frozen=True)
class DocPage(_Record):
    crate: str
    version: str
    path: str
    url: str
    title: str | None
    description: str | None
    content: List[str] = field(default_factory=list)
    items: List[DocItem] = field(default_factory=list)


@dataclass(frozen=True)
class ModuleListing(_Record):
    """Items listed on a crate's root page, grouped by kind.

    Every category is always present; a kind the page does not list is an
    empty list.
    """

    crate: str
    version: str
    modules: List[DocItem] = field(default_factory=list)
    structs: List[DocItem] = field(default_factory=list)
    enums: List[DocItem] = field(default_factory=list)
    functions: List[DocItem] = field(default_factory=list)
    traits: List[DocItem] = field(default_factory=list)
    macros: List[DocItem] = field(default_factory=list)


@dataclass(frozen=True)
class ReadmeInfo(_Record):
    crate: str
    version: str
    readme: str | None
    metadata: Dict[str, str] = field(default_factory=dict)
