"""docs.rs CLI: entry-point for all scraper operations.

Usage:
    docsrs --help

Each sub-command maps to one operation in :mod:`docsrs.service`:
    search    → search crates by keyword
    home      → crate landing page summary
    doc       → one rustdoc page
    modules   → items listed on a crate root page
    readme    → README text and repository/documentation links
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Awaitable, Dict, Optional

import typer

from docsrs.scraper.errors import DocsRsError
from docsrs.service import (
    InvalidArgumentError,
    crate_home,
    get_doc,
    get_readme,
    list_modules,
    search,
)

app = typer.Typer(
    name="docsrs",
    help="Query docs.rs pages and print structured JSON.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests to stderr."),
) -> None:
    """Configure logging for every sub-command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _run(operation: str, call: Awaitable[Dict[str, Any]]) -> None:
    """Await *call*, print its JSON, or report ``<operation> failed: ...``."""
    try:
        result = asyncio.run(call)
    except (DocsRsError, InvalidArgumentError) as exc:
        typer.echo(f"{operation} failed: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(json.dumps(result, indent=2, ensure_ascii=False))


@app.command("search")
def search_cmd(
    query: str = typer.Argument(..., help="Crate name or keyword."),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Maximum results (1-50, default 10)."),
) -> None:
    """Search docs.rs for crates."""
    _run("search", search(query, limit))


@app.command("home")
def home_cmd(
    crate: str = typer.Argument(..., help="Crate name."),
) -> None:
    """Show a crate's title, description and latest version."""
    _run("crate_home", crate_home(crate))


@app.command("doc")
def doc_cmd(
    crate: str = typer.Argument(..., help="Crate name."),
    version: Optional[str] = typer.Option(None, "--version", help="Crate version (default: latest)."),
    path: str = typer.Option(
        "",
        "--path",
        help="Documentation path, e.g. 'tokio/runtime/struct.Runtime.html'.",
    ),
) -> None:
    """Fetch one documentation page of a crate."""
    _run("get_doc", get_doc(crate, version, path))


@app.command("modules")
def modules_cmd(
    crate: str = typer.Argument(..., help="Crate name."),
    version: Optional[str] = typer.Option(None, "--version", help="Crate version (default: latest)."),
) -> None:
    """List modules, structs, enums, functions, traits and macros of a crate."""
    _run("list_modules", list_modules(crate, version))


@app.command("readme")
def readme_cmd(
    crate: str = typer.Argument(..., help="Crate name."),
    version: Optional[str] = typer.Option(None, "--version", help="Crate version (default: latest)."),
) -> None:
    """Show a crate's README and repository/documentation links."""
    _run("get_readme", get_readme(crate, version))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
