"""Tests for the release-search extractor."""

from __future__ import annotations

import httpx
import pytest
import respx

from docsrs.scraper.errors import UpstreamError
from docsrs.scraper.models import SearchResult
from docsrs.scraper.search import parse_search, search_crates, split_label


# ---------------------------------------------------------------------------
# Fixtures / constants
# ---------------------------------------------------------------------------

_LABELED_HTML = """\
<html><body>
<ul class="releases">
  <li class="release">
    <div class="release-name"><a href="/tokio/1.40.0/tokio/">tokio</a></div>
    <span class="version">1.40.0</span>
    <div class="description">An event-driven, non-blocking I/O platform.</div>
  </li>
  <li class="release">
    <div class="release-name"><a>no-link</a></div>
    <span class="version">0.1.0</span>
  </li>
  <li class="release">
    <div class="release-name"><a href="/tokio-util/latest/tokio_util/">tokio-util-0.7.12</a></div>
    <div class="description"></div>
  </li>
</ul>
</body></html>
"""

_COMBINED_HTML = """\
<html><body>
<ul>
  <li>
    <a href="/my-crate/1.2.3/my_crate/" class="release">
      <div class="pure-g">
        <div class="pure-u-1 name">my-crate-1.2.3</div>
        <div class="pure-u-1 description">Does useful things.</div>
      </div>
    </a>
  </li>
  <li>
    <a class="release"><div class="name">orphan-0.1.0</div></a>
  </li>
  <li>
    <a href="/serde/1.0.210/serde/" class="release"><div class="name">serde-1.0.210</div></a>
  </li>
</ul>
</body></html>
"""


# ---------------------------------------------------------------------------
# split_label
# ---------------------------------------------------------------------------

class TestSplitLabel:
    def test_splits_on_last_hyphen(self) -> None:
        assert split_label("my-crate-1.2.3") == ("my-crate", "1.2.3")

    def test_simple_label(self) -> None:
        assert split_label("tokio-1.40.0") == ("tokio", "1.40.0")

    def test_prerelease_version_kept_whole(self) -> None:
        assert split_label("foo-0.1.0-alpha.1") == ("foo", "0.1.0-alpha.1")

    def test_name_without_version(self) -> None:
        assert split_label("my-crate") == ("my-crate", None)

    def test_no_hyphen(self) -> None:
        assert split_label("serde") == ("serde", None)


# ---------------------------------------------------------------------------
# parse_search
# ---------------------------------------------------------------------------

class TestParseSearch:
    def test_labeled_rows(self) -> None:
        results = parse_search(_LABELED_HTML)

        assert results[0] == SearchResult(
            name="tokio",
            version="1.40.0",
            description="An event-driven, non-blocking I/O platform.",
            docs_url="https://docs.rs/tokio/1.40.0/tokio/",
        )

    def test_row_without_link_is_dropped(self) -> None:
        names = [r.name for r in parse_search(_LABELED_HTML)]
        assert names == ["tokio", "tokio-util"]

    def test_labeled_row_without_version_cell_splits_label(self) -> None:
        row = parse_search(_LABELED_HTML)[1]
        assert row.name == "tokio-util"
        assert row.version == "0.7.12"
        assert row.description is None

    def test_combined_label_rows(self) -> None:
        results = parse_search(_COMBINED_HTML)

        assert [(r.name, r.version) for r in results] == [
            ("my-crate", "1.2.3"),
            ("serde", "1.0.210"),
        ]
        assert results[0].description == "Does useful things."
        assert results[0].docs_url == "https://docs.rs/my-crate/1.2.3/my_crate/"
        assert results[1].description is None

    def test_unknown_markup_yields_empty_list(self) -> None:
        assert parse_search("<html><body><p>No results</p></body></html>") == []

    def test_results_are_not_truncated(self) -> None:
        rows = "".join(
            f'<li class="release"><div class="release-name"><a href="/c{i}/">c{i}</a></div></li>'
            for i in range(60)
        )
        assert len(parse_search(f"<ul>{rows}</ul>")) == 60


# ---------------------------------------------------------------------------
# search_crates
# ---------------------------------------------------------------------------

class TestSearchCrates:
    async def test_fetches_search_endpoint(self) -> None:
        with respx.mock:
            route = respx.get("https://docs.rs/releases/search", params={"query": "tokio util"}).mock(
                return_value=httpx.Response(200, text=_LABELED_HTML)
            )
            results = await search_crates("tokio util")

        assert route.called
        assert len(results) == 2

    async def test_upstream_error_propagates(self) -> None:
        with respx.mock:
            respx.get("https://docs.rs/releases/search").mock(return_value=httpx.Response(500))
            with pytest.raises(UpstreamError) as excinfo:
                await search_crates("tokio")

        assert excinfo.value.status_code == 500
