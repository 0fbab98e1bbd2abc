"""Tests for the timeout-bounded docs.rs fetcher.

Mocking strategy:
- ``respx`` patches ``httpx`` at the transport layer so no real network calls
  are made.
- The wall-clock timeout test replaces ``httpx.AsyncClient.get`` with a
  coroutine that never finishes in time.
"""

from __future__ import annotations

import asyncio
import time
from unittest.mock import patch

import httpx
import pytest
import respx

from docsrs.config import settings
from docsrs.scraper.errors import DocsRsError, FetchTimeoutError, UpstreamError
from docsrs.scraper.fetcher import fetch_markup

_URL = "https://docs.rs/tokio/"


class TestFetchMarkup:
    async def test_returns_body_text(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(return_value=httpx.Response(200, text="<html>ok</html>"))
            html = await fetch_markup(_URL)

        assert html == "<html>ok</html>"

    async def test_sends_identifying_user_agent(self) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(200, text=""))
            await fetch_markup(_URL)

        assert route.call_count == 1
        assert route.calls.last.request.headers["User-Agent"] == settings.user_agent

    async def test_non_success_raises_upstream_error_with_status(self) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(404, text="Not Found"))
            with pytest.raises(UpstreamError) as excinfo:
                await fetch_markup(_URL)

        assert excinfo.value.status_code == 404
        assert "404" in str(excinfo.value)
        assert route.call_count == 1

    async def test_server_error_is_not_retried(self) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(return_value=httpx.Response(503))
            with pytest.raises(UpstreamError) as excinfo:
                await fetch_markup(_URL)

        assert excinfo.value.status_code == 503
        assert route.call_count == 1

    async def test_httpx_timeout_raises_timeout_error(self) -> None:
        with respx.mock:
            route = respx.get(_URL).mock(side_effect=httpx.ConnectTimeout("slow"))
            with pytest.raises(TimeoutError) as excinfo:
                await fetch_markup(_URL)

        assert isinstance(excinfo.value, FetchTimeoutError)
        assert isinstance(excinfo.value, DocsRsError)
        assert route.call_count == 1

    async def test_wall_clock_budget_cancels_slow_request(self) -> None:
        calls = []

        async def never_answers(self, url, **kwargs):
            calls.append(url)
            await asyncio.sleep(5)

        started = time.monotonic()
        with patch.object(httpx.AsyncClient, "get", never_answers):
            with pytest.raises(FetchTimeoutError) as excinfo:
                await fetch_markup(_URL, timeout=0.05)

        assert time.monotonic() - started < 2
        assert excinfo.value.timeout == 0.05
        assert calls == [_URL]

    async def test_connection_failure_raises_upstream_error_without_status(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(side_effect=httpx.ConnectError("refused"))
            with pytest.raises(UpstreamError) as excinfo:
                await fetch_markup(_URL)

        assert excinfo.value.status_code is None

    async def test_redirect_loop_raises_upstream_error_without_status(self) -> None:
        url = "https://docs.rs/loop/"
        with respx.mock:
            respx.get(url).mock(return_value=httpx.Response(302, headers={"Location": url}))
            with pytest.raises(UpstreamError) as excinfo:
                await fetch_markup(url)

        assert excinfo.value.status_code is None
        assert isinstance(excinfo.value.__cause__, httpx.TooManyRedirects)

    async def test_undecodable_body_raises_upstream_error(self) -> None:
        with respx.mock:
            respx.get(_URL).mock(side_effect=httpx.DecodingError("bad gzip stream"))
            with pytest.raises(UpstreamError) as excinfo:
                await fetch_markup(_URL)

        assert excinfo.value.status_code is None

    async def test_concurrent_calls_are_independent(self) -> None:
        with respx.mock:
            respx.get("https://docs.rs/a/").mock(return_value=httpx.Response(200, text="A"))
            respx.get("https://docs.rs/b/").mock(return_value=httpx.Response(500))
            results = await asyncio.gather(
                fetch_markup("https://docs.rs/a/"),
                fetch_markup("https://docs.rs/b/"),
                return_exceptions=True,
            )

        assert results[0] == "A"
        assert isinstance(results[1], UpstreamError)
