"""HTTP fetcher for docs.rs pages with a hard wall-clock timeout."""

from __future__ import annotations

import asyncio
import logging

import httpx

from docsrs.config import settings
from docsrs.scraper.errors import FetchTimeoutError, UpstreamError

logger = logging.getLogger(__name__)


def _default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


async def fetch_markup(url: str, *, timeout: float | None = None) -> str:
    """Fetch *url* once and return the response body as text.

    The whole request, including connect and body download, must finish
    within *timeout* seconds (``settings.request_timeout`` by default).  When
    the budget runs out the in-flight request is cancelled and the client is
    closed before the error is raised.

    Raises:
        FetchTimeoutError: No complete response within the budget.
        UpstreamError: A non-2xx response, or the host could not be reached.
    """
    budget = settings.request_timeout if timeout is None else timeout
    logger.debug("GET %s (timeout=%ss)", url, budget)

    async with httpx.AsyncClient(
        headers=_default_headers(),
        timeout=budget,
        follow_redirects=True,
    ) as client:
        try:
            response = await asyncio.wait_for(client.get(url), timeout=budget)
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.debug("GET %s timed out", url)
            raise FetchTimeoutError(url, budget) from exc
        except httpx.RequestError as exc:
            logger.debug("GET %s failed: %s", url, exc)
            raise UpstreamError(url, None, str(exc)) from exc

    if not response.is_success:
        logger.debug("GET %s -> HTTP %s", url, response.status_code)
        raise UpstreamError(url, response.status_code)

    logger.debug("GET %s -> HTTP %s (%d bytes)", url, response.status_code, len(response.content))
    return response.text
