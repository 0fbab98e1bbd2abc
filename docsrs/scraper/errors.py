"""Error types raised by the fetch layer.

Only the fetcher raises these; extractors let them propagate unchanged.  A
page that parses to nothing is never an error.
"""

from __future__ import annotations


class DocsRsError(Exception):
    """Base class for failures talking to docs.rs."""


class FetchTimeoutError(DocsRsError, TimeoutError):
    """No response arrived within the request budget."""

    def __init__(self, url: str, timeout: float) -> None:
        super().__init__(f"docs.rs request timed out after {timeout:g}s: {url}")
        self.url = url
        self.timeout = timeout


class UpstreamError(DocsRsError):
    """docs.rs answered with a non-success status, or could not be reached.

    ``status_code`` is ``None`` when no response was received at all.
    """

    def __init__(self, url: str, status_code: int | None, detail: str = "") -> None:
        if status_code is not None:
            message = f"docs.rs http error: {status_code}"
        else:
            message = f"docs.rs unreachable: {detail or 'connection failed'}"
        super().__init__(message)
        self.url = url
        self.status_code = status_code
