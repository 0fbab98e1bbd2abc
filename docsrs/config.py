"""Centralised settings for the docs.rs scraper.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Upstream
    # ------------------------------------------------------------------
    base_url: str = field(
        default_factory=lambda: os.environ.get("DOCSRS_BASE_URL", "https://docs.rs").rstrip("/")
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("DOCSRS_USER_AGENT", "docsrs-scraper/0.1.0")
    )

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("DOCSRS_REQUEST_TIMEOUT", "10.0"))
    )

    # ------------------------------------------------------------------
    # Search operation
    # ------------------------------------------------------------------
    search_limit: int = field(
        default_factory=lambda: int(os.environ.get("DOCSRS_SEARCH_LIMIT", "10"))
    )
    search_max_limit: int = field(
        default_factory=lambda: int(os.environ.get("DOCSRS_SEARCH_MAX_LIMIT", "50"))
    )


# Module-level singleton, import this everywhere:
#   from docsrs.config import settings
settings = Settings()
