"""HTTP client factory for the YouTube Data API."""

from __future__ import annotations

import httpx

USER_AGENT = "cs50videos/0.1 (+https://github.com/cs50)"


def create_http_client(*, proxy_url: str | None = None, timeout: float = 30.0) -> httpx.Client:
    """Create a JSON-accepting httpx.Client with our User-Agent and optional proxy."""
    return httpx.Client(
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        timeout=timeout,
        proxy=proxy_url,
    )
