"""HTTP utilities for botcrawl page fetchers."""

from __future__ import annotations

import httpx
from bs4 import BeautifulSoup

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/125.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml",
    "Accept-Language": "en-US,en;q=0.9",
}

_HTML_TYPES = ("text/html", "application/xhtml+xml")


class FetchError(Exception):
    """Raised when a response body cannot be used as an HTML document."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {reason}")


async def fetch_text(
    url: str,
    *,
    headers: dict[str, str] | None = None,
    timeout: float = 30.0,
) -> tuple[str, str]:
    """GET *url* and return ``(body, content_type)``."""
    merged = {**_DEFAULT_HEADERS, **(headers or {})}
    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        resp = await client.get(url, headers=merged)
        resp.raise_for_status()
        return resp.text, resp.headers.get("Content-Type", "")


async def fetch_document(
    url: str,
    *,
    headers: dict[str, str] | None = None,
    timeout: float = 30.0,
) -> BeautifulSoup:
    """Fetch *url* and parse it into a queryable HTML document."""
    body, content_type = await fetch_text(url, headers=headers, timeout=timeout)
    if content_type and not content_type.lower().startswith(_HTML_TYPES):
        raise FetchError(url, f"unexpected content type {content_type!r}")
    if not body.strip():
        raise FetchError(url, "empty response body")
    return BeautifulSoup(body, "html.parser")
