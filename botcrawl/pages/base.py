"""Base page parser interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from markdownify import markdownify

from botcrawl.models import FetchConfig
from botcrawl.utils.http import fetch_document


class PageParser(ABC):
    """All page shapes must implement this interface."""

    @abstractmethod
    def parse(self, doc: BeautifulSoup, config: FetchConfig) -> Any:
        """Extract structured records from a parsed document."""
        ...

    @abstractmethod
    def get_page_name(self) -> str:
        """Return the human-readable page shape name."""
        ...

    async def fetch(self, url: str, config: FetchConfig) -> Any:
        """Fetch *url* and parse it. Network and body errors propagate."""
        doc = await fetch_document(url, timeout=config.timeout)
        return self.parse(doc, config)


def to_markdown(element: Tag | None) -> str | None:
    """Convert the inner HTML of *element* to Markdown."""
    if element is None:
        return None
    # Names are dataset keys; scraped text must come through unescaped.
    return markdownify(
        element.decode_contents(),
        escape_underscores=False,
        escape_asterisks=False,
        escape_misc=False,
    ).strip()


def absolute_url(config: FetchConfig, href: str | None) -> str | None:
    if not href:
        return None
    return urljoin(config.base_url + "/", href)
