"""Category listing pages."""

from __future__ import annotations

from bs4 import BeautifulSoup

from botcrawl.models import FetchConfig, ListingEntry
from botcrawl.pages.base import PageParser, absolute_url, to_markdown

_BOT_SELECTOR = ".media_list li a"


class ListingParser(PageParser):
    """Extract the ranked bots of one category page."""

    def get_page_name(self) -> str:
        return "listing"

    def parse(self, doc: BeautifulSoup, config: FetchConfig) -> list[ListingEntry]:
        entries: list[ListingEntry] = []
        # Rank follows document order, including anchors that fail to parse.
        for rank, anchor in enumerate(doc.select(_BOT_SELECTOR), 1):
            spans = anchor.find_all("span")
            name = to_markdown(spans[0]) if spans else None
            url = absolute_url(config, anchor.get("href"))
            if not name or not url:
                continue
            tagline = to_markdown(spans[1]) if len(spans) > 1 else None
            entries.append(
                ListingEntry(name=name, url=url, tagline=tagline or "", rank=rank)
            )
        return entries
