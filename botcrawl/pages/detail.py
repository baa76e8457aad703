"""Bot detail pages."""

from __future__ import annotations

from bs4 import BeautifulSoup

from botcrawl.models import DetailPage, FetchConfig, Tag
from botcrawl.pages.base import PageParser, absolute_url, to_markdown


class DetailParser(PageParser):
    """Extract description, install link and tags from a bot page."""

    def get_page_name(self) -> str:
        return "detail"

    def parse(self, doc: BeautifulSoup, config: FetchConfig) -> DetailPage:
        description = to_markdown(doc.select_one(".tsf_output")) or None

        site = None
        link = doc.select_one(".single_install_button a")
        if link is not None:
            site = link.get("href") or None

        return DetailPage(
            description=description,
            site=site,
            tags=self._parse_tags(doc, config),
        )

    @staticmethod
    def _parse_tags(doc: BeautifulSoup, config: FetchConfig) -> list[Tag]:
        tags: list[Tag] = []
        for el in doc.select(".tag"):
            name = to_markdown(el)
            url = absolute_url(config, el.get("href"))
            if name and url:
                tags.append(Tag(name=name, url=url))
        return tags
