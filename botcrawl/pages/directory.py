"""Directory index: the list of categories on ``{base}/apps``."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from botcrawl.models import Category, FetchConfig
from botcrawl.pages.base import PageParser, absolute_url, to_markdown

logger = logging.getLogger(__name__)

_CATEGORY_SELECTOR = ".titled_list ul li a"


class DirectoryParser(PageParser):
    """Discover category pages from the directory index."""

    def get_page_name(self) -> str:
        return "directory"

    @staticmethod
    def index_url(config: FetchConfig) -> str:
        return f"{config.base_url.rstrip('/')}/apps"

    def parse(self, doc: BeautifulSoup, config: FetchConfig) -> list[Category]:
        categories: dict[str, Category] = {}
        for anchor in doc.select(_CATEGORY_SELECTOR):
            name = to_markdown(anchor)
            url = absolute_url(config, anchor.get("href"))
            if not name or not url:
                continue
            if name in categories:
                logger.debug("Duplicate category %s ignored", name)
                continue
            categories[name] = Category(name=name, url=url)
        return list(categories.values())
