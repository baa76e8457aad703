"""Core data models for botcrawl."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class FetchConfig(BaseModel, frozen=True):
    """Configuration passed to each page parser."""

    base_url: str = "https://slack.com"
    timeout: float = 30.0


class QueueMode(str, Enum):
    """How the on-disk queue is treated when the queue is rebuilt."""

    RECOMPUTE = "recompute"
    AUTHORITATIVE = "authoritative"


class Category(BaseModel, frozen=True):
    """A directory category page."""

    name: str
    url: str


class ListingEntry(BaseModel, frozen=True):
    """One bot as it appears on a category listing."""

    name: str
    url: str
    tagline: str = ""
    rank: int


class Snapshot(BaseModel, frozen=True):
    """One category's listing results at a point in time."""

    date: str
    category: Category
    results: list[ListingEntry] = Field(default_factory=list)


class Tag(BaseModel, frozen=True):
    """A category tag shown on a bot's detail page."""

    name: str
    url: str


class Bot(BaseModel, frozen=True):
    """Master record for a bot, keyed by name."""

    name: str
    url: str
    tagline: str = ""
    rank: int | None = None
    description: str = ""
    site: str = ""
    categories: list[Tag] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return bool(self.description)


class DetailPage(BaseModel, frozen=True):
    """Parsed bot detail page. Missing elements are ``None``."""

    description: str | None = None
    site: str | None = None
    tags: list[Tag] = Field(default_factory=list)
