"""Page parsers for the app directory, one per page shape."""

from botcrawl.pages.detail import DetailParser
from botcrawl.pages.directory import DirectoryParser
from botcrawl.pages.listing import ListingParser

__all__: list[str] = [
    "DetailParser",
    "DirectoryParser",
    "ListingParser",
]
