"""botcrawl — incremental crawler for an app directory's bot listings."""

__version__ = "0.1.0"
