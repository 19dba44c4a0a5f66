"""Daily Deep Read: generate the daily digest page, archive index and RSS feed."""

__version__ = "0.2.0"
