"""Rewrite Bluesky RSS feeds into a form Hugo can read."""

__version__ = "1.0.0"
