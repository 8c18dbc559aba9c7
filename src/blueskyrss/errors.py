"""Exceptions raised by each stage of the feed rewrite."""


class FeedError(Exception):
    """Base class for every failure that should abort a run."""

    stage = "feed"


class ConfigError(FeedError):
    """Raised when a required input is missing from the environment."""

    stage = "config"


class FetchError(FeedError):
    """Raised when the feed cannot be downloaded."""

    stage = "fetch"


class DecodeError(FeedError):
    """Raised when the response body is not a readable RSS document."""

    stage = "decode"


class PubDateError(FeedError):
    """Raised when an item's pubDate is not in the Bluesky layout."""

    stage = "transform"


class OutputError(FeedError):
    """Raised when the rewritten feed cannot be serialized or written."""

    stage = "output"
