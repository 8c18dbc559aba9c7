"""Data models for a Bluesky RSS feed."""

from dataclasses import dataclass, field


@dataclass
class Guid:
    """Opaque item identifier with its raw isPermaLink attribute."""

    value: str = ""
    is_perma_link: str | None = None


@dataclass
class Item:
    """A single post in the feed."""

    link: str = ""
    description: str = ""
    pub_date: str = ""
    guid: Guid = field(default_factory=Guid)


@dataclass
class Channel:
    """The feed's channel. Items are kept in publication order."""

    description: str = ""
    link: str = ""
    title: str = ""
    items: list[Item] = field(default_factory=list)


@dataclass
class Feed:
    """Root <rss> document."""

    version: str = ""
    channel: Channel = field(default_factory=Channel)
