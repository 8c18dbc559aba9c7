"""Fetch, rewrite and save a Bluesky feed."""

import logging

from blueskyrss.codec import decode_feed, write_feed
from blueskyrss.config import Settings
from blueskyrss.fetcher import open_feed
from blueskyrss.models import Feed
from blueskyrss.transform import rewrite_pub_dates

logger = logging.getLogger(__name__)


def run(settings: Settings, session=None) -> Feed:
    """Run the pipeline once and return the feed that was written.

    Each stage raises its own FeedError subclass; nothing is written unless
    every item was rewritten.
    """
    with open_feed(settings.url, session=session) as body:
        feed = decode_feed(body)

    rewrite_pub_dates(feed)
    write_feed(feed, settings.path)
    logger.debug(
        "Saved %d items from %s to %s",
        len(feed.channel.items), settings.url, settings.path,
    )
    return feed
