"""Rewrite item pubDate values from the Bluesky layout to ISO 8601.

Bluesky publishes dates as ``02 Jan 2006 15:04 -0700``, which Hugo cannot
read. They are rewritten as ``2006-01-02T15:04:00-07:00``.
"""

import logging
import re
from datetime import datetime, timedelta, timezone

from blueskyrss.errors import PubDateError
from blueskyrss.models import Feed

logger = logging.getLogger(__name__)

MONTHS = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)

PUB_DATE_RE = re.compile(
    r"(?P<day>\d{2}) (?P<month>[A-Za-z]{3}) (?P<year>\d{4}) "
    r"(?P<hour>\d{2}):(?P<minute>\d{2}) "
    r"(?P<sign>[+-])(?P<off_hours>\d{2})(?P<off_minutes>\d{2})",
    re.ASCII,
)


def parse_pub_date(text: str) -> datetime:
    """Parse a Bluesky pubDate into an aware datetime.

    Raises:
        PubDateError: If ``text`` is not exactly ``DD Mon YYYY hh:mm +hhmm``
            or names an impossible date, time or offset.
    """
    match = PUB_DATE_RE.fullmatch(text)
    if match is None:
        raise PubDateError(f"Failed to parse the pubDate field: {text!r}")

    try:
        month = MONTHS.index(match["month"].lower()) + 1
    except ValueError:
        raise PubDateError(
            f"Failed to parse the pubDate field: {text!r}: unknown month"
        ) from None

    off_hours = int(match["off_hours"])
    off_minutes = int(match["off_minutes"])
    if off_hours > 23 or off_minutes > 59:
        raise PubDateError(
            f"Failed to parse the pubDate field: {text!r}: bad UTC offset"
        )
    offset = timedelta(hours=off_hours, minutes=off_minutes)
    if match["sign"] == "-":
        offset = -offset

    try:
        return datetime(
            int(match["year"]),
            month,
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            tzinfo=timezone(offset),
        )
    except ValueError as e:
        raise PubDateError(f"Failed to parse the pubDate field: {text!r}: {e}") from e


def format_pub_date(value: datetime) -> str:
    """Format as ``YYYY-MM-DDThh:mm:ss+hh:mm`` with a numeric offset."""
    return value.isoformat(timespec="seconds")


def rewrite_pub_dates(feed: Feed) -> int:
    """Rewrite every item's pubDate in place, in feed order.

    Stops at the first item that cannot be parsed. Items already rewritten
    are left as they are.

    Returns:
        Number of items rewritten.
    """
    items = feed.channel.items
    for index, item in enumerate(items):
        try:
            parsed = parse_pub_date(item.pub_date)
        except PubDateError as e:
            raise PubDateError(
                f"item {index} (guid {item.guid.value!r}): {e}"
            ) from e
        item.pub_date = format_pub_date(parsed)

    logger.debug("Rewrote %d pubDate values", len(items))
    return len(items)
