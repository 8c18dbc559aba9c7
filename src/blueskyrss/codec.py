"""Decode and encode the fixed Bluesky RSS schema."""

import logging
import xml.etree.ElementTree as ET
from typing import BinaryIO

from blueskyrss.errors import DecodeError, OutputError
from blueskyrss.models import Channel, Feed, Guid, Item

logger = logging.getLogger(__name__)

INDENT = "  "


def decode_feed(source: BinaryIO | bytes) -> Feed:
    """Parse an RSS document into a Feed.

    Missing elements decode as empty strings and anything not part of the
    schema is ignored.

    Args:
        source: A readable byte stream or the raw document bytes.

    Raises:
        DecodeError: If the document is not well-formed XML or its root
            element is not ``<rss>``.
    """
    try:
        if isinstance(source, bytes):
            root = ET.fromstring(source)
        else:
            root = ET.parse(source).getroot()
    except ET.ParseError as e:
        raise DecodeError(f"Failed to parse the RSS feed: {e}") from e

    if root.tag != "rss":
        raise DecodeError(
            f"Failed to parse the RSS feed: expected element <rss> but found <{root.tag}>"
        )

    channel = Channel()
    channel_el = root.find("channel")
    if channel_el is not None:
        channel = Channel(
            description=_child_text(channel_el, "description"),
            link=_child_text(channel_el, "link"),
            title=_child_text(channel_el, "title"),
            items=[_decode_item(el) for el in channel_el.findall("item")],
        )

    feed = Feed(version=root.get("version", ""), channel=channel)
    logger.debug("Decoded feed with %d items", len(channel.items))
    return feed


def _decode_item(element: ET.Element) -> Item:
    guid = Guid()
    guid_el = element.find("guid")
    if guid_el is not None:
        guid = Guid(
            value=_text(guid_el),
            is_perma_link=guid_el.get("isPermaLink"),
        )

    return Item(
        link=_child_text(element, "link"),
        description=_child_text(element, "description"),
        pub_date=_child_text(element, "pubDate"),
        guid=guid,
    )


def _child_text(parent: ET.Element, tag: str) -> str:
    child = parent.find(tag)
    if child is None:
        return ""
    return _text(child)


def _text(element: ET.Element) -> str:
    """Character data directly inside ``element``, skipping child elements."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def encode_feed(feed: Feed) -> bytes:
    """Serialize a Feed as indented UTF-8 XML with a declaration."""
    root = ET.Element("rss", version=feed.version)
    channel_el = ET.SubElement(root, "channel")
    ET.SubElement(channel_el, "description").text = feed.channel.description
    ET.SubElement(channel_el, "link").text = feed.channel.link
    ET.SubElement(channel_el, "title").text = feed.channel.title

    for item in feed.channel.items:
        item_el = ET.SubElement(channel_el, "item")
        ET.SubElement(item_el, "link").text = item.link
        ET.SubElement(item_el, "description").text = item.description
        ET.SubElement(item_el, "pubDate").text = item.pub_date
        guid_el = ET.SubElement(item_el, "guid")
        if item.guid.is_perma_link is not None:
            guid_el.set("isPermaLink", item.guid.is_perma_link)
        guid_el.text = item.guid.value

    ET.indent(root, space=INDENT)
    data = ET.tostring(
        root, encoding="utf-8", xml_declaration=True, short_empty_elements=False
    )
    # ElementTree writes \r in text raw; readers would normalise it to \n.
    return data.replace(b"\r", b"&#13;")


def write_feed(feed: Feed, path: str) -> None:
    """Serialize a Feed and write it to ``path``, replacing any existing file.

    The document is built in memory before the file is opened, so a
    serialization failure leaves an existing file untouched.

    Raises:
        OutputError: If serialization fails or the file cannot be written.
    """
    try:
        data = encode_feed(feed)
    except (TypeError, ValueError) as e:
        raise OutputError(f"Failed to write the RSS feed: {e}") from e

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise OutputError(f"Failed to create the file: {e}") from e

    logger.debug("Wrote %d bytes to %s", len(data), path)
