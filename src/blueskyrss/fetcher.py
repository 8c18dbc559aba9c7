"""Download the source feed over HTTP."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO
from urllib.parse import urlparse

import requests
import urllib3

from blueskyrss.errors import FetchError

logger = logging.getLogger(__name__)


@contextmanager
def open_feed(url: str, session=None) -> Iterator[BinaryIO]:
    """Fetch a feed and yield its response body as a byte stream.

    The response is closed when the ``with`` block exits, whether or not
    the caller raised.

    Args:
        url: The feed URL.
        session: Optional ``requests.Session`` to send the request with.

    Raises:
        FetchError: If the URL is invalid, the request fails, or the server
            does not answer 200 OK, or the connection breaks while the
            body is being read.
    """
    _validate_url(url)
    http = session if session is not None else requests

    logger.debug("Downloading %s", url)
    try:
        response = http.get(url, stream=True)
    except requests.RequestException as e:
        raise FetchError(f"Failed to download the RSS feed: {e}") from e

    with response:
        if response.status_code != requests.codes.ok:
            raise FetchError(
                f"Failed to download RSS feed. Status code: {response.status_code}"
            )
        # Let urllib3 undo gzip/deflate so the decoder sees plain XML.
        response.raw.decode_content = True
        try:
            yield response.raw
        except (requests.RequestException, urllib3.exceptions.HTTPError) as e:
            raise FetchError(f"Failed to read the RSS feed: {e}") from e


def _validate_url(url: str) -> None:
    """Validate that the URL has a valid format."""
    try:
        result = urlparse(url)
    except ValueError as e:
        raise FetchError("Invalid URL format") from e
    if not result.scheme or not result.netloc:
        raise FetchError("Invalid URL format")
    if result.scheme not in ("http", "https"):
        raise FetchError("Invalid URL format: only http and https are supported")
