"""Shared test fixtures for the Bluesky feed rewriter tests."""

import io
from unittest.mock import MagicMock

import pytest
import urllib3


SAMPLE_RSS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <description>Posts from a test account</description>
    <link>https://bsky.app/profile/test.bsky.social</link>
    <title>@test.bsky.social - Test Account</title>
    <item>
      <link>https://bsky.app/profile/test.bsky.social/post/3lfirst</link>
      <description>First post with &lt;b&gt;markup&lt;/b&gt; &amp; an ampersand</description>
      <pubDate>02 Jan 2025 09:15 +0000</pubDate>
      <guid isPermaLink="false">at://did:plc:abc123/app.bsky.feed.post/3lfirst</guid>
    </item>
    <item>
      <link>https://bsky.app/profile/test.bsky.social/post/3lsecond</link>
      <description>Second post</description>
      <pubDate>15 Aug 2024 23:59 -0500</pubDate>
      <guid isPermaLink="false">at://did:plc:abc123/app.bsky.feed.post/3lsecond</guid>
    </item>
    <item>
      <link>https://bsky.app/profile/test.bsky.social/post/3lthird</link>
      <description>Third post</description>
      <pubDate>31 Dec 2023 18:30 +0530</pubDate>
      <guid isPermaLink="false">at://did:plc:abc123/app.bsky.feed.post/3lthird</guid>
    </item>
  </channel>
</rss>"""

SAMPLE_EMPTY_RSS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <description>Nothing posted yet</description>
    <link>https://bsky.app/profile/quiet.bsky.social</link>
    <title>@quiet.bsky.social</title>
  </channel>
</rss>"""

SAMPLE_BAD_DATE_RSS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <description>Bad dates</description>
    <link>https://bsky.app/profile/test.bsky.social</link>
    <title>@test.bsky.social</title>
    <item>
      <link>https://bsky.app/profile/test.bsky.social/post/3lgood</link>
      <description>Good</description>
      <pubDate>02 Jan 2025 09:15 +0000</pubDate>
      <guid isPermaLink="false">good</guid>
    </item>
    <item>
      <link>https://bsky.app/profile/test.bsky.social/post/3lbad</link>
      <description>Bad</description>
      <pubDate>Thu, 02 Jan 2025 09:15:00 GMT</pubDate>
      <guid isPermaLink="false">bad</guid>
    </item>
  </channel>
</rss>"""

SAMPLE_MALFORMED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Malformed Feed</title>
    <item>
      <description>Missing closing tags intentionally
"""

SAMPLE_NOT_A_FEED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<html>
  <body>This is not a feed</body>
</html>"""

FEED_URL = "https://bsky.app/profile/test.bsky.social/rss"


class RawBody(io.BytesIO):
    """Stand-in for urllib3's response body stream."""

    decode_content = False


class BrokenBody(RawBody):
    """Body stream whose connection drops on the first read."""

    def read(self, *args):
        raise urllib3.exceptions.ProtocolError(
            "Connection broken: IncompleteRead(12 bytes read, 500 more expected)"
        )


def make_response(body: str = SAMPLE_RSS_XML, status_code: int = 200) -> MagicMock:
    """Create a mock requests.Response streaming ``body``."""
    response = MagicMock()
    response.status_code = status_code
    response.raw = RawBody(body.encode("utf-8"))
    return response


def make_session(response: MagicMock) -> MagicMock:
    """Create a mock requests.Session whose get() returns ``response``."""
    session = MagicMock()
    session.get.return_value = response
    return session


@pytest.fixture
def sample_rss_xml():
    """Sample Bluesky RSS feed."""
    return SAMPLE_RSS_XML


@pytest.fixture
def sample_empty_rss_xml():
    """Sample Bluesky RSS feed with no items."""
    return SAMPLE_EMPTY_RSS_XML


@pytest.fixture
def sample_bad_date_rss_xml():
    """Sample feed whose second item has an RFC 822 pubDate."""
    return SAMPLE_BAD_DATE_RSS_XML


@pytest.fixture
def sample_malformed_xml():
    """Sample malformed RSS XML."""
    return SAMPLE_MALFORMED_XML


@pytest.fixture
def sample_not_a_feed_xml():
    """Sample XML that is not a feed."""
    return SAMPLE_NOT_A_FEED_XML


@pytest.fixture
def output_path(tmp_path):
    """Destination path for the rewritten feed."""
    return str(tmp_path / "bluesky.xml")


@pytest.fixture
def mock_response():
    """A 200 OK response carrying the sample feed."""
    return make_response()


@pytest.fixture
def mock_session(mock_response):
    """A session that answers every request with ``mock_response``."""
    return make_session(mock_response)
