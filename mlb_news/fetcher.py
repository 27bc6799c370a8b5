from __future__ import annotations

import logging
from typing import Any, Dict, List

import feedparser
import requests

from .config import DEFAULT_REQUEST_TIMEOUT, DEFAULT_USER_AGENT
from .exceptions import FeedParseError, SourceFetchError

logger = logging.getLogger(__name__)


def fetch_feed_entries(
    url: str,
    *,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    user_agent: str = DEFAULT_USER_AGENT,
) -> List[Dict[str, Any]]:
    """
    Fetch a single feed URL and return its entries.

    Raises SourceFetchError on network/timeout/HTTP issues and FeedParseError when
    the document is not a feed feedparser can read.
    """
    try:
        response = requests.get(url, timeout=timeout, headers={"User-Agent": user_agent})
        response.raise_for_status()
    except requests.RequestException as e:
        raise SourceFetchError(f"Failed to fetch feed: {url} ({e})") from e

    feed = feedparser.parse(response.content)
    entries = getattr(feed, "entries", None)
    if not isinstance(entries, list):
        raise FeedParseError(f"Feed has no entries: {url}")

    if not entries:
        if getattr(feed, "bozo", 0):
            exc = getattr(feed, "bozo_exception", None)
            msg = f"Invalid RSS/Atom feed: {url}"
            if exc:
                msg += f" ({exc})"
            raise FeedParseError(msg)
        if not getattr(feed, "version", ""):
            raise FeedParseError(f"Unrecognized feed format: {url}")
    elif getattr(feed, "bozo", 0):
        # Lenient: keep what feedparser recovered
        logger.warning(f"Feed {url} has parsing issues: {getattr(feed, 'bozo_exception', None)}")

    return entries
