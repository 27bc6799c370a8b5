from __future__ import annotations

from typing import Any, Mapping

from .exceptions import ItemParseError
from .models import NormalizedArticle
from .parser import parse_entry


def to_article(entry: Mapping[str, Any]) -> NormalizedArticle:
    """
    Convert a raw feed entry into a NormalizedArticle.
    Requires:
    - title (non-blank after trimming)
    - a parseable timestamp (pubDate, published or updated)
    Optional (empty string when absent):
    - description, link
    The source label always resolves, falling back to "Unknown".

    Raises ItemParseError when a requirement is missing or extraction fails.
    """
    try:
        fields = parse_entry(entry)
    except Exception as e:
        raise ItemParseError(f"Failed to extract entry fields ({e})") from e

    title = fields["title"].strip()
    published_at = fields["published_at"]
    if not title:
        raise ItemParseError("Entry has no title")
    if published_at is None:
        raise ItemParseError(f"Entry has no parseable timestamp: {title!r}")

    return NormalizedArticle(
        title=title,
        published_at=published_at,
        description=fields["description"],
        link=fields["link"],
        source_label=fields["source"],
    )
