from __future__ import annotations

import calendar
import time
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Mapping, Optional, Sequence
from urllib.parse import urlparse

from dateutil import parser as date_parser
from dateutil import tz as date_tz


# Feeds routinely use US zone abbreviations dateutil does not know on its own.
TZINFOS = {
    "EST": timezone(timedelta(hours=-5)),
    "EDT": timezone(timedelta(hours=-4)),
    "CST": timezone(timedelta(hours=-6)),
    "CDT": timezone(timedelta(hours=-5)),
    "MST": timezone(timedelta(hours=-7)),
    "MDT": timezone(timedelta(hours=-6)),
    "PST": timezone(timedelta(hours=-8)),
    "PDT": timezone(timedelta(hours=-7)),
    # zone-less abbreviations follow daylight saving time
    "ET": date_tz.gettz("America/New_York"),
    "CT": date_tz.gettz("America/Chicago"),
    "MT": date_tz.gettz("America/Denver"),
    "PT": date_tz.gettz("America/Los_Angeles"),
    "GMT": timezone.utc,
    "UTC": timezone.utc,
    "Z": timezone.utc,
}

UNKNOWN_SOURCE = "Unknown"

Extractor = Callable[[Mapping[str, Any]], Optional[Any]]


def _first(entry: Mapping[str, Any], extractors: Sequence[Extractor]) -> Optional[Any]:
    """Run extractors in priority order; the first non-empty result wins."""
    for extract in extractors:
        value = extract(entry)
        if value:
            return value
    return None


# Field values are either a plain string or a tagged node: {"text": ...} for text
# payloads and {"href": ...} for links.

def unwrap_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, Mapping):
        for key in ("text", "value"):
            inner = value.get(key)
            if isinstance(inner, str) and inner.strip():
                return inner.strip()
    return None


def unwrap_href(value: Any) -> Optional[str]:
    if isinstance(value, Mapping):
        href = value.get("href")
        if isinstance(href, str) and href.strip():
            return href.strip()
    return None


def _text_field(key: str) -> Extractor:
    def extract(entry: Mapping[str, Any]) -> Optional[str]:
        value = entry.get(key)
        if isinstance(value, list):
            # Atom <content> arrives as a list of nodes
            for node in value:
                text = unwrap_text(node)
                if text:
                    return text
            return None
        return unwrap_text(value)
    return extract


def _link_field(entry: Mapping[str, Any]) -> Optional[str]:
    value = entry.get("link")
    if isinstance(value, list):
        nodes = [n for n in value if unwrap_href(n)]
        alternate = [n for n in nodes if n.get("rel", "alternate") == "alternate"]
        for node in alternate or nodes:
            return unwrap_href(node)
        return None
    if isinstance(value, Mapping):
        return unwrap_href(value) or unwrap_text(value)
    return unwrap_text(value)


def _links_list(entry: Mapping[str, Any]) -> Optional[str]:
    # feedparser keeps every <link> under "links"
    links = entry.get("links")
    if not isinstance(links, list):
        return None
    return _link_field({"link": links})


def _to_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def _timestamp_field(key: str) -> Extractor:
    def extract(entry: Mapping[str, Any]) -> Optional[datetime]:
        parsed = entry.get(f"{key}_parsed")
        if isinstance(parsed, time.struct_time):
            try:
                return datetime.fromtimestamp(calendar.timegm(parsed), tz=timezone.utc)
            except (OverflowError, ValueError):
                pass
        value = entry.get(key)
        if isinstance(value, datetime):
            return _to_utc(value)
        text = unwrap_text(value)
        if not text:
            return None
        try:
            return _to_utc(date_parser.parse(text, tzinfos=TZINFOS))
        except (ValueError, OverflowError):
            return None
    return extract


def _source_name(entry: Mapping[str, Any]) -> Optional[str]:
    src = entry.get("source")
    if isinstance(src, Mapping):
        for key in ("title", "name", "text"):
            name = src.get(key)
            if isinstance(name, str) and name.strip():
                return name.strip()
        return None
    return unwrap_text(src)


def _author(entry: Mapping[str, Any]) -> Optional[str]:
    author = entry.get("author")
    if isinstance(author, Mapping):
        name = author.get("name")
        return name.strip() if isinstance(name, str) and name.strip() else None
    return unwrap_text(author)


def host_label(link: Optional[str]) -> Optional[str]:
    if not link:
        return None
    host = urlparse(link).hostname or ""
    if host.startswith("www."):
        host = host[len("www."):]
    return host or None


TIMESTAMP_EXTRACTORS: Sequence[Extractor] = (
    _timestamp_field("pubDate"),
    _timestamp_field("published"),
    _timestamp_field("updated"),
)
TITLE_EXTRACTORS: Sequence[Extractor] = (_text_field("title"),)
DESCRIPTION_EXTRACTORS: Sequence[Extractor] = (
    _text_field("description"),
    _text_field("summary"),
    _text_field("content"),
)
LINK_EXTRACTORS: Sequence[Extractor] = (_link_field, _links_list)
SOURCE_EXTRACTORS: Sequence[Extractor] = (_source_name, _author)


def parse_entry(entry: Mapping[str, Any]) -> dict:
    """
    Map a raw feed entry (RSS 2.0, Atom, or a feedparser entry) to a dict with
    common fields: title, published_at (datetime|None), description, link, source.

    Missing fields come back as empty strings (or None for published_at); deciding
    whether the entry is usable is left to `normalizer.to_article`.
    """
    link = _first(entry, LINK_EXTRACTORS) or ""
    source = (
        _first(entry, SOURCE_EXTRACTORS)
        or host_label(link)
        or UNKNOWN_SOURCE
    )
    return {
        "title": _first(entry, TITLE_EXTRACTORS) or "",
        "published_at": _first(entry, TIMESTAMP_EXTRACTORS),
        "description": _first(entry, DESCRIPTION_EXTRACTORS) or "",
        "link": link,
        "source": source,
    }
