from __future__ import annotations

import re
from typing import Iterable, List, Set

from .models import MatchedArticle


_PUNCT = re.compile(r"[^\w\s]")
_SPACES = re.compile(r"\s+")


def title_key(title: str) -> str:
    """Strip punctuation, collapse whitespace, lower-case."""
    return _SPACES.sub(" ", _PUNCT.sub("", title)).strip().lower()


def deduplicate(items: Iterable[MatchedArticle]) -> List[MatchedArticle]:
    """
    Sort newest first, then keep an article only if neither its normalized title nor
    its exact link has been kept already. The most recent copy of a duplicate wins.
    """
    seen_titles: Set[str] = set()
    seen_links: Set[str] = set()
    out: List[MatchedArticle] = []

    for it in sorted(items, key=lambda x: x.published_at, reverse=True):
        key = title_key(it.title)
        if key in seen_titles:
            continue
        if it.link in seen_links:
            continue
        seen_titles.add(key)
        seen_links.add(it.link)
        out.append(it)
    return out
