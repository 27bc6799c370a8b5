"""
mlb_news

Fetches MLB news feeds and returns only transaction news (trades, signings, roster
moves) for a team or a set of players within a date window.

Core ideas:
- Input: a date window, a team or player names, and the news source types to query
- Process: fetch → normalize → window check (±6h buffer) → match (entity AND
  transaction keyword) → deduplicate → sort (newest first)
- Output: SearchResult (articles + counters)

Example
-------
from mlb_news import NewsSearch, SearchOptions, resolve_date_window

window = resolve_date_window(hours_back=48)
search = NewsSearch(SearchOptions(team="Yankees", source_types=["Trade", "Signing"]))
result = search.search(window)

for item in result.articles:
    print(item.published_at, item.source_label, item.title, item.match_reason)
"""
from .models import DateWindow, MatchedArticle, NormalizedArticle, SearchResult, SearchStats
from .core import NewsSearch, SearchOptions, search_news
from .daterange import resolve_date_window
from .render import format_results

__all__ = [
    "DateWindow",
    "MatchedArticle",
    "NormalizedArticle",
    "SearchResult",
    "SearchStats",
    "NewsSearch",
    "SearchOptions",
    "search_news",
    "resolve_date_window",
    "format_results",
]
