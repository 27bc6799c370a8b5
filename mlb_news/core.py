from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence

from .classifier import match_article
from .config import DEFAULT_REQUEST_DELAY, DEFAULT_WINDOW_BUFFER_HOURS
from .daterange import resolve_date_window
from .dedup import deduplicate
from .exceptions import FeedParseError, ItemParseError, SourceFetchError
from .fetcher import fetch_feed_entries
from .models import DateWindow, MatchedArticle, SearchResult, SearchStats, SourceSpec
from .normalizer import to_article
from .sources import ALL, canonical_team, select_sources

logger = logging.getLogger(__name__)

# Feed publish times lag or lead the crawl; widen the window on both sides.
WINDOW_BUFFER = timedelta(hours=DEFAULT_WINDOW_BUFFER_HOURS)

FetchFn = Callable[[str], Iterable[Mapping[str, Any]]]


@dataclass
class SearchOptions:
    team: str = ALL
    players: Sequence[str] = field(default_factory=list)
    source_types: Optional[Sequence[str]] = None
    request_delay: float = DEFAULT_REQUEST_DELAY
    window_buffer: timedelta = WINDOW_BUFFER


class NewsSearch:
    """
    High-level API: query every selected source and return matched, unique articles.

    Pipeline per source: fetch → normalize → buffered window check → relevance match.
    Then across sources: deduplicate → sort (newest first).

    Sources are queried one at a time with `request_delay` seconds between them. A
    failing source is recorded in the stats and never aborts the run.
    """

    def __init__(
        self,
        options: Optional[SearchOptions] = None,
        *,
        fetch: Optional[FetchFn] = None,
        sources: Optional[Sequence[SourceSpec]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        options = options or SearchOptions()
        self.options = SearchOptions(
            team=canonical_team(options.team),
            players=[p.strip() for p in options.players if p and p.strip()],
            source_types=options.source_types,
            request_delay=max(0.0, options.request_delay),
            window_buffer=options.window_buffer,
        )
        self._fetch = fetch or fetch_feed_entries
        self._sources = sources
        self._sleep = sleep

    def search(self, window: DateWindow) -> SearchResult:
        stats = SearchStats()
        result = SearchResult(window=window, stats=stats)

        sources = select_sources(self.options.source_types, self._sources)
        stats.sources_selected = len(sources)
        if not sources:
            logger.warning("No sources selected")
            return result

        matched: List[MatchedArticle] = []
        for index, source in enumerate(sources):
            stats.sources_attempted += 1
            logger.info(f"Searching {source.name} ({source.type.value})")
            try:
                entries = list(self._fetch(source.endpoint))
            except (SourceFetchError, FeedParseError) as e:
                logger.warning(f"Source {source.name} failed: {e}")
                stats.failed_sources.append(source.name)
                continue
            except Exception as e:
                # injected transports may raise their own errors
                logger.error(f"Error fetching source {source.name}: {e}")
                stats.failed_sources.append(source.name)
                continue

            found = self._process_entries(source, entries, window, stats)
            matched.extend(found)
            logger.info(f"{source.name}: {len(entries)} entries, {len(found)} matched")

            if self.options.request_delay and index < len(sources) - 1:
                self._sleep(self.options.request_delay)

        stats.items_matched = len(matched)
        result.articles = deduplicate(matched)
        stats.unique_count = len(result.articles)
        logger.info(
            f"Checked {stats.items_checked} entries from {stats.sources_successful}/"
            f"{stats.sources_attempted} sources: {stats.items_matched} matched, "
            f"{stats.unique_count} unique"
        )
        return result

    def _process_entries(
        self,
        source: SourceSpec,
        entries: Iterable[Mapping[str, Any]],
        window: DateWindow,
        stats: SearchStats,
    ) -> List[MatchedArticle]:
        start = window.start - self.options.window_buffer
        end = window.end + self.options.window_buffer

        found: List[MatchedArticle] = []
        parsed_any = False
        for entry in entries:
            stats.items_checked += 1
            try:
                article = to_article(entry)
            except ItemParseError as e:
                stats.items_dropped += 1
                logger.debug(f"[{source.name}] skipped entry: {e}")
                continue
            parsed_any = True

            if not start <= article.published_at <= end:
                logger.debug(f"[{source.name}] outside window: {article.title}")
                continue
            stats.items_in_window += 1

            hit = match_article(article, team=self.options.team, players=self.options.players)
            if hit is None:
                logger.debug(f"[{source.name}] not relevant: {article.title}")
                continue
            logger.debug(f"[{source.name}] {hit.match_reason}: {article.title}")
            found.append(hit)

        if parsed_any:
            stats.sources_successful += 1
        return found


def search_news(
    *,
    team: str = ALL,
    players: Sequence[str] = (),
    source_types: Optional[Sequence[str]] = None,
    hours_back: Optional[int] = None,
    single_date: Optional[date] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    request_delay: float = DEFAULT_REQUEST_DELAY,
    window_buffer: timedelta = WINDOW_BUFFER,
    fetch: Optional[FetchFn] = None,
) -> SearchResult:
    """
    Resolve the date window and run a search. Date range errors are raised before
    any source is fetched.
    """
    window = resolve_date_window(
        hours_back=hours_back,
        single_date=single_date,
        start_date=start_date,
        end_date=end_date,
    )
    options = SearchOptions(
        team=team,
        players=list(players),
        source_types=source_types,
        request_delay=request_delay,
        window_buffer=window_buffer,
    )
    return NewsSearch(options, fetch=fetch).search(window)
