from datetime import datetime, timedelta, timezone

from mlb_news.models import DateWindow, MatchedArticle, SearchResult, SearchStats
from mlb_news.render import format_results

NOW = datetime(2024, 7, 30, 12, 0, tzinfo=timezone.utc)
WINDOW = DateWindow(start=NOW - timedelta(hours=24), end=NOW,
                    description="in the last 24 hours", total_days=1)


def test_formats_articles_and_counters():
    article = MatchedArticle(
        title="Yankees Sign [free agent] Pitcher",
        published_at=NOW,
        description="word " * 100,
        link="https://www.mlb.com/news/1",
        source_label="mlb.com",
        match_reason="Matches team: Yankees",
    )
    stats = SearchStats(sources_selected=1, sources_attempted=1, sources_successful=1,
                        items_checked=4, items_matched=1, unique_count=1)

    text = format_results(SearchResult(window=WINDOW, articles=[article], stats=stats))

    assert "in the last 24 hours" in text
    assert "Matches team: Yankees" in text
    assert "\\[free agent]" in text
    assert "https://www.mlb.com/news/1" in text
    assert "Sources: 1/1 successful" in text
    assert "..." in text


def test_empty_result_is_not_a_failure():
    stats = SearchStats(sources_selected=2, sources_attempted=2, failed_sources=["Trades"])
    text = format_results(SearchResult(window=WINDOW, stats=stats))
    assert "No matching news found" in text
    assert "Failed sources: Trades" in text


def test_no_sources_selected():
    text = format_results(SearchResult(window=WINDOW))
    assert "No sources selected" in text
