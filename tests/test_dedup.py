from datetime import datetime, timedelta, timezone

from mlb_news.dedup import deduplicate, title_key
from mlb_news.models import MatchedArticle

BASE = datetime(2024, 7, 30, 12, 0, tzinfo=timezone.utc)


def _item(title, link, hours_ago=0):
    return MatchedArticle(
        title=title,
        published_at=BASE - timedelta(hours=hours_ago),
        description="",
        link=link,
        source_label="test",
        match_reason="General MLB news",
    )


def test_title_key_strips_punctuation_and_whitespace():
    assert title_key("  Yankees   Sign: Free-Agent Pitcher! ") == "yankees sign freeagent pitcher"


def test_same_title_different_links_collapse():
    out = deduplicate([
        _item("Yankees sign pitcher", "https://a.com/1", hours_ago=3),
        _item("Yankees Sign Pitcher!", "https://b.com/2", hours_ago=1),
    ])
    assert len(out) == 1
    # the most recent copy wins
    assert out[0].link == "https://b.com/2"


def test_same_link_different_titles_collapse():
    out = deduplicate([
        _item("Mets trade for reliever", "https://a.com/1", hours_ago=1),
        _item("Mets trade for a reliever, per report", "https://a.com/1", hours_ago=2),
    ])
    assert [a.title for a in out] == ["Mets trade for reliever"]


def test_different_titles_and_links_survive():
    out = deduplicate([
        _item("Cubs sign catcher", "https://a.com/1", hours_ago=2),
        _item("Reds release outfielder", "https://a.com/2", hours_ago=1),
    ])
    assert [a.title for a in out] == ["Reds release outfielder", "Cubs sign catcher"]


def test_sort_is_stable_for_equal_times():
    out = deduplicate([
        _item("First", "https://a.com/1"),
        _item("Second", "https://a.com/2"),
        _item("Third", "https://a.com/3"),
    ])
    assert [a.title for a in out] == ["First", "Second", "Third"]


def test_empty_links_count_as_the_same_link():
    out = deduplicate([
        _item("Cubs sign catcher", "", hours_ago=1),
        _item("Reds release outfielder", "", hours_ago=2),
    ])
    assert [a.title for a in out] == ["Cubs sign catcher"]


def test_idempotent():
    items = [
        _item("Yankees sign pitcher", "https://a.com/1", hours_ago=3),
        _item("Yankees sign pitcher.", "https://b.com/1", hours_ago=2),
        _item("Astros claim infielder", "https://a.com/1", hours_ago=5),
        _item("Rays option prospect", "https://c.com/9", hours_ago=4),
    ]
    once = deduplicate(items)
    assert deduplicate(once) == once
