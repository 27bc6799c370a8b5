import pytest

from mlb_news.models import SourceType
from mlb_news.sources import MLB_TEAMS, SOURCES, canonical_team, select_sources


def test_one_source_per_type():
    assert len(SOURCES) == 6
    assert {s.type for s in SOURCES} == set(SourceType)


def test_thirty_teams():
    assert len(MLB_TEAMS) == 30
    assert len(set(MLB_TEAMS)) == 30


def test_select_all():
    assert select_sources(None) == SOURCES
    assert select_sources(["All"]) == SOURCES
    assert select_sources(["trade", "all"]) == SOURCES


def test_select_subset_keeps_table_order():
    selected = select_sources(["Signing", "trade"])
    assert [s.type for s in selected] == [SourceType.TRADE, SourceType.SIGNING]


def test_empty_selection():
    assert select_sources([]) == []


def test_unknown_type():
    with pytest.raises(ValueError):
        select_sources(["Rumor"])


def test_canonical_team():
    assert canonical_team("red sox") == "Red Sox"
    assert canonical_team(None) == "All"
    assert canonical_team("ALL") == "All"
