from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Union
from urllib.parse import quote_plus

from .models import SourceSpec, SourceType


ALL = "All"

_GOOGLE_NEWS_RSS = "https://news.google.com/rss/search?q={query}&hl=en-US&gl=US&ceid=US:en"


def _google_news(query: str) -> str:
    return _GOOGLE_NEWS_RSS.format(query=quote_plus(query))


SOURCES: List[SourceSpec] = [
    SourceSpec("MLB Trades", SourceType.TRADE, _google_news("MLB trade")),
    SourceSpec("MLB Roster Moves", SourceType.ROSTER, _google_news("MLB roster moves")),
    SourceSpec("MLB Transactions", SourceType.TRANSACTION, _google_news("MLB transactions")),
    SourceSpec("MLB Signings", SourceType.SIGNING, _google_news("MLB signs contract")),
    SourceSpec("MLB Acquisitions", SourceType.ACQUISITION, _google_news("MLB acquires")),
    SourceSpec("MLB News", SourceType.GENERAL, _google_news("MLB baseball news")),
]

MLB_TEAMS = [
    "Diamondbacks", "Braves", "Orioles", "Red Sox", "Cubs",
    "White Sox", "Reds", "Guardians", "Rockies", "Tigers",
    "Astros", "Royals", "Angels", "Dodgers", "Marlins",
    "Brewers", "Twins", "Mets", "Yankees", "Athletics",
    "Phillies", "Pirates", "Padres", "Giants", "Mariners",
    "Cardinals", "Rays", "Rangers", "Blue Jays", "Nationals",
]


def canonical_team(team: Optional[str]) -> str:
    """Return the canonical spelling of `team`, or ALL for the wildcard."""
    if not team or team.strip().lower() == ALL.lower():
        return ALL
    wanted = team.strip().lower()
    for name in MLB_TEAMS:
        if name.lower() == wanted:
            return name
    raise ValueError(f"Unknown team: {team!r}")


def parse_source_type(value: str) -> SourceType:
    wanted = value.strip().lower()
    for t in SourceType:
        if t.value.lower() == wanted or t.name.lower() == wanted:
            return t
    raise ValueError(f"Unknown source type: {value!r}")


def select_sources(
    types: Optional[Iterable[Union[str, SourceType]]] = None,
    sources: Optional[Sequence[SourceSpec]] = None,
) -> List[SourceSpec]:
    """
    Filter the source table to the requested types.

    None, or any entry equal to "All", selects every source. The result keeps table
    order and is empty when no configured source has a requested type (including an
    empty `types`).
    """
    table = list(SOURCES if sources is None else sources)
    if types is None:
        return table
    requested = [t for t in types if t is not None]
    if any(not isinstance(t, SourceType) and t.strip().lower() == ALL.lower() for t in requested):
        return table

    wanted = {t if isinstance(t, SourceType) else parse_source_type(t) for t in requested}
    return [s for s in table if s.type in wanted]
