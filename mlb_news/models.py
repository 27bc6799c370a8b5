from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List


class SourceType(str, Enum):
    TRADE = "Trade"
    ROSTER = "Roster"
    TRANSACTION = "Transaction"
    SIGNING = "Signing"
    ACQUISITION = "Acquisition"
    GENERAL = "General"


@dataclass(frozen=True)
class SourceSpec:
    name: str
    type: SourceType
    endpoint: str


@dataclass(frozen=True)
class DateWindow:
    """
    Concrete search interval plus a human readable description.

    `start` and `end` are timezone-aware; `total_days` is for reporting only.
    """
    start: datetime
    end: datetime
    description: str
    total_days: int


@dataclass(frozen=True)
class NormalizedArticle:
    """
    A feed entry reduced to the fields the matcher cares about.

    WARNING: Do not change fields lightly. Renderer and tests depend on them.
    """
    title: str
    published_at: datetime
    description: str
    link: str
    source_label: str


@dataclass(frozen=True)
class MatchedArticle(NormalizedArticle):
    match_reason: str = ""


@dataclass
class SearchStats:
    sources_selected: int = 0
    sources_attempted: int = 0
    sources_successful: int = 0
    failed_sources: List[str] = field(default_factory=list)
    items_checked: int = 0
    items_dropped: int = 0
    items_in_window: int = 0
    items_matched: int = 0
    unique_count: int = 0


@dataclass
class SearchResult:
    window: DateWindow
    articles: List[MatchedArticle] = field(default_factory=list)
    stats: SearchStats = field(default_factory=SearchStats)
