from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .models import MatchedArticle, NormalizedArticle
from .sources import ALL


TRANSACTION_KEYWORDS = (
    "trade", "deal", "acquire", "sign", "roster", "move", "transaction",
    "swap", "exchange", "claim", "designate", "option", "waive", "waived",
    "release", "placed on", "recalled", "sent to", "promoted", "called up",
    "optioned", "designated", "injured list", "il", "dfa", "free agent",
    "contract", "extension", "agreement", "terms", "added", "removed",
    "assigned", "outrighted", "selected", "purchased", "transferred", "draft",
    "signing",
)

GENERAL_REASON = "General MLB news"


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    t = text.lower()
    return any(k.lower() in t for k in keywords)


def match_entity(
    title: str,
    description: str,
    *,
    team: str = ALL,
    players: Sequence[str] = (),
) -> Optional[str]:
    """
    Entity stage: return the match reason, or None when the entry is not about the
    configured players/team.

    Players take precedence over the team; the first matching player (in input
    order) names the reason. With no players and the wildcard team every entry
    passes. Matching is a case-insensitive substring test on title and description.
    """
    t = title.lower()
    d = description.lower()

    names = [p.strip() for p in players if p and p.strip()]
    if names:
        for name in names:
            n = name.lower()
            if n in t or n in d:
                return f"Matches player: {name}"
        return None

    if not team or team.lower() == ALL.lower():
        return GENERAL_REASON

    n = team.lower()
    if n in t or n in d:
        return f"Matches team: {team}"
    return None


def is_topical(title: str, description: str, keywords: Iterable[str] = TRANSACTION_KEYWORDS) -> bool:
    """Topical stage: does title (checked first) or description mention a transaction term?"""
    keywords = tuple(keywords)
    return _contains_any(title, keywords) or _contains_any(description, keywords)


def match_article(
    article: NormalizedArticle,
    *,
    team: str = ALL,
    players: Sequence[str] = (),
) -> Optional[MatchedArticle]:
    """
    Run both stages. Only entries passing the entity stage AND the topical stage
    are returned; general news without a transaction term is dropped too.
    """
    reason = match_entity(article.title, article.description, team=team, players=players)
    if reason is None:
        return None
    if not is_topical(article.title, article.description):
        return None
    return MatchedArticle(**vars(article), match_reason=reason)
