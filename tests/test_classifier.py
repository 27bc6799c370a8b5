from datetime import datetime, timezone

from mlb_news.classifier import is_topical, match_article, match_entity
from mlb_news.models import NormalizedArticle


def _article(title, description=""):
    return NormalizedArticle(
        title=title,
        published_at=datetime(2024, 7, 30, tzinfo=timezone.utc),
        description=description,
        link="https://example.com/a",
        source_label="example.com",
    )


def test_team_without_transaction_keyword_is_excluded():
    assert match_article(_article("Yankees win 5-3 at home"), team="Yankees") is None


def test_keyword_without_entity_is_excluded():
    assert match_article(_article("Blockbuster trade shakes up the league"), team="Yankees") is None


def test_team_and_keyword_is_included():
    hit = match_article(_article("Yankees trade for slugger"), team="Yankees")
    assert hit is not None
    assert hit.match_reason == "Matches team: Yankees"
    assert hit.title == "Yankees trade for slugger"


def test_team_match_in_description():
    hit = match_article(_article("Big trade news", "The yankees finalized it."), team="Yankees")
    assert hit.match_reason == "Matches team: Yankees"


def test_general_news_requires_keyword():
    assert match_article(_article("Walk-off homer in the ninth")) is None
    hit = match_article(_article("Club agrees to contract extension"))
    assert hit.match_reason == "General MLB news"


def test_players_take_precedence_over_team():
    reason = match_entity("Juan Soto traded", "", team="Yankees", players=["Aaron Judge", "Juan Soto"])
    assert reason == "Matches player: Juan Soto"
    assert match_entity("Yankees news", "", team="Yankees", players=["Juan Soto"]) is None


def test_first_player_in_input_order_wins():
    reason = match_entity("Soto and Judge sign", "", players=["Judge", "Soto"])
    assert reason == "Matches player: Judge"


def test_matching_is_plain_substring():
    # no word boundaries: "il" hides inside many words
    assert is_topical("Rain delays April opener", "")
    assert match_entity("The Metsian era", "", team="Mets") == "Matches team: Mets"


def test_topical_checks_description():
    assert is_topical("Quiet day", "Pitcher placed on the injured list")
    assert not is_topical("Quiet day", "Nothing happened")
