"""Command-line entry point for mlb-news."""

from __future__ import annotations

import functools
import logging
from datetime import datetime
from typing import Optional, Tuple

import click
from rich.console import Console

from .config import load_settings
from .core import NewsSearch, SearchOptions
from .daterange import MAX_HOURS_BACK, resolve_date_window
from .exceptions import InvalidRangeError, RangeTooLargeError
from .fetcher import fetch_feed_entries
from .models import SourceType
from .render import format_results
from .sources import ALL, MLB_TEAMS

logger = logging.getLogger(__name__)

TEAM_CHOICES = [ALL] + MLB_TEAMS
TYPE_CHOICES = [ALL] + [t.value for t in SourceType]


@click.command()
@click.option("--team", "-t", default=ALL, show_default=True,
              type=click.Choice(TEAM_CHOICES, case_sensitive=False),
              help="Team to follow")
@click.option("--player", "-p", "players", multiple=True,
              help="Player name to match (repeatable; overrides --team)")
@click.option("--hours", "hours_back", type=click.IntRange(1, MAX_HOURS_BACK),
              help="Look back this many hours (default: 24)")
@click.option("--date", "single_date", type=click.DateTime(formats=["%Y-%m-%d"]),
              help="Search a single day (YYYY-MM-DD)")
@click.option("--start-date", type=click.DateTime(formats=["%Y-%m-%d"]),
              help="Range start (YYYY-MM-DD, default: 30 days before end)")
@click.option("--end-date", type=click.DateTime(formats=["%Y-%m-%d"]),
              help="Range end (YYYY-MM-DD, default: today)")
@click.option("--type", "source_types", multiple=True,
              type=click.Choice(TYPE_CHOICES, case_sensitive=False),
              help="News source type (repeatable; default: All)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(
    team: str,
    players: Tuple[str, ...],
    hours_back: Optional[int],
    single_date: Optional[datetime],
    start_date: Optional[datetime],
    end_date: Optional[datetime],
    source_types: Tuple[str, ...],
    verbose: bool,
) -> None:
    """Search MLB news feeds for trades, signings and roster moves."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        window = resolve_date_window(
            hours_back=hours_back,
            single_date=single_date.date() if single_date else None,
            start_date=start_date.date() if start_date else None,
            end_date=end_date.date() if end_date else None,
        )
    except (InvalidRangeError, RangeTooLargeError) as e:
        raise click.UsageError(str(e))

    settings = load_settings()
    options = SearchOptions(
        team=team,
        players=list(players),
        source_types=list(source_types) or None,
        request_delay=settings.request_delay,
        window_buffer=settings.window_buffer,
    )
    fetch = functools.partial(
        fetch_feed_entries,
        timeout=settings.request_timeout,
        user_agent=settings.user_agent,
    )
    logger.info(f"Searching MLB news {window.description}")
    result = NewsSearch(options, fetch=fetch).search(window)

    Console().print(format_results(result))


if __name__ == "__main__":  # pragma: no cover
    main()
