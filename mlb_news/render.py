"""Plain formatting of a SearchResult as rich console markup."""

from __future__ import annotations

from typing import List

from rich.markup import escape

from .models import MatchedArticle, SearchResult

DESCRIPTION_LIMIT = 200


def _trim(text: str, limit: int = DESCRIPTION_LIMIT) -> str:
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[: limit - 3].rstrip() + "..."


def format_article(index: int, article: MatchedArticle) -> List[str]:
    published = article.published_at.astimezone().strftime("%Y-%m-%d %H:%M")
    lines = [
        f"[bold cyan]{index}. {escape(article.title)}[/bold cyan]",
        f"   [dim]{escape(article.source_label)} - {published}[/dim]",
        f"   [green]{escape(article.match_reason)}[/green]",
    ]
    if article.link:
        lines.append(f"   [blue underline]{escape(article.link)}[/blue underline]")
    if article.description:
        lines.append(f"   {escape(_trim(article.description))}")
    return lines


def format_results(result: SearchResult) -> str:
    window = result.window
    stats = result.stats
    lines = [f"[bold]MLB transaction news {escape(window.description)}[/bold]", ""]

    if stats.sources_selected == 0:
        lines.append("[yellow]No sources selected.[/yellow]")
    elif not result.articles:
        lines.append("[yellow]No matching news found.[/yellow]")
    else:
        for i, article in enumerate(result.articles, start=1):
            lines.extend(format_article(i, article))
            lines.append("")

    lines.append("")
    lines.append(
        f"[dim]Sources: {stats.sources_successful}/{stats.sources_attempted} successful | "
        f"Checked: {stats.items_checked} | Matched: {stats.items_matched} | "
        f"Unique: {stats.unique_count} | Window: {window.total_days} day(s)[/dim]"
    )
    if stats.failed_sources:
        lines.append(f"[red]Failed sources: {escape(', '.join(stats.failed_sources))}[/red]")
    return "\n".join(lines)
