"""
Command-line interface for SEO Text Metrics.

Provides a CLI for running keyword density analysis on a URL, a local
file, or inline text.
"""

import contextlib
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .analysis import analyze_keyword_density
from .config import AnalyzerConfig
from .content_sources import ContentExtractionError, fetch_url_content, load_content
from .models import AnalysisResult

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@click.command()
@click.option(
    "--url",
    type=str,
    help="URL to fetch and analyze.",
)
@click.option(
    "--file",
    "source_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a .docx, .txt, .md or .html file to analyze.",
)
@click.option(
    "--text",
    type=str,
    help="Text to analyze directly.",
)
@click.option(
    "--keyword",
    "-k",
    type=str,
    required=True,
    help="Target keyword or phrase.",
)
@click.option(
    "--extended/--basic",
    default=True,
    help="Extended mode reports 15 related keywords; basic reports 10 and skips the keyword itself.",
)
@click.option(
    "--limit",
    type=click.IntRange(min=0),
    default=None,
    help="Override the number of related keywords to report.",
)
@click.option(
    "--timeout",
    type=float,
    default=None,
    help="Fetch timeout in seconds (default: 10, or SEO_FETCH_TIMEOUT).",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the result as JSON.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
def main(
    url: Optional[str],
    source_file: Optional[Path],
    text: Optional[str],
    keyword: str,
    extended: bool,
    limit: Optional[int],
    timeout: Optional[float],
    as_json: bool,
    verbose: bool,
) -> None:
    """
    SEO Keyword Density - Measure how well content targets a keyword.

    Reports keyword density, related keywords, an SEO score (0-100) and
    suggestions for improving the content.

    Examples:

        seo-density --url https://example.com/page -k "seo tools"

        seo-density --file article.docx -k "keyword research" --basic --json
    """
    _configure_logging(verbose)

    sources = [s for s in (url, source_file, text) if s is not None]
    if not sources:
        console.print("[red]Error:[/red] Must provide one of --url, --file or --text")
        sys.exit(1)

    if len(sources) > 1:
        console.print("[red]Error:[/red] Provide only one of --url, --file or --text")
        sys.exit(1)

    config = AnalyzerConfig.extended() if extended else AnalyzerConfig.basic()
    if limit is not None:
        config = config.with_overrides(related_keyword_limit=limit)

    try:
        if text is not None:
            content_text = text
        else:
            status = contextlib.nullcontext() if as_json else console.status("[bold green]Loading content...")
            with status:
                if url:
                    content = fetch_url_content(url, timeout=timeout)
                else:
                    content = load_content(str(source_file), timeout=timeout)
            content_text = content.text
            if verbose and not as_json:
                console.print(f"  Loaded content from: {content.source}")
                console.print(f"  Word count: ~{content.word_count}")

        if not content_text.strip():
            console.print("[red]Error:[/red] Could not extract any text from the source")
            sys.exit(1)

        result = analyze_keyword_density(content_text, keyword, config=config)

    except ContentExtractionError as e:
        console.print(f"[red]Content extraction error:[/red] {escape(str(e))}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    _display_result(result, verbose)


def _score_style(score: int) -> str:
    if score >= 70:
        return "green"
    if score >= 50:
        return "yellow"
    return "red"


def _display_result(result: AnalysisResult, verbose: bool) -> None:
    """Display analysis summary."""
    style = _score_style(result.seo_score)
    console.print(Panel.fit(
        f"[bold blue]Keyword:[/bold blue] {escape(result.target_keyword)}\n"
        f"Density: [bold]{result.density:.2f}%[/bold]  "
        f"Occurrences: [bold]{result.keyword_count}[/bold]  "
        f"Words: [bold]{result.total_words}[/bold]\n"
        f"SEO score: [bold {style}]{result.seo_score}/100[/bold {style}]",
        title="Keyword Density Analysis",
        border_style="blue",
    ))

    if verbose:
        breakdown = result.score_breakdown
        score_table = Table(title="Score Breakdown", show_header=True)
        score_table.add_column("Band", style="cyan")
        score_table.add_column("Points", justify="right")
        score_table.add_row("Density", str(breakdown.density))
        score_table.add_row("Frequency", str(breakdown.frequency))
        score_table.add_row("Length", str(breakdown.length))
        score_table.add_row("Diversity", str(breakdown.diversity))
        console.print(score_table)

    if result.related_keywords:
        kw_table = Table(title="Related Keywords", show_header=True)
        kw_table.add_column("Keyword", style="green")
        kw_table.add_column("Count", justify="right")
        kw_table.add_column("Density", justify="right")
        for kw in result.related_keywords:
            kw_table.add_row(escape(kw.keyword), str(kw.count), f"{kw.density:.2f}%")
        console.print(kw_table)

    console.print("\n[bold]Suggestions[/bold]")
    for suggestion in result.suggestions:
        console.print(f"  - {escape(suggestion)}")

    console.print("\n[bold]Improvements[/bold]")
    for improvement in result.improvements:
        console.print(f"  - {improvement}")


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
