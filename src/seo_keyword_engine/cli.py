"""
Command-line interface for the SEO Keyword Engine.

Provides commands to analyze content and insert keywords into text files.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from .analysis import ContentValidationError, SeoAnalyzer
from .config import EngineConfig
from .insertion import insert_keyword_with_outcome, insert_keywords_bulk
from .keyword_loader import KeywordLoadError, load_keywords
from .models import AnalysisResult, TipType

console = Console()

TIP_STYLES = {
    TipType.SUCCESS: "green",
    TipType.WARNING: "yellow",
    TipType.ERROR: "red",
    TipType.INFO: "cyan",
}


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _read_content(source: Path) -> str:
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Could not read {source}: {e}")


def _write_or_print(content: str, output: Optional[Path]) -> None:
    if output:
        output.write_text(content, encoding="utf-8")
        console.print(f"\n[bold green]Success![/bold green] Output saved to: {output}")
    else:
        console.print(Panel(content, title="Optimized content", border_style="green"))


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """
    SEO Keyword Engine - analyze content and insert keywords naturally.

    Examples:

        seo-keywords analyze article.txt

        seo-keywords insert article.txt -k "content marketing" -o out.txt

        seo-keywords bulk article.txt --keywords-file keywords.csv
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)


@main.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--api-key",
    type=str,
    envvar="TEXTRAZOR_API_KEY",
    help="Enrichment API key. Can also be set via TEXTRAZOR_API_KEY env var.",
)
@click.option(
    "--reduced-fallback",
    is_flag=True,
    default=False,
    help="Use the reduced estimate profile when enrichment fails.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the analysis as JSON.",
)
def analyze(source: Path, api_key: Optional[str], reduced_fallback: bool, as_json: bool) -> None:
    """Analyze a text file for readability, keyword density and SEO score."""
    content = _read_content(source)
    overrides = {"fallback_profile": "reduced" if reduced_fallback else "local"}
    if api_key:
        overrides["enrichment_api_key"] = api_key
    config = EngineConfig.from_env(**overrides)

    analyzer = SeoAnalyzer(config=config)
    try:
        if as_json:
            result = analyzer.analyze(content)
        else:
            with console.status("[bold green]Analyzing content..."):
                result = analyzer.analyze(content)
    except ContentValidationError as e:
        console.print(f"[red]Invalid content:[/red] {e}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    _display_analysis(result)


@main.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--keyword", "-k", type=str, required=True, help="Keyword or phrase to insert.")
@click.option(
    "--position",
    "-p",
    type=int,
    default=None,
    help="Sentence index to insert into (0-based). Chosen automatically if omitted.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the optimized content here instead of printing it.",
)
def insert(source: Path, keyword: str, position: Optional[int], output: Optional[Path]) -> None:
    """Insert a single keyword into a text file."""
    content = _read_content(source)
    if not content.strip():
        console.print("[red]Invalid content:[/red] Content is required")
        sys.exit(1)
    if not keyword.strip():
        console.print("[red]Invalid keyword:[/red] Keyword is required")
        sys.exit(1)

    outcome = insert_keyword_with_outcome(content, keyword, position)

    if outcome.inserted:
        console.print(f"[green]Inserted[/green] '{keyword}'")
    else:
        console.print(f"[yellow]Skipped[/yellow] '{keyword}': {outcome.skip_reason}")

    _write_or_print(outcome.content, output)


@main.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--keyword",
    "-k",
    "keywords",
    type=str,
    multiple=True,
    help="Keyword to insert. Repeat for several keywords.",
)
@click.option(
    "--keywords-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Keyword list (CSV, Excel or one-per-line text).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the optimized content here instead of printing it.",
)
def bulk(
    source: Path,
    keywords: tuple[str, ...],
    keywords_file: Optional[Path],
    output: Optional[Path],
) -> None:
    """Insert several keywords, in order, into a text file."""
    content = _read_content(source)
    if not content.strip():
        console.print("[red]Invalid content:[/red] Content is required")
        sys.exit(1)

    keyword_list = [kw for kw in keywords if kw.strip()]
    if keywords_file:
        try:
            keyword_list.extend(load_keywords(keywords_file))
        except KeywordLoadError as e:
            console.print(f"[red]Keyword loading error:[/red] {e}")
            sys.exit(1)

    if not keyword_list:
        console.print("[red]Error:[/red] Provide at least one --keyword or --keywords-file")
        sys.exit(1)

    result = insert_keywords_bulk(content, keyword_list)

    table = Table(title="Keyword Insertion", show_header=True)
    table.add_column("Keyword", style="cyan")
    table.add_column("Outcome")
    inserted = set(result.inserted)
    for kw in keyword_list:
        outcome = "[green]inserted[/green]" if kw in inserted else "[yellow]skipped[/yellow]"
        table.add_row(kw, outcome)
    console.print(table)
    console.print(f"[cyan]Total inserted:[/cyan] {result.total_inserted}")

    _write_or_print(result.content, output)


def _display_analysis(result: AnalysisResult) -> None:
    """Display analysis scores, suggestions and tips."""
    console.print(Panel.fit(
        f"[bold]SEO score:[/bold] {result.seo_score}/100\n"
        f"[bold]Readability:[/bold] {result.readability_score}/100\n"
        f"[bold]Keyword density:[/bold] {result.keyword_density}%",
        title="SEO Analysis",
        border_style="blue",
    ))

    kw_table = Table(title="Suggested Keywords", show_header=True)
    kw_table.add_column("Keyword", style="green")
    kw_table.add_column("Volume (synthetic)")
    kw_table.add_column("Difficulty")
    kw_table.add_column("In content")
    for kw in result.suggested_keywords:
        kw_table.add_row(kw.term, kw.volume, kw.difficulty.value, "Yes" if kw.inserted else "No")
    console.print(kw_table)
    if result.missing_keywords:
        console.print(f"[yellow]Not yet in content:[/yellow] {', '.join(result.missing_keywords)}")

    console.print("\n[bold]Optimization Tips[/bold]")
    for tip in result.optimization_tips:
        style = TIP_STYLES[tip.type]
        console.print(f"  [{style}]{tip.title}[/{style}] - {tip.description}")


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
