"""Command-line interface for citation-formatter."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from citation_formatter.config import get_settings
from citation_formatter.exceptions import ArticleLoadError
from citation_formatter.models.citation_style import CitationStyle
from citation_formatter.services.bibliography import build_reference_list, load_articles

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="citation-formatter")
def main():
    """citation-formatter: Render article records as GOST, APA or Vancouver references."""
    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.ClickException(f"invalid settings: {e}") from e
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command("format")
@click.argument("articles_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-s",
    "--style",
    default=None,
    help="Citation style (gost, apa, vancouver). Unknown values fall back to gost.",
)
@click.option(
    "--dedupe/--no-dedupe",
    default=False,
    show_default=True,
    help="Merge articles sharing a PMID, DOI or title into one entry",
)
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Output file path (text)")
def format_command(articles_file: Path, style: str | None, dedupe: bool, output: Path | None):
    """Print a numbered reference list for the articles in ARTICLES_FILE (JSON list)."""
    if style is None:
        style = get_settings().default_style

    try:
        articles = load_articles(articles_file)
    except ArticleLoadError as e:
        raise click.ClickException(str(e)) from e

    entries = build_reference_list(articles, style, dedupe=dedupe)
    lines = [entry.numbered for entry in entries]

    if output:
        output.write_text("\n".join(lines) + "\n" if lines else "", encoding="utf-8")
        click.echo(f"{len(lines)} references saved to: {output}")
    else:
        for line in lines:
            click.echo(line)


@main.command()
def styles():
    """List the supported citation styles."""
    for style in CitationStyle:
        click.echo(style.value)


if __name__ == "__main__":
    main()
