"""
APA 7th edition formatter.

Shape: Author, A., & Author, B. (Year). Title. Journal, Volume(Issue), Pages. https://doi.org/doi
"""

from citation_formatter.constants import APA_DOI_PREFIX
from citation_formatter.helpers.author_names import render_apa
from citation_formatter.helpers.punctuation import join_apa_names, join_segments, terminate
from citation_formatter.models.article import Article


def format_apa_locus(volume: str | None, issue: str | None) -> str | None:
    """volume(issue), or just the volume; an issue without a volume is dropped."""
    if volume is None:
        return None
    if issue is None:
        return volume
    return f"{volume}({issue})"


def format_apa_source(article: Article) -> str | None:
    parts = [article.journal, format_apa_locus(article.volume, article.issue), article.pages]
    source = join_segments(parts, separator=", ")
    return terminate(source) if source else None


def format_apa(article: Article) -> str:
    """Render an article as an APA citation."""
    authors = join_apa_names([render_apa(name) for name in article.authors or ()])
    segments = [
        authors,
        f"({article.year})." if article.year is not None else None,
        terminate(article.title_en),
        format_apa_source(article),
        f"{APA_DOI_PREFIX}{article.doi}" if article.doi is not None else None,
    ]
    return join_segments(segments)
