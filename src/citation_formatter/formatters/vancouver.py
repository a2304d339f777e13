"""
Vancouver (ICMJE / NLM) formatter.

Shape: Author AB, Author CD. Title. Journal. Year;Volume(Issue):Pages. doi:doi
"""

from citation_formatter.constants import (
    VANCOUVER_DOI_PREFIX,
    VANCOUVER_ET_AL,
    VANCOUVER_MAX_AUTHORS,
)
from citation_formatter.helpers.author_names import render_vancouver
from citation_formatter.helpers.punctuation import join_segments, terminate, truncate_names
from citation_formatter.models.article import Article


def format_vancouver_authors(authors: tuple[str, ...] | None) -> str | None:
    if not authors:
        return None
    names = [render_vancouver(name) for name in authors]
    return ", ".join(truncate_names(names, VANCOUVER_MAX_AUTHORS, VANCOUVER_ET_AL))


def format_vancouver_publication(article: Article) -> str | None:
    """Year;Volume(Issue):Pages with each piece present only when its field is.

    The ";" and "(" characters appear only when a volume or issue is given.
    """
    block = str(article.year) if article.year is not None else ""
    if article.volume is not None or article.issue is not None:
        block += ";" + (article.volume or "")
        if article.issue is not None:
            block += f"({article.issue})"
    if article.pages is not None:
        block = f"{block}:{article.pages}" if block else article.pages
    return block or None


def format_vancouver(article: Article) -> str:
    """Render an article as a Vancouver citation."""
    segments = [
        format_vancouver_authors(article.authors),
        article.title_en,
        article.journal,
        format_vancouver_publication(article),
    ]
    body = [terminate(segment) for segment in segments if segment]
    if article.doi is not None:
        body.append(f"{VANCOUVER_DOI_PREFIX}{article.doi}")
    return join_segments(body)
