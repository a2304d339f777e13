"""
GOST R 7.0.5-2008 formatter.

Shape: Authors Title // Journal Year Vol. V No. N P. Pages DOI: doi.
Foreign sources are rendered in the original (English) language, so the
English title and Latin labels are used throughout.
"""

from citation_formatter.constants import (
    GOST_DOI_LABEL,
    GOST_ET_AL,
    GOST_ISSUE_LABEL,
    GOST_JOURNAL_MARK,
    GOST_MAX_AUTHORS,
    GOST_PAGES_LABEL,
    GOST_VOLUME_LABEL,
)
from citation_formatter.helpers.author_names import render_gost
from citation_formatter.helpers.punctuation import ensure_period, join_segments, labelled
from citation_formatter.models.article import Article


def format_gost_authors(authors: tuple[str, ...] | None) -> str | None:
    """First three authors, then " et al." when more exist."""
    if not authors:
        return None
    segment = ", ".join(render_gost(name) for name in authors[:GOST_MAX_AUTHORS])
    if len(authors) > GOST_MAX_AUTHORS:
        segment += f" {GOST_ET_AL}"
    return segment


def format_gost(article: Article) -> str:
    """Render an article as a GOST citation; always ends with one period."""
    segments = [
        format_gost_authors(article.authors),
        article.title_en,
        labelled(GOST_JOURNAL_MARK, article.journal),
        str(article.year) if article.year is not None else None,
        labelled(GOST_VOLUME_LABEL, article.volume),
        labelled(GOST_ISSUE_LABEL, article.issue),
        labelled(GOST_PAGES_LABEL, article.pages),
        labelled(GOST_DOI_LABEL, article.doi),
    ]
    return ensure_period(join_segments(segments))
