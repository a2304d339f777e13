"""Style dispatch: pick the formatter for a requested citation style."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from citation_formatter.formatters.apa import format_apa
from citation_formatter.formatters.gost import format_gost
from citation_formatter.formatters.vancouver import format_vancouver
from citation_formatter.models.article import Article
from citation_formatter.models.citation_style import CitationStyle

logger = logging.getLogger(__name__)

FORMATTERS: Mapping[CitationStyle, Callable[[Article], str]] = {
    CitationStyle.GOST: format_gost,
    CitationStyle.APA: format_apa,
    CitationStyle.VANCOUVER: format_vancouver,
}


def as_article(article: Article | Mapping[str, Any]) -> Article:
    """Accept either a model or a plain record mapping."""
    if isinstance(article, Article):
        return article
    return Article.model_validate(article)


def format_citation(
    article: Article | Mapping[str, Any], style: CitationStyle | str | None
) -> str:
    """Format one article in the given style; unknown styles fall back to GOST."""
    resolved = CitationStyle.resolve(style)
    if resolved.value != style:
        logger.debug("Unrecognised citation style %r; using %s", style, resolved.value)
    return FORMATTERS[resolved](as_article(article))
