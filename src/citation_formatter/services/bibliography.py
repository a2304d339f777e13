"""
Reference-list services built on top of the style formatters.

  1. format_bibliography  — numbered citation strings, one per input article
  2. build_reference_list — structured, optionally de-duplicated entries for export
  3. load_articles        — read article records from a JSON file
"""

import json
import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from citation_formatter.exceptions import ArticleLoadError
from citation_formatter.formatters.dispatch import as_article, format_citation
from citation_formatter.models.article import Article
from citation_formatter.models.citation_style import CitationStyle
from citation_formatter.models.reference import ReferenceEntry

logger = logging.getLogger(__name__)

_DOI_VERSION_SUFFIX = re.compile(r"/v\d+/.*$")
_TITLE_PUNCTUATION = re.compile(r"[^\w\s]")

ArticleLike = Article | Mapping[str, Any]


def format_bibliography(
    articles: Iterable[ArticleLike], style: CitationStyle | str | None
) -> list[str]:
    """Format every article in order, prefixed with its 1-based number."""
    entries = [
        f"{number}. {format_citation(article, style)}"
        for number, article in enumerate(articles, start=1)
    ]
    logger.debug("Formatted bibliography of %d entries", len(entries))
    return entries


def dedupe_key(article: ArticleLike) -> str:
    """Identity of a source: PMID, else DOI (version path dropped), else normalised title."""
    article = as_article(article)
    if article.pmid:
        return f"pmid:{article.pmid}"
    if article.doi:
        return f"doi:{_DOI_VERSION_SUFFIX.sub('', article.doi).lower()}"
    title = _TITLE_PUNCTUATION.sub("", article.title_en.lower()).strip()
    return f"title:{title}"


def deduplicate_articles(articles: Iterable[ArticleLike]) -> list[Article]:
    """Keep the first article for each dedupe key, preserving order."""
    seen: set[str] = set()
    unique: list[Article] = []
    for article in articles:
        article = as_article(article)
        key = dedupe_key(article)
        if key in seen:
            continue
        seen.add(key)
        unique.append(article)
    return unique


def build_reference_list(
    articles: Iterable[ArticleLike],
    style: CitationStyle | str | None,
    dedupe: bool = True,
) -> list[ReferenceEntry]:
    """Build the numbered reference list used for export.

    Args:
        articles: Article models or plain records, in citation order.
        style: Requested style; unrecognised values fall back to GOST.
        dedupe: Collapse articles sharing a PMID/DOI/title into one source.

    Returns:
        One ReferenceEntry per (unique) source, numbered from 1 without gaps.
    """
    resolved = CitationStyle.resolve(style)
    sources = (
        deduplicate_articles(articles)
        if dedupe
        else [as_article(article) for article in articles]
    )
    entries = [
        ReferenceEntry(
            number=number,
            style=resolved,
            formatted=format_citation(article, resolved),
            article=article,
        )
        for number, article in enumerate(sources, start=1)
    ]
    logger.debug("Built %s reference list with %d entries", resolved.value, len(entries))
    return entries


def load_articles(path: Path) -> list[Article]:
    """Read a JSON file holding a list of article records.

    Raises:
        ArticleLoadError: if the file cannot be read or parsed, is not a JSON
            list, or a record fails validation.
    """
    source = str(path)
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise ArticleLoadError(source, f"cannot read file: {e}") from e
    except json.JSONDecodeError as e:
        raise ArticleLoadError(source, f"invalid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ArticleLoadError(source, f"file is not valid UTF-8: {e}") from e

    if not isinstance(payload, list):
        raise ArticleLoadError(
            source, f"expected a JSON list of articles, got {type(payload).__name__}"
        )

    articles: list[Article] = []
    for index, record in enumerate(payload):
        try:
            articles.append(Article.model_validate(record))
        except ValidationError as e:
            raise ArticleLoadError(source, f"record {index} is invalid: {e}") from e

    logger.info("Loaded %d articles from %s", len(articles), source)
    return articles
