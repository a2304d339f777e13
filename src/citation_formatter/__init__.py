"""Bibliographic citation formatting (GOST, APA, Vancouver)."""

from citation_formatter.formatters import (
    format_apa,
    format_citation,
    format_gost,
    format_vancouver,
)
from citation_formatter.models import Article, CitationStyle, ReferenceEntry
from citation_formatter.services.bibliography import (
    build_reference_list,
    dedupe_key,
    deduplicate_articles,
    format_bibliography,
    load_articles,
)

__all__ = [
    "Article",
    "CitationStyle",
    "ReferenceEntry",
    "build_reference_list",
    "dedupe_key",
    "deduplicate_articles",
    "format_apa",
    "format_bibliography",
    "format_citation",
    "format_gost",
    "format_vancouver",
    "load_articles",
]
