"""Data models for citation_formatter."""

from citation_formatter.models.article import Article
from citation_formatter.models.citation_style import CitationStyle
from citation_formatter.models.reference import ReferenceEntry

__all__ = ["Article", "CitationStyle", "ReferenceEntry"]
