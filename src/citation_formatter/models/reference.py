"""Pydantic model for one numbered entry of an exported reference list."""

from pydantic import BaseModel, ConfigDict

from citation_formatter.models.article import Article
from citation_formatter.models.citation_style import CitationStyle


class ReferenceEntry(BaseModel):
    """A formatted source together with its position in the reference list."""

    model_config = ConfigDict(frozen=True)

    number: int  # 1-based, compact
    style: CitationStyle
    formatted: str  # citation text without the number prefix
    article: Article

    @property
    def numbered(self) -> str:
        return f"{self.number}. {self.formatted}"
