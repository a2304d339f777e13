"""
Pydantic model for an article record.

This is the data contract between callers and the formatters. Formatters
receive these models and return strings; they never mutate them.
"""

from pydantic import BaseModel, ConfigDict, field_validator

_OPTIONAL_TEXT_FIELDS = (
    "title_ru",
    "journal",
    "volume",
    "issue",
    "pages",
    "doi",
    "pmid",
    "publisher",
)


class Article(BaseModel):
    """A scientific article as handed to the citation formatters."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title_en: str  # primary title; always rendered
    title_ru: str | None = None  # alternate title; never rendered
    authors: tuple[str, ...] | None = None  # "Last First [Middle]"
    journal: str | None = None
    year: int | None = None
    volume: str | None = None
    issue: str | None = None
    pages: str | None = None  # already formatted range, e.g. "125-140"
    doi: str | None = None
    pmid: str | None = None  # accepted, never rendered
    publisher: str | None = None  # accepted, never rendered

    @field_validator(*_OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def coerce_optional_text(cls, value):
        # Numbers become text; blank strings mean "absent".
        if value is None:
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("authors", mode="before")
    @classmethod
    def drop_blank_authors(cls, value):
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return tuple(name for name in value if not isinstance(name, str) or name.strip())
        return value
