"""Exceptions raised at the edges of the formatter (loading input records)."""


class ArticleLoadError(Exception):
    """Raised when article records cannot be read or validated."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"[{source}] {message}")
