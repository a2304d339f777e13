"""Unit tests for the Article model."""

import pytest
from pydantic import ValidationError

from citation_formatter.models.article import Article


class TestArticle:
    """Tests for Article model."""

    def test_article_all_fields(self, sample_record):
        """Article should accept all fields with valid values."""
        article = Article(**sample_record, publisher="JCI Press")

        assert article.title_en == "Effect of Metformin on Glycemic Control in Type 2 Diabetes"
        assert article.authors == ("Smith John", "Johnson Mary", "Williams Robert")
        assert article.journal == "Journal of Clinical Investigation"
        assert article.year == 2024
        assert article.volume == "15"
        assert article.issue == "3"
        assert article.pages == "125-140"
        assert article.doi == "10.1234/jci.2024.001"
        assert article.pmid == "12345678"
        assert article.publisher == "JCI Press"

    def test_article_optional_fields_default_to_none(self):
        article = Article(title_en="Only A Title")

        assert article.title_ru is None
        assert article.authors is None
        assert article.journal is None
        assert article.year is None
        assert article.volume is None
        assert article.issue is None
        assert article.pages is None
        assert article.doi is None
        assert article.pmid is None
        assert article.publisher is None

    def test_article_requires_title(self):
        with pytest.raises(ValidationError):
            Article(journal="J Test Med")

    def test_article_is_frozen(self, sample_article):
        with pytest.raises(ValidationError):
            sample_article.journal = "Other Journal"

    def test_article_structural_equality(self, sample_record):
        assert Article(**sample_record) == Article(**sample_record)

    @pytest.mark.parametrize("field", ["journal", "volume", "issue", "pages", "doi", "pmid"])
    def test_blank_text_becomes_none(self, field):
        article = Article(title_en="T", **{field: "   "})
        assert getattr(article, field) is None

    def test_numeric_volume_issue_pmid_coerced_to_text(self):
        article = Article(title_en="T", volume=15, issue=3, pmid=12345678)

        assert article.volume == "15"
        assert article.issue == "3"
        assert article.pmid == "12345678"

    def test_blank_author_entries_dropped(self):
        article = Article(title_en="T", authors=["Smith John", "  ", ""])
        assert article.authors == ("Smith John",)

    def test_unknown_keys_ignored(self):
        article = Article.model_validate(
            {"title_en": "T", "id": "a1b2", "created_at": "2024-01-01"}
        )
        assert article == Article(title_en="T")
