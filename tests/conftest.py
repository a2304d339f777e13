"""Pytest configuration and fixtures."""

import pytest

from citation_formatter.models.article import Article


@pytest.fixture
def sample_record() -> dict:
    """Sample article record as it arrives from upstream."""
    return {
        "title_en": "Effect of Metformin on Glycemic Control in Type 2 Diabetes",
        "title_ru": "Влияние метформина на гликемический контроль при СД 2 типа",
        "authors": ["Smith John", "Johnson Mary", "Williams Robert"],
        "journal": "Journal of Clinical Investigation",
        "year": 2024,
        "volume": "15",
        "issue": "3",
        "pages": "125-140",
        "doi": "10.1234/jci.2024.001",
        "pmid": "12345678",
    }


@pytest.fixture
def sample_article(sample_record: dict) -> Article:
    """Sample article model with every field populated."""
    return Article(**sample_record)


@pytest.fixture
def short_articles() -> list[Article]:
    """Three minimal articles for reference-list tests."""
    return [
        Article(title_en="First Article", authors=["Author A"], year=2024),
        Article(title_en="Second Article", authors=["Author B"], year=2023),
        Article(title_en="Third Article", authors=["Author C"], year=2022),
    ]
