"""Data models for the news tracker."""

from newstracker.data.models import (
    Article,
    FallbackArticle,
    SearchFilters,
    SearchOutcome,
    SentimentFilter,
    SortOrder,
)

__all__ = [
    "Article",
    "FallbackArticle",
    "SearchFilters",
    "SearchOutcome",
    "SentimentFilter",
    "SortOrder",
]
