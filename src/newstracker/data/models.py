"""Core data models for the news tracker."""

from dataclasses import dataclass
from enum import StrEnum

from newstracker.errors import ErrorKind, SearchError


class SentimentFilter(StrEnum):
    """Sentiment restriction applied to a search."""

    ANY = ""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class SortOrder(StrEnum):
    """Result ordering understood by the World News API."""

    PUBLISH_TIME = "publish-time"
    RELEVANCE = "relevance"


@dataclass(frozen=True)
class SearchFilters:
    """Filter selections sent alongside a query.

    ``language`` is an ISO 639-1 code, ``source_country`` an ISO 3166-1 code
    or empty for all countries.
    """

    language: str = "en"
    source_country: str = ""
    sentiment: SentimentFilter = SentimentFilter.ANY
    sort_by: SortOrder = SortOrder.PUBLISH_TIME


@dataclass(frozen=True)
class Article:
    """A news article normalized from an API record."""

    id: str
    title: str
    url: str
    source: str
    summary: str = ""
    published_at: str | None = None
    image_url: str | None = None
    sentiment: float | None = None

    @property
    def is_fallback(self) -> bool:
        return False


@dataclass(frozen=True)
class FallbackArticle(Article):
    """Placeholder shown in place of results when a search fails.

    Keeps the result view populated in degraded mode while staying
    distinguishable from genuine API data.
    """

    error_kind: ErrorKind = ErrorKind.API_ERROR

    @property
    def is_fallback(self) -> bool:
        return True


@dataclass(frozen=True)
class SearchOutcome:
    """What a single search produced.

    ``articles`` is None when the Result Set must stay untouched (rejected
    query, missing credential, empty result).
    """

    query: str
    articles: tuple[Article, ...] | None = None
    error: SearchError | None = None

    @property
    def degraded(self) -> bool:
        return bool(self.articles) and all(a.is_fallback for a in self.articles)
