"""Mapping raw World News API records into articles."""

from datetime import UTC, datetime
from typing import Any

from newstracker.data import Article, FallbackArticle
from newstracker.errors import ErrorKind
from newstracker.search.url import extract_host

SUMMARY_LENGTH = 200
PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x200/4F46E5/white?text=Demo+News"


def normalize_article(item: dict[str, Any], index: int) -> Article:
    """Normalize one record of the ``news`` array.

    Text fields that are missing or not strings become empty, and a
    sentiment that is not a number becomes None.

    Args:
        item: Raw article record from the API response.
        index: Position of the record, used as id when the record has none.

    Returns:
        The normalized article.
    """
    url = _text(item.get("url"))
    return Article(
        id=str(item.get("id") or index),
        title=_text(item.get("title")),
        url=url,
        source=_text(item.get("author")) or extract_host(url),
        summary=_text(item.get("summary")) or _summarize(_text(item.get("text"))),
        published_at=_text(item.get("publish_date")) or None,
        image_url=_text(item.get("image")) or None,
        sentiment=_score(item.get("sentiment")),
    )


def normalize_response(data: Any) -> list[Article]:
    """Normalize every record of a search response body.

    Raises:
        ValueError: If ``news`` is present but is not a list.
    """
    if not isinstance(data, dict):
        return []
    news = data.get("news") or []
    if not isinstance(news, list):
        raise ValueError(f"Expected 'news' to be a list, got {type(news).__name__}")
    return [normalize_article(item, i) for i, item in enumerate(news) if isinstance(item, dict)]


def fallback_article(query: str, kind: ErrorKind, *, now: datetime | None = None) -> FallbackArticle:
    """Build the placeholder article shown after a failed search."""
    now = now or datetime.now(tz=UTC)
    return FallbackArticle(
        id="demo-1",
        title=f"Breaking: Latest developments on {query}",
        url="#",
        source="Demo Source",
        summary=(
            f"Recent updates and analysis regarding {query}. "
            "This is demo data - live news is unavailable right now."
        ),
        published_at=now.isoformat(),
        image_url=PLACEHOLDER_IMAGE,
        sentiment=0.1,
        error_kind=kind,
    )


def _summarize(text: str) -> str:
    if not text:
        return ""
    return text[:SUMMARY_LENGTH] + "..."


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _score(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        return None
    try:
        return float(value)
    except ValueError:
        return None
