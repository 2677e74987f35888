"""Tests for text rendering."""

from datetime import UTC, datetime

import pytest

from newstracker.data import Article
from newstracker.errors import ErrorKind
from newstracker.render import format_time, render, render_article, render_tabs, sentiment_label
from newstracker.search.normalize import fallback_article, normalize_response
from newstracker.state import AppState, View

NOW = datetime(2026, 2, 1, 12, 0, tzinfo=UTC)


def _article(**overrides: object) -> Article:
    fields: dict = {
        "id": "1",
        "title": "Ceasefire talks resume",
        "url": "https://example.com/a",
        "source": "Example News",
        "summary": "Negotiators met again.",
        "published_at": "2026-02-01T11:30:00Z",
        "sentiment": 0.4,
    }
    fields.update(overrides)
    return Article(**fields)


class TestFormatTime:
    """Tests for relative time formatting."""

    def test_minutes(self) -> None:
        assert format_time("2026-02-01T11:55:00Z", NOW) == "5m ago"

    def test_hours(self) -> None:
        assert format_time("2026-02-01T09:00:00+00:00", NOW) == "3h ago"

    def test_older_than_a_day(self) -> None:
        assert format_time("2026-01-20T09:00:00Z", NOW) == "2026-01-20"

    def test_naive_timestamp_is_utc(self) -> None:
        assert format_time("2026-02-01 11:00:00", NOW) == "1h ago"

    @pytest.mark.parametrize("value", [None, "", "yesterday"])
    def test_unparseable(self, value: str | None) -> None:
        assert format_time(value, NOW) == ""


@pytest.mark.parametrize(
    ("score", "label"),
    [
        (None, ""),
        (0, ""),
        (0.5, "Positive"),
        (0.1, "Neutral"),
        (0.05, "Neutral"),
        (-0.1, "Neutral"),
        (-0.6, "Negative"),
    ],
)
def test_sentiment_label(score: float | None, label: str) -> None:
    assert sentiment_label(score) == label


def test_render_article() -> None:
    text = render_article(_article(), index=1, bookmarked=True, now=NOW)
    assert " 1. [*] Ceasefire talks resume" in text
    assert "Negotiators met again." in text
    assert "Example News | 30m ago | Positive" in text
    assert "https://example.com/a" in text


def test_render_fallback_article_is_marked() -> None:
    text = render_article(fallback_article("q", ErrorKind.TRANSPORT_FAILURE), now=NOW)
    assert "demo data" in text


def test_render_string_sentiment_from_response() -> None:
    articles = normalize_response(
        {"news": [{"id": 1, "title": "T", "url": "https://a.com/x", "sentiment": "0.5"}]}
    )
    text = render(AppState(results=tuple(articles)), NOW)
    assert "a.com | Positive" in text


def test_render_tabs_counts() -> None:
    state = AppState(results=(_article(),), bookmarks=(), tab=View.BOOKMARKS)
    tabs = render_tabs(state)
    assert "Live News (1)" in tabs
    assert "[Bookmarks (0)]" in tabs


class TestRender:
    """Tests for whole-view rendering."""

    def test_empty_search_view(self) -> None:
        assert "Search Live News" in render(AppState(), NOW)

    def test_search_results(self) -> None:
        state = AppState(results=(_article(), _article(id="2", title="Second")))
        text = render(state, NOW)
        assert "Live News Results" in text
        assert " 2. [ ] Second" in text

    def test_bookmarked_marker_in_results(self) -> None:
        article = _article()
        text = render(AppState(results=(article,), bookmarks=(article,)), NOW)
        assert "[*] Ceasefire talks resume" in text

    def test_error_banner(self) -> None:
        text = render(AppState(error="Rate limit exceeded."), NOW)
        assert "! Rate limit exceeded." in text

    def test_loading(self) -> None:
        assert "Searching..." in render(AppState(loading=True), NOW)

    def test_saved_view(self) -> None:
        text = render(AppState(tab=View.SAVED_QUERIES), NOW)
        assert "Saved Searches" in text
        assert " 1. Trump Iran Israel" in text

    def test_empty_bookmarks(self) -> None:
        assert "No Bookmarks Yet" in render(AppState(tab=View.BOOKMARKS), NOW)

    def test_bookmarks(self) -> None:
        text = render(AppState(tab=View.BOOKMARKS, bookmarks=(_article(),)), NOW)
        assert "Bookmarked Articles" in text

    def test_setup(self) -> None:
        text = render(AppState(setup_open=True, error="Please enter your key"), NOW)
        assert "Setup World News API" in text
        assert "Please enter your key" in text
        assert "Live News" not in text
