"""Plain-text rendering of the application views."""

from datetime import UTC, datetime

from newstracker.data import Article
from newstracker.state import AppState, View, is_bookmarked

SENTIMENT_THRESHOLD = 0.1
RULE = "-" * 72


def format_time(published_at: str | None, now: datetime | None = None) -> str:
    """Describe a publish time relative to now.

    Returns "<n>m ago" under an hour, "<n>h ago" under a day and the
    calendar date otherwise. Unparseable input gives an empty string.
    """
    if not published_at:
        return ""
    try:
        date = datetime.fromisoformat(published_at.replace("Z", "+00:00"))
    except ValueError:
        return ""
    if date.tzinfo is None:
        date = date.replace(tzinfo=UTC)
    now = now or datetime.now(tz=UTC)

    minutes = int((now - date).total_seconds() // 60)
    hours = minutes // 60
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    return date.date().isoformat()


def sentiment_label(sentiment: float | None) -> str:
    """Label a sentiment score; missing or zero scores have no label."""
    if not sentiment:
        return ""
    if sentiment > SENTIMENT_THRESHOLD:
        return "Positive"
    if sentiment < -SENTIMENT_THRESHOLD:
        return "Negative"
    return "Neutral"


def render_article(
    article: Article,
    *,
    index: int | None = None,
    bookmarked: bool = False,
    now: datetime | None = None,
) -> str:
    marker = "*" if bookmarked else " "
    prefix = f"{index:>2}. " if index is not None else ""
    lines = [f"{prefix}[{marker}] {article.title}"]
    if article.is_fallback:
        lines.append("    (demo data: live results unavailable)")
    if article.summary:
        lines.append(f"    {article.summary}")

    meta = [article.source]
    when = format_time(article.published_at, now)
    if when:
        meta.append(when)
    label = sentiment_label(article.sentiment)
    if label:
        meta.append(label)
    lines.append("    " + " | ".join(meta))
    lines.append(f"    {article.url}")
    return "\n".join(lines)


def render_tabs(state: AppState) -> str:
    tabs = [
        (View.SEARCH, f"Live News ({len(state.results)})"),
        (View.SAVED_QUERIES, "Saved Searches"),
        (View.BOOKMARKS, f"Bookmarks ({len(state.bookmarks)})"),
    ]
    return "  ".join(f"[{label}]" if view == state.tab else f" {label} " for view, label in tabs)


def render(state: AppState, now: datetime | None = None) -> str:
    """Render the active view of ``state`` as text."""
    view = state.active_view
    if view == View.CREDENTIAL_SETUP:
        return _render_setup(state)

    parts = [render_tabs(state), RULE]
    if state.loading:
        parts.append("Searching...")
    if state.error:
        parts.append(f"! {state.error}")

    if view == View.SEARCH:
        parts.append(_render_search(state, now))
    elif view == View.SAVED_QUERIES:
        parts.append(_render_saved(state))
    else:
        parts.append(_render_bookmarks(state, now))
    return "\n".join(parts)


def _render_setup(state: AppState) -> str:
    lines = [
        "Setup World News API",
        "Enter your API key with /key <value>. Get a free key at https://worldnewsapi.com",
    ]
    if state.error:
        lines.append(f"! {state.error}")
    return "\n".join(lines)


def _render_search(state: AppState, now: datetime | None) -> str:
    if not state.results:
        return (
            "Search Live News\n"
            "Type a search term to find real-time news articles from around the world.\n"
            'Try searching: "Trump Iran Israel" or "Middle East conflict"'
        )
    cards = [
        render_article(a, index=i, bookmarked=is_bookmarked(state, a.id), now=now)
        for i, a in enumerate(state.results, 1)
    ]
    return "Live News Results\n\n" + "\n\n".join(cards)


def _render_saved(state: AppState) -> str:
    lines = ["Saved Searches"]
    lines.extend(f"{i:>2}. {q}" for i, q in enumerate(state.saved_queries, 1))
    return "\n".join(lines)


def _render_bookmarks(state: AppState, now: datetime | None) -> str:
    if not state.bookmarks:
        return "No Bookmarks Yet\nStar articles to bookmark them for later reading."
    cards = [
        render_article(a, index=i, bookmarked=True, now=now)
        for i, a in enumerate(state.bookmarks, 1)
    ]
    return "Bookmarked Articles\n\n" + "\n\n".join(cards)
