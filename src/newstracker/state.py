"""Application state and the pure functions that update it.

Every update takes the current ``AppState`` and returns a new one; nothing
is mutated in place. ``reduce`` dispatches action objects to these
functions.
"""

from dataclasses import dataclass, replace
from enum import StrEnum

from newstracker.data import Article, SearchFilters, SearchOutcome
from newstracker.errors import ErrorKind

DEFAULT_SAVED_QUERIES: tuple[str, ...] = (
    "Trump Iran Israel",
    "Middle East conflict",
    "Iran nuclear talks",
    "Gaza ceasefire",
    "Ukraine war",
)


class View(StrEnum):
    """What the user is looking at."""

    SEARCH = "search"
    SAVED_QUERIES = "saved"
    BOOKMARKS = "bookmarks"
    CREDENTIAL_SETUP = "setup"


@dataclass(frozen=True)
class AppState:
    """Everything the view controller renders from."""

    query: str = ""
    filters: SearchFilters = SearchFilters()
    tab: View = View.SEARCH
    setup_open: bool = False
    results: tuple[Article, ...] = ()
    saved_queries: tuple[str, ...] = DEFAULT_SAVED_QUERIES
    bookmarks: tuple[Article, ...] = ()
    loading: bool = False
    error: str = ""
    error_kind: ErrorKind | None = None

    @property
    def active_view(self) -> View:
        return View.CREDENTIAL_SETUP if self.setup_open else self.tab


# -- Actions --


@dataclass(frozen=True)
class SetQuery:
    text: str


@dataclass(frozen=True)
class SetFilters:
    filters: SearchFilters


@dataclass(frozen=True)
class SwitchView:
    view: View


@dataclass(frozen=True)
class OpenSettings:
    pass


@dataclass(frozen=True)
class CredentialSaved:
    pass


@dataclass(frozen=True)
class AddSavedQuery:
    text: str


@dataclass(frozen=True)
class RemoveSavedQuery:
    text: str


@dataclass(frozen=True)
class ToggleBookmark:
    article: Article


@dataclass(frozen=True)
class SearchStarted:
    query: str


@dataclass(frozen=True)
class SearchFinished:
    outcome: SearchOutcome


Action = (
    SetQuery
    | SetFilters
    | SwitchView
    | OpenSettings
    | CredentialSaved
    | AddSavedQuery
    | RemoveSavedQuery
    | ToggleBookmark
    | SearchStarted
    | SearchFinished
)


# -- Saved queries --


def add_saved_query(state: AppState, text: str) -> AppState:
    """Append a query unless it is blank or already saved."""
    text = text.strip()
    if not text or text in state.saved_queries:
        return state
    return replace(state, saved_queries=(*state.saved_queries, text))


def remove_saved_query(state: AppState, text: str) -> AppState:
    if text not in state.saved_queries:
        return state
    return replace(state, saved_queries=tuple(q for q in state.saved_queries if q != text))


# -- Bookmarks --


def is_bookmarked(state: AppState, article_id: str) -> bool:
    return any(a.id == article_id for a in state.bookmarks)


def toggle_bookmark(state: AppState, article: Article) -> AppState:
    """Star an article, or unstar it if one with the same id is starred."""
    if is_bookmarked(state, article.id):
        return replace(state, bookmarks=tuple(a for a in state.bookmarks if a.id != article.id))
    return replace(state, bookmarks=(*state.bookmarks, article))


# -- Views --


def switch_view(state: AppState, view: View) -> AppState:
    if view == View.CREDENTIAL_SETUP:
        return open_settings(state)
    return replace(state, tab=view)


def open_settings(state: AppState) -> AppState:
    return replace(state, setup_open=True)


def credential_saved(state: AppState) -> AppState:
    return replace(state, setup_open=False, error="", error_kind=None)


# -- Search lifecycle --


def search_started(state: AppState, query: str) -> AppState:
    return replace(state, query=query, loading=True, error="", error_kind=None)


def search_finished(state: AppState, outcome: SearchOutcome) -> AppState:
    """Apply a search outcome.

    Results are replaced wholesale when the outcome carries articles and
    left alone otherwise.
    """
    state = replace(state, loading=False)
    if outcome.articles is not None:
        state = replace(state, results=outcome.articles)
    if outcome.error is not None:
        state = replace(state, error=outcome.error.message, error_kind=outcome.error.kind)
        if outcome.error.kind == ErrorKind.MISSING_CREDENTIAL:
            state = open_settings(state)
    return state


def reduce(state: AppState, action: Action) -> AppState:
    """Return the state that results from applying ``action``."""
    if isinstance(action, SetQuery):
        return replace(state, query=action.text)
    if isinstance(action, SetFilters):
        return replace(state, filters=action.filters)
    if isinstance(action, SwitchView):
        return switch_view(state, action.view)
    if isinstance(action, OpenSettings):
        return open_settings(state)
    if isinstance(action, CredentialSaved):
        return credential_saved(state)
    if isinstance(action, AddSavedQuery):
        return add_saved_query(state, action.text)
    if isinstance(action, RemoveSavedQuery):
        return remove_saved_query(state, action.text)
    if isinstance(action, ToggleBookmark):
        return toggle_bookmark(state, action.article)
    if isinstance(action, SearchStarted):
        return search_started(state, action.query)
    if isinstance(action, SearchFinished):
        return search_finished(state, action.outcome)
    msg = f"Unknown action type: {type(action)}"
    raise ValueError(msg)
