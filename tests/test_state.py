"""Tests for application state updates."""

import pytest

from newstracker.data import Article, SearchFilters, SearchOutcome, SentimentFilter
from newstracker.errors import (
    EmptyResultError,
    ErrorKind,
    InvalidCredentialError,
    MissingCredentialError,
)
from newstracker.search.normalize import fallback_article
from newstracker.state import (
    DEFAULT_SAVED_QUERIES,
    AddSavedQuery,
    AppState,
    CredentialSaved,
    OpenSettings,
    RemoveSavedQuery,
    SearchFinished,
    SearchStarted,
    SetFilters,
    SetQuery,
    SwitchView,
    ToggleBookmark,
    View,
    add_saved_query,
    is_bookmarked,
    reduce,
    remove_saved_query,
    toggle_bookmark,
)


def _article(article_id: str = "42", title: str = "Title") -> Article:
    return Article(id=article_id, title=title, url="https://example.com/a", source="Example")


def test_initial_state() -> None:
    state = AppState()
    assert state.results == ()
    assert state.bookmarks == ()
    assert state.saved_queries == DEFAULT_SAVED_QUERIES
    assert state.active_view == View.SEARCH
    assert not state.loading
    assert state.error == ""


# -- Saved queries --


class TestSavedQueries:
    """Tests for saved query updates."""

    def test_add_appends(self) -> None:
        state = add_saved_query(AppState(), "AI technology")
        assert state.saved_queries == (*DEFAULT_SAVED_QUERIES, "AI technology")

    def test_add_then_remove_restores(self) -> None:
        before = AppState()
        after = remove_saved_query(add_saved_query(before, "AI technology"), "AI technology")
        assert after.saved_queries == before.saved_queries

    def test_add_trims(self) -> None:
        state = add_saved_query(AppState(saved_queries=()), "  climate  ")
        assert state.saved_queries == ("climate",)

    def test_duplicate_is_ignored(self) -> None:
        state = AppState()
        assert add_saved_query(state, "Ukraine war") is state
        assert add_saved_query(state, "  Ukraine war ") is state

    def test_duplicates_are_case_sensitive(self) -> None:
        state = add_saved_query(AppState(), "ukraine war")
        assert state.saved_queries[-1] == "ukraine war"
        assert len(state.saved_queries) == len(DEFAULT_SAVED_QUERIES) + 1

    @pytest.mark.parametrize("text", ["", "   ", "\t"])
    def test_blank_is_ignored(self, text: str) -> None:
        state = AppState()
        assert add_saved_query(state, text) is state

    def test_remove_missing_is_noop(self) -> None:
        state = AppState()
        assert remove_saved_query(state, "not saved") is state

    def test_remove_keeps_order(self) -> None:
        state = remove_saved_query(AppState(), "Iran nuclear talks")
        assert state.saved_queries == (
            "Trump Iran Israel",
            "Middle East conflict",
            "Gaza ceasefire",
            "Ukraine war",
        )


# -- Bookmarks --


class TestBookmarks:
    """Tests for bookmark toggling."""

    def test_toggle_adds(self) -> None:
        state = toggle_bookmark(AppState(), _article())
        assert is_bookmarked(state, "42")
        assert state.bookmarks == (_article(),)

    def test_toggle_twice_restores(self) -> None:
        before = AppState(bookmarks=(_article("1"),))
        after = toggle_bookmark(toggle_bookmark(before, _article()), _article())
        assert after.bookmarks == before.bookmarks

    def test_toggle_matches_on_id(self) -> None:
        state = toggle_bookmark(AppState(), _article("42", title="Old title"))
        state = toggle_bookmark(state, _article("42", title="New title"))
        assert state.bookmarks == ()

    def test_bookmark_is_snapshot(self) -> None:
        article = _article()
        state = AppState(results=(article,))
        state = toggle_bookmark(state, article)
        state = reduce(state, SearchFinished(SearchOutcome(query="q", articles=())))
        assert state.results == ()
        assert state.bookmarks == (article,)

    def test_is_bookmarked_false(self) -> None:
        assert not is_bookmarked(AppState(), "42")


# -- Search lifecycle --


class TestSearchLifecycle:
    """Tests for applying search outcomes."""

    def test_started_sets_loading_and_clears_error(self) -> None:
        state = AppState(error="old", error_kind=ErrorKind.RATE_LIMITED)
        state = reduce(state, SearchStarted("Ukraine war"))
        assert state.loading
        assert state.error == ""
        assert state.error_kind is None
        assert state.query == "Ukraine war"

    def test_success_replaces_results(self) -> None:
        state = AppState(results=(_article("old"),), loading=True)
        new = (_article("1"), _article("2"))
        state = reduce(state, SearchFinished(SearchOutcome(query="q", articles=new)))
        assert state.results == new
        assert not state.loading
        assert state.error == ""

    def test_empty_result_keeps_results(self) -> None:
        old = (_article("old"),)
        state = AppState(results=old, loading=True)
        outcome = SearchOutcome(query="q", error=EmptyResultError())
        state = reduce(state, SearchFinished(outcome))
        assert state.results == old
        assert state.error_kind == ErrorKind.EMPTY_RESULT
        assert state.error.startswith("No articles found")

    def test_failure_sets_fallback_and_error(self) -> None:
        state = AppState(results=(_article("old"),), loading=True)
        fallback = fallback_article("q", ErrorKind.INVALID_CREDENTIAL)
        outcome = SearchOutcome(query="q", articles=(fallback,), error=InvalidCredentialError())
        state = reduce(state, SearchFinished(outcome))
        assert state.results == (fallback,)
        assert state.error_kind == ErrorKind.INVALID_CREDENTIAL
        assert not state.loading

    def test_missing_credential_opens_setup(self) -> None:
        state = AppState(loading=True)
        outcome = SearchOutcome(query="q", error=MissingCredentialError())
        state = reduce(state, SearchFinished(outcome))
        assert state.active_view == View.CREDENTIAL_SETUP
        assert state.error_kind == ErrorKind.MISSING_CREDENTIAL
        assert state.results == ()


# -- Views --


class TestViews:
    """Tests for view switching and credential setup."""

    @pytest.mark.parametrize("view", [View.SEARCH, View.SAVED_QUERIES, View.BOOKMARKS])
    def test_switch_view(self, view: View) -> None:
        state = reduce(AppState(), SwitchView(view))
        assert state.active_view == view

    def test_results_survive_tab_switches(self) -> None:
        state = AppState(results=(_article(),))
        state = reduce(state, SwitchView(View.BOOKMARKS))
        state = reduce(state, SwitchView(View.SEARCH))
        assert state.results == (_article(),)

    def test_setup_overlays_current_tab(self) -> None:
        state = reduce(AppState(), SwitchView(View.BOOKMARKS))
        state = reduce(state, OpenSettings())
        assert state.active_view == View.CREDENTIAL_SETUP
        state = reduce(state, CredentialSaved())
        assert state.active_view == View.BOOKMARKS

    def test_switch_to_setup_opens_settings(self) -> None:
        state = reduce(AppState(), SwitchView(View.CREDENTIAL_SETUP))
        assert state.setup_open
        assert state.tab == View.SEARCH

    def test_credential_saved_clears_error(self) -> None:
        state = AppState(setup_open=True, error="x", error_kind=ErrorKind.MISSING_CREDENTIAL)
        state = reduce(state, CredentialSaved())
        assert not state.setup_open
        assert state.error == ""
        assert state.error_kind is None


def test_reduce_simple_actions() -> None:
    state = reduce(AppState(), SetQuery("gaza"))
    assert state.query == "gaza"

    filters = SearchFilters(language="de", sentiment=SentimentFilter.NEGATIVE)
    state = reduce(state, SetFilters(filters))
    assert state.filters == filters

    state = reduce(state, AddSavedQuery("gaza"))
    assert state.saved_queries[-1] == "gaza"
    state = reduce(state, RemoveSavedQuery("gaza"))
    assert "gaza" not in state.saved_queries

    state = reduce(state, ToggleBookmark(_article()))
    assert is_bookmarked(state, "42")


def test_reduce_unknown_action() -> None:
    with pytest.raises(ValueError, match="Unknown action type"):
        reduce(AppState(), object())  # type: ignore[arg-type]


def test_updates_do_not_mutate() -> None:
    state = AppState()
    add_saved_query(state, "new")
    toggle_bookmark(state, _article())
    assert state == AppState()
