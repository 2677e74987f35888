"""View controller tying user actions to the executor and state updates."""

import logging
from dataclasses import replace

from newstracker.credentials import CredentialStore
from newstracker.data import Article, SearchFilters, SearchOutcome
from newstracker.executor import QueryExecutor
from newstracker.state import (
    DEFAULT_SAVED_QUERIES,
    Action,
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
    is_bookmarked,
    reduce,
)

logger = logging.getLogger(__name__)


class NewsTracker:
    """Owns the application state and dispatches user actions.

    Only one search runs at a time: a search requested while another is
    loading is ignored.

    Args:
        credentials: API key store.
        executor: Runs searches.
        saved_queries: Initial saved query list.
        filters: Initial filter selections.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        executor: QueryExecutor,
        *,
        saved_queries: tuple[str, ...] | list[str] = DEFAULT_SAVED_QUERIES,
        filters: SearchFilters | None = None,
    ) -> None:
        self._credentials = credentials
        self._executor = executor
        state = AppState(filters=filters or SearchFilters(), saved_queries=())
        for text in saved_queries:
            state = reduce(state, AddSavedQuery(text))
        if not credentials.get():
            state = reduce(state, OpenSettings())
        self._state = state

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def key_from_environment(self) -> bool:
        """True when a build-time key takes precedence over any typed key."""
        return self._credentials.has_build_value

    def dispatch(self, action: Action) -> AppState:
        self._state = reduce(self._state, action)
        return self._state

    # -- Search --

    async def search(self, query: str | None = None) -> AppState:
        """Search for ``query``, or the current query field when omitted."""
        if self._state.loading:
            logger.warning(f"Ignoring search for {query!r}: another search is in progress")
            return self._state
        if query is None:
            query = self._state.query
        else:
            self.dispatch(SetQuery(query))
        if not query.strip():
            return self._state

        self.dispatch(SearchStarted(query))
        outcome = SearchOutcome(query=query.strip())
        try:
            outcome = await self._executor.search(query, self._state.filters)
        finally:
            self.dispatch(SearchFinished(outcome))
        return self._state

    async def run_saved_query(self, text: str) -> AppState:
        """Re-run a saved query from the search view."""
        self.dispatch(SwitchView(View.SEARCH))
        return await self.search(text)

    def set_filters(self, **changes: object) -> AppState:
        """Update one or more filter fields, e.g. ``set_filters(language="de")``."""
        return self.dispatch(SetFilters(replace(self._state.filters, **changes)))

    # -- Saved queries --

    def add_saved_query(self, text: str) -> AppState:
        return self.dispatch(AddSavedQuery(text))

    def remove_saved_query(self, text: str) -> AppState:
        return self.dispatch(RemoveSavedQuery(text))

    # -- Bookmarks --

    def toggle_bookmark(self, article: Article) -> AppState:
        return self.dispatch(ToggleBookmark(article))

    def is_bookmarked(self, article_id: str) -> bool:
        return is_bookmarked(self._state, article_id)

    # -- Views and settings --

    def switch_view(self, view: View) -> AppState:
        return self.dispatch(SwitchView(view))

    def open_settings(self) -> AppState:
        return self.dispatch(OpenSettings())

    def save_api_key(self, key: str) -> bool:
        """Store a user-entered key and close the setup view on success."""
        if not self._credentials.set(key):
            return False
        self.dispatch(CredentialSaved())
        return True
