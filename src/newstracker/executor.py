"""Query execution: credential check, search call, and failure handling."""

import logging

from newstracker.credentials import CredentialStore
from newstracker.data import SearchFilters, SearchOutcome
from newstracker.errors import ApiError, EmptyResultError, MissingCredentialError, SearchError
from newstracker.search.base import NewsSearcher
from newstracker.search.normalize import fallback_article

logger = logging.getLogger(__name__)


class QueryExecutor:
    """Runs a search and turns every result into a ``SearchOutcome``.

    No exception escapes ``search``: failures are reported through
    ``SearchOutcome.error``. A failed call (transport or API error) also
    yields a single fallback article so the result view is never blank.

    Args:
        credentials: Source of the API key.
        searcher: Client performing the HTTP search.
    """

    def __init__(self, credentials: CredentialStore, searcher: NewsSearcher) -> None:
        self._credentials = credentials
        self._searcher = searcher

    async def search(self, query: str, filters: SearchFilters) -> SearchOutcome:
        """Search for articles.

        Args:
            query: Search text as typed by the user.
            filters: Filter selections for the request.

        Returns:
            The outcome. ``articles`` is None when the Result Set must be
            left unchanged.
        """
        query = query.strip()
        if not query:
            return SearchOutcome(query=query)

        api_key = self._credentials.get()
        if not api_key:
            logger.info("Search skipped: no API key configured")
            return SearchOutcome(query=query, error=MissingCredentialError())

        logger.info(f"Searching news for: {query}")
        try:
            articles = await self._searcher.search(api_key, query, filters)
        except SearchError as e:
            logger.warning(f"Search for {query!r} failed ({e.kind}): {e.message}")
            return _failed(query, e)
        except Exception as e:
            logger.exception(f"Unexpected failure searching for {query!r}: {e}")
            return _failed(query, ApiError(f"API Error: {e}"))

        if not articles:
            logger.info(f"No articles found for: {query}")
            return SearchOutcome(query=query, error=EmptyResultError())

        logger.info(f"Found {len(articles)} articles for: {query}")
        return SearchOutcome(query=query, articles=tuple(articles))


def _failed(query: str, error: SearchError) -> SearchOutcome:
    return SearchOutcome(query=query, articles=(fallback_article(query, error.kind),), error=error)
