from typing import Protocol

from newstracker.data import Article, SearchFilters


class NewsSearcher(Protocol):
    """Interface for searching news articles."""

    async def search(self, api_key: str, query: str, filters: SearchFilters) -> list[Article]:
        """Search for articles matching the given query.

        Args:
            api_key: Credential sent with the request.
            query: Trimmed, non-empty search text.
            filters: Filter selections for the request.

        Returns:
            Normalized articles in API order.
        """
        ...
