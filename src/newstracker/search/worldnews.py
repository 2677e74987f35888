"""News search against the World News API."""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from newstracker.data import Article, SearchFilters, SentimentFilter
from newstracker.errors import ApiError, TransportFailureError, error_for_status
from newstracker.search.normalize import normalize_response

WORLD_NEWS_API_URL = "https://api.worldnewsapi.com/search-news"
DEFAULT_RELAY_PREFIX = "https://cors-anywhere.herokuapp.com/"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Attempt:
    """One way of reaching the search endpoint."""

    name: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)


class WorldNewsClient:
    """Search for news articles using the World News API.

    A request goes to the endpoint directly first. If that fails at the
    transport level, it is sent once more through the relay; an HTTP error
    status is never resent.

    Args:
        endpoint: Search endpoint URL.
        relay_prefix: Prefix of the relay used after a transport failure,
            or None to disable the second attempt.
        result_count: Number of articles requested per search.
        positive_threshold: ``min-sentiment`` sent for positive searches.
        negative_threshold: ``max-sentiment`` sent for negative searches.
    """

    def __init__(
        self,
        *,
        endpoint: str = WORLD_NEWS_API_URL,
        relay_prefix: str | None = DEFAULT_RELAY_PREFIX,
        result_count: int = 20,
        positive_threshold: float = 0.1,
        negative_threshold: float = -0.1,
    ) -> None:
        self._endpoint = endpoint
        self._relay_prefix = relay_prefix
        self._result_count = result_count
        self._positive_threshold = positive_threshold
        self._negative_threshold = negative_threshold

    @property
    def attempts(self) -> list[Attempt]:
        """Ordered list of ways to reach the endpoint, each tried at most once."""
        attempts = [Attempt("direct", self._endpoint, {"Content-Type": "application/json"})]
        if self._relay_prefix:
            attempts.append(
                Attempt(
                    "relay",
                    f"{self._relay_prefix}{self._endpoint}",
                    {"Content-Type": "application/json", "X-Requested-With": "XMLHttpRequest"},
                )
            )
        return attempts

    def build_params(self, api_key: str, query: str, filters: SearchFilters) -> dict[str, str]:
        """Build the query string for a search request."""
        params = {
            "api-key": api_key,
            "text": query,
            "language": filters.language,
            "sort": str(filters.sort_by),
            "number": str(self._result_count),
        }
        if filters.source_country:
            params["source-countries"] = filters.source_country
        if filters.sentiment == SentimentFilter.POSITIVE:
            params["min-sentiment"] = str(self._positive_threshold)
        elif filters.sentiment == SentimentFilter.NEGATIVE:
            params["max-sentiment"] = str(self._negative_threshold)
        return params

    async def search(self, api_key: str, query: str, filters: SearchFilters) -> list[Article]:
        """Search for articles matching a query.

        Args:
            api_key: World News API key.
            query: Trimmed, non-empty search text.
            filters: Filter selections for the request.

        Returns:
            Normalized articles, possibly empty.

        Raises:
            SearchError: On transport failure, a non-success response or a
                response body that cannot be read.
        """
        data = await self.fetch(self.build_params(api_key, query, filters))
        try:
            return normalize_response(data)
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Could not read search response: {e}")
            raise ApiError("API Error: malformed response body") from e

    async def fetch(self, params: dict[str, str]) -> Any:
        """Send one search request and return the decoded JSON body."""
        async with httpx.AsyncClient() as client:
            response = await self._send(client, params)

        status = response.status_code
        if not 200 <= status < 300:
            raise error_for_status(status, response.reason_phrase)
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"API Error: {status} - malformed response body", status=status) from e

    async def _send(self, client: httpx.AsyncClient, params: dict[str, str]) -> httpx.Response:
        last_error: httpx.RequestError | None = None
        for attempt in self.attempts:
            if last_error is not None:
                logger.warning(f"Request failed ({last_error!r}), trying {attempt.name} path")
            try:
                return await client.get(attempt.url, params=params, headers=attempt.headers)
            except httpx.RequestError as e:
                last_error = e
        raise TransportFailureError() from last_error
