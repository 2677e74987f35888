"""News tracker: search live news, keep saved searches and bookmarks."""

from newstracker.app import NewsTracker
from newstracker.config import NewsTrackerConfig, create_from_config, load_config
from newstracker.credentials import CredentialStore, JsonFileStorage, MemoryStorage
from newstracker.data import (
    Article,
    FallbackArticle,
    SearchFilters,
    SearchOutcome,
    SentimentFilter,
    SortOrder,
)
from newstracker.errors import (
    ApiError,
    EmptyResultError,
    ErrorKind,
    InvalidCredentialError,
    MissingCredentialError,
    QuotaExceededError,
    RateLimitedError,
    SearchError,
    TransportFailureError,
)
from newstracker.executor import QueryExecutor
from newstracker.search import NewsSearcher, WorldNewsClient
from newstracker.state import AppState, View

__all__ = [
    # Models
    "Article",
    "FallbackArticle",
    "SearchFilters",
    "SearchOutcome",
    "SentimentFilter",
    "SortOrder",
    # Errors
    "ApiError",
    "EmptyResultError",
    "ErrorKind",
    "InvalidCredentialError",
    "MissingCredentialError",
    "QuotaExceededError",
    "RateLimitedError",
    "SearchError",
    "TransportFailureError",
    # Protocols
    "NewsSearcher",
    # Components
    "CredentialStore",
    "JsonFileStorage",
    "MemoryStorage",
    "NewsTracker",
    "QueryExecutor",
    "WorldNewsClient",
    # State
    "AppState",
    "View",
    # Config
    "NewsTrackerConfig",
    "create_from_config",
    "load_config",
]
