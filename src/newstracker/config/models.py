"""Pydantic configuration models for the news tracker."""

from pydantic import BaseModel, Field

from newstracker.credentials import DEFAULT_ENV_VAR, DEFAULT_STORAGE_KEY
from newstracker.data import SearchFilters, SentimentFilter, SortOrder
from newstracker.search.worldnews import DEFAULT_RELAY_PREFIX, WORLD_NEWS_API_URL
from newstracker.state import DEFAULT_SAVED_QUERIES

# ============================================================
# API Config
# ============================================================


class ApiConfig(BaseModel):
    """Configuration for the World News API client."""

    endpoint: str = WORLD_NEWS_API_URL
    relay_prefix: str | None = DEFAULT_RELAY_PREFIX
    result_count: int = Field(default=20, ge=1, le=100)
    positive_threshold: float = 0.1
    negative_threshold: float = -0.1

    model_config = {"frozen": True}


# ============================================================
# Credential Config
# ============================================================


class CredentialConfig(BaseModel):
    """Where the API key comes from and where a user-entered key is kept."""

    env_var: str = DEFAULT_ENV_VAR
    storage_path: str = "~/.newstracker/storage.json"
    storage_key: str = DEFAULT_STORAGE_KEY

    model_config = {"frozen": True}


# ============================================================
# Defaults Config
# ============================================================


class FiltersConfig(BaseModel):
    """Filter selections in effect at startup."""

    language: str = "en"
    source_country: str = ""
    sentiment: SentimentFilter = SentimentFilter.ANY
    sort_by: SortOrder = SortOrder.PUBLISH_TIME

    model_config = {"frozen": True}

    def to_filters(self) -> SearchFilters:
        return SearchFilters(
            language=self.language,
            source_country=self.source_country,
            sentiment=self.sentiment,
            sort_by=self.sort_by,
        )


class DefaultsConfig(BaseModel):
    """Initial session state."""

    filters: FiltersConfig = Field(default_factory=FiltersConfig)
    saved_queries: list[str] = Field(default_factory=lambda: list(DEFAULT_SAVED_QUERIES))

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = "WARNING"
    format: str = "%(levelname)s %(name)s: %(message)s"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class NewsTrackerConfig(BaseModel):
    """Root configuration for the news tracker."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    credentials: CredentialConfig = Field(default_factory=CredentialConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
