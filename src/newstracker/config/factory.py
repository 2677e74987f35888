"""Factory functions to create components from configuration."""

from collections.abc import Mapping

from newstracker.app import NewsTracker
from newstracker.config.models import ApiConfig, CredentialConfig, NewsTrackerConfig
from newstracker.credentials import CredentialStore, JsonFileStorage, KeyValueStorage
from newstracker.executor import QueryExecutor
from newstracker.search.worldnews import WorldNewsClient


def create_client(config: ApiConfig) -> WorldNewsClient:
    """Create a World News API client from config."""
    return WorldNewsClient(
        endpoint=config.endpoint,
        relay_prefix=config.relay_prefix,
        result_count=config.result_count,
        positive_threshold=config.positive_threshold,
        negative_threshold=config.negative_threshold,
    )


def create_credentials(
    config: CredentialConfig,
    *,
    storage: KeyValueStorage | None = None,
    environ: Mapping[str, str] | None = None,
) -> CredentialStore:
    """Create the credential store from config.

    Args:
        config: Credential configuration.
        storage: Storage to use instead of the configured JSON file.
        environ: Environment to read the build-time key from (defaults to
            ``os.environ``).
    """
    return CredentialStore.from_env(
        storage if storage is not None else JsonFileStorage(config.storage_path),
        env_var=config.env_var,
        storage_key=config.storage_key,
        environ=environ,
    )


def create_from_config(
    config: NewsTrackerConfig,
    *,
    storage: KeyValueStorage | None = None,
    environ: Mapping[str, str] | None = None,
) -> NewsTracker:
    """Create a ready-to-use NewsTracker from root config.

    Args:
        config: Root configuration.
        storage: Override for the credential storage backend.
        environ: Override for the environment holding the build-time key.

    Returns:
        The view controller with its executor and credential store wired up.
    """
    credentials = create_credentials(config.credentials, storage=storage, environ=environ)
    executor = QueryExecutor(credentials, create_client(config.api))
    return NewsTracker(
        credentials,
        executor,
        saved_queries=config.defaults.saved_queries,
        filters=config.defaults.filters.to_filters(),
    )
