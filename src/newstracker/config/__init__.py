"""Configuration module for the news tracker."""

from newstracker.config.factory import create_client, create_credentials, create_from_config
from newstracker.config.loader import get_default_config_path, load_config
from newstracker.config.models import (
    ApiConfig,
    CredentialConfig,
    DefaultsConfig,
    FiltersConfig,
    LoggingConfig,
    NewsTrackerConfig,
)

__all__ = [
    "ApiConfig",
    "CredentialConfig",
    "DefaultsConfig",
    "FiltersConfig",
    "LoggingConfig",
    "NewsTrackerConfig",
    "create_client",
    "create_credentials",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
