"""Configuration module for the Newsriver client."""

from newsriver.config.factory import create_client, create_from_config, normalize_options
from newsriver.config.loader import get_default_config_path, load_config
from newsriver.config.models import (
    ClientConfig,
    CredentialsConfig,
    LoggingConfig,
    NewsriverConfig,
    NormalizeConfig,
    SearchDefaultsConfig,
)

__all__ = [
    "ClientConfig",
    "CredentialsConfig",
    "LoggingConfig",
    "NewsriverConfig",
    "NormalizeConfig",
    "SearchDefaultsConfig",
    "create_client",
    "create_from_config",
    "get_default_config_path",
    "load_config",
    "normalize_options",
]
