"""Factory functions to create components from configuration."""

from pathlib import Path
from typing import Any

from newsriver.config.models import NewsriverConfig, NormalizeConfig
from newsriver.credentials.store import EnvCredentialStore
from newsriver.run_logger import RunLogger
from newsriver.search.newsriver import NewsriverClient
from newsriver.search.rate_limit import RateLimiter


def create_client(
    config: NewsriverConfig,
    run_logger: RunLogger | None = None,
) -> NewsriverClient:
    """Create a search client from config."""
    return NewsriverClient(
        credential_store=EnvCredentialStore(env_file=config.credentials.env_file),
        endpoint=config.client.endpoint,
        timeout=config.client.timeout,
        rate_limiter=RateLimiter(config.client.request_interval),
        run_logger=run_logger,
    )


def normalize_options(config: NormalizeConfig) -> dict[str, Any]:
    """Keyword arguments for ``clean_news``.

    ``min_chars`` is handed back as an int when it has no fractional part.
    """
    options = config.model_dump()
    if float(options["min_chars"]).is_integer():
        options["min_chars"] = int(options["min_chars"])
    return options


def create_from_config(
    config: NewsriverConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[NewsriverClient, RunLogger | None]:
    """Create a search client and its run logger from root config.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (client, run_logger). run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    return (create_client(config, run_logger=run_logger), run_logger)
