"""YAML configuration loading utilities."""

import logging
from pathlib import Path

import yaml

from newsriver.config.models import NewsriverConfig

logger = logging.getLogger(__name__)


def load_config(path: Path | str | None = None) -> NewsriverConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file. When omitted, ``configs/default.yaml``
            is used if it is present and built-in defaults otherwise, so an
            installed package without the repo's ``configs/`` still works.

    Returns:
        Validated NewsriverConfig. An empty file yields the defaults.

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    if path is None:
        path = get_default_config_path()
        if not path.exists():
            logger.debug(f"No config at {path}, using built-in defaults")
            return NewsriverConfig()

    with Path(path).open() as f:
        raw = yaml.safe_load(f)

    return NewsriverConfig.model_validate(raw or {})


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml"
