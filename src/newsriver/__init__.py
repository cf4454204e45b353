"""Newsriver: retrieve news articles day by day and clean them into a corpus."""

from newsriver.config import NewsriverConfig, create_from_config, load_config
from newsriver.credentials import (
    CredentialStore,
    EnvCredentialStore,
    resolve_credentials,
    store_creds,
    store_creds_temp,
)
from newsriver.data import Credentials, DayProgress, DayWindow, SearchRequest
from newsriver.errors import (
    InvalidParameterError,
    NewsriverError,
    ResponseFormatError,
    SchemaError,
)
from newsriver.languages import LANGUAGE_CODES
from newsriver.normalize import clean_news, normalize
from newsriver.run_logger import RunLogger
from newsriver.search import (
    NewsriverClient,
    NewsSearcher,
    RateLimiter,
    build_day_query,
    build_search_request,
    get_news,
    plan_day_windows,
)

__all__ = [
    # Models
    "Credentials",
    "DayProgress",
    "DayWindow",
    "SearchRequest",
    "LANGUAGE_CODES",
    # Errors
    "InvalidParameterError",
    "NewsriverError",
    "ResponseFormatError",
    "SchemaError",
    # Protocols
    "CredentialStore",
    "NewsSearcher",
    # Planning
    "build_day_query",
    "build_search_request",
    "plan_day_windows",
    # Retrieval
    "NewsriverClient",
    "RateLimiter",
    "get_news",
    # Normalization
    "clean_news",
    "normalize",
    # Credentials
    "EnvCredentialStore",
    "resolve_credentials",
    "store_creds",
    "store_creds_temp",
    # Logging
    "RunLogger",
    # Config
    "NewsriverConfig",
    "create_from_config",
    "load_config",
]
