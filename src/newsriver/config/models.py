"""Pydantic configuration models for the Newsriver client."""

from pydantic import BaseModel, Field, NonNegativeFloat, PositiveFloat, StrictBool, field_validator

from newsriver.credentials.store import default_env_file
from newsriver.languages import is_language_code
from newsriver.search.newsriver import NEWSRIVER_API_URL
from newsriver.search.rate_limit import DEFAULT_REQUEST_INTERVAL


class ClientConfig(BaseModel):
    """HTTP settings for the search client."""

    endpoint: str = NEWSRIVER_API_URL
    timeout: PositiveFloat = 30.0
    request_interval: NonNegativeFloat = DEFAULT_REQUEST_INTERVAL

    model_config = {"frozen": True}


class SearchDefaultsConfig(BaseModel):
    """Default search parameters used when none are given."""

    language: str = "en"
    limit: int = Field(default=100, ge=1, le=100)

    model_config = {"frozen": True}

    @field_validator("language")
    @classmethod
    def language_must_be_known(cls, v: str) -> str:
        if not is_language_code(v):
            raise ValueError(f"Unknown language code: {v}")
        return v


class NormalizeConfig(BaseModel):
    """Options forwarded to ``clean_news``."""

    min_chars: NonNegativeFloat = 300
    as_date: StrictBool = True
    drop_vars: StrictBool = True
    to_lower: StrictBool = True
    distinct: StrictBool = True
    drop_na: StrictBool = False
    tif_corpus: StrictBool = False

    model_config = {"frozen": True}


class CredentialsConfig(BaseModel):
    """Where to look up credentials not set in the environment."""

    env_file: str = Field(default_factory=lambda: str(default_env_file()))

    model_config = {"frozen": True}


class LoggingConfig(BaseModel):
    """Configuration for per-run request logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


class NewsriverConfig(BaseModel):
    """Root configuration for the Newsriver client."""

    client: ClientConfig = Field(default_factory=ClientConfig)
    search: SearchDefaultsConfig = Field(default_factory=SearchDefaultsConfig)
    normalize: NormalizeConfig = Field(default_factory=NormalizeConfig)
    credentials: CredentialsConfig = Field(default_factory=CredentialsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
