"""Credential storage and resolution."""

from newsriver.credentials.prompt import store_creds, store_creds_temp
from newsriver.credentials.store import (
    API_KEY_VAR,
    USER_AGENT_VAR,
    CredentialStore,
    EnvCredentialStore,
    default_env_file,
    resolve_credentials,
)

__all__ = [
    "API_KEY_VAR",
    "USER_AGENT_VAR",
    "CredentialStore",
    "EnvCredentialStore",
    "default_env_file",
    "resolve_credentials",
    "store_creds",
    "store_creds_temp",
]
