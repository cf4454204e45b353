"""Credential lookup from the environment or a dotenv file."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from dotenv import dotenv_values

from newsriver.data import Credentials

API_KEY_VAR = "NEWSRIVER_API_KEY"
USER_AGENT_VAR = "NEWSRIVER_USER_AGENT"


def default_env_file() -> Path:
    """Get path to the per-user credentials file written by ``store_creds``."""
    return Path.home() / ".newsriver.env"


class CredentialStore(Protocol):
    """Interface for looking up a named credential."""

    def get(self, name: str) -> str:
        """Return the value stored under ``name``, or "" when absent."""
        ...


class EnvCredentialStore:
    """Read credentials from process environment variables.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``).
        env_file: dotenv file consulted when a variable is unset (defaults to
            the ``~/.newsriver.env`` file written by ``store_creds``).
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        *,
        env_file: Path | str | None = None,
    ) -> None:
        self._environ = environ if environ is not None else os.environ
        self._env_file = (
            Path(env_file).expanduser() if env_file is not None else default_env_file()
        )

    def get(self, name: str) -> str:
        value = self._environ.get(name)
        if value:
            return value
        if self._env_file.exists():
            return dotenv_values(self._env_file).get(name) or ""
        return ""


def resolve_credentials(
    api_token: str | None = None,
    user_agent: str | None = None,
    store: CredentialStore | None = None,
) -> Credentials:
    """Resolve credentials, preferring explicit arguments over the store.

    Empty values are returned as-is; ``build_search_request`` rejects them.
    """
    store = store or EnvCredentialStore()
    token = api_token if api_token is not None else store.get(API_KEY_VAR)
    agent = user_agent if user_agent is not None else store.get(USER_AGENT_VAR)
    return Credentials(token=token, user_agent=agent)
