"""Interactive helpers that prompt for and store Newsriver credentials.

Register for a free API token at https://console.newsriver.io/api-token. A
good user agent is your email address, so Newsriver can reach you if
something goes wrong.
"""

import getpass
import logging
import os
from collections.abc import Callable
from pathlib import Path

from dotenv import set_key

from newsriver.credentials.store import API_KEY_VAR, USER_AGENT_VAR, default_env_file

logger = logging.getLogger(__name__)

Prompt = Callable[[str], str]


def store_creds(path: Path | str | None = None, prompt: Prompt = getpass.getpass) -> Path:
    """Prompt for a token and user agent and persist them to a dotenv file.

    Existing entries are overwritten in place, so calling this twice does not
    leave duplicate variables behind.

    Args:
        path: File to write (defaults to ``~/.newsriver.env``).
        prompt: Function used to ask for each value.

    Returns:
        Path of the file written.
    """
    env_file = Path(path) if path is not None else default_env_file()
    env_file.touch(mode=0o600, exist_ok=True)

    set_key(env_file, API_KEY_VAR, prompt("Please enter API key: "))
    set_key(env_file, USER_AGENT_VAR, prompt("Please enter user agent: "))

    logger.info(f"Your credentials were written to {env_file}")
    return env_file


def store_creds_temp(prompt: Prompt = getpass.getpass) -> None:
    """Prompt for a token and user agent and set them for this process only."""
    os.environ[API_KEY_VAR] = prompt("Please enter API key: ")
    os.environ[USER_AGENT_VAR] = prompt("Please enter user agent: ")
    logger.info("Your credentials have been stored for the current session")
