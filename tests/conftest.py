"""Shared fixtures."""

from pathlib import Path

import pytest

from newsriver.credentials import API_KEY_VAR, USER_AGENT_VAR


@pytest.fixture(autouse=True)
def isolated_home(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> Path:
    """Keep the real ~/.newsriver.env and credential variables out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv(API_KEY_VAR, raising=False)
    monkeypatch.delenv(USER_AGENT_VAR, raising=False)
    return home
