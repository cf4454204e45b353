"""Tests for configuration loading and factory functions."""

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest
from pydantic import ValidationError

from newsriver.config import (
    ClientConfig,
    NewsriverConfig,
    NormalizeConfig,
    SearchDefaultsConfig,
    create_client,
    create_from_config,
    get_default_config_path,
    load_config,
    normalize_options,
)
from newsriver.credentials import EnvCredentialStore, default_env_file
from newsriver.search import NEWSRIVER_API_URL, NewsriverClient


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_client_config_defaults(self) -> None:
        config = ClientConfig()
        assert config.endpoint == NEWSRIVER_API_URL
        assert config.timeout == 30.0
        assert config.request_interval == 4.0

    def test_search_defaults(self) -> None:
        config = SearchDefaultsConfig()
        assert config.language == "en"
        assert config.limit == 100

    def test_search_rejects_unknown_language(self) -> None:
        with pytest.raises(ValidationError):
            SearchDefaultsConfig(language="xx")

    @pytest.mark.parametrize("limit", [0, 101])
    def test_search_rejects_limit_out_of_range(self, limit: int) -> None:
        with pytest.raises(ValidationError):
            SearchDefaultsConfig(limit=limit)

    def test_normalize_config_defaults(self) -> None:
        config = NormalizeConfig()
        assert config.min_chars == 300
        assert config.as_date is True
        assert config.drop_vars is True
        assert config.to_lower is True
        assert config.distinct is True
        assert config.drop_na is False
        assert config.tif_corpus is False

    def test_normalize_config_requires_real_bools(self) -> None:
        with pytest.raises(ValidationError):
            NormalizeConfig(drop_na="yes")

    def test_root_config_defaults(self) -> None:
        config = NewsriverConfig()
        assert config.logging.enabled is False
        assert config.credentials.env_file == str(default_env_file())


class TestConfigLoader:
    """Tests for YAML config loading."""

    def test_load_config(self) -> None:
        yaml_content = """
client:
  request_interval: 6.5
search:
  language: it
  limit: 20
normalize:
  min_chars: 500
  tif_corpus: true
logging:
  enabled: true
  log_dir: runs
"""
        with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()
            config = load_config(Path(f.name))

        assert config.client.request_interval == 6.5
        assert config.client.endpoint == NEWSRIVER_API_URL
        assert config.search.language == "it"
        assert config.search.limit == 20
        assert config.normalize.min_chars == 500
        assert config.normalize.tif_corpus is True
        assert config.logging.log_dir == "runs"

    def test_load_empty_config(self) -> None:
        with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()
            config = load_config(f.name)
        assert config == NewsriverConfig()

    def test_load_config_without_path_uses_default(self) -> None:
        assert load_config() == NewsriverConfig()

    def test_missing_default_falls_back_to_builtin(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setattr(
            "newsriver.config.loader.get_default_config_path",
            lambda: tmp_path / "absent.yaml",
        )
        assert load_config() == NewsriverConfig()

    def test_missing_explicit_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.yaml")

    def test_get_default_config_path(self) -> None:
        path = get_default_config_path()
        assert path.name == "default.yaml"
        assert "configs" in str(path)

    def test_load_default_config(self) -> None:
        path = get_default_config_path()
        if path.exists():
            config = load_config(path)
            assert config == NewsriverConfig()


class TestFactoryFunctions:
    """Tests for factory functions."""

    def test_create_client(self, tmp_path: Path) -> None:
        config = NewsriverConfig.model_validate(
            {
                "client": {"endpoint": "https://example.com/search", "request_interval": 1.0},
                "credentials": {"env_file": str(tmp_path / "creds.env")},
            }
        )
        client = create_client(config)
        assert isinstance(client, NewsriverClient)
        assert client._endpoint == "https://example.com/search"
        assert client._rate_limiter.min_interval == 1.0
        assert isinstance(client._credential_store, EnvCredentialStore)

    def test_create_from_config_without_logging(self) -> None:
        client, run_logger = create_from_config(NewsriverConfig())
        assert isinstance(client, NewsriverClient)
        assert run_logger is None

    def test_create_from_config_with_log_override(self, tmp_path: Path) -> None:
        client, run_logger = create_from_config(
            NewsriverConfig(), log_override=True, log_dir_override=str(tmp_path)
        )
        assert run_logger is not None
        assert run_logger.enabled
        assert client._run_logger is run_logger

    def test_normalize_options(self) -> None:
        options = normalize_options(NormalizeConfig(min_chars=250, drop_na=True))
        assert options == {
            "min_chars": 250,
            "as_date": True,
            "drop_vars": True,
            "to_lower": True,
            "distinct": True,
            "drop_na": True,
            "tif_corpus": False,
        }
        assert isinstance(options["min_chars"], int)

    def test_normalize_options_keeps_fractional_min_chars(self) -> None:
        assert normalize_options(NormalizeConfig(min_chars=12.5))["min_chars"] == 12.5


def test_configured_client_reads_stored_credentials(isolated_home: Path) -> None:
    (isolated_home / ".newsriver.env").write_text(
        "NEWSRIVER_API_KEY=stored-key\nNEWSRIVER_USER_AGENT=stored-ua\n"
    )
    client = create_client(load_config(get_default_config_path()))
    assert client._credential_store.get("NEWSRIVER_API_KEY") == "stored-key"
