"""Tests for configuration merging."""

import pytest

from tvdbv2.services.client import DEFAULT_BASE_URL, ClientOptions
from tvdbv2.utils import config as config_module
from tvdbv2.utils.config import ENV_MAP, build_config, client_options


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr(config_module, "load_dotenv", lambda: None)
    for key in ENV_MAP:
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    config = build_config()
    assert config["api_key"] is None
    assert config["language"] == "en"
    assert config["timeout"] == 15.0
    assert config["base_url"] == DEFAULT_BASE_URL


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("TVDB_API_KEY", "env-key")
    monkeypatch.setenv("TVDB_TIMEOUT", "3.5")
    monkeypatch.setenv("TVDB_LANGUAGE", "fr")
    config = build_config()
    assert config["api_key"] == "env-key"
    assert config["timeout"] == 3.5
    assert config["language"] == "fr"


def test_cli_overrides_env(monkeypatch):
    monkeypatch.setenv("TVDB_API_KEY", "env-key")
    config = build_config(cli_args={"api_key": "cli-key", "language": None})
    assert config["api_key"] == "cli-key"
    assert config["language"] == "en"


def test_client_options():
    opts = client_options(build_config(cli_args={"user_key": "U", "username": "homer"}))
    assert opts == ClientOptions(api_key="", user_key="U", username="homer", language="en")
