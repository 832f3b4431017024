""".env loading with CLI override merging."""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

from tvdbv2.services.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientOptions

DEFAULTS: dict[str, Any] = {
    "api_key": None,
    "user_key": None,
    "username": None,
    "language": "en",
    "timeout": DEFAULT_TIMEOUT,
    "base_url": DEFAULT_BASE_URL,
}

ENV_MAP = {
    "TVDB_API_KEY": "api_key",
    "TVDB_USER_KEY": "user_key",
    "TVDB_USERNAME": "username",
    "TVDB_LANGUAGE": "language",
    "TVDB_TIMEOUT": "timeout",
    "TVDB_BASE_URL": "base_url",
}


def build_config(cli_args: dict[str, Any] | None = None) -> dict[str, Any]:
    """Merge defaults <- env vars <- CLI args."""
    load_dotenv()
    config = dict(DEFAULTS)

    for env_key, cfg_key in ENV_MAP.items():
        val = os.environ.get(env_key)
        if val is not None:
            if cfg_key == "timeout":
                config[cfg_key] = float(val)
            else:
                config[cfg_key] = val

    if cli_args:
        for key, val in cli_args.items():
            if val is not None:
                config[key] = val

    return config


def client_options(config: dict[str, Any]) -> ClientOptions:
    """Build ClientOptions from a merged config dict."""
    return ClientOptions(
        api_key=config.get("api_key") or "",
        user_key=config.get("user_key") or "",
        username=config.get("username") or "",
        language=config.get("language") or "",
    )
