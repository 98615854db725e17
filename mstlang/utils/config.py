""".env loading with CLI override merging."""

from __future__ import annotations

import os
from typing import Any

from dotenv import find_dotenv, load_dotenv

DEFAULTS: dict[str, Any] = {
    "backend": "microsoft",
    "api_key": None,
    "client_id": None,
    "client_secret": None,
    "base_url": None,  # None means the backend's own default
    "timeout": 15.0,
    "locale": "en",
    "verbose": False,
}

SECRET_KEYS = ("api_key", "client_secret")


def build_config(
    cli_args: dict[str, Any] | None = None,
    **_kwargs: Any,
) -> dict[str, Any]:
    """Merge defaults <- env vars <- CLI args."""
    load_dotenv(find_dotenv(usecwd=True))
    config = dict(DEFAULTS)

    # Layer 2: env vars (MSTLANG_ prefix)
    env_map = {
        "MSTLANG_BACKEND": "backend",
        "MSTLANG_API_KEY": "api_key",
        "MSTLANG_CLIENT_ID": "client_id",
        "MSTLANG_CLIENT_SECRET": "client_secret",
        "MSTLANG_BASE_URL": "base_url",
        "MSTLANG_TIMEOUT": "timeout",
        "MSTLANG_LOCALE": "locale",
    }
    for env_key, cfg_key in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            if cfg_key == "timeout":
                config[cfg_key] = float(val)
            else:
                config[cfg_key] = val

    # Layer 3: CLI args (override everything)
    if cli_args:
        for key, val in cli_args.items():
            if val is not None:
                config[key] = val

    return config


def mask_secret(value: str) -> str:
    return value[:4] + "..." + value[-4:] if len(value) > 8 else "***"
