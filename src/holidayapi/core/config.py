"""Client configuration.

- Centralizes environment variables (pydantic-settings) for the library and CLI.
- Values come from `HOLIDAYAPI_*` env vars, the project `.env` and the
  per-user `.env` written by `holidayapi doctor configure`.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import dotenv_values, set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://holidayapi.com"
SUPPORTED_VERSIONS: tuple[int, ...] = (1,)


def get_user_env_file() -> Path:
    """`.env` inside the platform's per-user config dir for the app."""

    return Path(typer.get_app_dir("holidayapi")) / ".env"


def read_user_env_vars(env_path: Path | None = None) -> dict[str, str]:
    env_path = env_path or get_user_env_file()
    return {k: v for k, v in dotenv_values(env_path).items() if v is not None}


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Set `values` in the user's .env; other keys and comments are kept."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    for key, value in values.items():
        if value is not None:
            set_key(env_path, key, value, quote_mode="never")
    return env_path


class ClientSettings(BaseSettings):
    """Settings shared by the client, the HTTP factory and the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="HOLIDAYAPI_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="Holiday API key (UUID shaped).",
    )
    version: int = Field(
        default=1,
        ge=1,
        description="Holiday API version used to build the base URL.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Scheme and host of the Holiday API, without version.",
    )
    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds. None keeps the httpx default.",
    )
    user_agent: str = Field(
        default="holidayapi-python/0.1",
        min_length=1,
        description="User-Agent header sent with every request.",
    )
