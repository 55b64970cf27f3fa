"""Configuration helpers for the Spotify Web API binding."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from .errors import ConfigurationError

TOKEN_URL = "https://accounts.spotify.com/api/token"
API_BASE_URL = "https://api.spotify.com/v1/"
DEFAULT_TIMEOUT = 15.0

_ENV_LOADED = False


def _ensure_env_loaded() -> None:
    """Load environment variables from a `.env` file the first time settings are read."""
    global _ENV_LOADED
    if _ENV_LOADED:
        return

    candidate_paths = [
        Path.cwd() / ".env",
        Path(__file__).resolve().parent / ".env",
    ]
    for path in candidate_paths:
        if path.exists():
            load_dotenv(dotenv_path=path, override=False)
            break

    _ENV_LOADED = True


@dataclass(frozen=True)
class Settings:
    """Credentials and endpoints used to talk to Spotify."""

    client_id: str
    client_secret: str
    refresh_token: Optional[str] = None
    api_base_url: str = API_BASE_URL
    token_url: str = TOKEN_URL
    timeout: float = DEFAULT_TIMEOUT

    @property
    def credentials(self) -> Tuple[str, str]:
        return self.client_id, self.client_secret


def _normalise_base_url(value: str) -> str:
    """Templates are appended directly, so the base URL must end with a slash."""
    value = value.strip()
    if not value.endswith("/"):
        value += "/"
    return value


def _parse_timeout(raw_value: Optional[str]) -> float:
    if raw_value is None or not raw_value.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw_value)
    except ValueError:
        raise ConfigurationError(
            f"SPOTIFY_TIMEOUT must be a number of seconds, got {raw_value!r}."
        ) from None
    if timeout <= 0:
        raise ConfigurationError("SPOTIFY_TIMEOUT must be greater than zero.")
    return timeout


def load_settings() -> Settings:
    """Build a Settings instance from environment variables."""
    _ensure_env_loaded()

    client_id = os.getenv("SPOTIFY_CLIENT_ID")
    client_secret = os.getenv("SPOTIFY_CLIENT_SECRET")
    if not client_id or not client_secret:
        raise ConfigurationError(
            "Missing Spotify credentials. "
            "Set SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET."
        )

    refresh_token = os.getenv("SPOTIFY_REFRESH_TOKEN") or None
    api_base_url = _normalise_base_url(os.getenv("SPOTIFY_API_BASE_URL") or API_BASE_URL)
    token_url = (os.getenv("SPOTIFY_TOKEN_URL") or TOKEN_URL).strip()
    if not api_base_url.startswith("https://"):
        raise ConfigurationError("SPOTIFY_API_BASE_URL must be an https:// URL.")

    return Settings(
        client_id=client_id,
        client_secret=client_secret,
        refresh_token=refresh_token,
        api_base_url=api_base_url,
        token_url=token_url,
        timeout=_parse_timeout(os.getenv("SPOTIFY_TIMEOUT")),
    )


__all__ = ["API_BASE_URL", "DEFAULT_TIMEOUT", "TOKEN_URL", "Settings", "load_settings"]
