"""Fake HTTP collaborators shared by the test suite."""

from typing import Any, Dict, List, Optional

import pytest

from spotify_binding import config

_NO_JSON = object()


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = _NO_JSON, url: str = ""):
        self.status_code = status_code
        self._payload = payload
        self.url = url
        self.text = "" if payload is _NO_JSON else str(payload)

    def json(self):
        if self._payload is _NO_JSON:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Records every call instead of touching the network."""

    def __init__(self, response: Optional[FakeResponse] = None):
        self.response = response or FakeResponse(200, {})
        self.calls: List[Dict[str, Any]] = []

    def post(self, url: str, **kwargs):
        self.calls.append({"method": "POST", "url": url, **kwargs})
        return self.response

    def request(self, method: str, url: str, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        return self.response

    @property
    def last(self) -> Dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def clean_env(monkeypatch):
    """Isolate settings from the developer's environment and .env files."""
    monkeypatch.setattr(config, "_ENV_LOADED", True)
    for name in (
        "SPOTIFY_CLIENT_ID",
        "SPOTIFY_CLIENT_SECRET",
        "SPOTIFY_REFRESH_TOKEN",
        "SPOTIFY_API_BASE_URL",
        "SPOTIFY_TOKEN_URL",
        "SPOTIFY_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
