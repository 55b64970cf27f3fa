"""Token acquisition against the accounts service."""

import pytest
import requests

from conftest import FakeResponse, FakeSession
from spotify_binding.auth import (
    access_token_from_settings,
    get_access_token,
    refresh_access_token,
)
from spotify_binding.config import TOKEN_URL, Settings
from spotify_binding.errors import AuthError, TransportError


def test_client_credentials_flow():
    session = FakeSession(FakeResponse(200, {"access_token": "abc", "expires_in": 3600}))

    token = get_access_token("client", "secret", session=session)

    assert token == "abc"
    call = session.last
    assert call["method"] == "POST"
    assert call["url"] == TOKEN_URL
    assert call["data"] == {"grant_type": "client_credentials"}
    assert call["auth"] == ("client", "secret")


def test_refresh_flow_sends_refresh_token():
    session = FakeSession(FakeResponse(200, {"access_token": "fresh"}))

    token = refresh_access_token("client", "secret", "r-token", session=session)

    assert token == "fresh"
    assert session.last["data"] == {"grant_type": "refresh_token", "refresh_token": "r-token"}
    assert session.last["auth"] == ("client", "secret")


@pytest.mark.parametrize("status", [400, 401, 500])
def test_non_2xx_status_raises_auth_error(status):
    session = FakeSession(FakeResponse(status, {"error": "invalid_client"}))

    with pytest.raises(AuthError) as excinfo:
        get_access_token("client", "wrong", session=session)

    assert excinfo.value.status_code == status


def test_missing_access_token_raises_auth_error():
    session = FakeSession(FakeResponse(200, {"token_type": "Bearer"}))

    with pytest.raises(AuthError):
        refresh_access_token("client", "secret", "r-token", session=session)


def test_non_json_body_raises_auth_error():
    session = FakeSession(FakeResponse(200))

    with pytest.raises(AuthError):
        get_access_token("client", "secret", session=session)


def test_token_url_and_timeout_are_configurable():
    session = FakeSession(FakeResponse(200, {"access_token": "abc"}))

    get_access_token(
        "client", "secret", token_url="https://auth.local/token", timeout=2, session=session
    )

    assert session.last["url"] == "https://auth.local/token"
    assert session.last["timeout"] == 2


def test_settings_without_refresh_token_use_client_credentials():
    session = FakeSession(FakeResponse(200, {"access_token": "abc"}))
    settings = Settings(client_id="client", client_secret="secret", timeout=4.0)

    assert access_token_from_settings(settings, session=session) == "abc"
    assert session.last["auth"] == settings.credentials
    assert session.last["data"] == {"grant_type": "client_credentials"}
    assert session.last["timeout"] == 4.0


def test_settings_with_refresh_token_use_refresh_flow():
    session = FakeSession(FakeResponse(200, {"access_token": "user-token"}))
    settings = Settings(
        client_id="client",
        client_secret="secret",
        refresh_token="r-token",
        token_url="https://auth.local/token",
    )

    assert access_token_from_settings(settings, session=session) == "user-token"
    assert session.last["url"] == "https://auth.local/token"
    assert session.last["data"]["grant_type"] == "refresh_token"


class _DownSession:
    def post(self, url, **kwargs):
        raise requests.ConnectionError("accounts service unreachable")


@pytest.mark.parametrize(
    "fetch",
    [
        lambda session: get_access_token("client", "secret", session=session),
        lambda session: refresh_access_token("client", "secret", "r-token", session=session),
    ],
)
def test_transport_failure_is_not_wrapped_in_auth_error(fetch):
    with pytest.raises(TransportError) as excinfo:
        fetch(_DownSession())

    assert type(excinfo.value) is requests.ConnectionError
    assert not isinstance(excinfo.value, AuthError)
