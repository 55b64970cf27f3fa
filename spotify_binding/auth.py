"""Access token acquisition against the Spotify accounts service."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from .config import DEFAULT_TIMEOUT, TOKEN_URL, Settings
from .errors import AuthError

LOGGER = logging.getLogger(__name__)


def get_access_token(
    client_id: str,
    client_secret: str,
    *,
    token_url: str = TOKEN_URL,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Request an access token using the Client Credentials flow.

    Tokens obtained this way only reach endpoints that do not touch user data.
    Use an OAuth 2 authorization and :func:`refresh_access_token` for those.
    """
    LOGGER.debug("Requesting Spotify client credentials token")
    return _request_token(
        {"grant_type": "client_credentials"},
        client_id,
        client_secret,
        token_url=token_url,
        session=session,
        timeout=timeout,
    )


def refresh_access_token(
    client_id: str,
    client_secret: str,
    refresh_token: str,
    *,
    token_url: str = TOKEN_URL,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Exchange a refresh token from an earlier OAuth 2 authorization for a new access token."""
    LOGGER.debug("Refreshing Spotify access token")
    return _request_token(
        {"grant_type": "refresh_token", "refresh_token": refresh_token},
        client_id,
        client_secret,
        token_url=token_url,
        session=session,
        timeout=timeout,
    )


def access_token_from_settings(
    settings: Settings, *, session: Optional[requests.Session] = None
) -> str:
    """Obtain a token with the credentials held in ``settings``.

    The refresh flow is used when a refresh token is configured, since only
    that flow yields a token able to act on behalf of a user.
    """
    if settings.refresh_token:
        return refresh_access_token(
            *settings.credentials,
            settings.refresh_token,
            token_url=settings.token_url,
            session=session,
            timeout=settings.timeout,
        )
    return get_access_token(
        *settings.credentials,
        token_url=settings.token_url,
        session=session,
        timeout=settings.timeout,
    )


# Internal helpers -----------------------------------------------------


def _request_token(
    form: Dict[str, Any],
    client_id: str,
    client_secret: str,
    *,
    token_url: str,
    session: Optional[requests.Session],
    timeout: float,
) -> str:
    http = session or requests
    response = http.post(
        token_url,
        data=form,
        auth=(client_id, client_secret),
        timeout=timeout,
    )

    if not 200 <= response.status_code < 300:
        LOGGER.warning(
            "Spotify token request (%s) failed with status %s",
            form["grant_type"],
            response.status_code,
        )
        raise AuthError(
            f"Token endpoint returned {response.status_code}: {response.text}",
            response=response,
        )

    try:
        payload = response.json()
    except ValueError:
        raise AuthError(
            "Token endpoint returned a body that is not JSON", response=response
        ) from None

    token = payload.get("access_token") if isinstance(payload, dict) else None
    if not token:
        raise AuthError(
            "Token endpoint response did not contain an access_token",
            response=response,
        )
    return token


__all__ = ["access_token_from_settings", "get_access_token", "refresh_access_token"]
