"""Exceptions raised by the Spotify Web API binding."""

from __future__ import annotations

from typing import Optional

import requests

# Connection, DNS and timeout failures from the transport are surfaced unchanged.
TransportError = requests.RequestException


class SpotifyBindingError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(SpotifyBindingError, RuntimeError):
    """Raised when required environment configuration is missing or invalid."""


class _ResponseError(SpotifyBindingError):
    def __init__(self, message: str, response: Optional[requests.Response] = None) -> None:
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        if self.response is None:
            return None
        return self.response.status_code


class AuthError(_ResponseError):
    """The token endpoint rejected the request or returned no access token."""


class RemoteApiError(_ResponseError):
    """A resource endpoint answered with a non-2xx status."""


def raise_for_remote_error(response: requests.Response) -> requests.Response:
    """Raise RemoteApiError for a non-2xx response, otherwise return it unchanged.

    Endpoint calls never do this themselves; it is for callers who prefer
    exceptions over inspecting the status code.
    """
    if 200 <= response.status_code < 300:
        return response

    detail = ""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            detail = error.get("message") or ""
        elif isinstance(error, str):
            detail = payload.get("error_description") or error

    message = f"Spotify API returned {response.status_code} for {response.url}"
    if detail:
        message = f"{message}: {detail}"
    raise RemoteApiError(message, response=response)


__all__ = [
    "AuthError",
    "ConfigurationError",
    "RemoteApiError",
    "SpotifyBindingError",
    "TransportError",
    "raise_for_remote_error",
]
