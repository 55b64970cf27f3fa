"""Thin binding for the Spotify Web API."""

from .auth import access_token_from_settings, get_access_token, refresh_access_token
from .config import Settings, load_settings
from .endpoints import ENDPOINTS, Endpoint, UnimplementedEndpoint
from .errors import (
    AuthError,
    ConfigurationError,
    RemoteApiError,
    SpotifyBindingError,
    TransportError,
    raise_for_remote_error,
)
from .params import filter_query_params, substitute_path_params
from .request import build_request, delete_request, get_request, post_request, put_request

__all__ = [
    "ENDPOINTS",
    "AuthError",
    "ConfigurationError",
    "Endpoint",
    "RemoteApiError",
    "Settings",
    "SpotifyBindingError",
    "TransportError",
    "UnimplementedEndpoint",
    "access_token_from_settings",
    "build_request",
    "delete_request",
    "filter_query_params",
    "get_access_token",
    "get_request",
    "load_settings",
    "post_request",
    "put_request",
    "raise_for_remote_error",
    "refresh_access_token",
    "substitute_path_params",
]
