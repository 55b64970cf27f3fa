"""Generic request builder shared by every endpoint."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

import requests

from .config import API_BASE_URL, DEFAULT_TIMEOUT, Settings
from .params import filter_query_params, substitute_path_params

LOGGER = logging.getLogger(__name__)

METHODS = ("GET", "POST", "PUT", "DELETE")

RequestFunction = Callable[..., requests.Response]


def build_request(method: str) -> RequestFunction:
    """Return a function that sends ``method`` requests to a templated endpoint."""
    method = method.upper()
    if method not in METHODS:
        raise ValueError(f"Unsupported HTTP method {method!r}")

    def send(
        endpoint: str,
        params: Mapping[str, Any],
        token: str,
        *,
        body: Optional[Any] = None,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        settings: Optional[Settings] = None,
    ) -> requests.Response:
        if base_url is None:
            base_url = settings.api_base_url if settings else API_BASE_URL
        if timeout is None:
            timeout = settings.timeout if settings else DEFAULT_TIMEOUT

        url = substitute_path_params(params, base_url + endpoint)
        query = filter_query_params(params)
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }

        LOGGER.debug("%s %s params=%s", method, url, query)
        http = session or requests
        return http.request(
            method,
            url,
            params=query,
            json=body,
            headers=headers,
            timeout=timeout,
        )

    send.__name__ = f"{method.lower()}_request"
    return send


get_request = build_request("GET")
post_request = build_request("POST")
put_request = build_request("PUT")
delete_request = build_request("DELETE")

SENDERS = {
    "GET": get_request,
    "POST": post_request,
    "PUT": put_request,
    "DELETE": delete_request,
}


__all__ = [
    "METHODS",
    "SENDERS",
    "build_request",
    "delete_request",
    "get_request",
    "post_request",
    "put_request",
]
