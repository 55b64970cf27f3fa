"""Classification of request parameters into path placeholders and query values."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

LOGGER = logging.getLogger(__name__)

SCHEME = "https://"

# A template segment spelled exactly like one of these names is a placeholder.
PATH_PARAM_NAMES = frozenset(
    {
        "id",
        "playlist_id",
        "user_id",
        "category_id",
    }
)

QUERY_PARAM_NAMES = frozenset(
    {
        "additional_types",
        "after",
        "before",
        "country",
        "device_id",
        "fields",
        "ids",
        "include_external",
        "include_groups",
        "limit",
        "locale",
        "market",
        "offset",
        "position",
        "position_ms",
        "q",
        "state",
        "time_range",
        "timestamp",
        "type",
        "uri",
        "uris",
        "volume_percent",
    }
)


def _restrict(params: Mapping[str, Any], names: frozenset) -> Dict[str, Any]:
    return {key: value for key, value in params.items() if key in names}


def substitute_path_params(params: Mapping[str, Any], url: str) -> str:
    """Replace placeholder segments of ``url`` with values from ``params``.

    Only whole segments equal to a name in PATH_PARAM_NAMES that is present in
    ``params`` are replaced. Values are inserted as ``str(value)`` without any
    percent-encoding. A blank ``url`` yields an empty string.
    """
    if not url or not url.strip():
        return ""

    # Any scheme is replaced; requests always go out over https.
    _, separator, remainder = url.partition("://")
    if not separator:
        remainder = url
    lookup = _restrict(params, PATH_PARAM_NAMES)

    segments = []
    for segment in remainder.split("/"):
        if segment in lookup:
            segments.append(str(lookup[segment]))
            continue
        if segment in PATH_PARAM_NAMES:
            LOGGER.debug("No value for path placeholder '%s' in %s", segment, url)
        segments.append(segment)

    return SCHEME + "/".join(segments)


def _query_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(item) for item in value)
    return value


def filter_query_params(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Restrict ``params`` to recognised query-string names.

    Unknown keys and ``None`` values are dropped. Sequences are joined with
    commas and booleans are lower-cased the way the Web API expects them.
    """
    return {
        key: _query_value(value)
        for key, value in _restrict(params, QUERY_PARAM_NAMES).items()
        if value is not None
    }


__all__ = [
    "PATH_PARAM_NAMES",
    "QUERY_PARAM_NAMES",
    "filter_query_params",
    "substitute_path_params",
]
