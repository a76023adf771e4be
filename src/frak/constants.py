"""HTTP method tables shared by the request builder and the dispatcher."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

JSON_CONTENT_TYPE = "application/json"

HTTP_METHODS = frozenset(
    {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS", "CONNECT", "TRACE"}
)

# Content-Type sent by default for each method. None means "do not set".
DEFAULT_REQUEST_CONTENT_TYPES: Mapping[str, str | None] = MappingProxyType(
    {
        "GET": None,
        "POST": JSON_CONTENT_TYPE,
        "PUT": JSON_CONTENT_TYPE,
        "PATCH": JSON_CONTENT_TYPE,
        "DELETE": None,
        "HEAD": None,
        "OPTIONS": None,
        "CONNECT": None,
        "TRACE": None,
    }
)

# Content-Type a response must contain for each method. None disables the check.
EXPECTED_RESPONSE_CONTENT_TYPES: Mapping[str, str | None] = MappingProxyType(
    {
        "GET": JSON_CONTENT_TYPE,
        "POST": JSON_CONTENT_TYPE,
        "PUT": JSON_CONTENT_TYPE,
        "PATCH": JSON_CONTENT_TYPE,
        "DELETE": None,
        "HEAD": None,
        "OPTIONS": None,
        "CONNECT": None,
        "TRACE": None,
    }
)
