"""Frak: a JSON-oriented asynchronous HTTP request helper."""

from .builder import RequestConfig, build
from .client import FrakClient
from .constants import (
    DEFAULT_REQUEST_CONTENT_TYPES,
    EXPECTED_RESPONSE_CONTENT_TYPES,
    HTTP_METHODS,
    JSON_CONTENT_TYPE,
)
from .dispatcher import dispatch
from .exceptions import (
    FrakContentTypeError,
    FrakDecodeError,
    FrakError,
    FrakHTTPError,
    FrakNetworkError,
    FrakValidationError,
    InvalidMethodError,
)
from .request_options import RequestOptions
from .settings import ClientSettings
from .transport import HttpxTransport, Transport, TransportAbortedError

__all__ = [
    "ClientSettings",
    "DEFAULT_REQUEST_CONTENT_TYPES",
    "EXPECTED_RESPONSE_CONTENT_TYPES",
    "FrakClient",
    "FrakContentTypeError",
    "FrakDecodeError",
    "FrakError",
    "FrakHTTPError",
    "FrakNetworkError",
    "FrakValidationError",
    "HTTP_METHODS",
    "HttpxTransport",
    "InvalidMethodError",
    "JSON_CONTENT_TYPE",
    "RequestConfig",
    "RequestOptions",
    "Transport",
    "TransportAbortedError",
    "build",
    "dispatch",
]
