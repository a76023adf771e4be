"""Response validation and dispatch."""

from __future__ import annotations

from typing import Any, Mapping

import httpx
import structlog

from .builder import RequestConfig
from .constants import EXPECTED_RESPONSE_CONTENT_TYPES, JSON_CONTENT_TYPE
from .exceptions import (
    FrakContentTypeError,
    FrakDecodeError,
    FrakError,
    FrakHTTPError,
    FrakNetworkError,
)
from .security import sanitize_headers
from .settings import ClientSettings
from .transport import Transport, TransportAbortedError

logger = structlog.get_logger(__name__)

_TRANSPORT_FAILURES = (httpx.TransportError, TransportAbortedError, OSError)


def _failure(
    error_cls: type[FrakError],
    message: str,
    config: RequestConfig,
    url: str,
    *,
    response: httpx.Response | None = None,
    cause: BaseException | None = None,
) -> FrakError:
    error = error_cls(message, response=response, cause=cause)
    logger.warning(
        "request_failed",
        method=config.method,
        url=url,
        reason=error.reason,
        status_code=error.status_code,
        error=str(cause) if cause is not None else None,
    )
    return error


def _is_ok(response: httpx.Response) -> bool:
    return response.status_code < 400


# Exchanges that never carry a body, whatever their headers announce.
def _has_no_body(config: RequestConfig, response: httpx.Response) -> bool:
    return config.method == "HEAD" or response.status_code in (204, 304)


def _is_zero_length(response: httpx.Response) -> bool:
    # A missing content-length is treated as an empty body.
    raw = response.headers.get("content-length")
    if raw is None:
        return True
    try:
        return int(raw.strip()) == 0
    except ValueError:
        return False


def _content_type(response: httpx.Response) -> str | None:
    value = response.headers.get("content-type")
    if not value:
        return None
    return value.replace("\\", "/").lower()


async def dispatch(
    url: str,
    config: RequestConfig,
    settings: ClientSettings,
    *,
    transport: Transport,
    expected_content_types: Mapping[str, str | None] = EXPECTED_RESPONSE_CONTENT_TYPES,
) -> Any:
    """Send ``config`` to ``url`` and turn the response into a call outcome.

    Returns the decoded JSON value for JSON responses and the raw
    ``httpx.Response`` for zero-length (when allowed), non-JSON or untyped
    responses, and for HEAD, 204, 304 or empty-bodied JSON responses.

    Raises:
        FrakNetworkError: the transport failed or the request was aborted.
        FrakHTTPError: the status is 400 or above and
            ``settings.throw_on_failed_status`` is set.
        FrakContentTypeError: the response content type does not contain the
            type expected for the method.
        FrakDecodeError: a JSON response body could not be decoded.
    """
    logger.debug(
        "request_dispatched",
        method=config.method,
        url=url,
        headers=sanitize_headers(config.headers),
    )
    try:
        response = await transport.fetch(url, config)
    except _TRANSPORT_FAILURES as exc:
        raise _failure(FrakNetworkError, f"Network failure: {exc}", config, url, cause=exc) from exc

    content_type = _content_type(response)
    logger.debug(
        "response_received",
        method=config.method,
        url=url,
        status_code=response.status_code,
        content_type=content_type,
    )

    if settings.throw_on_failed_status and not _is_ok(response):
        raise _failure(FrakHTTPError, "Request failed", config, url, response=response)

    if settings.allow_zero_length_response and _is_zero_length(response):
        return response

    if content_type is None:
        return response

    expected = expected_content_types.get(config.method)
    if expected and expected.lower() not in content_type:
        raise _failure(
            FrakContentTypeError,
            f"Unexpected content-type in response: {content_type} (expected {expected})",
            config,
            url,
            response=response,
        )

    if JSON_CONTENT_TYPE not in content_type or _has_no_body(config, response):
        return response

    try:
        await response.aread()
    except _TRANSPORT_FAILURES as exc:
        raise _failure(FrakNetworkError, f"Network failure: {exc}", config, url, response=response, cause=exc) from exc
    if not response.content.strip():
        return response
    try:
        return response.json()
    except (ValueError, httpx.StreamError) as exc:
        raise _failure(FrakDecodeError, f"Could not decode JSON body: {exc}", config, url, response=response, cause=exc) from exc
