"""Request configuration merging.

``build`` layers the method's default content type, the client settings and
the caller's per-call options into one ``RequestConfig``. It performs no I/O
and never mutates its inputs, so it is safe to call from concurrent tasks.
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping

import httpx
from pydantic import BaseModel

from .constants import DEFAULT_REQUEST_CONTENT_TYPES, HTTP_METHODS
from .exceptions import FrakValidationError, InvalidMethodError
from .request_options import RequestOptions, resolve_request_options
from .settings import ClientSettings


@dataclass(frozen=True)
class RequestConfig:
    method: str
    headers: httpx.Headers
    body: str | bytes | None = None
    cache: str = "default"
    mode: str = "cors"
    credentials: str | None = None
    referrer: str | None = None
    referrer_policy: str | None = None
    signal: asyncio.Event | None = None


def normalize_method(method: str) -> str:
    if not isinstance(method, str) or method.upper() not in HTTP_METHODS:
        raise InvalidMethodError(f"Invalid method: {method!r}")
    return method.upper()


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize_body(body: Any) -> str | bytes | None:
    """Return ``body`` ready for the wire; structured values become compact JSON."""
    if body is None or isinstance(body, (str, bytes)):
        return body
    try:
        return json.dumps(body, separators=(",", ":"), default=_json_default)
    except (TypeError, ValueError) as exc:
        raise FrakValidationError(f"request body is not JSON serializable: {exc}", cause=exc) from exc


def _merge_headers(
    content_type: str | None,
    settings_headers: Mapping[str, str],
    caller_headers: Mapping[str, str] | None,
) -> httpx.Headers:
    headers = httpx.Headers()
    if content_type is not None:
        headers["Content-Type"] = content_type
    headers.update(settings_headers)
    if caller_headers:
        headers.update({str(key): str(value) for key, value in caller_headers.items()})
    return headers


def _pick(override: Any, fallback: Any) -> Any:
    return fallback if override is None else override


def build(
    method: str,
    settings: ClientSettings,
    options: RequestOptions | Mapping[str, Any] | None = None,
    body: Any = None,
    *,
    content_types: Mapping[str, str | None] = DEFAULT_REQUEST_CONTENT_TYPES,
) -> RequestConfig:
    """Merge settings, method defaults and caller options into a ``RequestConfig``.

    Precedence, lowest to highest: the method's default ``Content-Type``, the
    settings, the caller's options, then ``body``. The resolved upper-case
    method is stamped last and cannot be overridden through ``options``.

    Raises:
        InvalidMethodError: ``method`` is not one of the nine HTTP methods.
        FrakValidationError: ``options`` has unknown keys or ``body`` cannot be
            serialized.
    """
    resolved_method = normalize_method(method)
    request_options = resolve_request_options(options)

    headers = _merge_headers(
        content_types.get(resolved_method),
        settings.headers,
        request_options.headers,
    )
    payload = serialize_body(request_options.body)
    if body is not None:
        payload = serialize_body(body)

    return RequestConfig(
        method=resolved_method,
        headers=headers,
        body=payload,
        cache=_pick(request_options.cache, settings.cache),
        mode=_pick(request_options.mode, settings.mode),
        credentials=_pick(request_options.credentials, settings.credentials),
        referrer=_pick(request_options.referrer, settings.referrer),
        referrer_policy=_pick(request_options.referrer_policy, settings.referrer_policy),
        signal=request_options.signal,
    )
