"""Per-request overrides for the Frak client."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, fields
from typing import Any, Mapping

from .exceptions import FrakValidationError


@dataclass(frozen=True)
class RequestOptions:
    headers: Mapping[str, str] | None = None
    cache: str | None = None
    mode: str | None = None
    credentials: str | None = None
    referrer: str | None = None
    referrer_policy: str | None = None
    signal: asyncio.Event | None = None
    body: Any = None
    # Accepted for call-site symmetry; the builder always stamps its own method.
    method: str | None = None


_OPTION_NAMES = frozenset(field.name for field in fields(RequestOptions))


def resolve_request_options(options: RequestOptions | Mapping[str, Any] | None) -> RequestOptions:
    if options is None:
        return RequestOptions()
    if isinstance(options, RequestOptions):
        return options
    unknown = sorted(set(options) - _OPTION_NAMES)
    if unknown:
        raise FrakValidationError(f"unknown request options: {', '.join(unknown)}")
    return RequestOptions(**dict(options))
