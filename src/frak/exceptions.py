"""Frak exceptions."""

from __future__ import annotations

from datetime import datetime, timezone

import httpx


class FrakError(Exception):
    """Base exception for every failed Frak call.

    All failures share one shape: the triggering response (if any), a short
    reason string callers can branch on, and the time the failure was raised.
    """

    reason = "error"

    def __init__(
        self,
        message: str | None = None,
        *,
        response: httpx.Response | None = None,
        reason: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        if reason is not None:
            self.reason = reason
        super().__init__(message or self.reason)
        self.response = response
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc)

    @property
    def status_code(self) -> int | None:
        if self.response is None:
            return None
        return self.response.status_code

    def __str__(self) -> str:
        message = str(self.args[0])
        status_code = self.status_code
        return message if status_code is None else f"{message} (HTTP {status_code})"


class FrakValidationError(FrakError):
    """Raised when client settings or per-call options are invalid."""

    reason = "invalid configuration"


class InvalidMethodError(FrakValidationError):
    """Raised for HTTP verbs outside the nine supported methods."""

    reason = "invalid method"


class FrakNetworkError(FrakError):
    """Raised for transport-level failures like DNS, TCP errors and aborts."""

    reason = "network failure"


class FrakHTTPError(FrakError):
    """Raised for failed statuses when ``throw_on_failed_status`` is enabled."""

    reason = "request failed"


class FrakContentTypeError(FrakError):
    """Raised when a response content type does not match the method's expectation."""

    reason = "unexpected content-type"


class FrakDecodeError(FrakError):
    """Raised when a JSON response body cannot be decoded."""

    reason = "decode error"
