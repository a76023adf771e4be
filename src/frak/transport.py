"""Transport capability used by the dispatcher."""

from __future__ import annotations

import asyncio
from typing import Protocol

import httpx
import structlog

from .builder import RequestConfig

logger = structlog.get_logger(__name__)


class TransportAbortedError(Exception):
    """Raised when a request's abort signal fires before the exchange completes."""


class Transport(Protocol):
    """Anything that can perform one HTTP exchange.

    ``fetch`` must return for every completed exchange regardless of status
    and raise only on transport-level failure. ``mode`` and
    ``referrer_policy`` are browser fetch notions; they travel on the config
    for transports that can honour them and ``HttpxTransport`` ignores them.
    """

    async def fetch(self, url: str, config: RequestConfig) -> httpx.Response: ...


# Request Cache-Control header implied by a fetch cache mode.
_CACHE_CONTROL = {"no-store": "no-store", "no-cache": "no-cache", "reload": "no-cache"}


def _is_absolute_url(value: str | None) -> bool:
    return bool(value) and value.startswith(("http://", "https://"))


class HttpxTransport:
    """``Transport`` backed by ``httpx.AsyncClient``.

    ``cache`` maps to a ``Cache-Control`` request header, ``credentials="omit"``
    strips the cookies the client jar would attach, and an absolute
    ``referrer`` becomes the ``Referer`` header. Explicit ``Cache-Control`` and
    ``Referer`` headers are left alone.
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(follow_redirects=True, trust_env=False)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _build_request(self, url: str, config: RequestConfig) -> httpx.Request:
        headers = httpx.Headers(config.headers)
        if _is_absolute_url(config.referrer) and "Referer" not in headers:
            headers["Referer"] = config.referrer
        cache_control = _CACHE_CONTROL.get(config.cache)
        if cache_control and "Cache-Control" not in headers:
            headers["Cache-Control"] = cache_control
        request = self._client.build_request(
            config.method,
            url,
            headers=headers,
            content=config.body,
        )
        if config.credentials == "omit":
            request.headers.pop("Cookie", None)
        return request

    async def fetch(self, url: str, config: RequestConfig) -> httpx.Response:
        request = self._build_request(url, config)
        signal = config.signal
        if signal is None:
            return await self._client.send(request)

        if signal.is_set():
            raise TransportAbortedError("request aborted before it was sent")

        send = asyncio.ensure_future(self._client.send(request))
        aborted = asyncio.ensure_future(signal.wait())
        try:
            done, _ = await asyncio.wait({send, aborted}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            for task in (send, aborted):
                if not task.done():
                    task.cancel()
            await asyncio.gather(send, aborted, return_exceptions=True)

        if send in done:
            return send.result()
        logger.debug("request_aborted", method=config.method, url=url)
        raise TransportAbortedError("request aborted")
