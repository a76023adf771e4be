"""Asynchronous JSON client built on the request builder and the dispatcher."""

from __future__ import annotations

from typing import Any, Mapping, Union

import httpx

from .builder import build
from .dispatcher import dispatch
from .request_options import RequestOptions
from .settings import ClientSettings, load_settings
from .transport import HttpxTransport, Transport

Options = Union[RequestOptions, Mapping[str, Any], None]


class FrakClient:
    """Async client exposing one coroutine per HTTP method.

    Each call resolves to the decoded JSON body, or to the raw
    ``httpx.Response`` when the body is empty (and allowed) or not JSON.
    Failures raise a ``FrakError`` subclass.
    """

    def __init__(
        self,
        settings: ClientSettings | Mapping[str, Any] | None = None,
        *,
        transport: Transport | None = None,
        httpx_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = load_settings(settings)
        self._request_content_types = self.settings.request_content_type_table()
        self._response_content_types = self.settings.response_content_type_table()
        self._owns_transport = transport is None
        self._transport = transport or HttpxTransport(httpx_client)

    async def __aenter__(self) -> "FrakClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_transport and isinstance(self._transport, HttpxTransport):
            await self._transport.aclose()

    async def request(self, method: str, url: str, body: Any = None, options: Options = None) -> Any:
        config = build(
            method,
            self.settings,
            options,
            body,
            content_types=self._request_content_types,
        )
        return await dispatch(
            url,
            config,
            self.settings,
            transport=self._transport,
            expected_content_types=self._response_content_types,
        )

    async def get(self, url: str, options: Options = None) -> Any:
        return await self.request("GET", url, options=options)

    async def post(self, url: str, body: Any, options: Options = None) -> Any:
        return await self.request("POST", url, body, options)

    async def put(self, url: str, body: Any, options: Options = None) -> Any:
        return await self.request("PUT", url, body, options)

    async def patch(self, url: str, body: Any, options: Options = None) -> Any:
        return await self.request("PATCH", url, body, options)

    async def delete(self, url: str, options: Options = None) -> Any:
        return await self.request("DELETE", url, options=options)

    async def head(self, url: str, options: Options = None) -> Any:
        return await self.request("HEAD", url, options=options)

    async def options(self, url: str, options: Options = None) -> Any:
        return await self.request("OPTIONS", url, options=options)

    async def connect(self, url: str, body: Any = None, options: Options = None) -> Any:
        return await self.request("CONNECT", url, body, options)

    async def trace(self, url: str, options: Options = None) -> Any:
        """TRACE is supported for completeness; most servers disable it."""
        return await self.request("TRACE", url, options=options)
