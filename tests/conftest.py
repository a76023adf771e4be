from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from frak import ClientSettings, FrakClient, HttpxTransport


Handler = Callable[[httpx.Request], Any]


@pytest.fixture
def mock_transport() -> Callable[[Handler], HttpxTransport]:
    def factory(handler: Handler) -> HttpxTransport:
        return HttpxTransport(httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    return factory


@pytest.fixture
def make_client(mock_transport) -> Callable[..., FrakClient]:
    def factory(handler: Handler, **settings: Any) -> FrakClient:
        return FrakClient(ClientSettings(**settings), transport=mock_transport(handler))

    return factory
