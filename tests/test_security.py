from __future__ import annotations

from frak.security import sanitize_headers


def test_sanitize_headers_redacts_credentials() -> None:
    headers = {
        "Authorization": "Bearer secret",
        "Cookie": "session=abc",
        "X-Api-Key": "key",
        "Accept": "application/json",
    }
    assert sanitize_headers(headers) == {
        "Authorization": "[REDACTED]",
        "Cookie": "[REDACTED]",
        "X-Api-Key": "[REDACTED]",
        "Accept": "application/json",
    }
