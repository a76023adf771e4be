from __future__ import annotations

import pytest
from pydantic import ValidationError

from frak import ClientSettings, DEFAULT_REQUEST_CONTENT_TYPES, EXPECTED_RESPONSE_CONTENT_TYPES


def test_settings_defaults() -> None:
    settings = ClientSettings()
    assert settings.headers == {}
    assert settings.cache == "default"
    assert settings.mode == "cors"
    assert settings.referrer == "client"
    assert settings.throw_on_failed_status is False
    assert settings.allow_zero_length_response is False


def test_settings_are_frozen() -> None:
    settings = ClientSettings()
    with pytest.raises(ValidationError):
        settings.throw_on_failed_status = True


def test_settings_reject_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        ClientSettings(timeout=5)


def test_settings_reject_bad_mode() -> None:
    with pytest.raises(ValidationError):
        ClientSettings(mode="teleport")


def test_settings_reject_unknown_method_in_tables() -> None:
    with pytest.raises(ValidationError, match="unknown HTTP method"):
        ClientSettings(request_content_types={"FETCH": "application/json"})


def test_settings_without_overrides_share_default_tables() -> None:
    settings = ClientSettings()
    assert settings.request_content_type_table() is DEFAULT_REQUEST_CONTENT_TYPES
    assert settings.response_content_type_table() is EXPECTED_RESPONSE_CONTENT_TYPES


def test_settings_overrides_are_layered_and_read_only() -> None:
    settings = ClientSettings(response_content_types={"delete": "application/json"})
    table = settings.response_content_type_table()

    assert table["DELETE"] == "application/json"
    assert table["GET"] == "application/json"
    assert table["HEAD"] is None
    assert EXPECTED_RESPONSE_CONTENT_TYPES["DELETE"] is None
    with pytest.raises(TypeError):
        table["GET"] = None  # type: ignore[index]


def test_default_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_REQUEST_CONTENT_TYPES["GET"] = "text/plain"  # type: ignore[index]
    assert {m for m, v in DEFAULT_REQUEST_CONTENT_TYPES.items() if v} == {"POST", "PUT", "PATCH"}


def test_settings_headers_are_read_only() -> None:
    settings = ClientSettings(headers={"X-A": "1"})
    with pytest.raises(TypeError):
        settings.headers["Authorization"] = "leaked"  # type: ignore[index]
    assert dict(settings.headers) == {"X-A": "1"}


def test_settings_default_headers_are_read_only() -> None:
    with pytest.raises(TypeError):
        ClientSettings().headers["X-A"] = "1"  # type: ignore[index]


def test_settings_content_type_overrides_are_read_only() -> None:
    settings = ClientSettings(
        request_content_types={"post": "text/plain"},
        response_content_types={"delete": "application/json"},
    )
    with pytest.raises(TypeError):
        settings.request_content_types["GET"] = "text/plain"  # type: ignore[index]
    with pytest.raises(TypeError):
        settings.response_content_types["GET"] = None  # type: ignore[index]
    assert dict(settings.request_content_types) == {"POST": "text/plain"}


def test_settings_copy_caller_headers() -> None:
    headers = {"X-A": "1"}
    settings = ClientSettings(headers=headers)
    headers["X-B"] = "2"
    assert "X-B" not in settings.headers
