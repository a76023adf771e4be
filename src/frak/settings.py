"""Client-wide configuration."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import (
    DEFAULT_REQUEST_CONTENT_TYPES,
    EXPECTED_RESPONSE_CONTENT_TYPES,
    HTTP_METHODS,
)
from .exceptions import FrakValidationError

CacheMode = Literal["default", "no-store", "reload", "no-cache", "force-cache", "only-if-cached"]
RequestMode = Literal["cors", "no-cors", "same-origin", "navigate"]
CredentialsMode = Literal["omit", "same-origin", "include"]


def _normalize_content_type_table(value: Mapping[str, str | None] | None) -> dict[str, str | None] | None:
    if value is None:
        return None
    table: dict[str, str | None] = {}
    for method, content_type in value.items():
        key = str(method).upper()
        if key not in HTTP_METHODS:
            raise ValueError(f"unknown HTTP method in content type table: {method}")
        table[key] = content_type
    return table


def _overlay(base: Mapping[str, str | None], override: Mapping[str, str | None] | None) -> Mapping[str, str | None]:
    if not override:
        return base
    merged = dict(base)
    merged.update(override)
    return MappingProxyType(merged)


class ClientSettings(BaseModel):
    """Frozen settings shared by every call made through one client.

    ``headers``, ``cache``, ``mode``, ``credentials``, ``referrer`` and
    ``referrer_policy`` seed each request. ``throw_on_failed_status`` and
    ``allow_zero_length_response`` only steer response handling and are never
    sent. The two ``*_content_types`` tables partially override the per-method
    defaults.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    cache: CacheMode = "default"
    mode: RequestMode = "cors"
    credentials: CredentialsMode | None = None
    referrer: str = "client"
    referrer_policy: str | None = None
    throw_on_failed_status: bool = False
    allow_zero_length_response: bool = False
    request_content_types: Mapping[str, str | None] | None = None
    response_content_types: Mapping[str, str | None] | None = None

    @field_validator("headers", mode="before")
    @classmethod
    def _coerce_headers(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {str(key): str(item) for key, item in value.items()}
        return value

    @field_validator("request_content_types", "response_content_types", mode="before")
    @classmethod
    def _check_methods(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return _normalize_content_type_table(value)
        return value

    @field_validator("headers", "request_content_types", "response_content_types")
    @classmethod
    def _freeze(cls, value: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
        if value is None:
            return None
        return MappingProxyType(dict(value))

    def request_content_type_table(self) -> Mapping[str, str | None]:
        return _overlay(DEFAULT_REQUEST_CONTENT_TYPES, self.request_content_types)

    def response_content_type_table(self) -> Mapping[str, str | None]:
        return _overlay(EXPECTED_RESPONSE_CONTENT_TYPES, self.response_content_types)


def load_settings(settings: ClientSettings | Mapping[str, Any] | None) -> ClientSettings:
    """Return ``settings`` as a validated ``ClientSettings`` instance."""
    if settings is None:
        return ClientSettings()
    if isinstance(settings, ClientSettings):
        return settings
    try:
        return ClientSettings.model_validate(dict(settings))
    except ValidationError as exc:
        raise FrakValidationError(f"invalid client settings: {exc}", cause=exc) from exc
