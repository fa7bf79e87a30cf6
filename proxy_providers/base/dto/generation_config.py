"""Typed configuration objects for the proxy adapter entry points.

Purpose
-------
Replace loose keyword bags with explicit, validated structures. Every factory
(`create_llm`, `create_streaming_llm`, `create_stt`) coerces its input into one
of these models, so an unknown option fails fast instead of being silently
absorbed.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation, immutability and ``model_dump``.
- ``httpx.URL`` to reject a ``base_url`` the HTTP client could not parse.

Failure modes & side effects
----------------------------
- Pure data containers: no I/O. Invalid or unrecognized fields raise
  ``pydantic.ValidationError``; :func:`coerce_generation_config` converts that
  into a ``ProviderError`` with code ``VALIDATION``.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...config.defaults import (
    CUSTOM_PROXY_DEFAULT_BASE_URL,
    CUSTOM_PROXY_DEFAULT_MAX_TOKENS,
    CUSTOM_PROXY_DEFAULT_MODEL,
    CUSTOM_PROXY_DEFAULT_TEMPERATURE,
    STT_DEFAULT_LANGUAGE,
)
from ..errors import ErrorCode, ProviderError


class GenerationConfig(BaseModel):
    """Configuration captured by value when a client is created.

    Attributes
    ----------
    api_key:
        Bearer token sent with every request; must be ASCII. ``None`` is
        accepted at construction time; calls fail with ``missing_api_key``
        before I/O.
    model:
        Model identifier placed in the request body.
    temperature:
        Sampling temperature, ``0 <= temperature <= 2``.
    max_tokens:
        Positive maximum number of output tokens.
    base_url:
        Proxy root URL without the ``/v1`` suffix; a trailing ``/`` is removed.
    timeout_seconds:
        Per-request bound; ``None`` uses the process timeout configuration.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, hide_input_in_errors=True)

    api_key: Optional[str] = None
    model: str = CUSTOM_PROXY_DEFAULT_MODEL
    temperature: float = Field(default=CUSTOM_PROXY_DEFAULT_TEMPERATURE, ge=0.0, le=2.0)
    max_tokens: int = Field(default=CUSTOM_PROXY_DEFAULT_MAX_TOKENS, gt=0)
    base_url: str = CUSTOM_PROXY_DEFAULT_BASE_URL
    timeout_seconds: Optional[float] = Field(default=None, gt=0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        try:
            httpx.URL(value)
        except httpx.InvalidURL as e:
            raise ValueError(f"base_url is not a valid URL: {e}") from e
        return value

    @field_validator("api_key")
    @classmethod
    def _header_safe_key(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.isascii():
            raise ValueError("api_key must be ASCII to fit an HTTP header")
        return value

    @field_validator("model")
    @classmethod
    def _non_empty_model(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("model must be a non-empty string")
        return value


class STTConfig(BaseModel):
    """Configuration accepted by the speech-input session factory.

    The session never contacts a service; fields exist so callers can pass the
    same shape they pass to real STT providers.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    api_key: Optional[str] = None
    language: str = STT_DEFAULT_LANGUAGE
    callbacks: Dict[str, Callable[..., Any]] = Field(default_factory=dict)


_ConfigT = TypeVar("_ConfigT", bound=BaseModel)


def _coerce(model_cls: Type[_ConfigT], config: Any, overrides: Mapping[str, Any]) -> _ConfigT:
    if config is None:
        data: Dict[str, Any] = {}
    elif isinstance(config, model_cls):
        data = config.model_dump(exclude_unset=True)
    elif isinstance(config, Mapping):
        data = dict(config)
    else:
        raise ProviderError(
            code=ErrorCode.VALIDATION,
            message=f"expected {model_cls.__name__}, mapping or None, got {type(config).__name__}",
            provider="custom_proxy",
        )
    data.update(overrides)
    try:
        return model_cls(**data)
    except ValidationError as e:
        raise ProviderError(
            code=ErrorCode.VALIDATION,
            message=f"invalid {model_cls.__name__}: {e}",
            provider="custom_proxy",
            raw=e,
        ) from e


def coerce_generation_config(config: Any = None, **overrides: Any) -> GenerationConfig:
    """Build a :class:`GenerationConfig` from a model, mapping or keywords.

    Keyword overrides win over fields of ``config``. ``maxTokens`` and
    ``baseURL`` spellings are not accepted; use the snake_case names.

    Raises:
        ProviderError: ``VALIDATION`` on unknown fields or out-of-range values.
    """
    return _coerce(GenerationConfig, config, overrides)


def coerce_stt_config(config: Any = None, **overrides: Any) -> STTConfig:
    """Build an :class:`STTConfig`; same rules as :func:`coerce_generation_config`."""
    return _coerce(STTConfig, config, overrides)


__all__ = [
    "GenerationConfig",
    "STTConfig",
    "coerce_generation_config",
    "coerce_stt_config",
]
