"""Common helpers for the custom proxy provider.

Purpose:
    Request building and upstream error shaping shared by the non-streaming
    and streaming clients.

Notes:
    Consumers provide ``_config`` (a ``GenerationConfig``), ``_logger`` and
    ``provider_name``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..base.constants import ERROR_BODY_EXCERPT_CHARS, MISSING_API_KEY_ERROR, UPSTREAM_ERROR_PREFIX
from ..base.dto import GenerationConfig
from ..base.errors import RETRYABLE_CODES, ErrorCode, ProviderError, code_for_status
from ..base.http import get_httpx_client
from ..base.logging import LogContext, normalized_log_event

CHAT_COMPLETIONS_PATH = "/v1/chat/completions"
MODELS_PATH = "/v1/models"


def bearer_headers(api_key: str) -> Dict[str, str]:
    """Return the authorization and content-type headers for ``api_key``."""
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


def upstream_error(response: httpx.Response, body_text: str, *, provider: str, model: Optional[str]) -> ProviderError:
    """Build the error raised for a non-2xx completion response.

    The message embeds status code, reason phrase and (a bounded excerpt of)
    the body so callers can surface the proxy's own explanation.
    """
    excerpt = body_text[:ERROR_BODY_EXCERPT_CHARS]
    code = code_for_status(response.status_code)
    return ProviderError(
        code=code,
        message=f"{UPSTREAM_ERROR_PREFIX}: {response.status_code} {response.reason_phrase} - {excerpt}",
        provider=provider,
        model=model,
        retryable=code in RETRYABLE_CODES,
        http_status=response.status_code,
    )


class CustomProxyCommonMixin:
    """Mixin offering payload/header builders and error logging."""

    _config: GenerationConfig
    _logger: logging.Logger

    def _ctx(self, operation: str) -> LogContext:
        return LogContext(provider=self.provider_name, model=self._config.model, operation=operation)

    def _client(self, purpose: str) -> httpx.Client:
        return get_httpx_client(self._config.base_url, purpose=f"{self.provider_name}.{purpose}")

    def _require_api_key(self, ctx: LogContext) -> str:
        """Return the configured key or raise before any network I/O."""
        api_key = self._config.api_key
        if api_key:
            return api_key
        err = ProviderError(
            code=ErrorCode.AUTH,
            message=MISSING_API_KEY_ERROR,
            provider=self.provider_name,
            model=self._config.model,
        )
        self._log_error(ctx, err, phase="start")
        raise err

    def _build_headers(self, api_key: str) -> Dict[str, str]:
        return bearer_headers(api_key)

    def _build_payload(self, messages: List[Dict[str, Any]], stream: bool = False) -> Dict[str, Any]:
        """Assemble the JSON body for ``/v1/chat/completions``.

        The ``stream`` key is only present for streaming requests.
        """
        payload: Dict[str, Any] = {
            "model": self._config.model,
            "messages": messages,
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
        }
        if stream:
            payload["stream"] = True
        return payload

    def _log_start(self, event: str, ctx: LogContext, messages: List[Dict[str, Any]]) -> None:
        normalized_log_event(
            self._logger,
            event,
            ctx,
            phase="start",
            messages=len(messages),
            max_tokens=self._config.max_tokens,
            temperature=self._config.temperature,
        )

    def _log_error(self, ctx: LogContext, err: ProviderError, phase: str = "finalize") -> None:
        normalized_log_event(
            self._logger,
            f"{ctx.operation}.error",
            ctx,
            phase=phase,
            emitted=False,
            error_code=err.code.value,
            error=err.message,
            http_status=err.http_status,
            level=logging.ERROR,
        )


__all__ = [
    "CHAT_COMPLETIONS_PATH",
    "MODELS_PATH",
    "CustomProxyCommonMixin",
    "bearer_headers",
    "upstream_error",
]
