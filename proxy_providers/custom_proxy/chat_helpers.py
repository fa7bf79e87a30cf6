"""Chat helpers for the custom proxy provider.

Encapsulates the non-streaming POST, response decoding and error handling so
``client.py`` stays focused on the public call shapes.
"""

from __future__ import annotations

import time
from typing import Any, Dict, List

import httpx

from ..base.dto import parse_completion_body
from ..base.errors import ErrorCode, ProviderError, transport_error
from ..base.logging import LogContext, normalized_log_event
from ..base.models import CompletionResult
from ..base.timeouts import get_timeout_config
from .helpers import CHAT_COMPLETIONS_PATH, upstream_error


class CustomProxyChatMixin:
    """Mixin providing chat execution and result building."""

    def _complete(self, messages: List[Dict[str, Any]]) -> CompletionResult:
        """POST one non-streaming completion and return the decoded result.

        Raises:
            ProviderError: missing key (``AUTH``), transport failure
                (``NETWORK``/``TIMEOUT``), non-2xx status (code from status),
                or a body without ``choices[0].message.content``
                (``MALFORMED_RESPONSE``). Every failure is logged first.
        """
        ctx = self._ctx("chat")
        api_key = self._require_api_key(ctx)
        payload = self._build_payload(messages)
        self._log_start("chat.start", ctx, messages)

        t0 = time.perf_counter()
        response = self._post_chat(payload, api_key, ctx)
        latency_ms = (time.perf_counter() - t0) * 1000.0

        if not response.is_success:
            err = upstream_error(response, response.text, provider=self.provider_name, model=self._config.model)
            self._log_error(ctx, err)
            raise err

        result = self._decode_completion(response, ctx)
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=True,
            tokens=result.raw.get("usage"),
            latency_ms=round(latency_ms, 2),
            http_status=response.status_code,
        )
        return result

    def _post_chat(self, payload: Dict[str, Any], api_key: str, ctx: LogContext) -> httpx.Response:
        timeout = get_timeout_config().for_request(self._config.timeout_seconds)
        try:
            return self._client("chat").post(
                CHAT_COMPLETIONS_PATH,
                json=payload,
                headers=self._build_headers(api_key),
                timeout=timeout,
            )
        except httpx.HTTPError as e:
            err = transport_error(e, provider=self.provider_name, model=self._config.model)
            self._log_error(ctx, err)
            raise err from e

    def _decode_completion(self, response: httpx.Response, ctx: LogContext) -> CompletionResult:
        try:
            data = response.json()
        except ValueError as e:
            err = ProviderError(
                code=ErrorCode.MALFORMED_RESPONSE,
                message=f"unexpected response shape: body is not JSON ({e})",
                provider=self.provider_name,
                model=self._config.model,
                raw=e,
                http_status=response.status_code,
            )
            self._log_error(ctx, err)
            raise err from e
        try:
            body = parse_completion_body(data, model=self._config.model)
        except ProviderError as err:
            err.provider = self.provider_name
            err.http_status = response.status_code
            self._log_error(ctx, err)
            raise
        return CompletionResult(content=body.first_content(), raw=data)


__all__ = ["CustomProxyChatMixin"]
