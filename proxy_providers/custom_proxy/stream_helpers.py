"""Streaming helpers for the custom proxy provider.

Opens the streamed completion and hands it back unread as a
:class:`~proxy_providers.base.streaming.ChatStream`. No SSE parsing happens
here; the caller consumes the lines.
"""

from __future__ import annotations

from typing import Any, Dict, List

import httpx

from ..base.errors import transport_error
from ..base.logging import normalized_log_event
from ..base.streaming import ChatStream
from ..base.timeouts import get_timeout_config
from .helpers import CHAT_COMPLETIONS_PATH, upstream_error


class CustomProxyStreamingMixin:
    """Mixin providing the streaming request path."""

    def _open_stream(self, messages: List[Dict[str, Any]]) -> ChatStream:
        """POST with ``stream: true`` and return the unread response handle.

        On a non-2xx status the body is read as text, the response closed and
        a ``ProviderError`` raised with the same message format as the
        non-streaming path.
        """
        ctx = self._ctx("stream")
        api_key = self._require_api_key(ctx)
        payload = self._build_payload(messages, stream=True)
        self._log_start("stream.start", ctx, messages)

        client = self._client("stream")
        request = client.build_request(
            "POST",
            CHAT_COMPLETIONS_PATH,
            json=payload,
            headers=self._build_headers(api_key),
            timeout=get_timeout_config().for_stream(self._config.timeout_seconds),
        )
        try:
            response = client.send(request, stream=True)
        except httpx.HTTPError as e:
            err = transport_error(e, provider=self.provider_name, model=self._config.model)
            self._log_error(ctx, err)
            raise err from e

        if not response.is_success:
            try:
                body_text = response.read().decode(response.encoding or "utf-8", errors="replace")
            except httpx.HTTPError:
                body_text = ""
            finally:
                response.close()
            err = upstream_error(response, body_text, provider=self.provider_name, model=self._config.model)
            self._log_error(ctx, err)
            raise err

        normalized_log_event(
            self._logger,
            "stream.open",
            ctx,
            phase="stream",
            emitted=False,
            http_status=response.status_code,
        )
        return ChatStream(response, logger=self._logger, ctx=ctx)


__all__ = ["CustomProxyStreamingMixin"]
