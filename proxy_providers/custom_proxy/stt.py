"""Placeholder speech-to-text session for the custom proxy backend.

The proxy offers no real-time transcription. The factory still returns an
object satisfying :class:`~proxy_providers.base.interfaces.STTSession` so the
calling application can treat every backend alike; feeding audio and closing
both succeed without contacting any service.
"""

from __future__ import annotations

import logging
from typing import Any

from ..base.dto import STTConfig, coerce_stt_config
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..config.defaults import CUSTOM_PROXY_PROVIDER_NAME


class CustomProxySTTSession:
    """No-op session with two states: open and closed.

    ``close`` is the only transition and may be called repeatedly.
    ``send_realtime_input`` discards audio in either state.
    """

    def __init__(self, config: STTConfig) -> None:
        self._config = config
        self._closed = False
        self._logger = get_logger("custom_proxy.stt")
        self._ctx = LogContext(provider=CUSTOM_PROXY_PROVIDER_NAME, operation="stt", extra={"language": config.language})

    @property
    def config(self) -> STTConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def send_realtime_input(self, audio_chunk: Any) -> None:
        """Discard ``audio_chunk``; streaming speech input is unsupported."""
        if not self._closed:
            normalized_log_event(
                self._logger,
                "stt.input",
                self._ctx,
                phase="stream",
                emitted=False,
                level=logging.DEBUG,
            )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        normalized_log_event(self._logger, "stt.closed", self._ctx, phase="finalize")

    def __enter__(self) -> "CustomProxySTTSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def create_stt(config: Any = None, **kwargs: Any) -> CustomProxySTTSession:
    """Create a placeholder STT session and warn that it is unsupported.

    Parameters:
        config: ``STTConfig``, mapping or ``None``.
        **kwargs: Field overrides (``api_key``, ``language``, ``callbacks``).

    Raises:
        ProviderError: ``VALIDATION`` on unrecognized fields.
    """
    cfg = coerce_stt_config(config, **kwargs)
    normalized_log_event(
        get_logger("custom_proxy.stt"),
        "stt.unsupported",
        LogContext(provider=CUSTOM_PROXY_PROVIDER_NAME, operation="stt"),
        phase="start",
        message="streaming speech input is not supported by the custom proxy backend; use another STT provider",
        level=logging.WARNING,
    )
    return CustomProxySTTSession(cfg)


__all__ = ["CustomProxySTTSession", "create_stt"]
