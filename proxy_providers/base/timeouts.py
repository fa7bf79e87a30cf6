"""Timeout configuration for the proxy adapter.

Every outbound request carries an explicit ``httpx`` timeout; values come from
this module unless a ``GenerationConfig`` overrides them.

Supported environment variables (all optional, positive floats):
    PT_TIMEOUT_HTTP_SECONDS     non-streaming request timeout (default 30)
    PT_TIMEOUT_CONNECT_SECONDS  connection establishment timeout (default 10)
    PT_TIMEOUT_STREAM_SECONDS   read timeout between streamed chunks (default 60)

The configuration is cached per process and recomputed when any of the
variables above changes, so tests can adjust it with ``monkeypatch.setenv``.
"""
from __future__ import annotations

from dataclasses import dataclass
import os

import httpx

_ENV_NAMES = ("PT_TIMEOUT_HTTP_SECONDS", "PT_TIMEOUT_CONNECT_SECONDS", "PT_TIMEOUT_STREAM_SECONDS")


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Overall bound for one non-streaming request.
        connect_timeout_seconds: Bound for establishing the connection.
        stream_timeout_seconds: Idle bound while waiting for the next chunk of
            a streamed response.
    """

    http_timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0
    stream_timeout_seconds: float = 60.0

    def for_request(self, seconds: float | None = None) -> httpx.Timeout:
        """Return an ``httpx.Timeout`` for a regular request."""
        total = seconds if seconds is not None else self.http_timeout_seconds
        return httpx.Timeout(total, connect=min(total, self.connect_timeout_seconds))

    def for_stream(self, seconds: float | None = None) -> httpx.Timeout:
        """Return an ``httpx.Timeout`` for a streamed request.

        The connect and write phases use the request bound; reads between
        chunks use the stream bound.
        """
        total = seconds if seconds is not None else self.http_timeout_seconds
        return httpx.Timeout(
            total,
            connect=min(total, self.connect_timeout_seconds),
            read=self.stream_timeout_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read a positive float from the environment, else return ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(n, "") for n in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float("PT_TIMEOUT_HTTP_SECONDS", 30.0),
        connect_timeout_seconds=_parse_env_float("PT_TIMEOUT_CONNECT_SECONDS", 10.0),
        stream_timeout_seconds=_parse_env_float("PT_TIMEOUT_STREAM_SECONDS", 60.0),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
]
