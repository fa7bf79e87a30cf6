"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements the HTTP status table and the transport exception mapping for
``httpx``.
"""
from __future__ import annotations

from typing import Optional, Dict

import httpx

from .error_code import ErrorCode
from .provider_error import ProviderError


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}

# Codes worth surfacing as retryable to callers.
RETRYABLE_CODES = frozenset(
    {ErrorCode.TRANSIENT, ErrorCode.RATE_LIMIT, ErrorCode.TIMEOUT, ErrorCode.NETWORK, ErrorCode.UNAVAILABLE}
)


def code_for_status(status: int) -> ErrorCode:
    """Map an HTTP status to an :class:`ErrorCode`.

    Unlisted 5xx statuses are treated as ``SERVER_ERROR``; anything else that
    is not mapped yields ``UNKNOWN``.
    """
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 500 <= status < 600:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (builtin and ``httpx``).
        3. Other ``httpx`` transport errors and ``OSError`` -> ``NETWORK``;
           ``httpx.InvalidURL`` -> ``VALIDATION``.
        4. ``UNKNOWN`` for anything else.

    HTTP responses are not exceptions here; callers map their status with
    :func:`code_for_status`.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (httpx.TransportError, OSError)):
        return ErrorCode.NETWORK
    if isinstance(exc, httpx.InvalidURL):
        return ErrorCode.VALIDATION
    return ErrorCode.UNKNOWN


def transport_error(exc: Exception, *, provider: str, model: Optional[str]) -> ProviderError:
    """Wrap a transport-level exception (DNS, TLS, reset, timeout, broken stream)."""
    code = classify_exception(exc)
    return ProviderError(
        code=code,
        message=f"{type(exc).__name__}: {exc}",
        provider=provider,
        model=model,
        retryable=code in RETRYABLE_CODES,
        raw=exc,
    )


__all__ = [
    "classify_exception",
    "transport_error",
    "code_for_status",
    "RETRYABLE_CODES",
    "_HTTP_STATUS_MAP",
]
