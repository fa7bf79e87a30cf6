"""
Structured provider error exception type.

Wraps transport, HTTP and decoding failures with a normalized `ErrorCode` for
consistent handling and structured logging.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging. For
            upstream HTTP failures it embeds status code, reason phrase and
            the response body text.
        provider: Provider key where the error originated (``"custom_proxy"``).
        model: Optional model name associated with the failure.
        retryable: Hint for caller-side retry logic (not authoritative; the
            adapter itself never retries).
        raw: Optional original exception for diagnostics.
        http_status: HTTP status code when the failure came from a response.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None
    http_status: Optional[int] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
