"""API key validation for the custom proxy.

The proxy exposes no dedicated key-check route, so validation sends
``GET {base}/v1/models`` and reads only the HTTP status:

==========================  =========================================
Outcome                     Result
==========================  =========================================
2xx or 404                  valid (a missing route is not a key issue)
401 or 403                  invalid, authentication failed
any other status            valid (not a credential problem)
transport failure           invalid, cannot validate
==========================  =========================================

5xx responses count as valid. Validation never raises for
these outcomes; callers branch on :class:`ValidationResult`.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..base.constants import AUTH_FAILED_ERROR, INVALID_KEY_FORMAT_ERROR, VALIDATION_NETWORK_ERROR
from ..base.errors import classify_exception
from ..base.http import get_httpx_client
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ValidationResult
from ..base.timeouts import get_timeout_config
from ..config.defaults import CUSTOM_PROXY_DEFAULT_BASE_URL, CUSTOM_PROXY_PROVIDER_NAME
from .helpers import MODELS_PATH, bearer_headers

_AUTH_FAILURE_STATUSES = frozenset({401, 403})


def classify_models_status(status: int) -> ValidationResult:
    """Map a models-route HTTP status to a :class:`ValidationResult`."""
    if status in _AUTH_FAILURE_STATUSES:
        return ValidationResult(success=False, error=AUTH_FAILED_ERROR)
    return ValidationResult(success=True)


def validate_api_key(
    key: Any,
    *,
    base_url: Optional[str] = None,
    timeout_seconds: Optional[float] = None,
) -> ValidationResult:
    """Check whether ``key`` is accepted by the proxy.

    Parameters:
        key: Candidate bearer token. Anything but a non-empty ASCII ``str``
            fails immediately without network I/O (HTTP headers are ASCII).
        base_url: Proxy root URL; defaults to the built-in proxy.
        timeout_seconds: Per-request bound; defaults to the HTTP timeout
            configuration.

    Returns:
        Failure only for 401/403, a transport error or an unusable
        ``base_url``; every other status counts as success. Never raises.
    """
    if not key or not isinstance(key, str) or not key.isascii():
        return ValidationResult(success=False, error=INVALID_KEY_FORMAT_ERROR)

    base = (base_url or CUSTOM_PROXY_DEFAULT_BASE_URL).rstrip("/")
    logger = get_logger("custom_proxy.validation")
    ctx = LogContext(provider=CUSTOM_PROXY_PROVIDER_NAME, operation="validate")
    normalized_log_event(logger, "validate.start", ctx, phase="start", base_url=base)
    try:
        response = get_httpx_client(base, purpose=f"{CUSTOM_PROXY_PROVIDER_NAME}.validate").get(
            MODELS_PATH,
            headers=bearer_headers(key),
            timeout=get_timeout_config().for_request(timeout_seconds),
        )
    except (httpx.HTTPError, httpx.InvalidURL, OSError, ValueError) as e:
        normalized_log_event(
            logger,
            "validate.error",
            ctx,
            phase="finalize",
            emitted=False,
            error_code=classify_exception(e).value,
            error=str(e),
            level=logging.ERROR,
        )
        return ValidationResult(success=False, error=VALIDATION_NETWORK_ERROR)

    result = classify_models_status(response.status_code)
    normalized_log_event(
        logger,
        "validate.end",
        ctx,
        phase="finalize",
        emitted=result.success,
        http_status=response.status_code,
        error=result.error,
        level=logging.INFO if result.success else logging.WARNING,
    )
    return result


__all__ = ["validate_api_key", "classify_models_status"]
