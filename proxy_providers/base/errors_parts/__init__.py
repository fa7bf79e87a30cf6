"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `proxy_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .classification import RETRYABLE_CODES, classify_exception, code_for_status, transport_error

__all__ = ["ErrorCode", "ProviderError", "classify_exception", "code_for_status", "transport_error", "RETRYABLE_CODES"]
